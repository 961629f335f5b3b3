"""Last-resort solvability repair.

Every algorithm yields a connected maze, so this should never fire; when it
does, the planner logs it and flags the layout as repaired.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from maze_levels.core.distances import DistanceField

if TYPE_CHECKING:
    from maze_levels.core.grid import Cell, Grid

logger = logging.getLogger(__name__)


def link_manhattan_chain(grid: Grid, source: Cell, target: Cell) -> int:
    """Link a chain of cells from *source* to *target*.

    Each step moves one cell closer in Manhattan distance, columns first,
    then rows.  Returns the number of links added.  Both cells must belong
    to *grid*, otherwise :class:`~maze_levels.errors.InvalidCellReference`
    is raised before anything is linked.
    """
    grid.check_owned(source)
    grid.check_owned(target)

    added = 0
    current = source
    while current is not target:
        # target is on this grid, so the step never leaves it
        if current.column < target.column:
            nxt = current.east
        elif current.column > target.column:
            nxt = current.west
        elif current.row < target.row:
            nxt = current.south
        else:
            nxt = current.north
        if not current.is_linked(nxt):
            grid.link(current, nxt)
            added += 1
        current = nxt
    return added


def ensure_path(grid: Grid, entrance: Cell, goal: Cell) -> bool:
    """Make *goal* reachable from *entrance*; return ``True`` if links were added."""
    if goal in DistanceField(entrance):
        return False
    added = link_manhattan_chain(grid, entrance, goal)
    logger.warning(
        "No path from %r to %r; linked a %d-step corridor", entrance, goal, added,
    )
    return True
