"""Movement legality for the gameplay layer.

A move is legal when the destination is a spatial neighbor of the source,
a passage links the two, and nothing occupies the destination.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Collection

from maze_levels.core.grid import CellKind

if TYPE_CHECKING:
    from maze_levels.core.grid import Cell, Coord, Grid


class Direction(str, Enum):
    NORTH = "NORTH"
    SOUTH = "SOUTH"
    EAST = "EAST"
    WEST = "WEST"


def neighbor_in(cell: Cell, direction: Direction | str) -> Cell | None:
    """Spatial neighbor of *cell* in *direction* (ignores links)."""
    return getattr(cell, Direction(direction).name.lower())


def is_occupied(cell: Cell, occupied: Collection[Coord] = ()) -> bool:
    return cell.kind is CellKind.OCCUPIED or cell.coord in occupied


def can_move(
    grid: Grid,
    source: Cell,
    destination: Cell | None,
    occupied: Collection[Coord] = (),
) -> bool:
    """Return whether a unit on *source* may step onto *destination*."""
    if destination is None or destination.grid is not grid or source.grid is not grid:
        return False
    if not source.is_neighbor(destination):
        return False
    if not grid.linked(source, destination):
        return False
    return not is_occupied(destination, occupied)


def step(
    grid: Grid,
    source: Cell,
    direction: Direction | str,
    occupied: Collection[Coord] = (),
) -> Cell | None:
    """Resolve a move: the destination cell if legal, else ``None``."""
    destination = neighbor_in(source, direction)
    if can_move(grid, source, destination, occupied):
        return destination
    return None
