"""Aldous-Broder maze generation.

An unbiased random walk: every spanning tree of the grid is equally likely.
Termination is only expected-finite, so the walk carries a step cap tied to
the grid size.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from maze_levels.core.grid import Grid
    from maze_levels.core.rng import LevelRNG

logger = logging.getLogger(__name__)

DEFAULT_STEP_FACTOR = 4


def step_cap(size: int, factor: int = DEFAULT_STEP_FACTOR) -> int:
    """Generous walk budget: quadratic in the cell count.

    Cover time on a 2D grid is roughly ``n log^2 n`` and on a 1xN corridor
    roughly ``n^2``, so ``factor * n^2`` is far beyond either.
    """
    return factor * size * size + 100


def aldous_broder(grid: Grid, rng: LevelRNG, max_steps: int | None = None) -> Grid:
    """Random-walk until every cell has been entered at least once.

    Parameters
    ----------
    max_steps:
        Hard cap on walk steps; defaults to :func:`step_cap`.  Hitting it
        leaves the grid partially carved and is logged as a warning.
    """
    if max_steps is None:
        max_steps = step_cap(grid.size)

    cell = grid.random_cell(rng)
    unvisited = grid.size - 1
    steps = 0
    while unvisited > 0:
        if steps >= max_steps:
            logger.warning(
                "Aldous-Broder hit its %d step cap with %d cells unvisited",
                max_steps, unvisited,
            )
            break
        neighbor = rng.choose_neighbor(cell.neighbors)
        if not neighbor.links:
            grid.link(cell, neighbor)
            unvisited -= 1
        cell = neighbor
        steps += 1

    logger.debug("Aldous-Broder finished after %d steps", steps)
    return grid
