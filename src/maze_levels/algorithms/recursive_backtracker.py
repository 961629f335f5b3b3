"""Recursive backtracker (randomised depth-first search).

Long winding corridors and few dead ends.  Uses an explicit stack so large
grids do not hit the interpreter's recursion limit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from maze_levels.core.grid import Cell, Grid
    from maze_levels.core.rng import LevelRNG


def recursive_backtracker(grid: Grid, rng: LevelRNG) -> Grid:
    stack: list[Cell] = [grid.random_cell(rng)]
    while stack:
        current = stack[-1]
        fresh = [n for n in current.neighbors if not n.links]
        if not fresh:
            stack.pop()
            continue
        neighbor = rng.choose_neighbor(fresh)
        grid.link(current, neighbor)
        stack.append(neighbor)
    return grid
