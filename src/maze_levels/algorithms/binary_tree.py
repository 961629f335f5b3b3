"""Binary tree maze generation.

Each cell carves a passage either north or east.  Cheap and fully
deterministic for a given draw sequence, but strongly biased: the northern
row and eastern column are always unbroken corridors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from maze_levels.core.grid import Grid
    from maze_levels.core.rng import LevelRNG


def binary_tree(grid: Grid, rng: LevelRNG) -> Grid:
    """Link every cell to its north or east neighbor.

    Draws one coin flip per cell that has both options (heads: north), in
    row-major order; cells with a single option take it without a draw.
    """
    for cell in grid.each_cell():
        north, east = cell.north, cell.east
        if north is not None and east is not None:
            grid.link(cell, north if rng.coin_flip() else east)
        elif north is not None:
            grid.link(cell, north)
        elif east is not None:
            grid.link(cell, east)
    return grid
