"""Shared fixtures for maze tests."""

from __future__ import annotations

import pytest

from maze_levels.core.grid import Grid


def build_corridor(length: int) -> Grid:
    """A 1 x *length* grid with every east-west passage carved."""
    grid = Grid(1, length)
    for col in range(length - 1):
        grid.link(grid[0, col], grid[0, col + 1])
    return grid


@pytest.fixture()
def corridor() -> Grid:
    return build_corridor(10)


@pytest.fixture()
def open_grid() -> Grid:
    """A 3x3 grid with every spatial neighbor linked."""
    grid = Grid(3, 3)
    for cell in grid.each_cell():
        for other in (cell.south, cell.east):
            if other is not None:
                grid.link(cell, other)
    return grid
