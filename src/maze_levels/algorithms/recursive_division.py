"""Recursive division maze generation.

Starts from an open field (every cell linked to all of its neighbors) and
adds walls.  Each split removes the links along one line except a single
passage, so the two halves always stay connected.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from maze_levels.core.grid import Grid
    from maze_levels.core.rng import LevelRNG

DEFAULT_MIN_SIZE = 5
DEFAULT_STOP_CHANCE = 0.25


class Orientation(str, Enum):
    HORIZONTAL = "HORIZONTAL"
    """Wall runs east-west; cells on ``line`` lose their south link."""
    VERTICAL = "VERTICAL"
    """Wall runs north-south; cells on ``line`` lose their east link."""


@dataclass(frozen=True)
class Division:
    """One split: the wall line, the span it covers, and its passage."""

    orientation: Orientation
    line: int
    """Row (horizontal) or column (vertical) of the cells bordering the wall."""
    span_start: int
    span_length: int
    passage: int
    """Absolute column (horizontal) or row (vertical) left open."""


def open_field(grid: Grid) -> None:
    """Link every cell to each of its spatial neighbors."""
    for cell in grid.each_cell():
        for neighbor in (cell.south, cell.east):
            if neighbor is not None:
                grid.link(cell, neighbor)


def recursive_division(
    grid: Grid,
    rng: LevelRNG,
    *,
    min_size: int = DEFAULT_MIN_SIZE,
    stop_chance: float = DEFAULT_STOP_CHANCE,
    recorder: list[Division] | None = None,
) -> Grid:
    """Carve *grid* by recursive division.

    Parameters
    ----------
    min_size:
        Rooms smaller than this in both dimensions may be left undivided.
    stop_chance:
        Probability of leaving such a small room undivided.
    recorder:
        If given, every split performed is appended to it.
    """
    open_field(grid)

    def divide(row: int, column: int, height: int, width: int) -> None:
        if height <= 1 or width <= 1:
            return
        if height < min_size and width < min_size and rng.chance(stop_chance):
            return
        if height > width:
            divide_horizontally(row, column, height, width)
        else:
            divide_vertically(row, column, height, width)

    def divide_horizontally(row: int, column: int, height: int, width: int) -> None:
        south_of = rng.split_at(height - 1)
        passage_at = rng.split_at(width)
        for x in range(width):
            if x == passage_at:
                continue
            cell = grid[row + south_of, column + x]
            grid.unlink(cell, cell.south)
        if recorder is not None:
            recorder.append(Division(
                Orientation.HORIZONTAL, row + south_of, column, width, column + passage_at,
            ))
        divide(row, column, south_of + 1, width)
        divide(row + south_of + 1, column, height - south_of - 1, width)

    def divide_vertically(row: int, column: int, height: int, width: int) -> None:
        east_of = rng.split_at(width - 1)
        passage_at = rng.split_at(height)
        for y in range(height):
            if y == passage_at:
                continue
            cell = grid[row + y, column + east_of]
            grid.unlink(cell, cell.east)
        if recorder is not None:
            recorder.append(Division(
                Orientation.VERTICAL, column + east_of, row, height, row + passage_at,
            ))
        divide(row, column, height, east_of + 1)
        divide(row, column + east_of + 1, height, width - east_of - 1)

    divide(0, 0, grid.rows, grid.columns)
    return grid
