"""Tests for recursive division."""

from maze_levels.algorithms.recursive_division import (
    Division,
    Orientation,
    open_field,
    recursive_division,
)
from maze_levels.core.distances import unreachable_cells
from maze_levels.core.grid import Grid
from maze_levels.core.rng import LevelRNG


def _open_positions(grid: Grid, division: Division) -> list[int]:
    """Positions along a split line whose crossing link is still present."""
    open_at = []
    for offset in range(division.span_length):
        pos = division.span_start + offset
        if division.orientation is Orientation.HORIZONTAL:
            cell = grid[division.line, pos]
            if cell.is_linked(cell.south):
                open_at.append(pos)
        else:
            cell = grid[pos, division.line]
            if cell.is_linked(cell.east):
                open_at.append(pos)
    return open_at


class TestOpenField:
    def test_links_every_neighbor(self):
        grid = Grid(3, 4)
        open_field(grid)
        for cell in grid.each_cell():
            assert set(cell.links) == set(cell.neighbors)


class TestRecursiveDivision:
    def test_exactly_one_passage_per_split(self):
        for seed in range(10):
            splits: list[Division] = []
            grid = recursive_division(Grid(12, 12), LevelRNG(seed), recorder=splits)
            assert splits, f"seed={seed}"
            for division in splits:
                assert _open_positions(grid, division) == [division.passage], (
                    f"seed={seed}, {division}"
                )

    def test_connected_by_construction(self):
        for seed in range(10):
            grid = recursive_division(Grid(10, 10), LevelRNG(seed))
            assert unreachable_cells(grid) == []

    def test_orientation_follows_shape(self):
        splits: list[Division] = []
        recursive_division(Grid(9, 3), LevelRNG(1), recorder=splits)
        assert splits[0].orientation is Orientation.HORIZONTAL

        splits = []
        recursive_division(Grid(3, 9), LevelRNG(1), recorder=splits)
        assert splits[0].orientation is Orientation.VERTICAL

    def test_never_stopping_early_gives_perfect_maze(self):
        grid = recursive_division(Grid(8, 8), LevelRNG(6), stop_chance=0.0)
        assert grid.link_count() == 8 * 8 - 1

    def test_always_stopping_leaves_small_rooms_open(self):
        splits: list[Division] = []
        grid = recursive_division(
            Grid(3, 3), LevelRNG(6), min_size=5, stop_chance=1.0, recorder=splits,
        )
        assert splits == []
        assert grid.link_count() == 12

    def test_large_rooms_always_divided(self):
        splits: list[Division] = []
        recursive_division(Grid(6, 6), LevelRNG(6), stop_chance=1.0, recorder=splits)
        assert len(splits) >= 1

    def test_thin_grids(self):
        row = recursive_division(Grid(1, 8), LevelRNG(2))
        column = recursive_division(Grid(8, 1), LevelRNG(2))
        assert row.link_count() == 7
        assert column.link_count() == 7
