"""Tests for movement legality."""

import pytest

from maze_levels.core.grid import CellKind, Grid
from maze_levels.layout.movement import Direction, can_move, neighbor_in, step


@pytest.fixture()
def grid() -> Grid:
    """2x2 grid: (0,0)-(0,1) and (0,0)-(1,0) linked, (1,1) linked only to (0,1)."""
    g = Grid(2, 2)
    g.link(g[0, 0], g[0, 1])
    g.link(g[0, 0], g[1, 0])
    g.link(g[0, 1], g[1, 1])
    g.classify()
    return g


class TestCanMove:
    def test_linked_neighbor(self, grid):
        assert can_move(grid, grid[0, 0], grid[0, 1])
        assert can_move(grid, grid[0, 1], grid[0, 0])

    def test_unlinked_neighbor(self, grid):
        assert not can_move(grid, grid[1, 0], grid[1, 1])

    def test_not_a_neighbor(self, grid):
        assert not can_move(grid, grid[0, 0], grid[1, 1])

    def test_same_cell(self, grid):
        assert not can_move(grid, grid[0, 0], grid[0, 0])

    def test_off_grid(self, grid):
        assert not can_move(grid, grid[0, 0], None)

    def test_foreign_grid(self, grid):
        other = Grid(2, 2)
        assert not can_move(grid, grid[0, 0], other[0, 1])

    def test_occupied_by_coordinate(self, grid):
        assert not can_move(grid, grid[0, 0], grid[0, 1], occupied={(0, 1)})

    def test_occupied_by_kind(self, grid):
        grid[1, 0].kind = CellKind.OCCUPIED
        assert not can_move(grid, grid[0, 0], grid[1, 0])


class TestStep:
    def test_neighbor_in(self, grid):
        assert neighbor_in(grid[0, 0], Direction.EAST) is grid[0, 1]
        assert neighbor_in(grid[0, 0], "SOUTH") is grid[1, 0]
        assert neighbor_in(grid[0, 0], Direction.NORTH) is None

    def test_legal_step(self, grid):
        assert step(grid, grid[0, 0], Direction.SOUTH) is grid[1, 0]

    def test_blocked_by_wall(self, grid):
        assert step(grid, grid[1, 0], Direction.EAST) is None

    def test_blocked_by_edge(self, grid):
        assert step(grid, grid[0, 0], Direction.WEST) is None

    def test_blocked_by_occupant(self, grid):
        assert step(grid, grid[0, 0], "EAST", occupied=[(0, 1)]) is None

    def test_direction_names_resolve(self, grid):
        assert step(grid, grid[0, 0], "EAST") is grid[0, 1]
        assert step(grid, grid[0, 1], Direction("SOUTH")) is grid[1, 1]
        assert [d.value for d in Direction] == ["NORTH", "SOUTH", "EAST", "WEST"]
