"""Tests for the seeded level RNG."""

import random

from maze_levels.algorithms import AVAILABLE
from maze_levels.core.grid import Grid
from maze_levels.core.rng import LevelRNG

BIG_SEED = 84620216499580564730520055512755805833


class TestDraws:
    def test_same_seed_same_stream(self):
        a, b = LevelRNG(123), LevelRNG(123)
        assert [a.cell_index(50) for _ in range(20)] == [b.cell_index(50) for _ in range(20)]

    def test_cell_index_in_range(self):
        rng = LevelRNG(7)
        assert {rng.cell_index(4) for _ in range(200)} == {0, 1, 2, 3}

    def test_split_at_in_range(self):
        rng = LevelRNG(7)
        assert all(0 <= rng.split_at(3) < 3 for _ in range(100))

    def test_quadrant_offset_stays_in_north_west_half(self):
        rng = LevelRNG(7)
        assert {rng.quadrant_offset(10) for _ in range(300)} == {0, 1, 2, 3, 4}
        assert {rng.quadrant_offset(5) for _ in range(300)} == {0, 1, 2}
        assert {rng.quadrant_offset(1) for _ in range(20)} == {0}

    def test_dimension_bounds_inclusive(self):
        rng = LevelRNG(7)
        assert {rng.dimension(8, 10) for _ in range(200)} == {8, 9, 10}

    def test_coin_flip_is_half_chance(self):
        a, b = LevelRNG(5), LevelRNG(5)
        for _ in range(20):
            assert a.coin_flip() == b.chance(0.5)

    def test_coin_flip_heads_below_half(self):
        """Heads means the next float draw is below 0.5."""
        rng, reference = LevelRNG(1), random.Random(1)
        for _ in range(20):
            assert rng.coin_flip() == (reference.random() < 0.5)

    def test_chance_extremes(self):
        rng = LevelRNG(3)
        assert not any(rng.chance(0.0) for _ in range(50))
        assert all(rng.chance(1.0) for _ in range(50))

    def test_choose_neighbor(self):
        grid = Grid(3, 3)
        center = grid[1, 1]
        rng = LevelRNG(11)
        picks = {rng.choose_neighbor(center.neighbors) for _ in range(100)}
        assert picks == set(center.neighbors)

    def test_choose_algorithm(self):
        rng = LevelRNG(11)
        assert {rng.choose_algorithm(AVAILABLE) for _ in range(100)} == set(AVAILABLE)


class TestForking:
    def test_large_seed_accepted(self):
        rng = LevelRNG(BIG_SEED)
        assert rng.seed == BIG_SEED
        assert 0 <= rng.cell_index(100) < 100

    def test_fork_is_deterministic(self):
        assert LevelRNG(1).fork("level:1").seed == LevelRNG(1).fork("level:1").seed

    def test_fork_names_differ(self):
        rng = LevelRNG(1)
        assert rng.fork("level:1").seed != rng.fork("level:2").seed

    def test_fork_does_not_consume_parent(self):
        a, b = LevelRNG(9), LevelRNG(9)
        a.fork("anything")
        assert a.cell_index(1000) == b.cell_index(1000)

    def test_repr(self):
        assert repr(LevelRNG(3)) == "LevelRNG(seed=3)"
