"""Core maze primitives: grid graph, distance fields, seeded RNG."""

from maze_levels.core.distances import (
    DistanceField,
    LongestPath,
    check_connectivity,
    distances_from,
    longest_path,
    unreachable_cells,
)
from maze_levels.core.grid import Cell, CellKind, Coord, Grid
from maze_levels.core.rng import LevelRNG

__all__ = [
    # rng
    "LevelRNG",
    # grid
    "Cell",
    "CellKind",
    "Coord",
    "Grid",
    # distances
    "DistanceField",
    "LongestPath",
    "check_connectivity",
    "distances_from",
    "longest_path",
    "unreachable_cells",
]
