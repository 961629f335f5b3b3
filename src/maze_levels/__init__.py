"""Procedural maze levels for a turn-based dungeon game."""

from maze_levels.algorithms import Algorithm, generate
from maze_levels.core import DistanceField, Grid, LevelRNG, longest_path
from maze_levels.layout import LevelLayout, LevelLayoutPlanner, LevelProgression, PlannerConfig

__all__ = [
    "Algorithm",
    "DistanceField",
    "Grid",
    "LevelLayout",
    "LevelLayoutPlanner",
    "LevelProgression",
    "LevelRNG",
    "PlannerConfig",
    "generate",
    "longest_path",
]
