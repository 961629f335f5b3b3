"""Level layout: planning, repair, movement rules, progression."""

from maze_levels.layout.config import PlannerConfig, load_config, save_config
from maze_levels.layout.models import TILE_CHARS, LayoutSummary, LevelLayout
from maze_levels.layout.movement import Direction, can_move, neighbor_in, step
from maze_levels.layout.planner import LevelLayoutPlanner
from maze_levels.layout.progression import LevelProgression
from maze_levels.layout.repair import ensure_path, link_manhattan_chain

__all__ = [
    "Direction",
    "LayoutSummary",
    "LevelLayout",
    "LevelLayoutPlanner",
    "LevelProgression",
    "PlannerConfig",
    "TILE_CHARS",
    "can_move",
    "ensure_path",
    "link_manhattan_chain",
    "load_config",
    "neighbor_in",
    "save_config",
    "step",
]
