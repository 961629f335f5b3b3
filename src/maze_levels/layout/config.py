"""Planner configuration.

A pydantic model so values are validated on construction and can be loaded
from JSON.  Every field has a default; an empty document is a valid config.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field


class PlannerConfig(BaseModel):
    """Tuning knobs for :class:`~maze_levels.layout.planner.LevelLayoutPlanner`."""

    min_division_size: int = Field(default=5, ge=2)
    """Recursive division may stop early below this size in both dimensions."""

    division_stop_chance: float = Field(default=0.25, ge=0.0, le=1.0)
    """Probability of stopping early on such a small room."""

    aldous_broder_step_factor: int = Field(default=4, ge=1)
    """Aldous-Broder step cap is ``factor * cells^2 + 100``."""

    strict_connectivity: bool = False
    """Raise DisconnectedGraphError instead of repairing a disconnected maze."""

    quadrant_start: bool = True
    """Draw the initial start cell from the north-west quadrant."""


def load_config(path: Path) -> PlannerConfig:
    """Load a planner config from a JSON file."""
    data = json.loads(path.read_text())
    return PlannerConfig.model_validate(data)


def save_config(config: PlannerConfig, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config.model_dump(), indent=2))
