"""Pydantic v2 models for maze statistics.

Per-maze metrics, per-algorithm aggregates and the survey report that
bundles them.  All are serialisable to/from JSON.
"""

from __future__ import annotations

from pydantic import BaseModel

from maze_levels.algorithms import Algorithm


class MazeMetrics(BaseModel):
    """Structural statistics of one carved grid."""

    cells: int
    links: int
    dead_ends: int
    """Cells with exactly one passage."""
    dead_end_ratio: float
    """dead_ends / cells."""
    junctions: int
    """Cells with three or more passages."""
    wall_cells: int
    """Cells with no passage at all."""
    longest_path: int
    """Approximate diameter (two-pass BFS from the first cell)."""
    horizontal_link_ratio: float
    """Share of links running east-west; 0.5 means no directional bias."""


class LevelSample(BaseModel):
    """Metrics of one planned level plus its placement outcome."""

    seed: int
    metrics: MazeMetrics
    goal_distance: int
    used_fallback: bool
    repaired: bool


class AlgorithmStats(BaseModel):
    """Aggregate metrics for one algorithm over many seeds."""

    algorithm: Algorithm
    samples: int
    avg_dead_end_ratio: float
    avg_longest_path: float
    max_longest_path: int
    avg_junctions: float
    avg_horizontal_link_ratio: float
    avg_goal_distance: float
    fallback_rate: float
    """Share of levels whose goal placement took the fallback."""
    repair_rate: float
    """Share of levels that needed a repair corridor."""


class SurveyReport(BaseModel):
    """Top-level survey structure."""

    rows: int
    columns: int
    samples: int
    base_seed: int
    generated_at: str
    """ISO 8601 timestamp."""
    algorithms: list[AlgorithmStats]
