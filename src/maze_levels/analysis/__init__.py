"""Maze analysis: metrics, algorithm surveys, and reports."""

from maze_levels.analysis.metrics import (
    compute_algorithm_stats,
    compute_maze_metrics,
    sample_layout,
)
from maze_levels.analysis.models import AlgorithmStats, LevelSample, MazeMetrics, SurveyReport
from maze_levels.analysis.report import generate_text_report
from maze_levels.analysis.survey import load_survey, run_survey, save_survey

__all__ = [
    "AlgorithmStats",
    "LevelSample",
    "MazeMetrics",
    "SurveyReport",
    "compute_algorithm_stats",
    "compute_maze_metrics",
    "generate_text_report",
    "load_survey",
    "run_survey",
    "sample_layout",
    "save_survey",
]
