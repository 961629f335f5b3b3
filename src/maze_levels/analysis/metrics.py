"""Pure metric computation functions for maze analysis.

No side effects, no I/O.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from maze_levels.analysis.models import AlgorithmStats, LevelSample, MazeMetrics
from maze_levels.core.distances import longest_path

if TYPE_CHECKING:
    from maze_levels.algorithms import Algorithm
    from maze_levels.core.grid import Grid
    from maze_levels.layout.models import LevelLayout


def compute_maze_metrics(grid: Grid) -> MazeMetrics:
    """Compute structural statistics for a carved grid."""
    cells = grid.size
    pairs = grid.link_pairs()
    links = len(pairs)
    degrees = [len(cell.links) for cell in grid.each_cell()]
    dead_ends = sum(1 for d in degrees if d == 1)
    horizontal = sum(1 for (a, b) in pairs if a[0] == b[0])

    return MazeMetrics(
        cells=cells,
        links=links,
        dead_ends=dead_ends,
        dead_end_ratio=dead_ends / cells,
        junctions=sum(1 for d in degrees if d >= 3),
        wall_cells=sum(1 for d in degrees if d == 0),
        longest_path=longest_path(next(grid.each_cell())).distance,
        horizontal_link_ratio=horizontal / links if links else 0.0,
    )


def sample_layout(layout: LevelLayout) -> LevelSample:
    return LevelSample(
        seed=layout.seed,
        metrics=compute_maze_metrics(layout.grid),
        goal_distance=layout.goal_distance,
        used_fallback=layout.used_fallback,
        repaired=layout.repaired,
    )


def compute_algorithm_stats(
    algorithm: Algorithm,
    samples: list[LevelSample],
) -> AlgorithmStats:
    """Aggregate samples that were all generated by *algorithm*."""
    total = len(samples)
    if total == 0:
        return AlgorithmStats(
            algorithm=algorithm, samples=0,
            avg_dead_end_ratio=0.0, avg_longest_path=0.0, max_longest_path=0,
            avg_junctions=0.0, avg_horizontal_link_ratio=0.0,
            avg_goal_distance=0.0, fallback_rate=0.0, repair_rate=0.0,
        )

    metrics = [s.metrics for s in samples]
    return AlgorithmStats(
        algorithm=algorithm,
        samples=total,
        avg_dead_end_ratio=sum(m.dead_end_ratio for m in metrics) / total,
        avg_longest_path=sum(m.longest_path for m in metrics) / total,
        max_longest_path=max(m.longest_path for m in metrics),
        avg_junctions=sum(m.junctions for m in metrics) / total,
        avg_horizontal_link_ratio=sum(m.horizontal_link_ratio for m in metrics) / total,
        avg_goal_distance=sum(s.goal_distance for s in samples) / total,
        fallback_rate=sum(1 for s in samples if s.used_fallback) / total,
        repair_rate=sum(1 for s in samples if s.repaired) / total,
    )
