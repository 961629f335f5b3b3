"""Human-readable text report for an algorithm survey."""

from __future__ import annotations

from maze_levels.analysis.models import SurveyReport


def generate_text_report(report: SurveyReport) -> str:
    """Generate a terminal/markdown summary of the survey."""
    lines: list[str] = []

    lines.append("=" * 60)
    lines.append(f"Maze Survey Report -- {report.rows}x{report.columns} grids")
    lines.append(
        f"Samples per algorithm: {report.samples:,} | base seed {report.base_seed}"
        f" | Generated: {report.generated_at}"
    )
    lines.append("=" * 60)

    lines.append("")
    lines.append("## Per-Algorithm Stats")
    for s in report.algorithms:
        lines.append(
            f"  {s.algorithm.value:24s}  dead_ends={s.avg_dead_end_ratio:.1%}"
            f"  diameter={s.avg_longest_path:.1f} (max {s.max_longest_path})"
            f"  junctions={s.avg_junctions:.1f}"
            f"  east-west={s.avg_horizontal_link_ratio:.2f}"
        )

    ranked = sorted(report.algorithms, key=lambda s: s.avg_goal_distance, reverse=True)
    if ranked:
        lines.append("")
        lines.append("## Goal Distance (longest first)")
        for s in ranked:
            lines.append(f"  {s.algorithm.value:24s}  {s.avg_goal_distance:.1f}")

    degraded = [s for s in report.algorithms if s.fallback_rate or s.repair_rate]
    lines.append("")
    lines.append("## Degraded Builds")
    if degraded:
        for s in degraded:
            lines.append(
                f"  {s.algorithm.value:24s}  fallback={s.fallback_rate:.1%}"
                f"  repaired={s.repair_rate:.1%}"
            )
    else:
        lines.append("  none")

    return "\n".join(lines)
