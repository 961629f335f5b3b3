"""Compare the four maze algorithms over many seeds.

Usage:
    uv run python scripts/compare_algorithms.py [--samples N] [--rows R] [--columns C]
        [--parallel] [--save PATH]
"""

from __future__ import annotations

import argparse
import time
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from maze_levels.algorithms import AVAILABLE
from maze_levels.analysis.metrics import sample_layout
from maze_levels.analysis.report import generate_text_report
from maze_levels.analysis.survey import run_survey, save_survey
from maze_levels.layout.planner import LevelLayoutPlanner


def run_comparison(rows: int, columns: int, n_samples: int, parallel: bool, save: Path | None) -> None:
    t0 = time.time()
    report = run_survey(rows, columns, samples=n_samples, base_seed=0, parallel=parallel)
    print(f"Survey took {time.time() - t0:.1f}s")
    print(generate_text_report(report))
    if save is not None:
        save_survey(report, save)
        print(f"\nSurvey saved to {save}")

    # Per-sample distributions for the histograms
    planner = LevelLayoutPlanner()
    results = {}
    for algorithm in AVAILABLE:
        samples = [
            sample_layout(planner.plan(rows, columns, seed, algorithm=algorithm))
            for seed in range(n_samples)
        ]
        results[algorithm.value] = {
            "dead_end_ratio": [s.metrics.dead_end_ratio for s in samples],
            "longest_path": [s.metrics.longest_path for s in samples],
            "goal_distance": [s.goal_distance for s in samples],
        }

    generate_charts(results, rows, columns, n_samples)


def generate_charts(results: dict, rows: int, columns: int, n_samples: int) -> None:
    fig, axes = plt.subplots(1, 3, figsize=(18, 6))
    fig.suptitle(f"Maze algorithms -- {n_samples} {rows}x{columns} levels each",
                 fontsize=16, fontweight="bold")

    colors = ["#e74c3c", "#2ecc71", "#3498db", "#9b59b6"]
    labels = list(results.keys())

    # --- Chart 1: Dead-end ratio ---
    ax = axes[0]
    for label, color in zip(labels, colors):
        values = results[label]["dead_end_ratio"]
        ax.hist(values, bins=20, alpha=0.5, color=color, edgecolor="black", linewidth=0.3,
                label=f"{label} (avg={np.mean(values):.2f})")
    ax.set_xlabel("Dead-end ratio")
    ax.set_ylabel("Count")
    ax.set_title("Dead Ends")
    ax.legend(fontsize=8)

    # --- Chart 2: Diameter ---
    ax = axes[1]
    data = [results[label]["longest_path"] for label in labels]
    ax.boxplot(data)
    ax.set_xticks(range(1, len(labels) + 1))
    ax.set_xticklabels([label.replace("_", "\n") for label in labels])
    ax.set_ylabel("Longest path (cells)")
    ax.set_title("Approximate Diameter")

    # --- Chart 3: Entrance-goal distance ---
    ax = axes[2]
    means = [np.mean(results[label]["goal_distance"]) for label in labels]
    bars = ax.bar(range(len(labels)), means, color=colors, edgecolor="black", linewidth=0.5)
    for bar, mean in zip(bars, means):
        ax.text(bar.get_x() + bar.get_width() / 2, bar.get_height() + 0.5,
                f"{mean:.1f}", ha="center", va="bottom", fontsize=11, fontweight="bold")
    ax.set_xticks(range(len(labels)))
    ax.set_xticklabels([label.replace("_", "\n") for label in labels])
    ax.set_ylabel("Mean distance")
    ax.set_title("Entrance to Goal")

    plt.tight_layout()
    out_path = "algorithm_comparison.png"
    plt.savefig(out_path, dpi=150, bbox_inches="tight")
    print(f"\nChart saved to {out_path}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--samples", type=int, default=200, help="Levels per algorithm")
    parser.add_argument("--rows", type=int, default=10)
    parser.add_argument("--columns", type=int, default=10)
    parser.add_argument("--parallel", action="store_true")
    parser.add_argument("--save", type=Path, default=None, help="Write the survey JSON here")
    args = parser.parse_args()
    run_comparison(args.rows, args.columns, args.samples, args.parallel, args.save)
