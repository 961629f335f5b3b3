#!/usr/bin/env python3
"""Generate one level and print it as ASCII art.

Usage:
    uv run python scripts/show_level.py [--rows R] [--columns C] [--seed S]
        [--algorithm NAME] [--config PATH] [--json]
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from maze_levels.algorithms import Algorithm
from maze_levels.core.grid import CellKind
from maze_levels.layout.config import PlannerConfig, load_config
from maze_levels.layout.models import TILE_CHARS, LevelLayout
from maze_levels.layout.planner import LevelLayoutPlanner


def draw(layout: LevelLayout) -> str:
    """Box-drawing view: a wall between every pair of unlinked neighbors."""
    grid = layout.grid
    lines = ["+" + "---+" * grid.columns]
    for row in grid.each_row():
        body = "|"
        floor = "+"
        for cell in row:
            mark = " " if cell.kind is CellKind.FLOOR else TILE_CHARS[cell.kind]
            body += f" {mark} " + (" " if cell.is_linked(cell.east) else "|")
            floor += ("   " if cell.is_linked(cell.south) else "---") + "+"
        lines.append(body)
        lines.append(floor)
    return "\n".join(lines)


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--rows", type=int, default=10)
    parser.add_argument("--columns", type=int, default=10)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--difficulty", type=int, default=1)
    parser.add_argument(
        "--algorithm", choices=[a.value for a in Algorithm], default=None,
        help="Force an algorithm instead of drawing one from the seed",
    )
    parser.add_argument("--config", type=Path, default=None, help="Planner config JSON")
    parser.add_argument("--json", action="store_true", help="Print the layout summary as JSON")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    config = load_config(args.config) if args.config else PlannerConfig()
    layout = LevelLayoutPlanner(config).plan(
        args.rows, args.columns, args.seed,
        algorithm=args.algorithm, difficulty=args.difficulty,
    )

    if args.json:
        print(json.dumps(layout.to_summary().model_dump(mode="json"), indent=2))
        return

    print(draw(layout))
    print(f"algorithm={layout.algorithm.value} entrance={layout.entrance_coord} "
          f"goal={layout.goal_coord} distance={layout.goal_distance} "
          f"fallback={layout.used_fallback} repaired={layout.repaired}")


if __name__ == "__main__":
    main()
