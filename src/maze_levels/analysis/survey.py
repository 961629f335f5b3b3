"""Algorithm survey: generate many levels per algorithm, aggregate, save/load JSON.

Orchestrates LevelLayoutPlanner -> metric computation -> SurveyReport.
"""

from __future__ import annotations

import json
import logging
import multiprocessing
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable

from maze_levels.algorithms import AVAILABLE, Algorithm
from maze_levels.analysis.metrics import compute_algorithm_stats, sample_layout
from maze_levels.analysis.models import LevelSample, SurveyReport
from maze_levels.layout.config import PlannerConfig
from maze_levels.layout.planner import LevelLayoutPlanner

logger = logging.getLogger(__name__)


def _sample_one(work: tuple[dict[str, Any], int, int, int, str]) -> LevelSample:
    """Worker entry point; takes only picklable arguments."""
    config_data, rows, columns, seed, algorithm = work
    planner = LevelLayoutPlanner(PlannerConfig.model_validate(config_data))
    return sample_layout(planner.plan(rows, columns, seed, algorithm=algorithm))


def _sample_batch(
    config: PlannerConfig,
    rows: int,
    columns: int,
    seeds: list[int],
    algorithm: Algorithm,
    parallel: bool,
) -> list[LevelSample]:
    work_items = [
        (config.model_dump(), rows, columns, seed, algorithm.value) for seed in seeds
    ]
    if parallel and len(seeds) > 1:
        n_workers = min(len(seeds), multiprocessing.cpu_count() or 1)
        with multiprocessing.Pool(processes=n_workers) as pool:
            return pool.map(_sample_one, work_items)
    return [_sample_one(item) for item in work_items]


def run_survey(
    rows: int = 10,
    columns: int = 10,
    samples: int = 100,
    base_seed: int = 42,
    algorithms: Iterable[Algorithm | str] = AVAILABLE,
    config: PlannerConfig | None = None,
    parallel: bool = False,
) -> SurveyReport:
    """Generate *samples* levels per algorithm and aggregate their metrics.

    Seeds are ``base_seed + i``; every algorithm sees the same seeds.
    """
    config = config or PlannerConfig()
    seeds = [base_seed + i for i in range(samples)]

    stats = []
    for algorithm in algorithms:
        algorithm = Algorithm(algorithm)
        logger.info("Surveying %s over %d seeds", algorithm.value, samples)
        samples_for = _sample_batch(config, rows, columns, seeds, algorithm, parallel)
        stats.append(compute_algorithm_stats(algorithm, samples_for))

    return SurveyReport(
        rows=rows,
        columns=columns,
        samples=samples,
        base_seed=base_seed,
        generated_at=datetime.now(timezone.utc).isoformat(),
        algorithms=stats,
    )


def save_survey(report: SurveyReport, path: Path) -> None:
    """Save survey report to JSON file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(report.model_dump(mode="json"), indent=2))


def load_survey(path: Path) -> SurveyReport:
    """Load survey report from JSON file."""
    data = json.loads(path.read_text())
    return SurveyReport.model_validate(data)
