"""Level progression: one planner call per level, seeds derived per level.

Level *n* depends only on the top-level seed and *n*, so replaying a run
with the same seed yields the same sequence of layouts.
"""

from __future__ import annotations

from maze_levels.algorithms import Algorithm
from maze_levels.core.rng import LevelRNG
from maze_levels.layout.models import LevelLayout
from maze_levels.layout.planner import LevelLayoutPlanner

MIN_RANDOM_SIZE = 8
MAX_RANDOM_SIZE = 20


class LevelProgression:
    """Drives successive levels of a run.

    Parameters
    ----------
    seed:
        Top-level seed for the whole run.
    rows, columns:
        Fixed level size; when ``None`` each level draws its own size in
        ``[8, 20]`` from a per-level stream.
    algorithm:
        Force one algorithm for every level.
    """

    def __init__(
        self,
        seed: int,
        rows: int | None = None,
        columns: int | None = None,
        algorithm: Algorithm | str | None = None,
        planner: LevelLayoutPlanner | None = None,
    ) -> None:
        self.rng = LevelRNG(seed)
        self.rows = rows
        self.columns = columns
        self.algorithm = algorithm
        self.planner = planner or LevelLayoutPlanner()
        self.level = 0

    def level_seed(self, level: int) -> int:
        return self.rng.fork(f"level:{level}").seed

    def level_size(self, level: int) -> tuple[int, int]:
        size_rng = self.rng.fork(f"size:{level}")
        rows = self.rows or size_rng.dimension(MIN_RANDOM_SIZE, MAX_RANDOM_SIZE)
        columns = self.columns or size_rng.dimension(MIN_RANDOM_SIZE, MAX_RANDOM_SIZE)
        return rows, columns

    def layout_for(self, level: int) -> LevelLayout:
        """Build level *level* (1-based); difficulty equals the level number."""
        if level < 1:
            raise ValueError(f"level must be >= 1, got {level}")
        rows, columns = self.level_size(level)
        return self.planner.plan(
            rows, columns, self.level_seed(level),
            algorithm=self.algorithm, difficulty=level,
        )

    def next_level(self) -> LevelLayout:
        self.level += 1
        return self.layout_for(self.level)
