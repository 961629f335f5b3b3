"""Level layout planner -- ties generation, placement and repair together.

One :class:`~maze_levels.core.rng.LevelRNG` seeded from the caller's seed is
consumed in a fixed order:

1. algorithm selection (one draw, skipped when the caller names one),
2. the algorithm's own carving draws,
3. start-cell sampling for entrance/goal placement.

so a seed reproduces the maze, the entrance and the goal exactly.
"""

from __future__ import annotations

import logging

from maze_levels.algorithms import AVAILABLE, Algorithm, generate
from maze_levels.algorithms.aldous_broder import step_cap
from maze_levels.core.distances import DistanceField, check_connectivity, longest_path
from maze_levels.core.grid import Cell, CellKind, Grid
from maze_levels.core.rng import LevelRNG
from maze_levels.errors import DisconnectedGraphError
from maze_levels.layout.config import PlannerConfig
from maze_levels.layout.models import LevelLayout
from maze_levels.layout.repair import ensure_path

logger = logging.getLogger(__name__)


class LevelLayoutPlanner:
    """Builds solvable maze levels.

    Parameters
    ----------
    config:
        Tuning knobs; defaults to ``PlannerConfig()``.
    """

    def __init__(self, config: PlannerConfig | None = None) -> None:
        self.config = config or PlannerConfig()

    def plan(
        self,
        rows: int,
        columns: int,
        seed: int,
        algorithm: Algorithm | str | None = None,
        difficulty: int = 1,
    ) -> LevelLayout:
        """Generate one level.

        *difficulty* is carried through untouched for collaborators (monster
        density and the like); it does not affect the maze.
        """
        rng = LevelRNG(seed)
        if algorithm is None:
            chosen = rng.choose_algorithm(AVAILABLE)
        else:
            chosen = Algorithm(algorithm)
        logger.debug(
            "Planning %dx%d level, seed=%d, algorithm=%s", rows, columns, seed, chosen.value,
        )

        grid = Grid(rows, columns)
        generate(chosen, grid, rng, **self._options_for(chosen, grid))
        logger.debug("Maze carved with %d dead ends", len(grid.dead_ends()))
        self._check_connectivity(grid, chosen)

        entrance, goal, used_fallback = self._place(grid, rng)
        repaired = ensure_path(grid, entrance, goal)

        grid.classify()
        goal.kind = CellKind.GOAL
        entrance.kind = CellKind.ENTRANCE

        goal_distance = DistanceField(entrance)[goal] or 0
        logger.debug(
            "Entrance %r, goal %r, distance %d", entrance, goal, goal_distance,
        )
        return LevelLayout(
            grid=grid,
            entrance=entrance,
            goal=goal,
            algorithm=chosen,
            seed=seed,
            difficulty=difficulty,
            goal_distance=goal_distance,
            used_fallback=used_fallback,
            repaired=repaired,
        )

    # -- generation ----------------------------------------------------------

    def _options_for(self, algorithm: Algorithm, grid: Grid) -> dict[str, object]:
        if algorithm is Algorithm.ALDOUS_BRODER:
            return {"max_steps": step_cap(grid.size, self.config.aldous_broder_step_factor)}
        if algorithm is Algorithm.RECURSIVE_DIVISION:
            return {
                "min_size": self.config.min_division_size,
                "stop_chance": self.config.division_stop_chance,
            }
        return {}

    def _check_connectivity(self, grid: Grid, algorithm: Algorithm) -> None:
        try:
            check_connectivity(grid)
        except DisconnectedGraphError as exc:
            if self.config.strict_connectivity:
                raise
            logger.warning(
                "%s: %s; entrance/goal path will be repaired if needed",
                algorithm.value, exc,
            )

    # -- placement -----------------------------------------------------------

    def _start_cell(self, grid: Grid, rng: LevelRNG) -> Cell:
        if not self.config.quadrant_start:
            return grid.random_cell(rng)
        row = rng.quadrant_offset(grid.rows)
        column = rng.quadrant_offset(grid.columns)
        return grid[row, column]

    def _place(self, grid: Grid, rng: LevelRNG) -> tuple[Cell, Cell, bool]:
        """Return ``(entrance, goal, used_fallback)``.

        Entrance and goal are the two ends of the approximate diameter
        reached from the start cell.  If they coincide, a fresh start cell
        is sampled, at most ``grid.size`` times.
        """
        path = longest_path(self._start_cell(grid, rng))
        attempts = 0
        while path.goal is path.entrance and attempts < grid.size:
            attempts += 1
            path = longest_path(grid.random_cell(rng))
        if path.goal is not path.entrance:
            return path.entrance, path.goal, False

        entrance = path.entrance
        neighbors = entrance.neighbors
        goal = neighbors[0] if neighbors else entrance
        logger.warning(
            "Goal placement fell back after %d attempts: entrance %r, goal %r",
            attempts, entrance, goal,
        )
        return entrance, goal, True
