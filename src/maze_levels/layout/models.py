"""Planner output records.

:class:`LevelLayout` is the live result handed to gameplay (it holds the
grid itself).  :class:`LayoutSummary` is its JSON-serialisable snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pydantic import BaseModel

from maze_levels.algorithms import Algorithm
from maze_levels.core.grid import CellKind

if TYPE_CHECKING:
    from maze_levels.core.grid import Cell, Coord, Grid

TILE_CHARS: dict[CellKind | None, str] = {
    CellKind.WALL: "#",
    CellKind.FLOOR: ".",
    CellKind.ENTRANCE: "@",
    CellKind.GOAL: "%",
    CellKind.OCCUPIED: "M",
    None: "?",
}


class LayoutSummary(BaseModel):
    """Serialisable snapshot of a generated level."""

    rows: int
    columns: int
    seed: int
    algorithm: Algorithm
    difficulty: int
    entrance: tuple[int, int]
    goal: tuple[int, int]
    goal_distance: int
    used_fallback: bool
    repaired: bool
    links: list[tuple[tuple[int, int], tuple[int, int]]]
    tiles: list[str]
    """One string per row, see ``TILE_CHARS``."""


@dataclass
class LevelLayout:
    """A generated level: carved grid plus entrance and goal.

    Attributes
    ----------
    used_fallback:
        Entrance/goal sampling gave up and took the deterministic fallback.
    repaired:
        The maze was disconnected and a corridor was linked between
        entrance and goal.
    """

    grid: Grid
    entrance: Cell
    goal: Cell
    algorithm: Algorithm
    seed: int
    difficulty: int
    goal_distance: int
    used_fallback: bool = False
    repaired: bool = False

    @property
    def entrance_coord(self) -> Coord:
        return self.entrance.coord

    @property
    def goal_coord(self) -> Coord:
        return self.goal.coord

    def tiles(self) -> list[str]:
        return ["".join(TILE_CHARS[cell.kind] for cell in row) for row in self.grid.each_row()]

    def to_summary(self) -> LayoutSummary:
        return LayoutSummary(
            rows=self.grid.rows,
            columns=self.grid.columns,
            seed=self.seed,
            algorithm=self.algorithm,
            difficulty=self.difficulty,
            entrance=self.entrance_coord,
            goal=self.goal_coord,
            goal_distance=self.goal_distance,
            used_fallback=self.used_fallback,
            repaired=self.repaired,
            links=self.grid.link_pairs(),
            tiles=self.tiles(),
        )
