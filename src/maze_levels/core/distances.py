"""Breadth-first distance fields over the link graph.

Distances follow *links* only; spatial adjacency without a passage does not
count.  Fields are transient: compute one, query it, throw it away.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING

from maze_levels.errors import (
    DisconnectedGraphError,
    PathReconstructionError,
    PathReconstructionOverflow,
)

if TYPE_CHECKING:
    from maze_levels.core.grid import Cell, Grid


class DistanceField:
    """Shortest-path distances from *root* to every reachable cell.

    Unreachable cells are absent from the field (``field[cell]`` is
    ``None``), never zero.
    """

    def __init__(self, root: Cell) -> None:
        self.root = root
        # insertion order == BFS discovery order
        self._distances: dict[Cell, int] = {root: 0}
        frontier = deque([root])
        while frontier:
            cell = frontier.popleft()
            next_distance = self._distances[cell] + 1
            for linked in cell.links:
                if linked not in self._distances:
                    self._distances[linked] = next_distance
                    frontier.append(linked)

    def __getitem__(self, cell: Cell) -> int | None:
        return self._distances.get(cell)

    def __contains__(self, cell: object) -> bool:
        return cell in self._distances

    def __len__(self) -> int:
        return len(self._distances)

    @property
    def cells(self) -> list[Cell]:
        """Reachable cells in BFS discovery order."""
        return list(self._distances)

    def max(self) -> tuple[Cell, int]:
        """Return the farthest cell and its distance.

        Ties go to the cell discovered first.
        """
        max_cell, max_distance = self.root, 0
        for cell, distance in self._distances.items():
            if distance > max_distance:
                max_cell, max_distance = cell, distance
        return max_cell, max_distance

    def path_to(self, goal: Cell, max_steps: int | None = None) -> list[Cell]:
        """Return the shortest path ``[root, ..., goal]``.

        Walks backward from *goal*, each step moving to a linked neighbor
        exactly one closer to the root.  The walk is capped at *max_steps*,
        by default the grid's cell count.
        """
        goal_distance = self._distances.get(goal)
        if goal_distance is None:
            raise DisconnectedGraphError(f"{goal!r} is not reachable from {self.root!r}")

        cap = goal.grid.size if max_steps is None else max_steps
        path = [goal]
        current = goal
        steps = 0
        while current is not self.root:
            steps += 1
            if steps > cap:
                raise PathReconstructionOverflow(
                    f"Backward walk from {goal!r} exceeded {cap} steps"
                )
            wanted = self._distances[current] - 1
            for linked in current.links:
                if self._distances.get(linked) == wanted:
                    current = linked
                    break
            else:
                raise PathReconstructionError(
                    f"No linked neighbor of {current!r} at distance {wanted}; "
                    "links changed after the field was computed?"
                )
            path.append(current)

        path.reverse()
        return path


def distances_from(cell: Cell) -> DistanceField:
    return DistanceField(cell)


@dataclass(frozen=True)
class LongestPath:
    """Endpoints of an approximate diameter and the distance between them.

    ``entrance`` is the cell farthest from the search start; ``goal`` is the
    cell farthest from ``entrance``.
    """

    entrance: Cell
    goal: Cell
    distance: int


def longest_path(start: Cell) -> LongestPath:
    """Two-pass BFS diameter approximation.

    The farthest cell *A* from *start* is found first; the farthest cell
    *B* from *A* is then the goal, and ``distance`` is the A -> B distance.
    """
    far_start, _ = DistanceField(start).max()
    goal, distance = DistanceField(far_start).max()
    return LongestPath(entrance=far_start, goal=goal, distance=distance)


def unreachable_cells(grid: Grid) -> list[Cell]:
    """Cells not reachable from the first cell, in row-major order."""
    field = DistanceField(next(grid.each_cell()))
    return [cell for cell in grid.each_cell() if cell not in field]


def check_connectivity(grid: Grid) -> None:
    """Raise :class:`DisconnectedGraphError` unless every cell is reachable."""
    missing = unreachable_cells(grid)
    if missing:
        raise DisconnectedGraphError(
            f"{len(missing)} of {grid.size} cells unreachable, e.g. {missing[0]!r}"
        )
