"""The single random stream behind one level build.

Every random decision a level makes goes through a named draw on
:class:`LevelRNG`: which algorithm, which cell, which way a binary-tree
cell opens, where a division wall goes.  The draws happen in a fixed order,
so one seed replays the whole level.
"""

from __future__ import annotations

import hashlib
import random
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from maze_levels.algorithms import Algorithm
    from maze_levels.core.grid import Cell


class LevelRNG:
    """Seeded draw source for maze generation and placement.

    Parameters
    ----------
    seed:
        Any integer, however large.
    """

    __slots__ = ("_seed", "_stream")

    def __init__(self, seed: int) -> None:
        self._seed = seed
        self._stream = random.Random(seed)

    @property
    def seed(self) -> int:
        return self._seed

    def choose_algorithm(self, algorithms: Sequence[Algorithm]) -> Algorithm:
        return self._stream.choice(algorithms)

    def cell_index(self, size: int) -> int:
        """Index of a uniformly drawn cell among *size* cells."""
        return self._stream.randrange(size)

    def quadrant_offset(self, extent: int) -> int:
        """Row or column offset inside the north-west half of *extent*."""
        return self._stream.randrange((extent + 1) // 2)

    def choose_neighbor(self, cells: Sequence[Cell]) -> Cell:
        return self._stream.choice(cells)

    def coin_flip(self) -> bool:
        """Heads (``True``) opens a binary-tree cell to the north."""
        return self.chance(0.5)

    def chance(self, probability: float) -> bool:
        return self._stream.random() < probability

    def split_at(self, length: int) -> int:
        """Offset in ``range(length)`` for a division wall or its passage."""
        return self._stream.randrange(length)

    def dimension(self, low: int, high: int) -> int:
        """Grid side length in ``[low, high]``."""
        return self._stream.randint(low, high)

    def fork(self, name: str) -> LevelRNG:
        """Independent stream for *name*, derived from the seed alone.

        The parent stream is not advanced.
        """
        digest = hashlib.sha256(f"{self._seed}:{name}".encode()).digest()
        return LevelRNG(int.from_bytes(digest[:8], "big"))

    def __repr__(self) -> str:
        return f"LevelRNG(seed={self._seed})"
