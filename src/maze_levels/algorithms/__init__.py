"""Maze generation algorithms.

Every algorithm is a plain function ``fn(grid, rng, **options) -> grid``
that carves links in place.  :class:`Algorithm` names them and
:func:`generate` dispatches on it, so consumers can do::

    from maze_levels.algorithms import Algorithm, generate
    generate(Algorithm.RECURSIVE_BACKTRACKER, grid, rng)
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Callable

from .aldous_broder import aldous_broder
from .binary_tree import binary_tree
from .recursive_backtracker import recursive_backtracker
from .recursive_division import Division, Orientation, recursive_division

if TYPE_CHECKING:
    from maze_levels.core.grid import Grid
    from maze_levels.core.rng import LevelRNG


class Algorithm(str, Enum):
    """The four supported generators, in selection order."""

    BINARY_TREE = "BINARY_TREE"
    ALDOUS_BRODER = "ALDOUS_BRODER"
    RECURSIVE_BACKTRACKER = "RECURSIVE_BACKTRACKER"
    RECURSIVE_DIVISION = "RECURSIVE_DIVISION"


GENERATORS: dict[Algorithm, Callable[..., Grid]] = {
    Algorithm.BINARY_TREE: binary_tree,
    Algorithm.ALDOUS_BRODER: aldous_broder,
    Algorithm.RECURSIVE_BACKTRACKER: recursive_backtracker,
    Algorithm.RECURSIVE_DIVISION: recursive_division,
}

AVAILABLE: tuple[Algorithm, ...] = tuple(Algorithm)


def generate(algorithm: Algorithm | str, grid: Grid, rng: LevelRNG, **options: Any) -> Grid:
    """Run *algorithm* on *grid*; *options* go to the generator function."""
    return GENERATORS[Algorithm(algorithm)](grid, rng, **options)


__all__ = [
    "AVAILABLE",
    "Algorithm",
    "Division",
    "GENERATORS",
    "Orientation",
    "aldous_broder",
    "binary_tree",
    "generate",
    "recursive_backtracker",
    "recursive_division",
]
