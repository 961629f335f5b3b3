"""Exception hierarchy for maze construction and traversal.

Programmer errors (bad coordinates, self-links) fail fast.  Degraded but
successful level builds are reported through flags on the layout, never
through these exceptions.
"""

from __future__ import annotations


class MazeError(Exception):
    """Base class for all maze errors."""


class InvalidCellReference(MazeError, IndexError):
    """Coordinates are out of bounds, or a cell is foreign / not adjacent."""


class SelfLinkError(MazeError, ValueError):
    """A cell was asked to link to itself."""


class DisconnectedGraphError(MazeError):
    """Some cells cannot be reached from the others through links."""


class PathReconstructionError(MazeError):
    """A distance field could not be walked back into a path."""


class PathReconstructionOverflow(PathReconstructionError):
    """The backward walk exceeded its iteration cap (the grid's cell count unless overridden)."""
