"""Maze graph model: cells arranged on a rectangular grid.

Every cell knows its (up to four) spatial neighbors, fixed at construction,
and a mutable set of *links* -- the passages carved by a generation
algorithm.  Links are always symmetric and always a subset of the spatial
neighbors.  Row 0 is the northern edge; column 0 is the western edge.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Iterator

from maze_levels.errors import InvalidCellReference, SelfLinkError

if TYPE_CHECKING:
    from maze_levels.core.rng import LevelRNG

Coord = tuple[int, int]


class CellKind(str, Enum):
    """Derived classification, assigned only after generation."""

    WALL = "WALL"
    FLOOR = "FLOOR"
    ENTRANCE = "ENTRANCE"
    GOAL = "GOAL"
    OCCUPIED = "OCCUPIED"


class Cell:
    """A single grid position and its passages."""

    __slots__ = ("grid", "row", "column", "north", "south", "east", "west", "kind", "_links")

    def __init__(self, grid: Grid, row: int, column: int) -> None:
        self.grid = grid
        self.row = row
        self.column = column
        self.north: Cell | None = None
        self.south: Cell | None = None
        self.east: Cell | None = None
        self.west: Cell | None = None
        self.kind: CellKind | None = None
        # dict keeps insertion order, so BFS and path walks are reproducible
        self._links: dict[Cell, None] = {}

    @property
    def coord(self) -> Coord:
        return (self.row, self.column)

    @property
    def neighbors(self) -> list[Cell]:
        """Spatial neighbors in north, south, east, west order."""
        return [c for c in (self.north, self.south, self.east, self.west) if c is not None]

    @property
    def links(self) -> list[Cell]:
        """Linked cells, in the order the links were created."""
        return list(self._links)

    def is_linked(self, other: Cell | None) -> bool:
        return other is not None and other in self._links

    def is_neighbor(self, other: Cell | None) -> bool:
        return other is not None and any(other is n for n in self.neighbors)

    def __repr__(self) -> str:
        return f"Cell({self.row}, {self.column})"


class Grid:
    """Owns a ``rows x columns`` arena of cells with spatial adjacency wired.

    Parameters
    ----------
    rows, columns:
        Grid dimensions; both must be at least 1.
    """

    def __init__(self, rows: int, columns: int) -> None:
        if rows < 1 or columns < 1:
            raise ValueError(f"Grid dimensions must be >= 1, got {rows}x{columns}")
        self.rows = rows
        self.columns = columns
        self._cells: list[Cell] = [
            Cell(self, i // columns, i % columns) for i in range(rows * columns)
        ]
        for cell in self._cells:
            row, col = cell.row, cell.column
            cell.north = self.cell_at(row - 1, col)
            cell.south = self.cell_at(row + 1, col)
            cell.east = self.cell_at(row, col + 1)
            cell.west = self.cell_at(row, col - 1)

    # -- addressing ----------------------------------------------------------

    @property
    def size(self) -> int:
        return self.rows * self.columns

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.columns

    def cell_at(self, row: int, col: int) -> Cell | None:
        """Return the cell at (*row*, *col*), or ``None`` when out of bounds."""
        if not self.in_bounds(row, col):
            return None
        return self._cells[row * self.columns + col]

    def __getitem__(self, coord: Coord) -> Cell:
        """Strict lookup: raises :class:`InvalidCellReference` when out of bounds."""
        row, col = coord
        cell = self.cell_at(row, col)
        if cell is None:
            raise InvalidCellReference(
                f"({row}, {col}) is outside a {self.rows}x{self.columns} grid"
            )
        return cell

    def random_cell(self, rng: LevelRNG) -> Cell:
        """Draw a cell uniformly (one RNG draw)."""
        return self._cells[rng.cell_index(len(self._cells))]

    def each_cell(self) -> Iterator[Cell]:
        """Yield every cell in row-major order."""
        yield from self._cells

    def each_row(self) -> Iterator[list[Cell]]:
        for start in range(0, len(self._cells), self.columns):
            yield self._cells[start : start + self.columns]

    # -- links ---------------------------------------------------------------

    def check_owned(self, cell: Cell) -> None:
        """Raise :class:`InvalidCellReference` unless *cell* belongs to this grid."""
        if cell.grid is not self:
            raise InvalidCellReference(f"{cell!r} does not belong to this grid")

    def link(self, a: Cell, b: Cell) -> None:
        """Carve a passage between two spatially adjacent cells."""
        if a is b:
            raise SelfLinkError(f"Cannot link {a!r} to itself")
        self.check_owned(a)
        self.check_owned(b)
        if not a.is_neighbor(b):
            raise InvalidCellReference(f"{a!r} and {b!r} are not spatial neighbors")
        a._links[b] = None
        b._links[a] = None

    def unlink(self, a: Cell, b: Cell) -> None:
        """Remove the passage between *a* and *b* (no-op if absent)."""
        a._links.pop(b, None)
        b._links.pop(a, None)

    def linked(self, a: Cell, b: Cell) -> bool:
        return a.is_linked(b)

    def link_pairs(self) -> list[tuple[Coord, Coord]]:
        """Every link once, as sorted coordinate pairs, in sorted order."""
        pairs: set[tuple[Coord, Coord]] = set()
        for cell in self._cells:
            for other in cell._links:
                pairs.add(tuple(sorted((cell.coord, other.coord))))  # type: ignore[arg-type]
        return sorted(pairs)

    def link_count(self) -> int:
        return sum(len(cell._links) for cell in self._cells) // 2

    # -- derived views -------------------------------------------------------

    def dead_ends(self) -> list[Cell]:
        """Cells with exactly one passage."""
        return [cell for cell in self._cells if len(cell._links) == 1]

    def classify(self) -> None:
        """Assign WALL to unlinked cells and FLOOR to every other cell."""
        for cell in self._cells:
            cell.kind = CellKind.FLOOR if cell._links else CellKind.WALL

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, columns={self.columns})"
