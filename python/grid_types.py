"""
Rectangular grid containers addressed by Coordinate.

Two concrete shapes share the Grid interface:
- UnsizedGrid: row/column counts decided by the input, stored as a list of rows
- SizedGrid: row/column counts pinned on the class, stored as one flat list

Reads outside the grid return None rather than raising, so neighbour scans
can branch on absence without bounds arithmetic at every call site.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, ClassVar, Generic, Iterable, Iterator, Sequence, TypeVar

from coordinates import Coordinate, Direction, FullDirection

__all__ = ["Grid", "UnsizedGrid", "SizedGrid", "check_rectangular"]

T = TypeVar("T")
U = TypeVar("U")


def check_rectangular(rows: Sequence[Sequence[object]], name: str = "grid") -> tuple[int, int]:
    """
    Validate that ``rows`` is non-empty and rectangular.

    Returns:
        (row_count, col_count)

    Raises:
        ValueError: if there are no rows, the first row is empty, or any row
        length differs from the first row's length
    """
    if not rows:
        raise ValueError(f"Cannot build {name}: no rows supplied")
    cols = len(rows[0])
    if cols == 0:
        raise ValueError(f"Cannot build {name}: row 0 is empty")

    mismatched = [(i, len(row)) for i, row in enumerate(rows) if len(row) != cols]
    if mismatched:
        error_msg = (
            f"Inconsistent row lengths in {name}\n"
            f"  Expected: {cols} columns (from row 0)\n"
            f"  Mismatched rows:\n"
        )
        for row_idx, actual_cols in mismatched:
            error_msg += f"    Row {row_idx}: {actual_cols} columns\n"
        error_msg += "  All rows must have the same number of cells"
        raise ValueError(error_msg)

    return len(rows), cols


class Grid(ABC, Generic[T]):
    """
    Shared behaviour for rectangular grids.

    Subclasses provide storage through ``_read``/``_write`` and a
    ``_build`` constructor used by ``map``. Shape is fixed once constructed;
    cell values may be replaced in place with ``set`` or ``update``.
    """

    def __init__(self, rows: int, cols: int) -> None:
        self._rows = rows
        self._cols = cols

    # -- storage hooks --------------------------------------------------------

    @abstractmethod
    def _read(self, i: int, j: int) -> T: ...

    @abstractmethod
    def _write(self, i: int, j: int, value: T) -> None: ...

    @classmethod
    @abstractmethod
    def _build(cls, rows: list[list[U]]) -> Grid[U]: ...

    # -- shape ----------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def contains(self, coord: Coordinate) -> bool:
        return 0 <= coord.i < self._rows and 0 <= coord.j < self._cols

    def last_coordinate(self) -> Coordinate:
        """Bottom-right corner."""
        return Coordinate(self._rows - 1, self._cols - 1)

    # -- access ---------------------------------------------------------------

    def get(self, coord: Coordinate) -> T | None:
        if not self.contains(coord):
            return None
        return self._read(coord.i, coord.j)

    def set(self, coord: Coordinate, value: T) -> bool:
        """Replace the value at ``coord``. Returns False if out of bounds."""
        if not self.contains(coord):
            return False
        self._write(coord.i, coord.j, value)
        return True

    def __getitem__(self, coord: Coordinate) -> T:
        if not self.contains(coord):
            raise IndexError(f"{coord} is outside a {self._rows}x{self._cols} grid")
        return self._read(coord.i, coord.j)

    def __setitem__(self, coord: Coordinate, value: T) -> None:
        if not self.set(coord, value):
            raise IndexError(f"{coord} is outside a {self._rows}x{self._cols} grid")

    # -- iteration ------------------------------------------------------------

    def coordinates(self) -> Iterator[Coordinate]:
        for i in range(self._rows):
            for j in range(self._cols):
                yield Coordinate(i, j)

    def iterate(self) -> Iterator[tuple[Coordinate, T]]:
        """Yield (coordinate, value) pairs in row-major order."""
        for coord in self.coordinates():
            yield coord, self._read(coord.i, coord.j)

    def iterate_rows(self) -> Iterator[list[tuple[Coordinate, T]]]:
        for i in range(self._rows):
            yield [(Coordinate(i, j), self._read(i, j)) for j in range(self._cols)]

    def neighbors(
        self,
        coord: Coordinate,
        directions: Iterable[Direction | FullDirection] | None = None,
    ) -> Iterator[tuple[Coordinate, T]]:
        """Yield in-bounds neighbours of ``coord`` (4-way unless told otherwise)."""
        for direction in directions if directions is not None else Direction.all():
            neighbor = coord + direction
            if self.contains(neighbor):
                yield neighbor, self._read(neighbor.i, neighbor.j)

    def update(self, fn: Callable[[Coordinate, T], T]) -> None:
        """Replace every cell with ``fn(coord, value)``, visiting each cell once."""
        for coord in self.coordinates():
            self._write(coord.i, coord.j, fn(coord, self._read(coord.i, coord.j)))

    def map(self, fn: Callable[[T], U]) -> Grid[U]:
        """A new grid of the same kind with ``fn`` applied to every cell."""
        return self._build([[fn(value) for _, value in row] for row in self.iterate_rows()])

    def to_rows(self) -> list[list[T]]:
        return [[value for _, value in row] for row in self.iterate_rows()]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.to_rows() == other.to_rows()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._rows}x{self._cols})"


class UnsizedGrid(Grid[T]):
    """A grid whose shape comes from its input, stored as a list of row lists."""

    def __init__(self, rows: Sequence[Sequence[T]]) -> None:
        n_rows, n_cols = check_rectangular(rows)
        super().__init__(n_rows, n_cols)
        self._cells: list[list[T]] = [list(row) for row in rows]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[T]]) -> UnsizedGrid[T]:
        return cls(rows)

    @classmethod
    def filled(cls, rows: int, cols: int, value: T) -> UnsizedGrid[T]:
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")
        return cls([[value] * cols for _ in range(rows)])

    @classmethod
    def _build(cls, rows: list[list[U]]) -> UnsizedGrid[U]:
        return UnsizedGrid(rows)

    def _read(self, i: int, j: int) -> T:
        return self._cells[i][j]

    def _write(self, i: int, j: int, value: T) -> None:
        self._cells[i][j] = value


class SizedGrid(Grid[T]):
    """
    A grid with a fixed shape, stored as one flat row-major list.

    Subclasses pin ``ROWS`` and ``COLS``; input of any other shape is
    rejected. With both left as None the shape is taken from the first
    construction and never changes afterwards.
    """

    ROWS: ClassVar[int | None] = None
    COLS: ClassVar[int | None] = None

    def __init__(self, rows: Sequence[Sequence[T]]) -> None:
        n_rows, n_cols = check_rectangular(rows, type(self).__name__)
        expected_rows = self.ROWS if self.ROWS is not None else n_rows
        expected_cols = self.COLS if self.COLS is not None else n_cols
        if (n_rows, n_cols) != (expected_rows, expected_cols):
            raise ValueError(
                f"{type(self).__name__} must be {expected_rows}x{expected_cols}, "
                f"got {n_rows}x{n_cols}"
            )
        super().__init__(n_rows, n_cols)
        self._cells: list[T] = [value for row in rows for value in row]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[T]]) -> SizedGrid[T]:
        return cls(rows)

    @classmethod
    def _build(cls, rows: list[list[U]]) -> SizedGrid[U]:
        # Mapped values may not suit a subclass's own semantics; keep the shape only
        return SizedGrid(rows)

    def _read(self, i: int, j: int) -> T:
        return self._cells[i * self._cols + j]

    def _write(self, i: int, j: int, value: T) -> None:
        self._cells[i * self._cols + j] = value
