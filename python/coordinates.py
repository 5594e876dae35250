"""
Coordinate system shared by the grid and pathfinding modules.

Coordinates are (i, j) = (row, column). Rows grow downwards, so North is
a decreasing row index.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = ["Coordinate", "Direction", "FullDirection"]


class Direction(Enum):
    """Cardinal direction for traversal."""

    N = "N"  # Up (decreasing row)
    E = "E"  # Right (increasing col)
    S = "S"  # Down (increasing row)
    W = "W"  # Left (decreasing col)

    @property
    def offset(self) -> tuple[int, int]:
        return _DIRECTION_OFFSETS[self]

    @staticmethod
    def all() -> list[Direction]:
        """The four cardinal directions in clockwise order starting at North."""
        return [Direction.N, Direction.E, Direction.S, Direction.W]

    @staticmethod
    def from_char(char: str) -> Direction:
        try:
            return Direction(char)
        except ValueError:
            raise ValueError(f"Invalid direction: '{char}' (expected one of N, E, S, W)") from None


class FullDirection(Enum):
    """Eight compass points, plus CURRENT for the cell itself."""

    N = "N"
    NE = "NE"
    E = "E"
    SE = "SE"
    S = "S"
    SW = "SW"
    W = "W"
    NW = "NW"
    CURRENT = "C"

    @property
    def offset(self) -> tuple[int, int]:
        return _FULL_DIRECTION_OFFSETS[self]

    @staticmethod
    def all() -> list[FullDirection]:
        """The eight compass points clockwise from North (CURRENT excluded)."""
        return [
            FullDirection.N,
            FullDirection.NE,
            FullDirection.E,
            FullDirection.SE,
            FullDirection.S,
            FullDirection.SW,
            FullDirection.W,
            FullDirection.NW,
        ]

    @staticmethod
    def kernel() -> list[FullDirection]:
        """
        The 3x3 neighbourhood in reading order (top-left to bottom-right),
        including the centre cell.
        """
        return [
            FullDirection.NW,
            FullDirection.N,
            FullDirection.NE,
            FullDirection.W,
            FullDirection.CURRENT,
            FullDirection.E,
            FullDirection.SW,
            FullDirection.S,
            FullDirection.SE,
        ]

    @staticmethod
    def from_str(value: str) -> FullDirection:
        if value == FullDirection.CURRENT.value:
            raise ValueError("CURRENT is not a compass direction")
        try:
            return FullDirection(value)
        except ValueError:
            raise ValueError(f"Invalid direction: '{value}'") from None


_DIRECTION_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.N: (-1, 0),
    Direction.E: (0, 1),
    Direction.S: (1, 0),
    Direction.W: (0, -1),
}

_FULL_DIRECTION_OFFSETS: dict[FullDirection, tuple[int, int]] = {
    FullDirection.N: (-1, 0),
    FullDirection.NE: (-1, 1),
    FullDirection.E: (0, 1),
    FullDirection.SE: (1, 1),
    FullDirection.S: (1, 0),
    FullDirection.SW: (1, -1),
    FullDirection.W: (0, -1),
    FullDirection.NW: (-1, -1),
    FullDirection.CURRENT: (0, 0),
}


@dataclass(frozen=True, order=True)
class Coordinate:
    """An immutable (row, column) point. Ordering is row-major."""

    i: int
    j: int

    def __add__(self, other: Coordinate | Direction | FullDirection) -> Coordinate:
        match other:
            case Coordinate(i=di, j=dj):
                return Coordinate(self.i + di, self.j + dj)
            case Direction() | FullDirection():
                di, dj = other.offset
                return Coordinate(self.i + di, self.j + dj)
            case _:
                return NotImplemented

    def manhattan_distance(self) -> int:
        return abs(self.i) + abs(self.j)
