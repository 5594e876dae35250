"""
Lowest-risk pathfinding over a grid of per-cell risk levels.

Each cell carries its fixed risk and the best cumulative risk found so far
for reaching it. A path's total risk is the sum of the risks of every cell
entered, so the starting cell's own risk never counts.
"""

from __future__ import annotations

import heapq
import logging
import sys
from dataclasses import dataclass
from typing import Iterable

from coordinates import Coordinate, Direction
from grid_parser import parse_digit_grid
from grid_types import UnsizedGrid

__all__ = ["INFINITE_RISK", "WALL", "RiskCell", "RiskMap", "wrap_risk"]

logger = logging.getLogger(__name__)

# Larger than any achievable path total
INFINITE_RISK = sys.maxsize

# A cell with this risk can never be entered
WALL = INFINITE_RISK


@dataclass
class RiskCell:
    """Fixed risk of entering a cell plus the best known total to reach it."""

    risk: int
    best: int = INFINITE_RISK


def wrap_risk(risk: int, bias: int) -> int:
    """Add ``bias`` to ``risk``, wrapping so the result stays within 1..9."""
    return (risk + bias - 1) % 9 + 1


class RiskMap:
    """
    A risk grid with a start and target cell.

    Usage:
        risk_map = RiskMap.from_lines(lines)
        risk_map.lowest_risk()           # part 1
        risk_map.expand_5x().lowest_risk()  # part 2
    """

    def __init__(
        self,
        grid: UnsizedGrid[RiskCell],
        start: Coordinate | None = None,
        end: Coordinate | None = None,
    ) -> None:
        self.grid = grid
        self.start = start if start is not None else Coordinate(0, 0)
        self.end = end if end is not None else grid.last_coordinate()
        for name, coord in (("start", self.start), ("end", self.end)):
            if not grid.contains(coord):
                raise ValueError(f"{name} {coord} is outside the {grid.rows}x{grid.cols} risk grid")
        self.reset()

    @classmethod
    def from_risks(cls, risks: list[list[int]]) -> RiskMap:
        return cls(UnsizedGrid([[RiskCell(risk) for risk in row] for row in risks]))

    @classmethod
    def from_lines(cls, source: str | Iterable[str]) -> RiskMap:
        return cls.from_risks(parse_digit_grid(source, "risk map"))

    def reset(self) -> None:
        """Forget all best known totals; the start cell costs nothing to reach."""
        for coord, cell in self.grid.iterate():
            if coord != self.start and cell.best != INFINITE_RISK:
                cell.best = INFINITE_RISK
        start = self.grid[self.start]
        if start.best != 0:
            start.best = 0

    def risks(self) -> list[list[int]]:
        return [[cell.risk for _, cell in row] for row in self.grid.iterate_rows()]

    # -- expansion ------------------------------------------------------------

    def expand(self, factor: int = 5) -> RiskMap:
        """
        Tile the grid ``factor`` times in each direction.

        Each tile step right or down adds one to every risk, wrapping from 9
        back to 1; walls stay walls in every tile. The expanded map starts
        fresh: every best known total is reset and the target moves to the
        new bottom-right corner.
        """
        if factor < 1:
            raise ValueError(f"Expansion factor must be at least 1, got {factor}")

        height, width = self.grid.rows, self.grid.cols
        expanded = UnsizedGrid.filled(height * factor, width * factor, 0)
        for coord, _ in expanded.iterate():
            base = self.grid[Coordinate(coord.i % height, coord.j % width)].risk
            bias = coord.i // height + coord.j // width
            expanded[coord] = base if base == WALL else wrap_risk(base, bias)

        logger.debug("expand: %dx%d -> %dx%d", height, width, expanded.rows, expanded.cols)
        return RiskMap.from_risks(expanded.to_rows())

    def expand_5x(self) -> RiskMap:
        return self.expand(5)

    # -- search ---------------------------------------------------------------

    def _search(self, parents: dict[Coordinate, Coordinate] | None) -> int | None:
        self.reset()
        heap: list[tuple[int, Coordinate]] = [(0, self.start)]
        popped = 0
        stale = 0

        while heap:
            acc_risk, coord = heapq.heappop(heap)
            if acc_risk > self.grid[coord].best:
                stale += 1
                continue
            popped += 1

            if coord == self.end:
                logger.info(
                    "lowest_risk: %dx%d grid, risk=%d, popped=%d, stale=%d",
                    self.grid.rows,
                    self.grid.cols,
                    acc_risk,
                    popped,
                    stale,
                )
                return acc_risk

            for neighbor, cell in self.grid.neighbors(coord, Direction.all()):
                new_risk = acc_risk + cell.risk
                if new_risk < cell.best:
                    cell.best = new_risk
                    if parents is not None:
                        parents[neighbor] = coord
                    heapq.heappush(heap, (new_risk, neighbor))

        logger.info("lowest_risk: no path from %s to %s", self.start, self.end)
        return None

    def lowest_risk(self) -> int | None:
        """Minimum total risk from start to end, or None if the end is unreachable."""
        return self._search(None)

    def lowest_risk_path(self) -> tuple[int, list[Coordinate]] | None:
        """
        Minimum total risk together with one path achieving it (start and end
        included), or None if the end is unreachable.
        """
        parents: dict[Coordinate, Coordinate] = {}
        total = self._search(parents)
        if total is None:
            return None

        path = [self.end]
        while path[-1] != self.start:
            path.append(parents[path[-1]])
        path.reverse()
        return total, path
