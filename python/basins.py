"""
Low points and basins of a height map.
"""

from __future__ import annotations

import logging
from collections import deque
from math import prod
from typing import Iterable

from coordinates import Coordinate, Direction
from grid_parser import parse_digit_grid
from grid_types import UnsizedGrid

__all__ = ["HIGHEST_POINT", "HeightMap"]

logger = logging.getLogger(__name__)

# Cells at this height belong to no basin
HIGHEST_POINT = 9


class HeightMap:
    def __init__(self, grid: UnsizedGrid[int]) -> None:
        self.grid = grid

    @classmethod
    def from_lines(cls, source: str | Iterable[str]) -> HeightMap:
        return cls(UnsizedGrid(parse_digit_grid(source, "height map")))

    def is_low_point(self, coord: Coordinate) -> bool:
        """True if every in-bounds 4-neighbour is strictly higher."""
        height = self.grid[coord]
        return all(neighbor > height for _, neighbor in self.grid.neighbors(coord, Direction.all()))

    def low_points(self) -> list[Coordinate]:
        return [coord for coord, _ in self.grid.iterate() if self.is_low_point(coord)]

    def risk_level_sum(self) -> int:
        return sum(self.grid[coord] + 1 for coord in self.low_points())

    def basin_size(self, low_point: Coordinate) -> int:
        """Number of cells reachable from ``low_point`` without crossing a height-9 cell."""
        seen: set[Coordinate] = {low_point}
        queue: deque[Coordinate] = deque([low_point])

        while queue:
            coord = queue.popleft()
            for neighbor, height in self.grid.neighbors(coord, Direction.all()):
                if height < HIGHEST_POINT and neighbor not in seen:
                    seen.add(neighbor)
                    queue.append(neighbor)

        return len(seen)

    def largest_basins_product(self, count: int = 3) -> int:
        sizes = sorted((self.basin_size(coord) for coord in self.low_points()), reverse=True)
        logger.info("largest_basins_product: %d basins, largest=%s", len(sizes), sizes[:count])
        return prod(sizes[:count])
