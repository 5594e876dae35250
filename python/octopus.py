"""
Flashing octopus simulation on a fixed 10x10 energy grid.

Each step every octopus gains one energy. Any octopus above 9 flashes,
giving one energy to all eight neighbours, which may flash in turn. An
octopus flashes at most once per step, and every octopus that flashed
ends the step at 0.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from coordinates import Coordinate, FullDirection
from grid_parser import parse_digit_grid
from grid_types import SizedGrid

__all__ = ["FLASH_THRESHOLD", "OctopusGrid"]

logger = logging.getLogger(__name__)

FLASH_THRESHOLD = 9


class OctopusGrid(SizedGrid[int]):
    ROWS = 10
    COLS = 10

    def __init__(self, rows: Sequence[Sequence[int]]) -> None:
        super().__init__(rows)
        self.steps_taken = 0

    @classmethod
    def from_lines(cls, source: str | Iterable[str]) -> OctopusGrid:
        return cls(parse_digit_grid(source, "octopus grid"))

    def step(self) -> int:
        """Advance one step and return how many octopuses flashed."""
        self.update(lambda _, energy: energy + 1)
        pending: list[Coordinate] = [coord for coord, energy in self.iterate() if energy > FLASH_THRESHOLD]
        flashed: set[Coordinate] = set(pending)

        while pending:
            coord = pending.pop()
            for neighbor, energy in self.neighbors(coord, FullDirection.all()):
                self[neighbor] = energy + 1
                if energy + 1 > FLASH_THRESHOLD and neighbor not in flashed:
                    flashed.add(neighbor)
                    pending.append(neighbor)

        for coord in flashed:
            self[coord] = 0
        self.steps_taken += 1
        return len(flashed)

    def flashes_after(self, steps: int) -> int:
        total = sum(self.step() for _ in range(steps))
        logger.info("flashes_after: %d flashes in %d steps", total, steps)
        return total

    def first_synchronised_step(self, limit: int = 10_000) -> int | None:
        """
        First step on which every octopus flashes.

        Steps are numbered from 1 since the grid was built, so steps already
        taken count too. At most ``limit`` further steps are tried; None if
        none of them synchronises.
        """
        size = self.rows * self.cols
        for _ in range(limit):
            if self.step() == size:
                logger.info("first_synchronised_step: %d", self.steps_taken)
                return self.steps_taken
        return None
