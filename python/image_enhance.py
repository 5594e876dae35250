"""
Image enhancement over an infinite canvas.

The image is a finite grid of pixels surrounded by infinitely many pixels
that all share one state. Each enhancement reads the 3x3 neighbourhood of
every pixel as a 9-bit number (top-left is the most significant bit) and
looks the result up in a 512-entry rule. The finite part grows by one pixel
on every side each pass; the surrounding state is looked up as all-dark
(index 0) or all-lit (index 511).
"""

from __future__ import annotations

import logging
from typing import Iterable

from coordinates import Coordinate, FullDirection
from grid_parser import parse_pixel_rows, split_sections
from grid_types import UnsizedGrid

__all__ = ["RULE_LENGTH", "ImageEnhancer"]

logger = logging.getLogger(__name__)

RULE_LENGTH = 512


class ImageEnhancer:
    def __init__(self, rule: list[bool], image: UnsizedGrid[bool], background: bool = False) -> None:
        if len(rule) != RULE_LENGTH:
            raise ValueError(f"Enhancement rule must have {RULE_LENGTH} entries, got {len(rule)}")
        self.rule = rule
        self.image = image
        self.background = background

    @classmethod
    def from_lines(cls, source: str | Iterable[str]) -> ImageEnhancer:
        """
        Parse a rule line, a blank line, then the image rows.

        Raises:
            ValueError: if either section is missing or malformed
        """
        sections = split_sections(source)
        if len(sections) != 2:
            raise ValueError(
                f"Expected 2 sections (rule, image) separated by a blank line, got {len(sections)}"
            )
        rule_section, image_section = sections
        # The rule may wrap over several lines
        (rule,) = parse_pixel_rows(["".join(rule_section)], "enhancement rule")
        return cls(rule, UnsizedGrid(parse_pixel_rows(image_section)))

    def pixel(self, coord: Coordinate) -> bool:
        value = self.image.get(coord)
        return self.background if value is None else value

    def _rule_index(self, coord: Coordinate) -> int:
        index = 0
        for direction in FullDirection.kernel():
            index = (index << 1) | int(self.pixel(coord + direction))
        return index

    def enhance_once(self) -> None:
        # The new image gains a one-pixel border; new (i, j) sits over old (i - 1, j - 1)
        offset = Coordinate(-1, -1)
        enhanced = UnsizedGrid.filled(self.image.rows + 2, self.image.cols + 2, False)
        enhanced.update(lambda coord, _: self.rule[self._rule_index(coord + offset)])

        self.background = self.rule[RULE_LENGTH - 1] if self.background else self.rule[0]
        self.image = enhanced

    def enhance(self, times: int) -> None:
        for _ in range(times):
            self.enhance_once()
        logger.info(
            "enhance: %d passes, image %dx%d, background=%s",
            times,
            self.image.rows,
            self.image.cols,
            "lit" if self.background else "dark",
        )

    def lit_count(self) -> int:
        """
        Raises:
            ValueError: when the surrounding pixels are lit (infinitely many)
        """
        if self.background:
            raise ValueError("Infinitely many pixels are lit")
        return sum(1 for _, lit in self.image.iterate() if lit)

    def render(self) -> str:
        return "\n".join("".join("#" if lit else "." for _, lit in row) for row in self.image.iterate_rows())
