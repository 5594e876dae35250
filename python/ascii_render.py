"""
ASCII rendering for grids.

Draws a grid inside a titled box, one fixed-width slot per cell, with
selected cells highlighted. Used to show optimal risk paths and basins.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Callable, Collection

import simple_chalk as chalk  # type: ignore[import-untyped]

from coordinates import Coordinate
from grid_types import Grid
from risk_map import RiskMap

__all__ = ["title_color", "render_grid", "render_risk_path", "strip_ansi"]

logger = logging.getLogger(__name__)

_PALETTE: list[Callable[[str], str]] = [
    chalk.red,
    chalk.green,
    chalk.yellow,
    chalk.blue,
    chalk.magenta,
    chalk.cyan,
]

_ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Remove ANSI colour codes."""
    return _ANSI_PATTERN.sub("", text)


def title_color(title: str) -> Callable[[str], str]:
    """A stable palette colour for a title."""
    return _PALETTE[sum(map(ord, title)) % len(_PALETTE)]


def render_grid(
    grid: Grid[Any],
    title: str,
    cell_width: int = 3,
    highlight: Collection[Coordinate] = (),
    cell_text: Callable[[Any], str] = str,
) -> list[str]:
    """
    Render a grid as a box of single-character cells.

    Args:
        grid: The grid to render
        title: Text centred in the top border
        cell_width: Characters per cell (default 3)
        highlight: Cells drawn with a white background
        cell_text: Converts a cell value to its display character (first
            character is used)

    Returns:
        List of strings representing the rendered grid lines
    """
    colorize = title_color(title)

    border_width = 2  # left and right borders
    title_text = f" {title} "
    grid_width = grid.cols * cell_width + border_width

    # Top border with title
    title_line = "┌" + "─" * (grid_width - 2) + "┐"
    if len(title_text) <= grid_width - 2:
        title_start = (grid_width - len(title_text)) // 2
        title_line = (
            "┌"
            + "─" * (title_start - 1)
            + title_text
            + "─" * (grid_width - title_start - len(title_text) - 1)
            + "┐"
        )
    lines: list[str] = [colorize(title_line)]

    for row in grid.iterate_rows():
        line_parts = [colorize("│")]
        for coord, value in row:
            text = cell_text(value)
            char = text[0] if text else "?"
            content = char if cell_width == 1 else char.center(cell_width)

            if coord in highlight:
                content = chalk.bgWhite.black(content)
            else:
                content = colorize(content)
            line_parts.append(content)

        line_parts.append(colorize("│"))
        lines.append("".join(line_parts))

    lines.append(colorize("└" + "─" * (grid_width - 2) + "┘"))
    return lines


def render_risk_path(risk_map: RiskMap, title: str = "risk", cell_width: int = 1) -> str:
    """Render the risk grid with one lowest-risk path highlighted."""
    result = risk_map.lowest_risk_path()
    path: set[Coordinate] = set(result[1]) if result is not None else set()
    if result is None:
        logger.info("render_risk_path: no path to highlight")

    lines = render_grid(
        risk_map.grid,
        f"{title} {result[0]}" if result is not None else f"{title} (no path)",
        cell_width=cell_width,
        highlight=path,
        cell_text=lambda cell: str(cell.risk) if cell.risk < 10 else "#",
    )
    return "\n".join(lines)
