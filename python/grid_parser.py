"""
Text parsing utilities for puzzle inputs.

Provides parsers for the three input shapes used by the solvers:
1. Digit grids (one digit per cell, one row per line)
2. Edge lists ("a-b" per line)
3. Pixel grids ('#' lit, '.' dark) with an optional blank-line separated header
"""

from __future__ import annotations

from typing import Iterable

from grid_types import check_rectangular

__all__ = ["clean_lines", "split_sections", "parse_digit_grid", "parse_edges", "parse_pixel_rows"]


def clean_lines(source: str | Iterable[str]) -> list[str]:
    """
    Normalise input into a list of stripped lines.

    Accepts either a multi-line string (e.g. a triple-quoted sample) or an
    iterable of lines (e.g. an open file). Leading and trailing blank lines
    are dropped; blank lines in the middle are kept as "" so sections can
    still be split.
    """
    if isinstance(source, str):
        source = source.split("\n")
    lines = [line.strip() for line in source]

    while lines and not lines[0]:
        lines.pop(0)
    while lines and not lines[-1]:
        lines.pop()
    return lines


def split_sections(source: str | Iterable[str]) -> list[list[str]]:
    """Split input into blank-line separated sections."""
    sections: list[list[str]] = [[]]
    for line in clean_lines(source):
        if not line:
            if sections[-1]:
                sections.append([])
            continue
        sections[-1].append(line)
    return [section for section in sections if section]


def parse_digit_grid(source: str | Iterable[str], name: str = "grid") -> list[list[int]]:
    """
    Parse rows of single decimal digits.

    Example:
        \"\"\"
        123
        456
        \"\"\"
        -> [[1, 2, 3], [4, 5, 6]]

    Raises:
        ValueError: on a non-digit character, an empty input, or ragged rows
    """
    rows: list[list[int]] = []

    for row_idx, line in enumerate(clean_lines(source)):
        row: list[int] = []
        for col_idx, char in enumerate(line):
            if not char.isdigit():
                raise ValueError(
                    f"Invalid character '{char}' in {name}\n"
                    f"  Row {row_idx}: \"{line}\"\n"
                    f"  Position: column {col_idx}\n"
                    f"  Valid characters: digits (0-9)"
                )
            row.append(int(char))
        rows.append(row)

    check_rectangular(rows, name)
    return rows


def parse_edges(source: str | Iterable[str], separator: str = "-") -> list[tuple[str, str]]:
    """
    Parse one "from-to" pair per line.

    Raises:
        ValueError: if a line does not contain exactly one separator with a
        non-empty name on each side
    """
    edges: list[tuple[str, str]] = []

    for line_idx, line in enumerate(clean_lines(source)):
        parts = line.split(separator)
        if len(parts) != 2 or not parts[0].strip() or not parts[1].strip():
            raise ValueError(
                f"Invalid edge on line {line_idx + 1}: '{line}'\n"
                f"  Expected format: 'from{separator}to'"
            )
        edges.append((parts[0].strip(), parts[1].strip()))

    if not edges:
        raise ValueError("No edges found in input")
    return edges


def parse_pixel_rows(source: str | Iterable[str], name: str = "image") -> list[list[bool]]:
    """
    Parse rows of '#' (lit) and '.' (dark) characters.

    Raises:
        ValueError: on any other character, an empty input, or ragged rows
    """
    rows: list[list[bool]] = []

    for row_idx, line in enumerate(clean_lines(source)):
        row: list[bool] = []
        for col_idx, char in enumerate(line):
            if char == "#":
                row.append(True)
            elif char == ".":
                row.append(False)
            else:
                raise ValueError(
                    f"Invalid character '{char}' in {name}\n"
                    f"  Row {row_idx}: \"{line}\"\n"
                    f"  Position: column {col_idx}\n"
                    f"  Valid characters: '#' (lit), '.' (dark)"
                )
        rows.append(row)

    check_rectangular(rows, name)
    return rows
