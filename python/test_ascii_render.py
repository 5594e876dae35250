"""Tests for ascii_render module."""

from ascii_render import render_grid, render_risk_path, strip_ansi, title_color
from coordinates import Coordinate
from grid_types import UnsizedGrid
from risk_map import WALL, RiskMap


class TestRenderGrid:
    """Tests for the boxed grid renderer."""

    def test_layout(self) -> None:
        grid = UnsizedGrid([[1, 2], [3, 4]])
        lines = [strip_ansi(line) for line in render_grid(grid, "g", cell_width=1)]
        assert lines == [
            "┌──┐",
            "│12│",
            "│34│",
            "└──┘",
        ]

    def test_title_centred(self) -> None:
        grid = UnsizedGrid([[0] * 4])
        top = strip_ansi(render_grid(grid, "ab", cell_width=3)[0])
        assert top == "┌──── ab ────┐"
        assert len(top) == 4 * 3 + 2

    def test_long_title_dropped(self) -> None:
        """A title wider than the box leaves a plain border."""
        top = strip_ansi(render_grid(UnsizedGrid([[0]]), "much too long", cell_width=1)[0])
        assert top == "┌─┐"

    def test_cell_text(self) -> None:
        grid = UnsizedGrid([[True, False]])
        lines = render_grid(grid, "x", cell_width=1, cell_text=lambda lit: "#" if lit else ".")
        assert strip_ansi(lines[1]) == "│#.│"

    def test_highlight_changes_styling_only(self) -> None:
        grid = UnsizedGrid([[1, 2]])
        plain = render_grid(grid, "h", cell_width=1)
        marked = render_grid(grid, "h", cell_width=1, highlight={Coordinate(0, 0)})
        assert [strip_ansi(line) for line in plain] == [strip_ansi(line) for line in marked]

    def test_title_color_is_stable(self) -> None:
        assert title_color("risk") is title_color("risk")


class TestRenderRiskPath:
    def test_title_carries_total(self) -> None:
        text = strip_ansi(render_risk_path(RiskMap.from_risks([[1, 1, 1], [1, 1, 1]]), cell_width=3))
        assert " risk 3 " in text
        assert "│ 1  1  1 │" in text

    def test_no_path(self) -> None:
        risk_map = RiskMap.from_risks([[1, WALL, 1, 1, 1], [WALL, 1, 1, 1, 1]])
        text = strip_ansi(render_risk_path(risk_map, title="r", cell_width=3))
        assert "r (no path)" in text
        assert " # " in text
