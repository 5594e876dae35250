"""Tests for risk_map module."""

import pytest

from coordinates import Coordinate
from grid_types import UnsizedGrid
from risk_map import INFINITE_RISK, WALL, RiskCell, RiskMap, wrap_risk
from samples import RISK_MAP


class RecordingCell(RiskCell):
    """A RiskCell that fails if its best known total ever increases once set."""

    def __setattr__(self, name: str, value: int) -> None:
        if name == "best" and hasattr(self, "best"):
            assert value <= self.best, f"best known increased from {self.best} to {value}"
        super().__setattr__(name, value)


class TestLowestRisk:
    """Tests for the Dijkstra search."""

    def test_sample(self) -> None:
        assert RiskMap.from_lines(RISK_MAP).lowest_risk() == 40

    def test_sample_expanded(self) -> None:
        assert RiskMap.from_lines(RISK_MAP).expand_5x().lowest_risk() == 315

    def test_start_risk_not_counted(self) -> None:
        """Only entered cells add to the total."""
        risk_map = RiskMap.from_risks([[9, 1], [9, 1]])
        assert risk_map.lowest_risk() == 2

    def test_single_cell(self) -> None:
        assert RiskMap.from_risks([[7]]).lowest_risk() == 0

    def test_detour_is_cheaper(self) -> None:
        """The cheapest route may wind away from the straight line."""
        risk_map = RiskMap.from_risks(
            [
                [1, 9, 1, 1, 1],
                [1, 9, 1, 9, 1],
                [1, 1, 1, 9, 1],
            ]
        )
        assert risk_map.lowest_risk() == 2 + 1 + 1 + 1 + 1 + 1 + 1 + 1 + 1

    def test_repeatable(self) -> None:
        """Running the search twice gives the same answer."""
        risk_map = RiskMap.from_lines(RISK_MAP)
        assert risk_map.lowest_risk() == risk_map.lowest_risk() == 40

    def test_best_known_at_target_matches_result(self) -> None:
        risk_map = RiskMap.from_lines(RISK_MAP)
        result = risk_map.lowest_risk()
        assert risk_map.grid[risk_map.end].best == result

    def test_best_known_only_decreases(self) -> None:
        """During a run no cell's best known total goes up."""
        rows = [[RecordingCell(int(char)) for char in line.strip()] for line in RISK_MAP.strip().split("\n")]
        risk_map = RiskMap(UnsizedGrid(rows))
        assert risk_map.lowest_risk() == 40

    def test_unreachable_returns_none(self) -> None:
        """A walled-off target is reported as no path, not zero."""
        risk_map = RiskMap.from_risks(
            [
                [1, WALL, 1],
                [WALL, WALL, 1],
                [1, 1, 1],
            ]
        )
        assert risk_map.lowest_risk() is None
        assert risk_map.lowest_risk_path() is None

    def test_custom_start_and_end(self) -> None:
        risk_map = RiskMap(
            UnsizedGrid([[RiskCell(r) for r in row] for row in [[1, 2, 3], [4, 5, 6]]]),
            start=Coordinate(1, 2),
            end=Coordinate(0, 0),
        )
        assert risk_map.lowest_risk() == 3 + 2 + 1

    def test_endpoint_outside_grid(self) -> None:
        with pytest.raises(ValueError, match="outside"):
            RiskMap(UnsizedGrid([[RiskCell(1)]]), end=Coordinate(1, 1))


class TestLowestRiskPath:
    """Tests for path reconstruction."""

    def test_sample_path(self) -> None:
        risk_map = RiskMap.from_lines(RISK_MAP)
        result = risk_map.lowest_risk_path()
        assert result is not None
        total, path = result

        assert total == 40
        assert path[0] == Coordinate(0, 0)
        assert path[-1] == Coordinate(9, 9)
        assert sum(risk_map.grid[coord].risk for coord in path[1:]) == 40
        for a, b in zip(path, path[1:]):
            assert (b + Coordinate(-a.i, -a.j)).manhattan_distance() == 1


class TestExpansion:
    """Tests for tiling the risk grid."""

    def test_wrap_risk(self) -> None:
        assert wrap_risk(8, 1) == 9
        assert wrap_risk(9, 1) == 1
        assert wrap_risk(8, 8) == 7

    def test_single_cell_expansion(self) -> None:
        """The worked single-cell example: 8 tiles into 8..9,1..7 diagonals."""
        expanded = RiskMap.from_risks([[8]]).expand_5x()
        assert expanded.risks() == [
            [8, 9, 1, 2, 3],
            [9, 1, 2, 3, 4],
            [1, 2, 3, 4, 5],
            [2, 3, 4, 5, 6],
            [3, 4, 5, 6, 7],
        ]

    def test_non_square_expansion(self) -> None:
        """Row tiles follow the row count and column tiles the column count."""
        expanded = RiskMap.from_risks([[1, 2, 3]]).expand(2)
        assert expanded.risks() == [
            [1, 2, 3, 2, 3, 4],
            [2, 3, 4, 3, 4, 5],
        ]

    def test_expanded_map_is_fresh(self) -> None:
        """Expansion resets every best known total and moves the target."""
        risk_map = RiskMap.from_lines(RISK_MAP)
        risk_map.lowest_risk()
        expanded = risk_map.expand_5x()

        assert expanded.end == Coordinate(49, 49)
        assert expanded.grid[Coordinate(0, 0)].best == 0
        assert all(cell.best == INFINITE_RISK for coord, cell in expanded.grid.iterate() if coord != Coordinate(0, 0))

    def test_walls_survive_expansion(self) -> None:
        """A walled-off target stays unreachable in every tile."""
        risk_map = RiskMap.from_risks([[1, WALL], [WALL, 1]])
        assert risk_map.lowest_risk() is None

        expanded = risk_map.expand(2)
        assert expanded.risks()[0] == [1, WALL, 2, WALL]
        assert expanded.lowest_risk() is None

    def test_expanded_sample_corner(self) -> None:
        """The first row continues into the next tile; the last tile is biased by 8."""
        expanded = RiskMap.from_lines(RISK_MAP).expand_5x()
        risks = expanded.risks()
        assert "".join(map(str, risks[0][:12])) == "116375174222"
        assert "".join(map(str, risks[49][-10:])) == "1299833479"

    def test_invalid_factor(self) -> None:
        with pytest.raises(ValueError, match="at least 1"):
            RiskMap.from_risks([[1]]).expand(0)
