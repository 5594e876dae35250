"""Tests for caves module."""

import pytest

from caves import (
    Big,
    CaveMap,
    End,
    PathRules,
    RevisitStrategy,
    Small,
    Start,
    cave_label,
    count_paths,
    count_paths_with_revisit,
    distinct_paths,
    parse_cave,
    paths_with_candidate,
)
from samples import CAVES_LARGE, CAVES_MEDIUM, CAVES_SMALL

SINGLE_PASS = PathRules(strategy=RevisitStrategy.SINGLE_PASS)


class TestCaveTypes:
    """Tests for cave name parsing."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("start", Start()),
            ("end", End()),
            ("A", Big("A")),
            ("HN", Big("HN")),
            ("b", Small("b")),
            ("kj", Small("kj")),
        ],
    )
    def test_parse_cave(self, name: str, expected: object) -> None:
        assert parse_cave(name) == expected

    def test_label_round_trip(self) -> None:
        for name in ("start", "end", "A", "dc"):
            assert cave_label(parse_cave(name)) == name

    def test_empty_name(self) -> None:
        with pytest.raises(ValueError):
            parse_cave("")


class TestCaveMap:
    """Tests for building the cave graph."""

    def test_connections_are_bidirectional(self) -> None:
        cave_map = CaveMap.from_lines(CAVES_SMALL)
        a = cave_map.graph.find_node_index(Big("A"))
        assert a is not None
        labels = {cave_map.label(index) for index in cave_map.neighbors(a)}
        assert labels == {"start", "c", "b", "end"}

    def test_node_and_edge_counts(self) -> None:
        cave_map = CaveMap.from_lines(CAVES_SMALL)
        assert cave_map.graph.node_count() == 6
        assert cave_map.graph.edge_count() == 14

    def test_small_caves(self) -> None:
        cave_map = CaveMap.from_lines(CAVES_SMALL)
        assert sorted(cave_map.label(index) for index in cave_map.small_caves()) == ["b", "c", "d"]

    def test_missing_end(self) -> None:
        with pytest.raises(ValueError, match="no end cave"):
            CaveMap.from_lines("start-A\nA-b")

    def test_missing_start_and_end(self) -> None:
        with pytest.raises(ValueError, match="no start or end cave"):
            CaveMap.from_lines("A-b")

    def test_adjacent_big_caves_rejected(self) -> None:
        """Two connected big caves would allow endless paths."""
        with pytest.raises(ValueError, match="directly connected"):
            CaveMap.from_lines("start-A\nA-B\nB-end")

    def test_malformed_line(self) -> None:
        with pytest.raises(ValueError, match="Invalid edge on line 2"):
            CaveMap.from_lines("start-A\nA end")


class TestCountPaths:
    """Tests for paths visiting each small cave at most once."""

    @pytest.mark.parametrize(
        "sample, expected",
        [(CAVES_SMALL, 10), (CAVES_MEDIUM, 19), (CAVES_LARGE, 226)],
    )
    def test_samples(self, sample: str, expected: int) -> None:
        assert count_paths(CaveMap.from_lines(sample)) == expected

    def test_direct_path(self) -> None:
        assert count_paths(CaveMap.from_lines("start-end")) == 1

    def test_matches_candidate_free_search(self) -> None:
        """Searching with no revisit candidate finds exactly the once-only paths."""
        cave_map = CaveMap.from_lines(CAVES_MEDIUM)
        assert len(paths_with_candidate(cave_map, None)) == count_paths(cave_map)


class TestRevisit:
    """Tests for paths allowing one small cave twice."""

    @pytest.mark.parametrize(
        "sample, expected",
        [(CAVES_SMALL, 36), (CAVES_MEDIUM, 103), (CAVES_LARGE, 3509)],
    )
    def test_samples_per_candidate(self, sample: str, expected: int) -> None:
        assert count_paths_with_revisit(CaveMap.from_lines(sample)) == expected

    @pytest.mark.parametrize(
        "sample, expected",
        [(CAVES_SMALL, 36), (CAVES_MEDIUM, 103), (CAVES_LARGE, 3509)],
    )
    def test_samples_single_pass(self, sample: str, expected: int) -> None:
        assert count_paths_with_revisit(CaveMap.from_lines(sample), SINGLE_PASS) == expected

    def test_strategies_agree_on_paths(self) -> None:
        cave_map = CaveMap.from_lines(CAVES_MEDIUM)
        assert distinct_paths(cave_map) == distinct_paths(cave_map, SINGLE_PASS)

    def test_published_small_paths(self) -> None:
        """A few of the listed example paths are found."""
        paths = distinct_paths(CaveMap.from_lines(CAVES_SMALL))
        assert ("start", "A", "b", "A", "b", "A", "c", "A", "end") in paths
        assert ("start", "b", "d", "b", "A", "c", "A", "end") in paths
        assert ("start", "A", "c", "A", "c", "A", "b", "end") in paths

    def test_path_shape(self) -> None:
        """Every path starts and ends correctly and respects the visit limits."""
        for path in distinct_paths(CaveMap.from_lines(CAVES_SMALL)):
            assert path[0] == "start"
            assert path[-1] == "end"
            assert path.count("start") == 1
            assert path.count("end") == 1
            small_counts = [path.count(name) for name in set(path) if name.islower() and name not in ("start", "end")]
            assert all(count <= 2 for count in small_counts)
            assert sum(1 for count in small_counts if count == 2) <= 1

    def test_candidate_budget_is_restored(self) -> None:
        """Repeated searches with the same candidate give identical results."""
        cave_map = CaveMap.from_lines(CAVES_SMALL)
        b = cave_map.graph.find_node_index(Small("b"))
        first = paths_with_candidate(cave_map, b)
        assert paths_with_candidate(cave_map, b) == first
        assert any(path.count("b") == 2 for path in first)

    def test_no_small_caves(self) -> None:
        """With only big caves the revisit rule changes nothing."""
        cave_map = CaveMap.from_lines("start-A\nA-end")
        assert count_paths_with_revisit(cave_map) == count_paths(cave_map) == 1

    def test_process_pool(self) -> None:
        """Candidate searches in worker processes give the same answer."""
        cave_map = CaveMap.from_lines(CAVES_MEDIUM)
        assert count_paths_with_revisit(cave_map, PathRules(workers=2)) == 103
