"""
Path enumeration through a cave system.

Caves are nodes of an undirected graph (every connection is stored in both
directions). Big caves (upper-case names) may be visited any number of
times, small caves (lower-case names) at most once per path, except that
the revisit rules may allow one small cave per path to be visited twice.
The start cave is never re-entered and reaching the end cave finishes a path.
"""

from __future__ import annotations

import logging
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator

from graph import Graph, NodeIndex
from grid_parser import parse_edges

__all__ = [
    "Start",
    "End",
    "Big",
    "Small",
    "Cave",
    "parse_cave",
    "cave_label",
    "CaveMap",
    "RevisitStrategy",
    "PathRules",
    "count_paths",
    "distinct_paths",
    "count_paths_with_revisit",
]

logger = logging.getLogger(__name__)

Path = tuple[str, ...]


# =============================================================================
# Cave Types
# =============================================================================


@dataclass(frozen=True)
class Start:
    """The cave every path leaves from."""

    pass


@dataclass(frozen=True)
class End:
    """The cave every path finishes in."""

    pass


@dataclass(frozen=True)
class Big:
    """A cave that may be visited any number of times."""

    name: str


@dataclass(frozen=True)
class Small:
    """A cave that may normally be visited once per path."""

    name: str


Cave = Start | End | Big | Small


def parse_cave(name: str) -> Cave:
    if name == "start":
        return Start()
    if name == "end":
        return End()
    if not name:
        raise ValueError("Cave name must not be empty")
    return Small(name) if name[0].islower() else Big(name)


def cave_label(cave: Cave) -> str:
    match cave:
        case Start():
            return "start"
        case End():
            return "end"
        case Big(name=name) | Small(name=name):
            return name
        case _:
            raise ValueError(f"Unknown cave type: {cave}")


# =============================================================================
# Cave Map
# =============================================================================


@dataclass
class CaveMap:
    graph: Graph[Cave, None]
    start: NodeIndex
    end: NodeIndex

    @classmethod
    def from_connections(cls, connections: Iterable[tuple[str, str]]) -> CaveMap:
        """
        Build a cave map from (a, b) name pairs, connecting both directions.

        Raises:
            ValueError: if start or end is missing, or two big caves are
            connected directly (that would allow infinitely many paths)
        """
        graph: Graph[Cave, None] = Graph()
        for a, b in connections:
            cave_a, cave_b = parse_cave(a), parse_cave(b)
            if isinstance(cave_a, Big) and isinstance(cave_b, Big):
                raise ValueError(
                    f"Big caves '{a}' and '{b}' are directly connected\n"
                    f"  Paths could bounce between them forever"
                )
            graph.add_edge_by_data(cave_a, cave_b, None)
            graph.add_edge_by_data(cave_b, cave_a, None)

        start = graph.find_node_index(Start())
        end = graph.find_node_index(End())
        if start is None or end is None:
            missing = [label for label, index in (("start", start), ("end", end)) if index is None]
            raise ValueError(f"Cave map has no {' or '.join(missing)} cave")
        return cls(graph, start, end)

    @classmethod
    def from_lines(cls, source: str | Iterable[str]) -> CaveMap:
        return cls.from_connections(parse_edges(source))

    def neighbors(self, index: NodeIndex) -> Iterator[NodeIndex]:
        for target, _ in self.graph.neighbors(index):
            yield target

    def cave(self, index: NodeIndex) -> Cave:
        return self.graph.get_node_data(index)

    def label(self, index: NodeIndex) -> str:
        return cave_label(self.cave(index))

    def small_caves(self) -> list[NodeIndex]:
        return [index for index, cave in self.graph.nodes() if isinstance(cave, Small)]


# =============================================================================
# Revisit Rules
# =============================================================================


class RevisitStrategy(Enum):
    """How the one-small-cave-twice search is organised."""

    PER_CANDIDATE = "per_candidate"  # One search per small cave, dedupe paths
    SINGLE_PASS = "single_pass"  # One search carrying a "revisit used" slot


@dataclass(frozen=True)
class PathRules:
    """Options for the revisit search."""

    strategy: RevisitStrategy = RevisitStrategy.PER_CANDIDATE
    workers: int = 1  # >1 runs candidate searches in a process pool


# =============================================================================
# Searches
# =============================================================================


def count_paths(cave_map: CaveMap) -> int:
    """Number of start -> end paths visiting each small cave at most once."""
    closed: set[NodeIndex] = set()

    def walk(current: NodeIndex) -> int:
        if current == cave_map.end:
            return 1

        total = 0
        for nxt in cave_map.neighbors(current):
            if nxt == cave_map.start or nxt in closed:
                continue
            is_small = isinstance(cave_map.cave(nxt), Small)
            if is_small:
                closed.add(nxt)
            total += walk(nxt)
            if is_small:
                closed.discard(nxt)
        return total

    result = walk(cave_map.start)
    logger.info("count_paths: %d paths", result)
    return result


def paths_with_candidate(cave_map: CaveMap, candidate: NodeIndex | None) -> set[Path]:
    """
    All paths in which ``candidate`` may be visited twice and every other
    small cave at most once. With no candidate every small cave is limited
    to one visit.
    """
    found: set[Path] = set()
    closed: set[NodeIndex] = set()
    path: list[str] = [cave_map.label(cave_map.start)]
    remaining = 2

    def walk(current: NodeIndex) -> None:
        nonlocal remaining
        if current == cave_map.end:
            found.add(tuple(path))
            return

        for nxt in cave_map.neighbors(current):
            if nxt == cave_map.start:
                continue
            cave = cave_map.cave(nxt)
            path.append(cave_label(cave))

            if not isinstance(cave, Small):
                walk(nxt)
            elif nxt == candidate:
                if remaining > 0:
                    remaining -= 1
                    walk(nxt)
                    remaining += 1
            elif nxt not in closed:
                closed.add(nxt)
                walk(nxt)
                closed.discard(nxt)

            path.pop()

    walk(cave_map.start)
    logger.debug(
        "paths_with_candidate: candidate=%s, %d paths",
        cave_map.label(candidate) if candidate is not None else None,
        len(found),
    )
    return found


def _paths_single_pass(cave_map: CaveMap) -> set[Path]:
    found: set[Path] = set()
    visits: dict[NodeIndex, int] = {}
    path: list[str] = [cave_map.label(cave_map.start)]
    revisit_used = False

    def walk(current: NodeIndex) -> None:
        nonlocal revisit_used
        if current == cave_map.end:
            found.add(tuple(path))
            return

        for nxt in cave_map.neighbors(current):
            if nxt == cave_map.start:
                continue
            cave = cave_map.cave(nxt)
            path.append(cave_label(cave))

            if not isinstance(cave, Small):
                walk(nxt)
            elif visits.get(nxt, 0) == 0:
                visits[nxt] = 1
                walk(nxt)
                visits[nxt] = 0
            elif not revisit_used:
                revisit_used = True
                walk(nxt)
                revisit_used = False

            path.pop()

    walk(cave_map.start)
    return found


def _paths_per_candidate(cave_map: CaveMap, workers: int) -> set[Path]:
    candidates: list[NodeIndex | None] = list(cave_map.small_caves()) or [None]
    found: set[Path] = set()

    if workers <= 1 or len(candidates) == 1:
        for candidate in candidates:
            found |= paths_with_candidate(cave_map, candidate)
        return found

    with ProcessPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(paths_with_candidate, cave_map, candidate) for candidate in candidates]
        for future in as_completed(futures):
            found |= future.result()
    return found


def distinct_paths(cave_map: CaveMap, rules: PathRules = PathRules()) -> set[Path]:
    """
    Every distinct start -> end path (as a tuple of cave names) in which at
    most one small cave is visited twice.
    """
    match rules.strategy:
        case RevisitStrategy.PER_CANDIDATE:
            found = _paths_per_candidate(cave_map, rules.workers)
        case RevisitStrategy.SINGLE_PASS:
            found = _paths_single_pass(cave_map)
        case _:
            raise ValueError(f"Unknown revisit strategy: {rules.strategy}")

    logger.info("distinct_paths: %d paths (strategy=%s)", len(found), rules.strategy.value)
    return found


def count_paths_with_revisit(cave_map: CaveMap, rules: PathRules = PathRules()) -> int:
    return len(distinct_paths(cave_map, rules))
