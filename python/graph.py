"""
Directed graph stored as two flat lists (nodes, edges) addressed by index.

Each node records the index of its most recently added outgoing edge, and
each edge records the next edge leaving the same node. Adding an edge
prepends it to that chain in O(1), so ``neighbors`` walks a node's edges
in reverse insertion order.

Indices carry the id of the graph that issued them. Using an index with a
different graph, or one that is out of range, raises GraphIndexError.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Iterator, TypeVar

__all__ = ["Graph", "NodeIndex", "EdgeIndex", "GraphIndexError"]

N = TypeVar("N")
E = TypeVar("E")

_graph_ids = itertools.count()


class GraphIndexError(IndexError):
    """An index was used with a graph that did not issue it, or is out of range."""


@dataclass(frozen=True)
class NodeIndex:
    """Opaque handle to a node, valid only for the graph that issued it."""

    idx: int
    graph_id: int


@dataclass(frozen=True)
class EdgeIndex:
    """Opaque handle to an edge, valid only for the graph that issued it."""

    idx: int
    graph_id: int


@dataclass
class _Node(Generic[N]):
    data: N
    first_edge: EdgeIndex | None = None


@dataclass
class _Edge(Generic[E]):
    data: E
    to: NodeIndex
    next_edge: EdgeIndex | None = None


class Graph(Generic[N, E]):
    """
    Usage:
        graph: Graph[str, None] = Graph()
        a = graph.add_node("A")
        b = graph.add_node("B")
        graph.add_edge(a, b, None)
        for target, _ in graph.neighbors(a):
            print(graph.get_node_data(target))
    """

    def __init__(self) -> None:
        self._id = next(_graph_ids)
        self._nodes: list[_Node[N]] = []
        self._edges: list[_Edge[E]] = []

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[N, N]], default_edge: E) -> Graph[N, E]:
        """Build a graph from (from, to) node data pairs, creating nodes as needed."""
        graph: Graph[N, E] = cls()
        for source, target in pairs:
            graph.add_edge_by_data(source, target, default_edge)
        return graph

    # -- index checks ---------------------------------------------------------

    def _node(self, index: NodeIndex) -> _Node[N]:
        if index.graph_id != self._id:
            raise GraphIndexError(f"{index} belongs to graph {index.graph_id}, not graph {self._id}")
        if not 0 <= index.idx < len(self._nodes):
            raise GraphIndexError(f"{index} is out of range ({len(self._nodes)} nodes)")
        return self._nodes[index.idx]

    def _edge(self, index: EdgeIndex) -> _Edge[E]:
        if index.graph_id != self._id:
            raise GraphIndexError(f"{index} belongs to graph {index.graph_id}, not graph {self._id}")
        if not 0 <= index.idx < len(self._edges):
            raise GraphIndexError(f"{index} is out of range ({len(self._edges)} edges)")
        return self._edges[index.idx]

    # -- construction ---------------------------------------------------------

    def add_node(self, data: N) -> NodeIndex:
        index = NodeIndex(len(self._nodes), self._id)
        self._nodes.append(_Node(data))
        return index

    def add_edge(self, source: NodeIndex, target: NodeIndex, data: E) -> EdgeIndex:
        """Add a directed edge source -> target, prepended to source's edge chain."""
        node = self._node(source)
        self._node(target)
        index = EdgeIndex(len(self._edges), self._id)
        self._edges.append(_Edge(data, target, node.first_edge))
        node.first_edge = index
        return index

    def add_edge_by_data(self, source: N, target: N, data: E) -> EdgeIndex:
        """Add an edge between the nodes holding ``source`` and ``target``, creating either if absent."""
        source_index = self.find_node_index(source)
        if source_index is None:
            source_index = self.add_node(source)
        target_index = self.find_node_index(target)
        if target_index is None:
            target_index = self.add_node(target)
        return self.add_edge(source_index, target_index, data)

    def add_undirected_edge(self, a: NodeIndex, b: NodeIndex, data: E) -> None:
        """Add a -> b and b -> a."""
        self.add_edge(a, b, data)
        self.add_edge(b, a, data)

    # -- queries --------------------------------------------------------------

    def find_node(self, predicate: Callable[[N], bool]) -> NodeIndex | None:
        """First node (in insertion order) whose data satisfies ``predicate``."""
        for idx, node in enumerate(self._nodes):
            if predicate(node.data):
                return NodeIndex(idx, self._id)
        return None

    def find_node_index(self, data: N) -> NodeIndex | None:
        """First node whose data equals ``data``."""
        return self.find_node(lambda candidate: candidate == data)

    def get_node_data(self, index: NodeIndex) -> N:
        return self._node(index).data

    def get_edge_data(self, index: EdgeIndex) -> E:
        return self._edge(index).data

    def node_count(self) -> int:
        return len(self._nodes)

    def edge_count(self) -> int:
        return len(self._edges)

    def nodes(self) -> Iterator[tuple[NodeIndex, N]]:
        for idx, node in enumerate(self._nodes):
            yield NodeIndex(idx, self._id), node.data

    def neighbors(self, index: NodeIndex) -> Iterator[tuple[NodeIndex, E]]:
        """
        Yield (target, edge data) for each edge leaving ``index``, most
        recently added first. Mutating the graph mid-iteration is unsupported.
        """
        current = self._node(index).first_edge
        while current is not None:
            edge = self._edge(current)
            yield edge.to, edge.data
            current = edge.next_edge

    def __repr__(self) -> str:
        lines = [f"Graph: ({len(self._nodes)} nodes) {{"]
        for node_index, data in self.nodes():
            targets = [repr(self._nodes[target.idx].data) for target, _ in self.neighbors(node_index)]
            lines.append(f"    {node_index.idx}: {data!r} -> [{', '.join(targets)}]")
        lines.append("}")
        return "\n".join(lines)
