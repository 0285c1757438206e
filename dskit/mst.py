"""Minimum spanning trees by Kruskal's and Prim's algorithms."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional, Sequence

from dskit.weighted import WeightedGraph

NO_EDGE = 99
"""Matrix weight meaning "no edge" for :func:`kruskal_matrix`; larger weights count as none too."""

EDGE_LIMIT = 999
"""Edges given to :func:`kruskal_edges` with this weight or more are never chosen."""


@dataclass(frozen=True)
class MstEdge:
    """An edge chosen for a spanning tree."""

    u: int
    v: int
    weight: int


@dataclass(frozen=True)
class SpanningTree:
    """The edges of a spanning tree (or forest) in the order they were chosen."""

    edges: tuple[MstEdge, ...]

    @property
    def weight(self) -> int:
        """Total weight of the chosen edges."""
        return sum(edge.weight for edge in self.edges)

    def __iter__(self) -> Iterator[MstEdge]:
        return iter(self.edges)

    def __len__(self) -> int:
        return len(self.edges)


class _Forest:
    """Parent links joining each root of the second set under the first."""

    def __init__(self, size: int) -> None:
        self._parent = list(range(size))

    def find(self, vertex: int) -> int:
        while vertex != self._parent[vertex]:
            vertex = self._parent[vertex]
        return vertex

    def union(self, a: int, b: int) -> bool:
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        self._parent[root_b] = root_a
        return True


def _check_count(vertices: int) -> None:
    if vertices < 0:
        raise ValueError("number of vertices cannot be negative")


def kruskal_edges(vertices: int, edges: Iterable[tuple[int, int, int]]) -> SpanningTree:
    """Kruskal's algorithm over a list of ``(u, v, weight)`` edges.

    Among equal weights the edge given first is taken first. Edges are reported
    as given. A disconnected graph yields the edges of a spanning forest.
    """
    _check_count(vertices)
    pool = [(u, v) for u, v, _ in edges]
    weights = [w for _, _, w in edges] if isinstance(edges, Sequence) else None
    if weights is None:
        raise TypeError("edges must be a sequence of (u, v, weight) triples")
    for u, v in pool:
        if not (0 <= u < vertices and 0 <= v < vertices):
            raise ValueError(f"edge {u} - {v} has a vertex out of range")
    forest = _Forest(vertices)
    chosen: list[MstEdge] = []
    while len(chosen) + 1 < vertices:
        pos = min(
            (i for i, w in enumerate(weights) if w < EDGE_LIMIT),
            key=weights.__getitem__,
            default=None,
        )
        if pos is None:
            break
        u, v = pool[pos]
        if forest.union(u, v):
            chosen.append(MstEdge(u, v, weights[pos]))
        weights[pos] = EDGE_LIMIT
    return SpanningTree(tuple(chosen))


def kruskal_matrix(matrix: Sequence[Sequence[int]]) -> SpanningTree:
    """Kruskal's algorithm over an adjacency matrix, where ``NO_EDGE`` or more means no edge.

    The matrix is scanned row by row, so among equal weights the first entry
    found wins. The input is not modified.
    """
    grid = [list(row) for row in matrix]
    count = len(grid)
    if any(len(row) != count for row in grid):
        raise ValueError("adjacency matrix must be square")
    forest = _Forest(count)
    chosen: list[MstEdge] = []
    while len(chosen) + 1 < count:
        best = min(
            (
                (w, i, j)
                for i, row in enumerate(grid)
                for j, w in enumerate(row)
                if w < NO_EDGE
            ),
            default=None,
        )
        if best is None:
            break
        w, a, b = best
        if forest.union(a, b):
            chosen.append(MstEdge(a, b, w))
        grid[a][b] = grid[b][a] = NO_EDGE
    return SpanningTree(tuple(chosen))


def _prim(count: int, edges_from: Callable[[int], Iterable[tuple[int, int]]]) -> SpanningTree:
    key: list[float] = [math.inf] * count
    parent: list[Optional[int]] = [None] * count
    visited = [False] * count
    if count == 0:
        return SpanningTree(())
    key[0] = 0
    for _ in range(count - 1):
        u = min(
            (i for i in range(count) if not visited[i] and key[i] < math.inf),
            key=key.__getitem__,
            default=None,
        )
        if u is None:
            raise ValueError("graph is not connected")
        visited[u] = True
        for v, weight in edges_from(u):
            if not visited[v] and weight < key[v]:
                key[v] = weight
                parent[v] = u
    edges: list[MstEdge] = []
    for vertex in range(1, count):
        origin = parent[vertex]
        if origin is None:
            raise ValueError("graph is not connected")
        edges.append(MstEdge(origin, vertex, int(key[vertex])))
    return SpanningTree(tuple(edges))


def prim_matrix(graph: WeightedGraph) -> SpanningTree:
    """Prim's algorithm from vertex 0 using the matrix, where 0 means no edge.

    Each vertex other than 0 is reported with the edge joining it to its parent.
    """
    count = graph.vertices

    def edges_from(u: int) -> Iterable[tuple[int, int]]:
        for v in range(count):
            weight = graph.weight(u, v)
            if weight != 0:
                yield v, weight

    return _prim(count, edges_from)


def prim_list(graph: WeightedGraph) -> SpanningTree:
    """Prim's algorithm from vertex 0 using the adjacency lists."""
    return _prim(graph.vertices, graph.adjacent)