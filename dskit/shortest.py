"""Dijkstra's shortest paths over a weighted graph, by matrix or by adjacency lists."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from dskit.weighted import WeightedGraph


@dataclass(frozen=True)
class ShortestPaths:
    """Distances from ``start``, infinite where unreachable, and each vertex's parent."""

    start: int
    distances: tuple[float, ...]
    parents: tuple[Optional[int], ...]

    def path_to(self, dest: int) -> list[int]:
        """Return the vertices on the shortest path from ``start`` to ``dest``."""
        if not 0 <= dest < len(self.distances):
            raise ValueError(f"vertex {dest} is out of range")
        if math.isinf(self.distances[dest]):
            raise ValueError(f"No path found from {self.start} to {dest}")
        path = [dest]
        parent = self.parents[dest]
        while parent is not None:
            path.append(parent)
            parent = self.parents[parent]
        path.reverse()
        return path


def _dijkstra(
    count: int,
    start: int,
    edges_from: Callable[[int], Iterable[tuple[int, int]]],
) -> ShortestPaths:
    if not 0 <= start < count:
        raise ValueError(f"vertex {start} is out of range")
    distances: list[float] = [math.inf] * count
    parents: list[Optional[int]] = [None] * count
    visited = [False] * count
    distances[start] = 0
    for _ in range(count - 1):
        u = min(
            (i for i in range(count) if not visited[i] and distances[i] < math.inf),
            key=distances.__getitem__,
            default=None,
        )
        if u is None:
            break
        visited[u] = True
        for v, weight in edges_from(u):
            if not visited[v] and distances[u] + weight < distances[v]:
                distances[v] = distances[u] + weight
                parents[v] = u
    return ShortestPaths(start, tuple(distances), tuple(parents))


def dijkstra_matrix(graph: WeightedGraph, start: int) -> ShortestPaths:
    """Shortest paths using the matrix, where a weight of 0 means no edge."""
    count = graph.vertices

    def edges_from(u: int) -> Iterable[tuple[int, int]]:
        for v in range(count):
            weight = graph.weight(u, v)
            if weight != 0:
                yield v, weight

    return _dijkstra(count, start, edges_from)


def dijkstra_list(graph: WeightedGraph, start: int) -> ShortestPaths:
    """Shortest paths using the adjacency lists."""
    return _dijkstra(graph.vertices, start, graph.adjacent)