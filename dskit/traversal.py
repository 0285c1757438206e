"""Undirected graph on numbered vertices with breadth-first and depth-first traversal."""

from __future__ import annotations

from collections import deque
from typing import Iterator


class Graph:
    """An undirected graph kept as adjacency lists.

    A new edge is placed at the front of each endpoint's list, so neighbours
    are visited most recently added first.
    """

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("number of vertices cannot be negative")
        self._adjacency: list[deque[int]] = [deque() for _ in range(vertices)]

    @property
    def vertices(self) -> int:
        return len(self._adjacency)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise ValueError(f"vertex {vertex} is out of range")

    def add_edge(self, src: int, dest: int) -> None:
        """Join two vertices with an undirected edge."""
        self._check(src)
        self._check(dest)
        self._adjacency[src].appendleft(dest)
        self._adjacency[dest].appendleft(src)

    def neighbors(self, vertex: int) -> list[int]:
        """Return the neighbours of a vertex in visiting order."""
        self._check(vertex)
        return list(self._adjacency[vertex])

    def bfs(self, start: int) -> list[int]:
        """Return the vertices reached from ``start`` in breadth-first order."""
        self._check(start)
        visited = [False] * len(self._adjacency)
        visited[start] = True
        queue = deque([start])
        order: list[int] = []
        while queue:
            current = queue.popleft()
            order.append(current)
            for neighbour in self._adjacency[current]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    queue.append(neighbour)
        return order

    def dfs(self, start: int) -> list[int]:
        """Return the vertices reached from ``start`` in depth-first order."""
        self._check(start)
        visited = [False] * len(self._adjacency)
        visited[start] = True
        order = [start]
        pending: list[Iterator[int]] = [iter(self._adjacency[start])]
        while pending:
            for neighbour in pending[-1]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    order.append(neighbour)
                    pending.append(iter(self._adjacency[neighbour]))
                    break
            else:
                pending.pop()
        return order