"""Undirected weighted graph kept both as an adjacency matrix and as adjacency lists."""

from __future__ import annotations

from collections import deque


def letter_to_index(letter: str) -> int:
    """Map a vertex letter, either case, to its index: A is 0."""
    if len(letter) != 1 or not letter.isascii() or not letter.isalpha():
        raise ValueError(f"{letter!r} is not a vertex letter")
    return ord(letter.upper()) - ord("A")


def index_to_letter(index: int) -> str:
    """Map a vertex index to its capital letter: 0 is A."""
    if not 0 <= index < 26:
        raise ValueError(f"vertex {index} has no letter")
    return chr(ord("A") + index)


class WeightedGraph:
    """An undirected weighted graph.

    The matrix holds 0 where there is no edge and the latest weight given to a
    pair otherwise. The lists keep every edge added, most recent first.
    """

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("number of vertices cannot be negative")
        self._matrix = [[0] * vertices for _ in range(vertices)]
        self._lists: list[deque[tuple[int, int]]] = [deque() for _ in range(vertices)]

    @property
    def vertices(self) -> int:
        return len(self._matrix)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._matrix):
            raise ValueError(f"vertex {vertex} is out of range")

    def add_edge(self, u: int, v: int, weight: int) -> None:
        """Join two vertices with an undirected edge of the given weight."""
        self._check(u)
        self._check(v)
        self._matrix[u][v] = weight
        self._matrix[v][u] = weight
        self._lists[u].appendleft((v, weight))
        self._lists[v].appendleft((u, weight))

    def weight(self, u: int, v: int) -> int:
        """Return the matrix weight between two vertices, 0 meaning no edge."""
        self._check(u)
        self._check(v)
        return self._matrix[u][v]

    def adjacent(self, u: int) -> list[tuple[int, int]]:
        """Return the (vertex, weight) pairs in the list of ``u``."""
        self._check(u)
        return list(self._lists[u])