"""Singly linked list of values with the classic list exercises as methods."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One cell of a singly linked list."""

    data: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that keeps its head, tail and length."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    @classmethod
    def _from_chain(cls, head: Optional[Node], tail: Optional[Node], size: int) -> "LinkedList":
        result = cls()
        result._head, result._tail, result._size = head, tail, size
        return result

    def _clear(self) -> None:
        self._head = None
        self._tail = None
        self._size = 0

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return " -> ".join([*map(str, self), "NULL"])

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def append(self, value: Any) -> None:
        """Add a value at the end of the list."""
        node = Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def copy(self) -> "LinkedList":
        """Return a new list made of new nodes holding the same values."""
        return type(self)(self)

    def absorb(self, other: "LinkedList") -> None:
        """Move every node of ``other`` onto the end of this list, leaving ``other`` empty."""
        if other is self:
            raise ValueError("a list cannot absorb itself")
        if other._head is None:
            return
        if self._tail is None:
            self._head = other._head
        else:
            self._tail.next = other._head
        self._tail = other._tail
        self._size += other._size
        other._clear()

    def front_back_split(self) -> tuple["LinkedList", "LinkedList"]:
        """Split the nodes into a front and a back half; the front gets the extra node.

        The nodes move into the two returned lists and this list is left empty.
        """
        head, tail, size = self._head, self._tail, self._size
        if size < 2:
            self._clear()
            return self._from_chain(head, tail, size), type(self)()
        middle = (size + 1) // 2
        last_front = next(islice(self._nodes(), middle - 1, None))
        back_head = last_front.next
        last_front.next = None
        self._clear()
        front = self._from_chain(head, last_front, middle)
        back = self._from_chain(back_head, tail, size - middle)
        return front, back

    def reverse(self) -> None:
        """Reverse the list in place by turning every link around."""
        previous: Optional[Node] = None
        node = self._head
        self._tail = node
        while node is not None:
            following = node.next
            node.next = previous
            previous = node
            node = following
        self._head = previous

    def remove_duplicates(self) -> None:
        """Drop every value that has already appeared earlier in the list."""
        seen: set[Any] = set()
        previous: Optional[Node] = None
        node = self._head
        while node is not None:
            if node.data in seen:
                assert previous is not None
                previous.next = node.next
                self._size -= 1
            else:
                seen.add(node.data)
                previous = node
            node = node.next
        self._tail = previous

    def _link_sorted(self, node: Node) -> None:
        if self._head is None or self._head.data >= node.data:
            node.next = self._head
            self._head = node
            if self._tail is None:
                self._tail = node
            return
        current = self._head
        while current.next is not None and current.next.data < node.data:
            current = current.next
        node.next = current.next
        current.next = node
        if node.next is None:
            self._tail = node

    def sorted_insert(self, value: Any) -> None:
        """Insert a value before the first element not smaller than it."""
        self._link_sorted(Node(value))
        self._size += 1

    def insertion_sort(self) -> None:
        """Sort the list in ascending order by relinking its nodes."""
        node = self._head
        self._head = None
        self._tail = None
        while node is not None:
            following = node.next
            node.next = None
            self._link_sorted(node)
            node = following