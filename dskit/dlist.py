"""Doubly linked list with insertion, deletion, sorting, appending and merging."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False, repr=False)
class _DNode:
    data: Any
    prev: Optional[_DNode] = None
    next: Optional[_DNode] = None


class DoublyLinkedList:
    """A doubly linked list that keeps its head, tail and length."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_DNode] = None
        self._tail: Optional[_DNode] = None
        self._size = 0
        for value in values:
            self.insert_at_end(value)

    def _clear(self) -> None:
        self._head = None
        self._tail = None
        self._size = 0

    def _nodes(self) -> Iterator[_DNode]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _find(self, value: Any) -> Optional[_DNode]:
        return next((node for node in self._nodes() if node.data == value), None)

    def _link_last(self, node: _DNode) -> None:
        node.prev = self._tail
        node.next = None
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def _unlink(self, node: _DNode) -> Any:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1
        return node.data

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        if self._head is None:
            return "DLL: Empty"
        return "DLL: " + "".join(f"{value} <-> " for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def insert_at_beginning(self, value: Any) -> None:
        """Put a value in front of the current head."""
        node = _DNode(value, None, self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def insert_at_end(self, value: Any) -> None:
        """Put a value after the current tail."""
        self._link_last(_DNode(value))

    def insert_after(self, key: Any, value: Any) -> None:
        """Insert a value right after the first node holding ``key``."""
        anchor = self._find(key)
        if anchor is None:
            raise ValueError(f"Node with value {key} not found")
        node = _DNode(value, anchor, anchor.next)
        if anchor.next is None:
            self._tail = node
        else:
            anchor.next.prev = node
        anchor.next = node
        self._size += 1

    def delete_from_beginning(self) -> Any:
        """Remove the head and return its value."""
        if self._head is None:
            raise IndexError("List is empty")
        return self._unlink(self._head)

    def delete_from_end(self) -> Any:
        """Remove the tail and return its value."""
        if self._tail is None:
            raise IndexError("List is empty")
        return self._unlink(self._tail)

    def delete_value(self, value: Any) -> Any:
        """Remove the first node holding ``value`` and return its value."""
        node = self._find(value)
        if node is None:
            raise ValueError(f"Node with value {value} not found")
        return self._unlink(node)

    def bubble_sort(self) -> None:
        """Sort ascending by swapping the values of neighbouring nodes."""
        swapped = True
        while swapped:
            swapped = False
            for node in self._nodes():
                following = node.next
                if following is not None and node.data > following.data:
                    node.data, following.data = following.data, node.data
                    swapped = True


def _join(front: DoublyLinkedList, back: DoublyLinkedList) -> DoublyLinkedList:
    if front is back:
        raise ValueError("a list cannot be appended to itself")
    if back._head is None:
        return front
    if front._tail is None:
        front._head = back._head
    else:
        front._tail.next = back._head
        back._head.prev = front._tail
    front._tail = back._tail
    front._size += back._size
    back._clear()
    return front


def append_start(first: DoublyLinkedList, second: DoublyLinkedList) -> DoublyLinkedList:
    """Link ``first`` in front of ``second``; returns ``first``, ``second`` ends empty."""
    return _join(first, second)


def append_end(first: DoublyLinkedList, second: DoublyLinkedList) -> DoublyLinkedList:
    """Link ``first`` after ``second``; returns ``second``, ``first`` ends empty."""
    return _join(second, first)


def merge_sorted(first: DoublyLinkedList, second: DoublyLinkedList) -> DoublyLinkedList:
    """Merge two sorted lists by relinking their nodes into a new list.

    Ties take the node from ``first``. Both inputs are left empty.
    """
    if first is second:
        raise ValueError("a list cannot be merged with itself")
    a, b = first._head, second._head
    first._clear()
    second._clear()
    merged = DoublyLinkedList()
    while a is not None or b is not None:
        if b is None or (a is not None and a.data <= b.data):
            node, a = a, a.next
        else:
            node, b = b, b.next
        merged._link_last(node)
    return merged