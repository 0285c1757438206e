"""A last-in first-out stack and a first-in first-out queue."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterator


class StackEmptyError(IndexError):
    """Raised when popping from an empty stack."""


class QueueUnderflowError(IndexError):
    """Raised when dequeuing from an empty queue."""


class Stack:
    """A stack; iteration runs from top to bottom."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        self._items.append(value)

    def pop(self) -> Any:
        if not self._items:
            raise StackEmptyError("Stack empty")
        return self._items.pop()

    def __iter__(self) -> Iterator[Any]:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        if not self._items:
            return "Stack is empty"
        return "Stack (top to bottom): " + " ".join(map(str, self))


class Queue:
    """A queue; iteration runs from front to rear."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        self._items.append(value)

    def dequeue(self) -> Any:
        if not self._items:
            raise QueueUnderflowError("Queue Underflow")
        return self._items.popleft()

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        if not self._items:
            return "Queue is empty"
        return "Queue (front to rear): " + " ".join(map(str, self))