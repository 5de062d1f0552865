"""Fixed-capacity stack and queue backed by a list."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

__all__ = [
    "SIZE",
    "StackOverflow",
    "StackUnderflow",
    "QueueFull",
    "QueueEmpty",
    "ArrayStack",
    "ArrayQueue",
]

SIZE = 5


class StackOverflow(OverflowError):
    """Raised when pushing onto a full stack."""


class StackUnderflow(IndexError):
    """Raised when popping from an empty stack."""


class QueueFull(OverflowError):
    """Raised when the queue's rear has reached its capacity."""


class QueueEmpty(IndexError):
    """Raised when dequeuing from an empty queue."""


def _check_capacity(capacity: int) -> int:
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    return capacity


class ArrayStack:
    """A bounded LIFO stack."""

    def __init__(self, capacity: int = SIZE) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        if len(self._items) == self.capacity:
            raise StackOverflow("stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        if not self._items:
            raise StackUnderflow("stack underflow")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from bottom to top."""
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"ArrayStack({self._items!r}, capacity={self.capacity})"


class ArrayQueue:
    """A bounded FIFO queue over a linear array.

    Slots freed by dequeuing are not reused: once ``capacity`` elements
    have been enqueued the queue reports full.
    """

    def __init__(self, capacity: int = SIZE) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: list[Any] = []
        self._front = 0

    def enqueue(self, value: Any) -> None:
        if len(self._items) == self.capacity:
            raise QueueFull("queue full")
        self._items.append(value)

    def dequeue(self) -> Any:
        if self._front == len(self._items):
            raise QueueEmpty("queue empty")
        value = self._items[self._front]
        self._front += 1
        return value

    def __len__(self) -> int:
        return len(self._items) - self._front

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to rear."""
        return iter(self._items[self._front:])

    def __repr__(self) -> str:
        return f"ArrayQueue({list(self)!r}, capacity={self.capacity})"