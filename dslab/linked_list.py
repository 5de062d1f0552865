"""Singly and doubly linked lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["SinglyLinkedList", "DoublyLinkedList"]


@dataclass(eq=False)
class _SinglyNode:
    data: Any
    next: Optional["_SinglyNode"] = None


@dataclass(eq=False)
class _DoublyNode:
    data: Any
    next: Optional["_DoublyNode"] = None
    prev: Optional["_DoublyNode"] = None


class SinglyLinkedList:
    """A linked list that appends at its tail and walks from its head."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_SinglyNode] = None
        self._tail: Optional[_SinglyNode] = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        node = _SinglyNode(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"


class DoublyLinkedList:
    """A linked list that can be walked in both directions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_DoublyNode] = None
        self._tail: Optional[_DoublyNode] = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        node = _DoublyNode(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"