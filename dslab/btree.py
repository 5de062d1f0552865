"""B-tree holding at most three keys per node."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["MAX_KEYS", "MIN_KEYS", "DuplicateKeyError", "BTree"]

MAX_KEYS = 3
MIN_KEYS = 2


class DuplicateKeyError(ValueError):
    """Raised when inserting a key that is already in the tree."""


@dataclass(eq=False)
class _BTreeNode:
    keys: list[Any]
    children: list[Optional[_BTreeNode]]


_Promotion = Optional[tuple[Any, Optional[_BTreeNode]]]


def _split(node: _BTreeNode, pos: int, key: Any, child: Optional[_BTreeNode]) -> tuple[Any, _BTreeNode]:
    median = MIN_KEYS + 1 if pos > MIN_KEYS else MIN_KEYS
    sibling = _BTreeNode(node.keys[median:], [None] + node.children[median + 1:])
    del node.keys[median:]
    del node.children[median + 1:]
    target, at = (node, pos) if pos <= MIN_KEYS else (sibling, pos - median)
    target.keys.insert(at, key)
    target.children.insert(at + 1, child)
    promoted = node.keys.pop()
    sibling.children[0] = node.children.pop()
    return promoted, sibling


def _place(node: Optional[_BTreeNode], value: Any) -> _Promotion:
    if node is None:
        return value, None
    pos = bisect_right(node.keys, value)
    if pos and node.keys[pos - 1] == value:
        raise DuplicateKeyError(f"duplicate key {value!r}")
    promotion = _place(node.children[pos], value)
    if promotion is None:
        return None
    key, child = promotion
    if len(node.keys) < MAX_KEYS:
        node.keys.insert(pos, key)
        node.children.insert(pos + 1, child)
        return None
    return _split(node, pos, key, child)


def _walk(node: Optional[_BTreeNode]) -> Iterator[Any]:
    if node is None:
        return
    for child, key in zip(node.children, node.keys):
        yield from _walk(child)
        yield key
    yield from _walk(node.children[-1])


class BTree:
    """A B-tree of distinct keys that grows at the root."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: Optional[_BTreeNode] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Insert value; raise DuplicateKeyError if it is already present."""
        promotion = _place(self._root, value)
        if promotion is not None:
            key, child = promotion
            self._root = _BTreeNode([key], [self._root, child])
        self._size += 1

    def __contains__(self, value: Any) -> bool:
        node = self._root
        while node is not None:
            pos = bisect_right(node.keys, value)
            if pos and node.keys[pos - 1] == value:
                return True
            node = node.children[pos]
        return False

    def __iter__(self) -> Iterator[Any]:
        return _walk(self._root)

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"BTree({list(self)!r})"