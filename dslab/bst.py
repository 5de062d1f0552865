"""Unbalanced binary search tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["BinarySearchTree"]


@dataclass(eq=False)
class _Node:
    data: Any
    left: Optional[_Node] = None
    right: Optional[_Node] = None


def _insert(node: Optional[_Node], value: Any) -> _Node:
    if node is None:
        return _Node(value)
    if value > node.data:
        node.right = _insert(node.right, value)
    else:
        node.left = _insert(node.left, value)
    return node


def _minimum(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _delete(node: Optional[_Node], value: Any) -> tuple[Optional[_Node], bool]:
    if node is None:
        return None, False
    if value > node.data:
        node.right, removed = _delete(node.right, value)
        return node, removed
    if value < node.data:
        node.left, removed = _delete(node.left, value)
        return node, removed
    if node.left is None:
        return node.right, True
    if node.right is None:
        return node.left, True
    successor = _minimum(node.right)
    node.data = successor.data
    node.right, _ = _delete(node.right, successor.data)
    return node, True


class BinarySearchTree:
    """A binary search tree; equal values are placed in the left subtree."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        self._root = _insert(self._root, value)
        self._size += 1

    def delete(self, value: Any) -> bool:
        """Remove one occurrence of value; return whether one was found."""
        self._root, removed = _delete(self._root, value)
        if removed:
            self._size -= 1
        return removed

    def __contains__(self, value: Any) -> bool:
        node = self._root
        while node is not None:
            if node.data == value:
                return True
            node = node.right if value > node.data else node.left
        return False

    def minimum(self) -> Any:
        """Return the smallest value; raise ValueError if the tree is empty."""
        if self._root is None:
            raise ValueError("minimum of an empty tree")
        return _minimum(self._root).data

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"BinarySearchTree({list(self)!r})"