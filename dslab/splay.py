"""Splay tree with parent links."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["SplayTree"]


@dataclass(eq=False)
class _SplayNode:
    data: Any
    left: Optional[_SplayNode] = None
    right: Optional[_SplayNode] = None
    parent: Optional[_SplayNode] = None


class SplayTree:
    """A self-adjusting search tree that moves accessed nodes to the root.

    Equal values are placed in the right subtree.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: Optional[_SplayNode] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def _replace_in_parent(self, old: _SplayNode, new: _SplayNode) -> None:
        new.parent = old.parent
        if old.parent is None:
            self._root = new
        elif old is old.parent.left:
            old.parent.left = new
        else:
            old.parent.right = new

    def _rotate_left(self, x: _SplayNode) -> None:
        y = x.right
        x.right = y.left
        if y.left is not None:
            y.left.parent = x
        self._replace_in_parent(x, y)
        y.left = x
        x.parent = y

    def _rotate_right(self, x: _SplayNode) -> None:
        y = x.left
        x.left = y.right
        if y.right is not None:
            y.right.parent = x
        self._replace_in_parent(x, y)
        y.right = x
        x.parent = y

    def _splay(self, node: _SplayNode) -> None:
        while node.parent is not None:
            parent = node.parent
            grand = parent.parent
            if grand is None:
                if node is parent.left:
                    self._rotate_right(parent)
                else:
                    self._rotate_left(parent)
            elif node is parent.left and parent is grand.left:
                self._rotate_right(grand)
                self._rotate_right(parent)
            elif node is parent.right and parent is grand.right:
                self._rotate_left(grand)
                self._rotate_left(parent)
            elif node is parent.right and parent is grand.left:
                self._rotate_left(parent)
                self._rotate_right(grand)
            else:
                self._rotate_right(parent)
                self._rotate_left(grand)

    def _find(self, value: Any) -> Optional[_SplayNode]:
        node = self._root
        while node is not None:
            if value == node.data:
                return node
            node = node.left if value < node.data else node.right
        return None

    def insert(self, value: Any) -> None:
        """Insert value and splay it to the root."""
        node = _SplayNode(value)
        parent = None
        current = self._root
        while current is not None:
            parent = current
            current = current.left if value < current.data else current.right
        node.parent = parent
        if parent is None:
            self._root = node
        elif value < parent.data:
            parent.left = node
        else:
            parent.right = node
        self._size += 1
        self._splay(node)

    def search(self, value: Any) -> bool:
        """Return whether value is present, splaying it to the root if so."""
        node = self._find(value)
        if node is None:
            return False
        self._splay(node)
        return True

    def delete(self, value: Any) -> None:
        """Remove value; raise KeyError if it is absent."""
        node = self._find(value)
        if node is None:
            raise KeyError(value)
        self._splay(node)
        left, right = node.left, node.right
        if left is not None:
            left.parent = None
        if right is not None:
            right.parent = None
        if left is None:
            self._root = right
        else:
            self._root = left
            largest = left
            while largest.right is not None:
                largest = largest.right
            self._splay(largest)
            self._root.right = right
            if right is not None:
                right.parent = self._root
        self._size -= 1

    def __iter__(self) -> Iterator[Any]:
        stack: list[_SplayNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def root_value(self) -> Any:
        """Return the value at the root; raise ValueError if the tree is empty."""
        if self._root is None:
            raise ValueError("tree is empty")
        return self._root.data

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"SplayTree({list(self)!r})"