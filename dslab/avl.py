"""Self-balancing AVL tree of distinct keys."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["AVLTree"]


@dataclass(eq=False)
class _AVLNode:
    key: Any
    left: Optional[_AVLNode] = None
    right: Optional[_AVLNode] = None
    height: int = 1


def _height(node: Optional[_AVLNode]) -> int:
    return node.height if node is not None else 0


def _update(node: _AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: Optional[_AVLNode]) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(y: _AVLNode) -> _AVLNode:
    x = y.left
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x: _AVLNode) -> _AVLNode:
    y = x.right
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


def _insert(node: Optional[_AVLNode], key: Any) -> tuple[_AVLNode, bool]:
    if node is None:
        return _AVLNode(key), True
    if key < node.key:
        node.left, added = _insert(node.left, key)
    elif key > node.key:
        node.right, added = _insert(node.right, key)
    else:
        return node, False

    _update(node)
    balance = _balance(node)
    if balance > 1 and key < node.left.key:
        return _rotate_right(node), added
    if balance < -1 and key > node.right.key:
        return _rotate_left(node), added
    if balance > 1 and key > node.left.key:
        node.left = _rotate_left(node.left)
        return _rotate_right(node), added
    if balance < -1 and key < node.right.key:
        node.right = _rotate_right(node.right)
        return _rotate_left(node), added
    return node, added


def _delete(root: Optional[_AVLNode], key: Any) -> tuple[Optional[_AVLNode], bool]:
    if root is None:
        return None, False
    if key < root.key:
        root.left, removed = _delete(root.left, key)
    elif key > root.key:
        root.right, removed = _delete(root.right, key)
    else:
        removed = True
        if root.left is None or root.right is None:
            child = root.left if root.left is not None else root.right
            if child is None:
                return None, True
            root = child
        else:
            successor = root.right
            while successor.left is not None:
                successor = successor.left
            root.key = successor.key
            root.right, _ = _delete(root.right, successor.key)

    _update(root)
    balance = _balance(root)
    if balance > 1 and _balance(root.left) >= 0:
        return _rotate_right(root), removed
    if balance > 1 and _balance(root.left) < 0:
        root.left = _rotate_left(root.left)
        return _rotate_right(root), removed
    if balance < -1 and _balance(root.right) <= 0:
        return _rotate_left(root), removed
    if balance < -1 and _balance(root.right) > 0:
        root.right = _rotate_right(root.right)
        return _rotate_left(root), removed
    return root, removed


class AVLTree:
    """A height-balanced search tree; inserting an existing key does nothing."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self._root: Optional[_AVLNode] = None
        self._size = 0
        for key in keys:
            self.insert(key)

    def insert(self, key: Any) -> bool:
        """Insert key; return False if it was already present."""
        self._root, added = _insert(self._root, key)
        if added:
            self._size += 1
        return added

    def delete(self, key: Any) -> bool:
        """Remove key; return False if it was not present."""
        self._root, removed = _delete(self._root, key)
        if removed:
            self._size -= 1
        return removed

    def preorder(self) -> Iterator[Any]:
        """Yield keys with each node before its subtrees."""
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.key
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def __iter__(self) -> Iterator[Any]:
        stack: list[_AVLNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def height(self) -> int:
        """Return the number of levels in the tree; 0 when empty."""
        return _height(self._root)

    def __contains__(self, key: Any) -> bool:
        node = self._root
        while node is not None:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right
        return False

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"AVLTree({list(self)!r})"