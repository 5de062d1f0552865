"""Linked binary tree with depth-first traversals."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["Node", "inorder", "preorder", "postorder"]


@dataclass(eq=False)
class Node:
    """A binary tree node holding one item."""

    item: Any
    left: Optional[Node] = None
    right: Optional[Node] = None

    def insert_left(self, value: Any) -> Node:
        """Attach a new left child holding value, replacing any existing one."""
        self.left = Node(value)
        return self.left

    def insert_right(self, value: Any) -> Node:
        """Attach a new right child holding value, replacing any existing one."""
        self.right = Node(value)
        return self.right


def inorder(root: Optional[Node]) -> Iterator[Any]:
    """Yield items left subtree first, then the node, then the right subtree."""
    if root is None:
        return
    yield from inorder(root.left)
    yield root.item
    yield from inorder(root.right)


def preorder(root: Optional[Node]) -> Iterator[Any]:
    """Yield each node's item before those of its subtrees."""
    if root is None:
        return
    yield root.item
    yield from preorder(root.left)
    yield from preorder(root.right)


def postorder(root: Optional[Node]) -> Iterator[Any]:
    """Yield each node's item after those of its subtrees."""
    if root is None:
        return
    yield from postorder(root.left)
    yield from postorder(root.right)
    yield root.item