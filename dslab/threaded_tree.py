"""Right-threaded binary trees with stackless in-order traversal."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["ThreadedNode", "make_threaded", "leftmost", "inorder"]


@dataclass(eq=False)
class ThreadedNode:
    """A node whose right link may be a thread to its in-order successor."""

    key: Any
    left: Optional[ThreadedNode] = None
    right: Optional[ThreadedNode] = None
    is_threaded: bool = False


def make_threaded(root: Optional[ThreadedNode]) -> Optional[ThreadedNode]:
    """Thread the tree in place and return its rightmost node."""
    if root is None:
        return None
    if root.left is None and root.right is None:
        return root
    if root.left is not None:
        predecessor = make_threaded(root.left)
        predecessor.right = root
        predecessor.is_threaded = True
    if root.right is None:
        return root
    return make_threaded(root.right)


def leftmost(node: Optional[ThreadedNode]) -> Optional[ThreadedNode]:
    """Return the leftmost node under node, or None for an empty tree."""
    while node is not None and node.left is not None:
        node = node.left
    return node


def inorder(root: Optional[ThreadedNode]) -> Iterator[Any]:
    """Yield keys in order by following threads rather than a stack."""
    current = leftmost(root)
    while current is not None:
        yield current.key
        if current.is_threaded:
            current = current.right
        else:
            current = leftmost(current.right)