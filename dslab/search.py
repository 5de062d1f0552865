"""Sequential search."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

__all__ = ["linear_search"]


def linear_search(values: Iterable[Any], target: Any) -> int:
    """Return the index of the first element equal to target, or -1."""
    for index, value in enumerate(values):
        if value == target:
            return index
    return -1