"""Left rotation of a sequence."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

__all__ = ["left_rotate"]


def left_rotate(values: Iterable[Any], steps: int) -> list[Any]:
    """Return values shifted left by steps places, wrapping around.

    A steps count of zero or less leaves the order unchanged.
    """
    items = list(values)
    if not items or steps <= 0:
        return items
    shift = steps % len(items)
    return items[shift:] + items[:shift]