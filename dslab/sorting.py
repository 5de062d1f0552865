"""Classic comparison sorts, each returning a new sorted list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

__all__ = [
    "insertion_sort",
    "selection_sort",
    "merge_sort",
    "quick_sort",
    "shell_sort",
    "heap_sort",
]


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by shifting each element left past its larger predecessors."""
    items = list(values)
    for i in range(1, len(items)):
        element = items[i]
        j = i - 1
        while j >= 0 and items[j] > element:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = element
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping the smallest remaining element forward."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    li = ri = 0
    while li < len(left) and ri < len(right):
        if left[li] <= right[ri]:
            merged.append(left[li])
            li += 1
        else:
            merged.append(right[ri])
            ri += 1
    merged.extend(left[li:])
    merged.extend(right[ri:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) < 2:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _quick(items: list[Any], first: int, last: int) -> None:
    if first >= last:
        return
    pivot = first
    i, j = first, last
    while i < j:
        while items[i] <= items[pivot] and i < last:
            i += 1
        while items[j] > items[pivot]:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
    items[pivot], items[j] = items[j], items[pivot]
    _quick(items, first, j - 1)
    _quick(items, j + 1, last)


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Quick sort using the first element of each range as pivot."""
    items = list(values)
    _quick(items, 0, len(items) - 1)
    return items


def shell_sort(values: Iterable[Any]) -> list[Any]:
    """Shell sort with gaps n/2, n/4, ..., 1."""
    items = list(values)
    n = len(items)
    interval = n // 2
    while interval > 0:
        for i in range(interval, n):
            temp = items[i]
            j = i
            while j >= interval and items[j - interval] > temp:
                items[j] = items[j - interval]
                j -= interval
            items[j] = temp
        interval //= 2
    return items


def _sift_down(items: list[Any], size: int, index: int) -> None:
    while True:
        largest = index
        left, right = 2 * index + 1, 2 * index + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == index:
            return
        items[index], items[largest] = items[largest], items[index]
        index = largest


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Heap sort on a max-heap built in place."""
    items = list(values)
    n = len(items)
    for i in range(n // 2 - 1, -1, -1):
        _sift_down(items, n, i)
    for end in range(n - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items