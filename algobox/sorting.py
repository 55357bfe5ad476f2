"""Simple comparison sorts."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list holding ``values`` in ascending order."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for i in range(end):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        if not swapped:
            break
    return items


def _partition(items: list[Any], start: int, end: int) -> int:
    pivot = items[end]
    boundary = start
    for j in range(start, end):
        if items[j] < pivot:
            items[boundary], items[j] = items[j], items[boundary]
            boundary += 1
    items[boundary], items[end] = items[end], items[boundary]
    return boundary


def quicksort(values: Iterable[Any]) -> list[Any]:
    """Return a new list holding ``values`` in ascending order.

    Uses the last element of each range as the pivot.
    """
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        start, end = pending.pop()
        if start < end:
            split = _partition(items, start, end)
            pending.append((start, split - 1))
            pending.append((split + 1, end))
    return items