"""Comparison and counting sorts; each returns a new sorted list."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

T = TypeVar("T", bound=Any)


def heap_sort(values: Sequence[T]) -> list[T]:
    """Sort by building a max-heap and repeatedly moving its root to the end."""
    items = list(values)

    def sift_down(size: int, root: int) -> None:
        while True:
            largest = root
            left, right = 2 * root + 1, 2 * root + 2
            if left < size and items[left] > items[largest]:
                largest = left
            if right < size and items[right] > items[largest]:
                largest = right
            if largest == root:
                return
            items[root], items[largest] = items[largest], items[root]
            root = largest

    size = len(items)
    for root in range(size // 2 - 1, -1, -1):
        sift_down(size, root)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        sift_down(end, 0)
    return items


def insertion_sort(values: Sequence[T]) -> list[T]:
    """Sort by inserting each element into the sorted prefix before it."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def bubble_sort(values: Sequence[T]) -> list[T]:
    """Sort by adjacent swaps, stopping early once a pass swaps nothing."""
    items = list(values)
    size = len(items)
    for done in range(size):
        swapped = False
        for j in range(size - 1 - done):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def counting_sort(values: Sequence[int]) -> list[int]:
    """Sort non-negative integers by counting how often each value occurs."""
    items = list(values)
    if not items:
        return []
    if min(items) < 0:
        raise ValueError("counting_sort() only handles non-negative integers")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def _cycle_position(items: list[T], start: int, item: T) -> int:
    return start + sum(1 for other in items[start + 1 :] if other < item)


def cycle_sort(values: Sequence[T]) -> list[T]:
    """Sort by rotating each cycle of misplaced elements into place."""
    items = list(values)
    size = len(items)
    for start in range(size - 1):
        item = items[start]
        pos = _cycle_position(items, start, item)
        if pos == start:
            continue
        while item == items[pos]:
            pos += 1
        items[pos], item = item, items[pos]
        while pos != start:
            pos = _cycle_position(items, start, item)
            while item == items[pos]:
                pos += 1
            if item != items[pos]:
                items[pos], item = item, items[pos]
    return items


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Sequence[T]) -> list[T]:
    """Sort stably by splitting in halves and merging the sorted halves."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = len(items) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[T], low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(values: Sequence[T]) -> list[T]:
    """Sort by partitioning around the last element of each range."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = _partition(items, low, high)
            pending.append((low, pivot - 1))
            pending.append((pivot + 1, high))
    return items


def selection_sort(values: Sequence[T]) -> list[T]:
    """Sort by repeatedly swapping the smallest remaining element forward."""
    items = list(values)
    size = len(items)
    for i in range(size - 1):
        smallest = min(range(i, size), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items