"""Search routines over sequences; each returns an index or None."""

from __future__ import annotations

from collections.abc import Sequence
from math import isqrt


def jump_search(values: Sequence[int], target: int) -> int | None:
    """Find ``target`` in sorted ``values`` by jumping sqrt(n) blocks at a time."""
    size = len(values)
    if size == 0:
        return None
    jump = isqrt(size)
    step = jump
    prev = 0
    while values[min(step, size) - 1] < target:
        prev = step
        step += jump
        if prev >= size:
            return None
    while values[prev] < target:
        prev += 1
        if prev == min(step, size):
            return None
    return prev if values[prev] == target else None


def binary_search(values: Sequence[int], target: int) -> int | None:
    """Find ``target`` in sorted ``values`` by halving the range."""
    start, end = 0, len(values) - 1
    while start <= end:
        mid = (start + end) // 2
        if values[mid] == target:
            return mid
        if target < values[mid]:
            end = mid - 1
        else:
            start = mid + 1
    return None


def binary_search_recursive(values: Sequence[int], target: int) -> int | None:
    """Find ``target`` in sorted ``values`` by recursive halving."""

    def search(low: int, high: int) -> int | None:
        if high < low:
            return None
        mid = low + (high - low) // 2
        if values[mid] == target:
            return mid
        if values[mid] > target:
            return search(low, mid - 1)
        return search(mid + 1, high)

    return search(0, len(values) - 1)


def linear_search(values: Sequence[int], target: int) -> int | None:
    """Return the index of the first element equal to ``target``."""
    return next((i for i, value in enumerate(values) if value == target), None)