"""Array algorithms: two-pointer scans, prefix tricks and simple transforms."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence
from functools import reduce
from operator import xor


def max_area(heights: Sequence[int]) -> int:
    """Return the largest water area held between two of the given walls."""
    if not heights:
        raise ValueError("max_area() requires at least one height")
    left, right = 0, len(heights) - 1
    best = 0
    while left < right:
        low, high = heights[left], heights[right]
        best = max(best, min(low, high) * (right - left))
        if low <= high:
            left += 1
        else:
            right -= 1
    return best


def find_duplicates(nums: Sequence[int]) -> list[int]:
    """Return the values of ``nums`` (each in 1..len(nums)) that repeat.

    A value is reported each time it completes a pair, so a value seen
    four times is reported twice.
    """
    size = len(nums)
    pending: set[int] = set()
    duplicates: list[int] = []
    for value in nums:
        if not 1 <= value <= size:
            raise ValueError(f"value {value} outside the range 1..{size}")
        if value in pending:
            pending.remove(value)
            duplicates.append(value)
        else:
            pending.add(value)
    return duplicates


def max_product_subarray(values: Sequence[int]) -> int:
    """Return the largest product of a contiguous, non-empty slice."""
    if not values:
        raise ValueError("max_product_subarray() requires a non-empty sequence")
    best = values[0]
    high = low = 1
    for value in values:
        if value < 0:
            high, low = low, high
        high = max(value * high, value)
        low = min(value * low, value)
        best = max(best, high)
        if value == 0:
            high = low = 1
    return best


def missing_number(values: Sequence[int]) -> int:
    """Return the one number of 1..len(values)+1 that is absent from ``values``."""
    present = reduce(xor, values, 0)
    expected = reduce(xor, range(1, len(values) + 2), 0)
    return present ^ expected


def or_adjacent(values: Sequence[int]) -> list[int]:
    """Replace each element by its bitwise OR with the next; the last is kept."""
    if not values:
        return []
    paired = [a | b for a, b in zip(values, values[1:])]
    paired.append(values[-1])
    return paired


def lower_bound(values: Sequence[int], value: int) -> int:
    """Return the largest element of sorted ``values`` not above ``value``.

    When no element qualifies, ``value`` itself is returned.
    """
    index = bisect_right(values, value)
    return values[index - 1] if index else value


def upper_bound(values: Sequence[int], value: int) -> int:
    """Return the smallest element of sorted ``values`` not below ``value``.

    When no element qualifies, ``value`` itself is returned.
    """
    index = bisect_left(values, value)
    return values[index] if index < len(values) else value


def largest_element(values: Sequence[int]) -> int:
    """Return the largest element."""
    if not values:
        raise ValueError("largest_element() requires a non-empty sequence")
    return max(values)


def max_subarray_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a contiguous, non-empty slice."""
    if not values:
        raise ValueError("max_subarray_sum() requires a non-empty sequence")
    if all(value <= 0 for value in values):
        return max(values)
    current = best = 0
    for value in values:
        current = max(current + value, 0)
        best = max(best, current)
    return best


def _is_palindromic_number(number: int) -> bool:
    if number < 0:
        return False
    digits = str(number)
    return digits == digits[::-1]


def is_palindromic_array(values: Sequence[int]) -> bool:
    """Return True when every number reads the same backwards.

    Negative numbers never count as palindromic.
    """
    return all(_is_palindromic_number(value) for value in values)


def remove_duplicates(values: Sequence[int]) -> list[int]:
    """Return the values with repeats dropped, keeping first occurrences in order."""
    return list(dict.fromkeys(values))


def rotate(values: Sequence[int], k: int) -> list[int]:
    """Return ``values`` rotated ``k`` places to the right."""
    items = list(values)
    if not items:
        return items
    k %= len(items)
    split = len(items) - k
    return items[split:] + items[:split]