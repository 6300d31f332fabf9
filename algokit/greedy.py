"""Greedy counting problems: refuelling stops, coins and banknotes."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise

_LOTTERY_BILLS = (100, 20, 10, 5, 1)


class UnreachableError(ValueError):
    """Raised when the destination cannot be reached on one tank per leg."""


def min_refills(distance: int, mileage: int, stops: Sequence[int]) -> int:
    """Return the fewest refills needed to drive ``distance`` miles.

    ``mileage`` is the range of a full tank and ``stops`` are the sorted
    distances of the gas stations from the start, which begins with a full tank.
    """
    points = [0, *stops, distance]
    if any(following - here > mileage for here, following in pairwise(points)):
        raise UnreachableError("a gap between stations exceeds the tank range")
    refills = 0
    last = 0
    for here, following in pairwise(points):
        travelled = here - last
        if travelled < mileage and following - last > mileage:
            last = here
            refills += 1
        elif travelled == mileage:
            last = here
            refills += 1
    if distance - last > mileage:
        refills += 1
    return refills


def coin_change(amount: int) -> int:
    """Return the fewest coins worth 10, 5 and 1 that sum to ``amount``."""
    if amount < 0:
        raise ValueError("amount must not be negative")
    tens, rest = divmod(amount, 10)
    fives, ones = divmod(rest, 5)
    return tens + fives + ones


def lottery_bills(amount: int) -> int:
    """Return the fewest bills of 100, 20, 10, 5 and 1 that sum to ``amount``."""
    if amount < 0:
        raise ValueError("amount must not be negative")
    count = 0
    for bill in _LOTTERY_BILLS:
        used, amount = divmod(amount, bill)
        count += used
    return count