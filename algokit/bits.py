"""Bit manipulation and small combinatorics helpers."""

from __future__ import annotations

from itertools import pairwise

_UINT32_MASK = 0xFFFFFFFF


def binomial_coefficient(n: int, k: int) -> int:
    """Return C(n, k) built from Pascal's triangle."""
    if n < 0 or k < 0 or k > n:
        raise ValueError(f"C({n}, {k}) is undefined; need 0 <= k <= n")
    row = [1]
    for _ in range(n):
        row = [1, *(a + b for a, b in pairwise(row)), 1]
    return row[k]


def count_set_bits(n: int) -> int:
    """Return the number of one bits in ``n`` taken as an unsigned 32-bit value."""
    n &= _UINT32_MASK
    count = 0
    while n:
        n &= n - 1
        count += 1
    return count


def xor_swap(a: int, b: int) -> tuple[int, int]:
    """Return ``(b, a)``, exchanged with exclusive-or and no temporary."""
    a ^= b
    b ^= a
    a ^= b
    return a, b