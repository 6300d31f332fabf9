"""Stack-based problems on sequences and strings."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Sequence
from typing import Any, TypeVar

T = TypeVar("T", bound=Any)
H = TypeVar("H", bound=Hashable)


def next_greater_elements(values: Sequence[T]) -> list[T | None]:
    """Return, for each element, the first later element that is larger.

    Positions with no larger element to their right hold None.
    """
    result: list[T | None] = [None] * len(values)
    pending: list[int] = []
    for index, value in enumerate(values):
        while pending and values[pending[-1]] < value:
            result[pending.pop()] = value
        pending.append(index)
    return result


def next_greater_frequency(values: Sequence[H]) -> list[H | None]:
    """Return, for each element, the first later element that occurs more often.

    Frequencies are counted over the whole sequence. Positions with no such
    element to their right hold None.
    """
    frequency = Counter(values)
    result: list[H | None] = [None] * len(values)
    pending: list[int] = []
    for index, value in enumerate(values):
        count = frequency[value]
        while pending and frequency[values[pending[-1]]] < count:
            result[pending.pop()] = value
        pending.append(index)
    return result


def reverse_words(text: str) -> str:
    """Reverse the letters of each space-separated word, keeping the spaces."""
    return " ".join(word[::-1] for word in text.split(" "))


def sort_stack(stack: Sequence[T]) -> list[T]:
    """Return the stack sorted so that the largest item is on top.

    The stack is given bottom first, top last, and is returned the same way.
    """
    source = list(stack)
    ordered: list[T] = []
    while source:
        item = source.pop()
        while ordered and ordered[-1] > item:
            source.append(ordered.pop())
        ordered.append(item)
    return ordered


def reverse_stack(stack: Sequence[T]) -> list[T]:
    """Return the stack with its order reversed, bottom first, top last."""
    source = list(stack)
    reversed_stack: list[T] = []
    while source:
        reversed_stack.append(source.pop())
    return reversed_stack