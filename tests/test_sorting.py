import random

import pytest

from algokit.sorting import (
    bubble_sort,
    counting_sort,
    cycle_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)

SAMPLES = [
    [],
    [7],
    [12, 11, 13, 5, 6, 7],
    [12, 11, 13, 5, 6],
    [1, 7, 8, 3, 5],
    [1, 8, 5, 2, 4],
    [2, 1, 7, 2, 2, 3, 7, 7, 8],
    [5, 4, 3, 2, 1],
    [1, 2, 3, 4, 5],
    [3, 3, 3, 3],
    [0, 0, 1, 0],
]


def _random_lists():
    rng = random.Random(1234)
    return [[rng.randint(0, 50) for _ in range(rng.randint(0, 40))] for _ in range(20)]


@pytest.mark.parametrize("values", SAMPLES)
def test_matches_builtin_sorted(values):
    expected = sorted(values)
    assert heap_sort(values) == expected
    assert insertion_sort(values) == expected
    assert bubble_sort(values) == expected
    assert counting_sort(values) == expected
    assert cycle_sort(values) == expected
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected
    assert selection_sort(values) == expected


def test_random_inputs():
    for values in _random_lists():
        expected = sorted(values)
        assert heap_sort(values) == expected
        assert insertion_sort(values) == expected
        assert bubble_sort(values) == expected
        assert counting_sort(values) == expected
        assert cycle_sort(values) == expected
        assert merge_sort(values) == expected
        assert quick_sort(values) == expected
        assert selection_sort(values) == expected


def test_input_is_not_mutated():
    values = [9, 2, 7, 2, 0]
    snapshot = list(values)
    expected = [0, 2, 2, 7, 9]
    assert heap_sort(values) == expected
    assert values == snapshot
    assert insertion_sort(values) == expected
    assert values == snapshot
    assert bubble_sort(values) == expected
    assert values == snapshot
    assert counting_sort(values) == expected
    assert values == snapshot
    assert cycle_sort(values) == expected
    assert values == snapshot
    assert merge_sort(values) == expected
    assert values == snapshot
    assert quick_sort(values) == expected
    assert values == snapshot
    assert selection_sort(values) == expected
    assert values == snapshot


def test_accepts_tuples():
    values = (4, 1, 3)
    assert heap_sort(values) == [1, 3, 4]
    assert insertion_sort(values) == [1, 3, 4]
    assert bubble_sort(values) == [1, 3, 4]
    assert counting_sort(values) == [1, 3, 4]
    assert cycle_sort(values) == [1, 3, 4]
    assert merge_sort(values) == [1, 3, 4]
    assert quick_sort(values) == [1, 3, 4]
    assert selection_sort(values) == [1, 3, 4]


def test_negative_numbers():
    values = [-30, 5, -3, 18, 14, 0]
    expected = [-30, -3, 0, 5, 14, 18]
    assert heap_sort(values) == expected
    assert insertion_sort(values) == expected
    assert bubble_sort(values) == expected
    assert cycle_sort(values) == expected
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected
    assert selection_sort(values) == expected


def test_strings():
    words = ["pear", "apple", "fig", "apple", "kiwi"]
    expected = ["apple", "apple", "fig", "kiwi", "pear"]
    assert heap_sort(words) == expected
    assert insertion_sort(words) == expected
    assert bubble_sort(words) == expected
    assert cycle_sort(words) == expected
    assert merge_sort(words) == expected
    assert quick_sort(words) == expected
    assert selection_sort(words) == expected


def test_quick_sort_handles_long_sorted_input():
    values = list(range(3000))
    assert quick_sort(values) == values
    assert quick_sort(values[::-1]) == values


def test_merge_sort_is_stable():
    class Item:
        def __init__(self, key, tag):
            self.key, self.tag = key, tag

        def __lt__(self, other):
            return self.key < other.key

        def __le__(self, other):
            return self.key <= other.key

    items = [Item(1, "a"), Item(0, "b"), Item(1, "c"), Item(0, "d")]
    assert [item.tag for item in merge_sort(items)] == ["b", "d", "a", "c"]


def test_counting_sort_rejects_negatives():
    with pytest.raises(ValueError):
        counting_sort([3, -1, 2])