import random

import pytest

from algobox.sorting import bubble_sort, quicksort


def test_source_example():
    data = [5, 4, 3, 2, 1, -1, -100]
    expected = [-100, -1, 1, 2, 3, 4, 5]
    assert bubble_sort(data) == expected
    assert quicksort(data) == expected


def test_does_not_mutate_input():
    data = [3, 1, 2]
    assert bubble_sort(data) == [1, 2, 3]
    assert data == [3, 1, 2]
    assert quicksort(data) == [1, 2, 3]
    assert data == [3, 1, 2]


def test_empty_and_single():
    assert bubble_sort([]) == []
    assert bubble_sort([42]) == [42]
    assert quicksort([]) == []
    assert quicksort([42]) == [42]


def test_duplicates():
    data = [2, 2, 1, 1, 3, 3, 2]
    expected = [1, 1, 2, 2, 2, 3, 3]
    assert bubble_sort(data) == expected
    assert quicksort(data) == expected


@pytest.mark.parametrize("seed", range(5))
def test_random_lists(seed):
    rng = random.Random(seed)
    data = [rng.randint(-50, 50) for _ in range(rng.randint(0, 60))]
    assert bubble_sort(data) == sorted(data)
    assert quicksort(data) == sorted(data)


def test_accepts_any_iterable():
    assert bubble_sort(iter("dcba")) == ["a", "b", "c", "d"]
    assert quicksort(iter("dcba")) == ["a", "b", "c", "d"]


def test_quicksort_handles_long_sorted_input():
    data = list(range(3000))
    assert quicksort(data) == data