import pytest

from algobox.searching import aggressive_cows, can_place_cows, total_fruit


def test_aggressive_cows_classic_example():
    assert aggressive_cows([1, 2, 8, 4, 9], 3) == 3


@pytest.mark.parametrize(
    "positions, cows",
    [
        ([1, 2, 8, 4, 9], 3),
        ([0, 3, 4, 7, 10, 9], 4),
        ([5, 100], 2),
        ([1, 2, 3, 4, 5, 6, 7], 3),
    ],
)
def test_aggressive_cows_answer_is_maximal(positions, cows):
    answer = aggressive_cows(positions, cows)
    stalls = sorted(positions)
    assert can_place_cows(stalls, cows, answer)
    assert not can_place_cows(stalls, cows, answer + 1)


def test_aggressive_cows_order_of_input_does_not_matter():
    assert aggressive_cows([9, 4, 8, 2, 1], 3) == aggressive_cows([1, 2, 4, 8, 9], 3)


def test_aggressive_cows_too_many_cows_raises():
    with pytest.raises(ValueError):
        aggressive_cows([1, 2, 3], 4)


def test_aggressive_cows_single_cow_raises():
    with pytest.raises(ValueError):
        aggressive_cows([1, 2, 3], 1)


def test_can_place_is_monotonic_in_distance():
    stalls = [1, 2, 4, 8, 9]
    results = [can_place_cows(stalls, 3, d) for d in range(0, 12)]
    assert results == [True] * 4 + [False] * 8


def test_can_place_zero_distance_always_fits():
    assert can_place_cows([3, 3, 3], 3, 0)


def test_total_fruit_examples():
    assert total_fruit([1, 2, 1]) == 3
    assert total_fruit([1, 2, 3, 2, 2]) == 4


def test_total_fruit_empty():
    assert total_fruit([]) == 0


def test_total_fruit_single_kind_takes_everything():
    fruits = [7] * 9
    assert total_fruit(fruits) == len(fruits)


def test_total_fruit_works_with_any_hashable():
    assert total_fruit(list("abcbb")) == total_fruit([1, 2, 3, 2, 2])


def test_total_fruit_never_exceeds_length():
    fruits = [0, 1, 2, 3, 4, 5]
    assert total_fruit(fruits) <= len(fruits)
    assert total_fruit(fruits) >= min(2, len(fruits))