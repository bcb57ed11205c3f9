from itertools import permutations

import pytest

from drills.sorting import (
    bubble_sort,
    insertion_sort,
    largest_number,
    merge_sort,
    partition,
    quick_sort,
    selection_sort,
    sorted_squares,
)

INPUTS = [
    [4, 2, 1, 3, 9, 10, 15, 20, 25, 60, 1, 4, 6, 14, 17, 18, 19, 40, 32],
    [2, 5, 7, 45, 3, 1, 16, 15],
    [3, 2, 1, 4],
    [2, 4, 1, 7],
    [2, 4, 9, 5, 3],
    [],
    [42],
    [5, 5, 5],
    [-3, 0, -10, 8, 8, -3],
]


@pytest.mark.parametrize("values", INPUTS)
def test_bubble_sort_matches_sorted(values):
    data = list(values)
    bubble_sort(data)
    assert data == sorted(values)


@pytest.mark.parametrize("values", INPUTS)
def test_insertion_sort_matches_sorted(values):
    data = list(values)
    insertion_sort(data)
    assert data == sorted(values)


@pytest.mark.parametrize("values", INPUTS)
def test_selection_sort_matches_sorted(values):
    data = list(values)
    selection_sort(data)
    assert data == sorted(values)


@pytest.mark.parametrize("values", INPUTS)
def test_merge_sort_matches_sorted(values):
    data = list(values)
    merge_sort(data)
    assert data == sorted(values)


@pytest.mark.parametrize("values", INPUTS)
def test_quick_sort_matches_sorted(values):
    data = list(values)
    quick_sort(data)
    assert data == sorted(values)


def test_bubble_sort_leaves_sorted_input_unchanged():
    data = list(range(20))
    bubble_sort(data)
    assert data == list(range(20))


def test_insertion_sort_leaves_sorted_input_unchanged():
    data = list(range(20))
    insertion_sort(data)
    assert data == list(range(20))


def test_selection_sort_leaves_sorted_input_unchanged():
    data = list(range(20))
    selection_sort(data)
    assert data == list(range(20))


def test_merge_sort_leaves_sorted_input_unchanged():
    data = list(range(20))
    merge_sort(data)
    assert data == list(range(20))


def test_quick_sort_leaves_sorted_input_unchanged():
    data = list(range(20))
    quick_sort(data)
    assert data == list(range(20))


def test_partition_places_pivot():
    values = [2, 5, 7, 45, 3, 1, 16, 15]
    original = list(values)
    index = partition(values, 0, len(values) - 1)
    pivot = values[index]
    assert pivot == original[-1]
    assert all(item <= pivot for item in values[:index])
    assert all(item > pivot for item in values[index + 1:])
    assert sorted(values) == sorted(original)


def test_partition_subrange_leaves_rest_alone():
    values = [9, 8, 3, 1, 2, 0]
    index = partition(values, 1, 4)
    assert values[0] == 9 and values[5] == 0
    assert 1 <= index <= 4


def test_partition_bad_range_raises():
    with pytest.raises(IndexError):
        partition([1, 2, 3], 0, 3)


def test_largest_number_worked_example():
    assert largest_number([3, 30, 34, 5, 9]) == "9534330"


def test_largest_number_all_zeros():
    assert largest_number([0, 0]) == "0"


@pytest.mark.parametrize("nums", [[10, 2], [1, 20, 23, 4, 8], [121, 12], [0, 9, 90]])
def test_largest_number_beats_every_arrangement(nums):
    best = max(int("".join(map(str, p))) for p in permutations(nums))
    assert int(largest_number(nums)) == best


def test_largest_number_uses_every_digit():
    nums = [3, 30, 34, 5, 9]
    assert sorted(largest_number(nums)) == sorted("".join(map(str, nums)))


@pytest.mark.parametrize("nums", [[-4, -1, 0, 3, 10], [-7, -3, 2, 3, 11], [1, 2, 3], [-5, -2], []])
def test_sorted_squares(nums):
    assert sorted_squares(nums) == sorted(x * x for x in nums)