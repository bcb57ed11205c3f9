"""Everyday operations on integer sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator, Sequence


def array_sum(values: Sequence[int]) -> int:
    """Return the sum of all elements."""
    return sum(values)


def contains(values: Sequence[int], element: int) -> bool:
    """Tell whether ``element`` occurs in ``values``."""
    return any(item == element for item in values)


def min_element(values: Sequence[int]) -> int:
    """Return the smallest element; the sequence must not be empty."""
    if not values:
        raise ValueError("min_element() of an empty sequence")
    smallest = values[0]
    for item in values:
        if item < smallest:
            smallest = item
    return smallest


def split_even_odd(values: Sequence[int]) -> tuple[list[int], list[int]]:
    """Split the elements into even and odd lists, keeping their order."""
    evens = [item for item in values if item % 2 == 0]
    odds = [item for item in values if item % 2 != 0]
    return evens, odds


def element_frequencies(values: Sequence[int]) -> list[tuple[int, int]]:
    """Pair every element, in input order, with how often it occurs."""
    counts = Counter(values)
    return [(item, counts[item]) for item in values]


def insert_at(values: Sequence[int], position: int, value: int) -> list[int]:
    """Return a new list with ``value`` placed at the 1-based ``position``."""
    if not 1 <= position <= len(values) + 1:
        raise IndexError(
            f"position {position} is outside 1..{len(values) + 1}"
        )
    result = list(values)
    result.insert(position - 1, value)
    return result


def is_sorted(values: Sequence[int]) -> bool:
    """Tell whether the elements are in non-decreasing order."""
    return all(left <= right for left, right in zip(values, values[1:]))


def median(values: Sequence[int]) -> float:
    """Return the median of an already sorted, non-empty sequence."""
    n = len(values)
    if n == 0:
        raise ValueError("median() of an empty sequence")
    if n % 2 == 0:
        return (values[n // 2] + values[n // 2 - 1]) / 2.0
    return float(values[n // 2])


def move_zeroes(nums: list[int]) -> None:
    """Move every zero to the end in place, keeping other elements in order."""
    slot = 0
    for current, item in enumerate(nums):
        if item != 0:
            nums[current], nums[slot] = nums[slot], nums[current]
            slot += 1


def reverse_in_place(values: list[int]) -> None:
    """Reverse the list in place by swapping from both ends."""
    start, end = 0, len(values) - 1
    while start < end:
        values[start], values[end] = values[end], values[start]
        start += 1
        end -= 1


def rotate_left(values: Sequence[int], k: int) -> list[int]:
    """Return the elements rotated ``k`` places to the left."""
    if not values:
        raise ValueError("cannot rotate an empty sequence")
    k %= len(values)
    return list(values[k:]) + list(values[:k])


def smallest_two(values: Sequence[int]) -> tuple[int, int | None]:
    """Return the smallest and the second smallest distinct element.

    The second item is ``None`` when all elements are equal.
    """
    if not values:
        raise ValueError("smallest_two() of an empty sequence")
    smallest = min_element(values)
    others = [item for item in values if item != smallest]
    second = min_element(others) if others else None
    return smallest, second


def subarrays(values: Sequence[int]) -> Iterator[list[int]]:
    """Yield every contiguous subarray, ordered by start then end."""
    n = len(values)
    for start in range(n):
        for end in range(start, n):
            yield list(values[start:end + 1])


def two_sum_sorted(numbers: Sequence[int], target: int) -> tuple[int, int]:
    """Find 1-based indexes of two entries of a sorted sequence summing to ``target``.

    Returns ``(-1, -1)`` when there is no such pair.
    """
    i, j = 0, len(numbers) - 1
    while i <= j:
        current = numbers[i] + numbers[j]
        if current == target:
            return i + 1, j + 1
        if current > target:
            j -= 1
        else:
            i += 1
    return -1, -1


def index_of(values: Sequence[int], element: int) -> int:
    """Return the index of the first occurrence of ``element``, or -1."""
    return next(
        (index for index, item in enumerate(values) if item == element), -1
    )