"""Classic sorting algorithms and sorting-based problems."""

from __future__ import annotations

from collections.abc import Sequence
from functools import cmp_to_key


def _concat_order(a: int, b: int) -> int:
    ab, ba = f"{a}{b}", f"{b}{a}"
    if ab > ba:
        return -1
    if ab < ba:
        return 1
    return 0


def largest_number(nums: Sequence[int]) -> str:
    """Arrange non-negative integers to form the largest possible number."""
    ordered = sorted(nums, key=cmp_to_key(_concat_order))
    answer = "".join(str(item) for item in ordered)
    if answer.startswith("0"):
        return "0"
    return answer


def _merge(values: list[int], low: int, mid: int, high: int) -> None:
    left = values[low:mid + 1]
    right = values[mid + 1:high + 1]
    i = j = 0
    k = low
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            values[k] = left[i]
            i += 1
        else:
            values[k] = right[j]
            j += 1
        k += 1
    values[k:high + 1] = left[i:] + right[j:]


def _merge_sort(values: list[int], low: int, high: int) -> None:
    if low >= high:
        return
    mid = (low + high) // 2
    _merge_sort(values, low, mid)
    _merge_sort(values, mid + 1, high)
    _merge(values, low, mid, high)


def merge_sort(values: list[int]) -> None:
    """Sort the list in place by merge sort."""
    _merge_sort(values, 0, len(values) - 1)


def partition(values: list[int], low: int, high: int) -> int:
    """Partition ``values[low..high]`` around its last element; return the pivot's index."""
    if not 0 <= low <= high < len(values):
        raise IndexError(f"range {low}..{high} is outside the list")
    pivot = values[high]
    store = low
    for scan in range(low, high):
        if values[scan] <= pivot:
            values[store], values[scan] = values[scan], values[store]
            store += 1
    values[high], values[store] = values[store], values[high]
    return store


def _quick_sort(values: list[int], low: int, high: int) -> None:
    if low >= high:
        return
    pivot_index = partition(values, low, high)
    _quick_sort(values, low, pivot_index - 1)
    _quick_sort(values, pivot_index + 1, high)


def quick_sort(values: list[int]) -> None:
    """Sort the list in place by quicksort."""
    _quick_sort(values, 0, len(values) - 1)


def sorted_squares(nums: Sequence[int]) -> list[int]:
    """Return the squares of a sorted sequence, in ascending order."""
    answer = [0] * len(nums)
    i, j = 0, len(nums) - 1
    index = len(nums) - 1
    while i <= j:
        if abs(nums[i]) > abs(nums[j]):
            answer[index] = nums[i] * nums[i]
            i += 1
        else:
            answer[index] = nums[j] * nums[j]
            j -= 1
        index -= 1
    return answer


def bubble_sort(values: list[int]) -> None:
    """Sort the list in place by bubble sort, stopping early once no swap happens."""
    n = len(values)
    for done in range(n):
        swapped = False
        for j in range(n - done - 1):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
                swapped = True
        if not swapped:
            break


def insertion_sort(values: list[int]) -> None:
    """Sort the list in place by insertion sort."""
    for i in range(1, len(values)):
        current = values[i]
        j = i - 1
        while j >= 0 and values[j] > current:
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = current


def selection_sort(values: list[int]) -> None:
    """Sort the list in place by selection sort."""
    n = len(values)
    for i in range(n - 1):
        smallest = min(range(i, n), key=values.__getitem__)
        values[i], values[smallest] = values[smallest], values[i]