"""Counting and grouping with dictionaries."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence


def map_demo() -> list[str]:
    """Walk through basic map operations and return the lines they report."""
    lines: list[str] = []
    numbers: dict[int, str] = {}
    numbers.setdefault(1, "One")
    numbers[2] = "Two"
    numbers[3] = "Three"

    lines.append(f"Value for key 1: {numbers[1]}")
    lines.append(f"Value for key 2: {numbers[1]}")

    key_to_find = 3
    if key_to_find in numbers:
        lines.append(f"Key {key_to_find} found with value: {numbers[key_to_find]}")
    else:
        lines.append(f"Key{key_to_find} Not found")

    def contents() -> list[str]:
        return [f"key: {key}, value {value}" for key, value in sorted(numbers.items())]

    lines.append("Map contents:")
    lines.extend(contents())
    lines.append(f"Size of map:{len(numbers)}")

    del numbers[2]
    lines.append("After erasing key 2:")
    lines.extend(contents())

    numbers.clear()
    lines.append(f"Size of map:{len(numbers)}")
    return lines


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group words made of the same letters, ordered by their sorted letters."""
    groups: dict[str, list[str]] = defaultdict(list)
    for word in strs:
        groups["".join(sorted(word))].append(word)
    return [groups[key] for key in sorted(groups)]


def sorted_frequencies(values: Iterable[int]) -> list[tuple[int, int]]:
    """Return ``(value, count)`` pairs in ascending order of value."""
    return sorted(Counter(values).items())


def subarray_sum_count(nums: Sequence[int], k: int) -> int:
    """Count contiguous subarrays whose elements sum to ``k``."""
    seen: Counter[int] = Counter({0: 1})
    total = 0
    answer = 0
    for item in nums:
        total += item
        answer += seen[total - k]
        seen[total] += 1
    return answer


def subarrays_divisible_by(nums: Sequence[int], k: int) -> int:
    """Count contiguous subarrays whose sum is divisible by ``k``."""
    if k == 0:
        raise ValueError("k must not be zero")
    seen: Counter[int] = Counter({0: 1})
    remainder = 0
    answer = 0
    for item in nums:
        remainder = (remainder + item) % k
        answer += seen[remainder]
        seen[remainder] += 1
    return answer