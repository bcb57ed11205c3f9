"""Small problems solved by recursion."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from functools import lru_cache


def repeat_line(text: str, n: int) -> list[str]:
    """Return ``text`` repeated ``n`` times, one entry per line."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return []
    return [text, *repeat_line(text, n - 1)]


def countdown(n: int) -> list[int]:
    """Return the numbers from ``n`` down to 1."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return []
    return [n, *countdown(n - 1)]


def max_element(values: Sequence[int]) -> int:
    """Return the largest element of a non-empty sequence."""
    if not values:
        raise ValueError("max_element() of an empty sequence")
    last = len(values) - 1

    def largest_from(index: int) -> int:
        if index == last:
            return values[index]
        return max(values[index], largest_from(index + 1))

    return largest_from(0)


def occurrences(values: Sequence[int], target: int) -> list[int]:
    """Return every index at which ``target`` occurs."""

    def found_from(index: int) -> list[int]:
        if index >= len(values):
            return []
        rest = found_from(index + 1)
        return [index, *rest] if values[index] == target else rest

    return found_from(0)


def power(base: int, exponent: int) -> int:
    """Raise ``base`` to a non-negative integer ``exponent``."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    if exponent == 0:
        return 1
    return base * power(base, exponent - 1)


def recursive_sum(values: Sequence[int]) -> int:
    """Return the sum of a non-empty sequence."""
    if not values:
        raise ValueError("recursive_sum() of an empty sequence")
    last = len(values) - 1

    def total_from(index: int) -> int:
        if index == last:
            return values[index]
        return values[index] + total_from(index + 1)

    return total_from(0)


def digit_sum(n: int) -> int:
    """Return the sum of the decimal digits of ``n``; negative input gives a negative sum."""
    if n < 0:
        return -digit_sum(-n)
    if n <= 9:
        return n
    return digit_sum(n // 10) + n % 10


def multiplication_table(n: int) -> list[int]:
    """Return ``n`` multiplied by 1 through 10."""

    def row_from(factor: int) -> list[int]:
        if factor == 11:
            return []
        return [n * factor, *row_from(factor + 1)]

    return row_from(1)


@lru_cache(maxsize=None)
def _fibonacci(n: int) -> int:
    if n in (1, 2):
        return n - 1
    return _fibonacci(n - 1) + _fibonacci(n - 2)


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci term, counting 0 as the first."""
    if n < 1:
        raise ValueError("n must be at least 1")
    return _fibonacci(n)


def walk(values: Sequence[int]) -> Iterator[int]:
    """Yield the elements one by one, front to back."""

    def from_index(index: int) -> Iterator[int]:
        if index == len(values):
            return
        yield values[index]
        yield from from_index(index + 1)

    yield from from_index(0)