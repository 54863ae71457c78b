"""Small recursive number and sequence routines."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import groupby


def reverse_number(n: int) -> int:
    """The decimal digits of ``n`` in reverse order; 0 for non-positive ``n``."""
    if n <= 0:
        return 0
    return int(str(n)[::-1])


def power(base: int, exp: int) -> int:
    """``base`` raised to a non-negative ``exp`` by repeated squaring."""
    if exp < 0:
        raise ValueError("exponent must not be negative")
    if exp == 0:
        return 1
    half = power(base, exp // 2)
    return half * half if exp % 2 == 0 else base * half * half


def reverse_exponentiation(n: int) -> int:
    """``n`` raised to the number formed by reversing its digits."""
    return power(n, reverse_number(n))


def count_up(n: int) -> list[int]:
    """The numbers 1 through ``n``."""
    if n < 1:
        raise ValueError("n must be at least 1")
    return list(range(1, n + 1))


def array_sum(values: Sequence[int]) -> int:
    """Sum of the values."""
    return sum(values)


def evenly_divides(n: int) -> int:
    """How many of the non-zero digits of ``n`` divide ``n`` exactly."""
    return sum(1 for ch in str(abs(n)) if ch != "0" and n % int(ch) == 0) if n else 0


def factorial(n: int) -> int:
    """``n!`` for a non-negative ``n``."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def pivot_index(values: Sequence[int]) -> int:
    """First index whose left and right sums are equal, or -1 if there is none."""
    total = sum(values)
    left = 0
    for index, value in enumerate(values):
        if left == total - left - value:
            return index
        left += value
    return -1


def remove_consecutive_duplicates(text: str) -> str:
    """Collapse each run of repeated characters into a single character."""
    return "".join(char for char, _ in groupby(text))


def tower_of_hanoi_moves(n: int) -> int:
    """Number of moves needed to shift ``n`` discs in the Tower of Hanoi."""
    if n < 1:
        raise ValueError("there must be at least one disc")
    return 2**n - 1