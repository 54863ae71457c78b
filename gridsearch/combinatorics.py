"""Counting and enumeration problems: coin change, subset sums, triplets, combinations."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import combinations


def coin_change_count(coins: Iterable[int], total: int) -> int:
    """Number of ways to make ``total`` from unlimited coins of the given values.

    The order of coins in a way does not matter. A total of 0 has exactly one way.
    """
    if total < 0:
        raise ValueError("total must not be negative")
    coin_values = list(coins)
    if any(coin <= 0 for coin in coin_values):
        raise ValueError("coin values must be positive")
    ways = [1] + [0] * total
    for coin in coin_values:
        for amount in range(coin, total + 1):
            ways[amount] += ways[amount - coin]
    return ways[total]


def is_subset_sum(values: Sequence[int], target: int) -> bool:
    """True when some subset of ``values`` adds up to ``target``.

    An element is only taken while it does not exceed what is left of the target.
    """
    items = list(values)

    def search(index: int, remaining: int) -> bool:
        if remaining == 0:
            return True
        if index == len(items):
            return False
        value = items[index]
        if value <= remaining and search(index + 1, remaining - value):
            return True
        return search(index + 1, remaining)

    return search(0, target)


def triplets_with_sum_limit(
    values: Iterable[int], limit: int
) -> list[tuple[int, int, int]]:
    """Triplets from the sorted values whose sum does not exceed ``limit``.

    Triplets come out in two-pointer order: for each first element and each
    second element, third elements from the largest down.
    """
    items = sorted(values)
    n = len(items)
    found: list[tuple[int, int, int]] = []
    for i, first in enumerate(items[:-2] if n > 2 else []):
        low, high = i + 1, n - 1
        while low < high:
            if first + items[low] + items[high] > limit:
                high -= 1
            else:
                found.extend(
                    (first, items[low], items[k]) for k in range(high, low, -1)
                )
                low += 1
    return found


def combine(n: int, k: int) -> list[list[int]]:
    """All k-element combinations of 1..n in lexicographic order."""
    if k < 0:
        return []
    return [list(combo) for combo in combinations(range(1, n + 1), k)]