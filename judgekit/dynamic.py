"""Dynamic-programming recurrences and prefix sums."""

from __future__ import annotations

import itertools
import math
from typing import Iterable, Sequence

_MODULUS = 10007


def _check_range(n: int, low: int, high: int) -> None:
    if not low <= n <= high:
        raise ValueError(f"n must lie between {low} and {high}, got {n}")


def fibonacci_calls(n: int) -> tuple[int, int]:
    """How often naive recursive fibonacci(n) reaches fibonacci(0) and fibonacci(1)."""
    _check_range(n, 0, 40)
    zeros, ones = 1, 0
    for _ in range(n):
        zeros, ones = ones, zeros + ones
    return zeros, ones


def _linear_recurrence(n: int, first: int, second: int, weight: int) -> int:
    if n == 0:
        return 0
    previous, current = first, second
    if n == 1:
        return previous
    for _ in range(n - 2):
        previous, current = current, (current + weight * previous) % _MODULUS
    return current


def tilings_2xn(n: int) -> int:
    """Ways to tile a 2 x n strip with 1x2 and 2x1 tiles, modulo 10007."""
    _check_range(n, 0, 1000)
    return _linear_recurrence(n, 1, 2, 1)


def tilings_2xn_with_squares(n: int) -> int:
    """Ways to tile a 2 x n strip with dominoes and 2x2 squares, modulo 10007."""
    _check_range(n, 0, 1000)
    return _linear_recurrence(n, 1, 3, 2)


def min_operations_to_one(n: int) -> int:
    """Fewest steps (divide by 3, divide by 2, subtract 1) taking n to 1."""
    if n < 1:
        raise ValueError("n must be at least 1")
    steps = [0, 0]
    for value in range(2, n + 1):
        best = steps[value - 1] + 1
        if value % 3 == 0:
            best = min(best, steps[value // 3] + 1)
        if value % 2 == 0:
            best = min(best, steps[value // 2] + 1)
        steps.append(best)
    return steps[n]


def min_square_terms(n: int) -> int:
    """Fewest perfect squares that sum to n."""
    _check_range(n, 0, 50000)
    terms = [0]
    for value in range(1, n + 1):
        terms.append(
            1 + min(terms[value - root * root] for root in range(1, math.isqrt(value) + 1))
        )
    return terms[n]


def count_sums_123(n: int) -> int:
    """Ordered ways to write n as a sum of 1, 2 and 3."""
    _check_range(n, 0, 11)
    ways = [0, 1, 2, 4]
    for value in range(4, n + 1):
        ways.append(ways[value - 1] + ways[value - 2] + ways[value - 3])
    return ways[n]


def padovan(n: int) -> int:
    """Side of the n-th triangle in the Padovan spiral."""
    _check_range(n, 0, 100)
    sides = [0, 1, 1, 1, 2, 2]
    for value in range(6, n + 1):
        sides.append(sides[value - 1] + sides[value - 5])
    return sides[n]


def range_sums(
    values: Sequence[int], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """Sums of ``values[i-1:j]`` for each 1-based inclusive query ``(i, j)``."""
    prefix = [0, *itertools.accumulate(values)]
    sums = []
    for first, last in queries:
        if not 1 <= first <= last <= len(values):
            raise IndexError(f"query ({first}, {last}) is out of range")
        sums.append(prefix[last] - prefix[first - 1])
    return sums