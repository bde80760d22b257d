"""Arithmetic and number-theory puzzles."""

from __future__ import annotations

import itertools
import math
import re
from typing import Iterable, NamedTuple, Sequence

_FIZZBUZZ_WORDS = frozenset({"Fizz", "Buzz", "FizzBuzz"})
_EXPRESSION = re.compile(r"\d+(?:[+-]\d+)*")


class SupplyOrder(NamedTuple):
    """Bundles of shirts and pens to order for a group of participants."""

    shirt_bundles: int
    pen_bundles: int
    single_pens: int


def _fizzbuzz_word(number: int) -> str:
    if number % 15 == 0:
        return "FizzBuzz"
    if number % 3 == 0:
        return "Fizz"
    if number % 5 == 0:
        return "Buzz"
    return str(number)


def fizzbuzz_next(words: Sequence[str]) -> str:
    """Return the FizzBuzz word that follows three consecutive ones."""
    if len(words) != 3:
        raise ValueError("expected exactly three consecutive words")
    for distance, word in zip((3, 2, 1), words):
        if word in _FIZZBUZZ_WORDS:
            continue
        try:
            number = int(word)
        except ValueError as exc:
            raise ValueError(f"not a FizzBuzz word: {word!r}") from exc
        return _fizzbuzz_word(number + distance)
    raise ValueError("three consecutive words always hold a number")


def order_supplies(
    participants: int, sizes: Iterable[int], shirt_bundle: int, pen_bundle: int
) -> SupplyOrder:
    """Count shirt bundles covering every size, and pen bundles plus single pens."""
    if shirt_bundle <= 0 or pen_bundle <= 0:
        raise ValueError("bundle sizes must be positive")
    shirts = sum(-(-wanted // shirt_bundle) for wanted in sizes if wanted)
    pen_bundles, single_pens = divmod(participants, pen_bundle)
    return SupplyOrder(shirts, pen_bundles, single_pens)


def nth_apocalypse_number(n: int) -> int:
    """Return the n-th smallest number whose decimal digits contain ``666``."""
    if n < 1:
        raise ValueError("n must be at least 1")
    matches = (value for value in itertools.count(666) if "666" in str(value))
    return next(itertools.islice(matches, n - 1, None))


def factorial_trailing_zeros(n: int) -> int:
    """Count the trailing zeros of ``n!``."""
    zeros = 0
    power = 5
    while n // power >= 1:
        zeros += n // power
        power *= 5
    return zeros


def primes_between(low: int, high: int) -> list[int]:
    """Return the primes in the closed range ``[low, high]``, ascending."""
    if high < 2:
        return []
    sieve = bytearray([1]) * (high + 1)
    sieve[0] = sieve[1] = 0
    for factor in range(2, math.isqrt(high) + 1):
        if sieve[factor]:
            start = factor * factor
            sieve[start::factor] = bytes(len(range(start, high + 1, factor)))
    return [value for value in range(max(low, 2), high + 1) if sieve[value]]


def sugar_bags(weight: int) -> int | None:
    """Fewest 5 kg and 3 kg bags that hold exactly ``weight``, or None if none do."""
    if weight < 0:
        raise ValueError("weight must not be negative")
    for fives in range(weight // 5, -1, -1):
        threes, rest = divmod(weight - 5 * fives, 3)
        if rest == 0:
            return fives + threes
    return None


def minimize_expression(expression: str) -> int:
    """Smallest value of a ``+``/``-`` expression once parentheses may be added."""
    if not _EXPRESSION.fullmatch(expression):
        raise ValueError(f"malformed expression: {expression!r}")
    head, minus, tail = expression.partition("-")
    positive = sum(int(term) for term in head.split("+"))
    negative = sum(int(term) for term in re.split(r"[+-]", tail)) if minus else 0
    return positive - negative


def _round_half_away(value: float) -> int:
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return whole if value >= 0 else -whole


def trimmed_mean(opinions: Iterable[int]) -> int:
    """Rounded mean after dropping the top and bottom 15% of the opinions."""
    ordered = sorted(opinions)
    count = len(ordered)
    if count == 0:
        return 0
    cut = _round_half_away(count * 0.15)
    kept = ordered[cut : count - cut]
    return _round_half_away(sum(kept) / len(kept))