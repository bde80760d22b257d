"""Parametric and exhaustive search problems."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, NamedTuple, Sequence

_MAX_HEIGHT = 256


class Flattening(NamedTuple):
    """Time taken and height reached when levelling the ground."""

    time: int
    height: int


def _cable_pieces(cables: Sequence[int], length: int) -> int:
    return sum(cable // length for cable in cables)


def max_cable_length(cables: Iterable[int], needed: int) -> int:
    """Longest length at which the cables cut into at least ``needed`` pieces."""
    cables = list(cables)
    if not cables:
        raise ValueError("at least one cable is required")
    left, right = 1, max(cables)
    while left <= right:
        middle = (left + right) // 2
        if _cable_pieces(cables, middle) >= needed:
            left = middle + 1
        else:
            right = middle - 1
    return right


def _wood_above(trees: Sequence[int], height: int) -> int:
    return sum(tree - height for tree in trees if tree > height)


def max_cutter_height(trees: Iterable[int], needed: int) -> int:
    """Highest cutter setting that still yields at least ``needed`` wood."""
    trees = list(trees)
    best = 0
    left, right = 0, max(trees, default=0)
    while left <= right:
        middle = (left + right) // 2
        if _wood_above(trees, middle) >= needed:
            best = middle
            left = middle + 1
        else:
            right = middle - 1
    return best


def flatten_ground(ground: Iterable[Iterable[int]], blocks: int) -> Flattening:
    """Fastest way to level the ground; digging costs 2, placing costs 1.

    Among levels that take equally long, the highest one wins.
    """
    heights = Counter(cell for row in ground for cell in row)
    if any(not 0 <= height <= _MAX_HEIGHT for height in heights):
        raise ValueError(f"heights must lie between 0 and {_MAX_HEIGHT}")

    best: Flattening | None = None
    for level in range(_MAX_HEIGHT + 1):
        dug = sum((height - level) * n for height, n in heights.items() if height > level)
        placed = sum((level - height) * n for height, n in heights.items() if height < level)
        if blocks + dug - placed < 0:
            continue
        time = 2 * dug + placed
        if best is None or time <= best.time:
            best = Flattening(time, level)
    if best is None:
        raise ValueError("no level can be reached with the blocks at hand")
    return best