"""Sorting, ranking and lookup problems."""

from __future__ import annotations

import itertools
from collections import Counter
from operator import attrgetter
from typing import Iterable, NamedTuple


class Member(NamedTuple):
    """A site member with an age and a name."""

    age: int
    name: str


def sort_members(members: Iterable[tuple[int, str]]) -> list[Member]:
    """Sort members by age, keeping the join order among equal ages."""
    return sorted((Member(age, name) for age, name in members), key=attrgetter("age"))


def total_wait_time(times: Iterable[int]) -> int:
    """Least total of waiting plus withdrawal times at a single ATM."""
    return sum(itertools.accumulate(sorted(times)))


def sort_points_xy(points: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Sort points by x, then by y."""
    return sorted((x, y) for x, y in points)


def sort_points_yx(points: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Sort points by y, then by x."""
    return sorted(((x, y) for x, y in points), key=lambda point: (point[1], point[0]))


def sort_numbers(numbers: Iterable[int]) -> list[int]:
    """Return the numbers in ascending order."""
    return sorted(numbers)


def compress_coordinates(values: Iterable[int]) -> list[int]:
    """Replace each value by the count of distinct values smaller than it."""
    values = list(values)
    rank = {value: index for index, value in enumerate(sorted(set(values)))}
    return [rank[value] for value in values]


def bulk_ranks(bodies: Iterable[tuple[int, int]]) -> list[int]:
    """Rank each (weight, height) by how many are larger in both, plus one."""
    bodies = list(bodies)
    return [
        1 + sum(1 for other_w, other_h in bodies if weight < other_w and height < other_h)
        for weight, height in bodies
    ]


def card_counts(cards: Iterable[int], queries: Iterable[int]) -> list[int]:
    """How many of the cards carry each queried number."""
    counts = Counter(cards)
    return [counts[query] for query in queries]


def membership(values: Iterable[int], queries: Iterable[int]) -> list[bool]:
    """Whether each queried number appears among the values."""
    present = set(values)
    return [query in present for query in queries]


def unheard_unseen(unheard: Iterable[str], unseen: Iterable[str]) -> list[str]:
    """Names that are both unheard and unseen, in dictionary order."""
    heard_of = set(unheard)
    return sorted(name for name in unseen if name in heard_of)