"""Dictionary lookups and counting by category."""

from __future__ import annotations

import math
from collections import Counter
from typing import Iterable


class Pokedex:
    """Two-way lookup between names and their 1-based numbers."""

    def __init__(self, names: Iterable[str]) -> None:
        self._names = list(names)
        self._numbers = {name: number for number, name in enumerate(self._names, 1)}

    def lookup(self, query: str) -> str | int:
        """Name for a numeric query, number for a name."""
        if query[:1].isdigit():
            number = int(query)
            if not 1 <= number <= len(self._names):
                raise KeyError(f"no entry numbered {number}")
            return self._names[number - 1]
        try:
            return self._numbers[query]
        except KeyError:
            raise KeyError(f"no entry named {query!r}") from None

    def __len__(self) -> int:
        return len(self._names)


def password_lookup(
    entries: Iterable[tuple[str, str]], sites: Iterable[str]
) -> list[str]:
    """Stored credential for each site; the first entry for a site wins."""
    stored: dict[str, str] = {}
    for site, credential in entries:
        stored.setdefault(site, credential)
    found = []
    for site in sites:
        if site not in stored:
            raise KeyError(f"no entry for site {site!r}")
        found.append(stored[site])
    return found


def outfit_count(clothes: Iterable[tuple[str, str]]) -> int:
    """Outfits of at most one item per kind, wearing at least one item."""
    per_kind = Counter(kind for _, kind in clothes)
    return math.prod(count + 1 for count in per_kind.values()) - 1