"""Stack, queue, heap and set puzzles."""

from __future__ import annotations

import heapq
from collections import deque
from typing import Callable, Iterable, Iterator, Sequence

_SET_LOW = 1
_SET_HIGH = 20
_OPENERS = {")": "(", "]": "["}


def zero_sum(numbers: Iterable[int]) -> int:
    """Sum of the recorded numbers, where each 0 erases the latest one still kept."""
    stack: list[int] = []
    for number in numbers:
        if number == 0 and stack:
            stack.pop()
        else:
            stack.append(number)
    return sum(stack)


def josephus(n: int, k: int) -> list[int]:
    """Order in which people 1..n leave a circle when every k-th one is removed."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if k < 1:
        raise ValueError("k must be at least 1")
    circle = deque(range(1, n + 1))
    order = []
    while circle:
        circle.rotate(-(k - 1))
        order.append(circle.popleft())
    return order


def last_card(n: int) -> int:
    """Card left after repeatedly discarding the top card and moving the next to the bottom."""
    if n < 1:
        raise ValueError("n must be at least 1")
    deck = deque(range(1, n + 1))
    while len(deck) > 1:
        deck.popleft()
        deck.append(deck.popleft())
    return deck[0]


def min_heap_run(values: Iterable[int]) -> list[int]:
    """Push positive values; for each other value pop the minimum, or report 0 if empty."""
    heap: list[int] = []
    popped = []
    for value in values:
        if value > 0:
            heapq.heappush(heap, value)
        else:
            popped.append(heapq.heappop(heap) if heap else 0)
    return popped


def printer_queue_position(priorities: Sequence[int], target: int) -> int:
    """At which turn the document at index ``target`` is printed."""
    if not 0 <= target < len(priorities):
        raise IndexError(f"document {target} is not in the queue")
    queue = deque(enumerate(priorities))
    highest = iter(sorted(priorities, reverse=True))
    top = next(highest)
    printed = 0
    while queue:
        index, priority = queue.popleft()
        if priority != top:
            queue.append((index, priority))
            continue
        printed += 1
        if index == target:
            return printed
        top = next(highest)
    raise AssertionError("target document was never printed")


class SmallSet:
    """A set restricted to the integers 1 through 20."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: set[int] = set()
        for value in values:
            self.add(value)

    @staticmethod
    def _validate(x: int) -> int:
        if not _SET_LOW <= x <= _SET_HIGH:
            raise ValueError(f"element {x} is outside {_SET_LOW}..{_SET_HIGH}")
        return x

    def add(self, x: int) -> None:
        """Insert x."""
        self._items.add(self._validate(x))

    def remove(self, x: int) -> None:
        """Drop x if present."""
        self._items.discard(self._validate(x))

    def check(self, x: int) -> bool:
        """Whether x is present."""
        return self._validate(x) in self._items

    def toggle(self, x: int) -> None:
        """Remove x if present, otherwise add it."""
        self._items ^= {self._validate(x)}

    def fill(self) -> None:
        """Make the set hold every allowed element."""
        self._items = set(range(_SET_LOW, _SET_HIGH + 1))

    def clear(self) -> None:
        """Empty the set."""
        self._items.clear()

    def apply(self, command: str, x: int | None = None) -> bool | None:
        """Run a named command; ``check`` returns its answer, the others None."""
        if command == "all":
            self.fill()
            return None
        if command == "empty":
            self.clear()
            return None
        actions: dict[str, Callable[[int], bool | None]] = {
            "add": self.add,
            "remove": self.remove,
            "check": self.check,
            "toggle": self.toggle,
        }
        if command not in actions:
            raise ValueError(f"unknown command: {command!r}")
        if x is None:
            raise ValueError(f"command {command!r} needs an element")
        return actions[command](x)

    def __contains__(self, x: object) -> bool:
        return x in self._items

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._items))

    def __len__(self) -> int:
        return len(self._items)


def _brackets_match(text: str, closers: dict[str, str]) -> bool:
    openers = set(closers.values())
    stack: list[str] = []
    for char in text:
        if char in openers:
            stack.append(char)
        elif char in closers:
            if not stack or stack[-1] != closers[char]:
                return False
            stack.pop()
    return not stack


def is_balanced(line: str) -> bool:
    """Whether round and square brackets in the line are properly nested."""
    return _brackets_match(line, _OPENERS)


def is_vps(text: str) -> bool:
    """Whether the parentheses in the text form a valid parenthesis string."""
    return _brackets_match(text, {")": "("})