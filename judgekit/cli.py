"""Command line entry point: solve a named problem from whitespace-separated stdin."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Iterator, Sequence

from judgekit.dynamic import count_sums_123
from judgekit.mathematics import fizzbuzz_next, primes_between
from judgekit.structures import (
    is_vps,
    josephus,
    last_card,
    min_heap_run,
    zero_sum,
)


def _take(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def _take_int(tokens: Iterator[str]) -> int:
    token = _take(tokens)
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"expected an integer, got {token!r}") from None


def _take_ints(tokens: Iterator[str]) -> list[int]:
    count = _take_int(tokens)
    return [_take_int(tokens) for _ in range(count)]


def _fizzbuzz(tokens: Iterator[str]) -> str:
    return fizzbuzz_next([_take(tokens) for _ in range(3)])


def _josephus(tokens: Iterator[str]) -> str:
    n, k = _take_int(tokens), _take_int(tokens)
    return "<" + ", ".join(map(str, josephus(n, k))) + ">"


def _zero_sum(tokens: Iterator[str]) -> str:
    return str(zero_sum(_take_ints(tokens)))


def _last_card(tokens: Iterator[str]) -> str:
    return str(last_card(_take_int(tokens)))


def _parentheses(tokens: Iterator[str]) -> str:
    count = _take_int(tokens)
    return "\n".join("YES" if is_vps(_take(tokens)) else "NO" for _ in range(count))


def _heap(tokens: Iterator[str]) -> str:
    return "\n".join(map(str, min_heap_run(_take_ints(tokens))))


def _primes(tokens: Iterator[str]) -> str:
    low, high = _take_int(tokens), _take_int(tokens)
    return "\n".join(map(str, primes_between(low, high)))


def _sums_123(tokens: Iterator[str]) -> str:
    return "\n".join(str(count_sums_123(n)) for n in _take_ints(tokens))


_PROBLEMS: dict[str, Callable[[Iterator[str]], str]] = {
    "fizzbuzz": _fizzbuzz,
    "heap": _heap,
    "josephus": _josephus,
    "last-card": _last_card,
    "parentheses": _parentheses,
    "primes": _primes,
    "sums-123": _sums_123,
    "zero-sum": _zero_sum,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Read the chosen problem's input from stdin and print its answer."""
    parser = argparse.ArgumentParser(
        prog="judgekit", description="Solve a puzzle from input read on stdin."
    )
    parser.add_argument("problem", choices=sorted(_PROBLEMS))
    args = parser.parse_args(argv)

    tokens = iter(sys.stdin.read().split())
    try:
        output = _PROBLEMS[args.problem](tokens)
    except ValueError as exc:
        print(f"judgekit: {exc}", file=sys.stderr)
        return 1
    if output:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())