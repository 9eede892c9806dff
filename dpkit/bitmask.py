"""Dynamic programming over bit masks: group connection, domino tilings, palindromes."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterator, Sequence
from functools import lru_cache

TILING_MOD = 1000000007

_SYMBOLS = frozenset("01?")


def min_cost_connect_groups(cost: Sequence[Sequence[int]]) -> int:
    """Return the least total cost that connects every point of both groups.

    ``cost[i][j]`` is the price of joining point ``i`` of the first group to
    point ``j`` of the second; every point must take part in at least one link.
    """
    rows = [list(row) for row in cost]
    if not rows or not rows[0]:
        raise ValueError("cost matrix must be non-empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("cost matrix must be rectangular")

    cheapest = [min(column) for column in zip(*rows)]
    best: dict[int, int] = {0: 0}
    for row in rows:
        following: dict[int, int] = {}
        for mask, spent in best.items():
            for j, price in enumerate(row):
                target = mask | (1 << j)
                total = spent + price
                if total < following.get(target, total + 1):
                    following[target] = total
        best = following

    def finish(mask: int, spent: int) -> int:
        return spent + sum(
            price for j, price in enumerate(cheapest) if not (mask >> j) & 1
        )

    return min(finish(mask, spent) for mask, spent in best.items())


@lru_cache(maxsize=None)
def _next_masks(mask: int, height: int) -> tuple[int, ...]:
    """Profiles of the following column reachable from ``mask``."""

    def fill(i: int, following: int) -> Iterator[int]:
        if i >= height:
            yield following
            return
        if (mask >> i) & 1:
            yield from fill(i + 1, following)
            return
        yield from fill(i + 1, following | (1 << i))
        if i + 1 < height and not (mask >> (i + 1)) & 1:
            yield from fill(i + 2, following)

    return tuple(fill(0, 0))


def count_domino_tilings(n: int, m: int) -> int:
    """Count tilings of an ``n`` by ``m`` grid with 1x2 dominoes, modulo 1e9+7."""
    if n < 0 or m < 0:
        raise ValueError("grid sides must be non-negative")
    ways: dict[int, int] = {0: 1}
    for _ in range(m):
        following: defaultdict[int, int] = defaultdict(int)
        for mask, count in ways.items():
            for target in _next_masks(mask, n):
                following[target] = (following[target] + count) % TILING_MOD
        ways = following
    return ways.get(0, 0) % TILING_MOD


def _is_palindrome(text: str) -> bool:
    return text == text[::-1]


def can_avoid_palindromes(s: str) -> bool:
    """Tell whether every ``?`` in ``s`` can become 0 or 1 so that no
    substring of length 5 or 6 is a palindrome."""
    if any(ch not in _SYMBOLS for ch in s):
        raise ValueError("only '0', '1' and '?' are allowed")
    states = {""}
    for ch in s:
        choices = "01" if ch == "?" else ch
        following = set()
        for tail in states:
            for choice in choices:
                window = (tail + choice)[-6:]
                if len(window) >= 5 and _is_palindrome(window[-5:]):
                    continue
                if len(window) == 6 and _is_palindrome(window):
                    continue
                following.add(window)
        states = following
        if not states:
            return False
    return True