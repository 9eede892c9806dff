"""Minimisation and maximisation problems solved with dynamic programming."""

from __future__ import annotations

import string
from functools import lru_cache
from itertools import chain

_TARGET_LIMIT = 1023


def min_deletions_to_even(s: str) -> int:
    """Return the fewest deletions that leave ``s`` made of equal adjacent pairs."""
    if any(ch not in string.ascii_lowercase for ch in s):
        raise ValueError("only lowercase latin letters are allowed")
    n = len(s)
    best = [0] * (n + 1)
    next_at: dict[str, int] = {}
    for i in reversed(range(n)):
        ch = s[i]
        partner = next_at.get(ch)
        paired = best[partner + 1] + 2 if partner is not None else 0
        best[i] = max(best[i + 1], paired)
        next_at[ch] = i
    return n - best[0]


def min_total_cost(a: list[int], b: list[int]) -> int:
    """Minimise the sum over pairs of ``(a_i+a_j)**2 + (b_i+b_j)**2`` over swaps of ``a_i, b_i``."""
    if len(a) != len(b):
        raise ValueError("sequences must have equal length")
    if any(x < 0 for x in chain(a, b)):
        raise ValueError("values must be non-negative")
    n = len(a)
    if n <= 1:
        return 0
    base = (n - 2) * sum(x * x for x in chain(a, b))
    total = sum(a) + sum(b)
    reachable = 1
    for x, y in zip(a, b):
        reachable = (reachable << x) | (reachable << y)
    best = min(
        s * s + (total - s) ** 2 for s in range(total + 1) if (reachable >> s) & 1
    )
    return base + best


def operation_costs(limit: int) -> dict[int, int]:
    """Return the fewest ``v += v // x`` steps from 1 to each value in ``1..limit``."""
    if limit < 1:
        raise ValueError("limit must be positive")
    costs = {1: 0}
    for value in range(1, limit + 1):
        step = costs[value] + 1
        for divisor in range(1, value + 1):
            target = value + value // divisor
            if target <= limit and step < costs.get(target, step + 1):
                costs[target] = step
    return costs


@lru_cache(maxsize=1)
def _target_costs() -> dict[int, int]:
    return operation_costs(_TARGET_LIMIT)


def max_coins(targets: list[int], rewards: list[int], k: int) -> int:
    """Return the largest reward collectable with at most ``k`` operations."""
    if len(targets) != len(rewards):
        raise ValueError("targets and rewards must have equal length")
    if k < 0:
        raise ValueError("k must be non-negative")
    costs = _target_costs()
    try:
        weights = [costs[t] for t in targets]
    except KeyError as exc:
        raise ValueError(f"target {exc.args[0]} outside 1..{_TARGET_LIMIT}") from None
    k = min(k, sum(weights))
    best = [0] * (k + 1)
    for weight, reward in zip(weights, rewards):
        for capacity in range(k, weight - 1, -1):
            best[capacity] = max(best[capacity], best[capacity - weight] + reward)
    return best[k]