"""Digit dynamic programming over integer ranges."""

from __future__ import annotations

from collections import defaultdict


def _check_range(a: int, b: int) -> None:
    if a < 0:
        raise ValueError("range must start at a non-negative number")
    if a > b:
        raise ValueError("range start must not exceed its end")


def _interesting_upto(limit: int) -> int:
    """Count ``1..limit`` whose digit product is divisible by their digit sum."""
    if limit <= 0:
        return 0
    digits = [int(ch) for ch in str(limit)]
    length = len(digits)
    total = 0
    for target in range(1, 9 * length + 1):
        states: dict[tuple[int, int, bool, bool], int] = {(0, 1 % target, True, False): 1}
        for pos, bound in enumerate(digits):
            remaining = length - pos - 1
            following: defaultdict[tuple[int, int, bool, bool], int] = defaultdict(int)
            for (digit_sum, product, tight, started), ways in states.items():
                for d in range((bound if tight else 9) + 1):
                    new_sum = digit_sum + d
                    if new_sum > target or target - new_sum > 9 * remaining:
                        continue
                    if started or d:
                        key = (new_sum, product * d % target, tight and d == bound, True)
                    else:
                        key = (new_sum, product, tight and d == bound, False)
                    following[key] += ways
            states = following
        total += sum(
            ways
            for (digit_sum, product, _, started), ways in states.items()
            if started and digit_sum == target and product == 0
        )
    return total


def count_interesting(a: int, b: int) -> int:
    """Count integers in ``[a, b]`` whose digit product is divisible by their digit sum."""
    _check_range(a, b)
    return _interesting_upto(b) - _interesting_upto(a - 1)


def _no_equal_adjacent_upto(limit: int) -> int:
    """Count ``0..limit`` that have no two equal adjacent digits."""
    if limit < 0:
        return 0
    digits = [int(ch) for ch in str(limit)]
    states: dict[tuple[int | None, bool], int] = {(None, True): 1}
    for bound in digits:
        following: defaultdict[tuple[int | None, bool], int] = defaultdict(int)
        for (previous, tight), ways in states.items():
            for d in range((bound if tight else 9) + 1):
                if previous is not None and d == previous:
                    continue
                current = None if previous is None and d == 0 else d
                following[(current, tight and d == bound)] += ways
        states = following
    return sum(states.values())


def count_no_equal_adjacent(a: int, b: int) -> int:
    """Count integers in ``[a, b]`` with no two equal adjacent digits."""
    _check_range(a, b)
    return _no_equal_adjacent_upto(b) - _no_equal_adjacent_upto(a - 1)