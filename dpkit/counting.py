"""Counting problems solved with dynamic programming modulo a prime."""

from __future__ import annotations

from dpkit.arithmetic import Binomial

PALINDROME_MOD = 1000000007
SUBSEQUENCE_MOD = 998244353
WINNING_MOD = 1000000007


def _is_palindrome(n: int) -> bool:
    digits = str(n)
    return digits == digits[::-1]


def palindrome_sum_counts(limit: int) -> list[int]:
    """Return ``ways`` where ``ways[n]`` counts multisets of palindromes summing to ``n``."""
    if limit < 0:
        raise ValueError("limit must be non-negative")
    ways = [1] + [0] * limit
    for part in filter(_is_palindrome, range(1, limit + 1)):
        for total in range(part, limit + 1):
            ways[total] = (ways[total] + ways[total - part]) % PALINDROME_MOD
    return ways


def count_palindrome_sums(n: int) -> int:
    """Count the ways to write ``n`` as an unordered sum of positive palindromes."""
    return palindrome_sum_counts(n)[n]


def count_good_subsequences(values: list[int]) -> int:
    """Count non-empty subsequences that split into good arrays.

    A good array has a positive first element equal to its length minus one.
    """
    n = len(values)
    binomial = Binomial(max(n - 1, 0), SUBSEQUENCE_MOD)
    ways = [0] * (n + 1)
    ways[n] = 1
    for start in reversed(range(n)):
        head = values[start]
        if head <= 0:
            continue
        ways[start] = (
            sum(
                binomial.ncr(end - start - 1, head) * ways[end]
                for end in range(start + head + 1, n + 1)
            )
            % SUBSEQUENCE_MOD
        )
    return sum(ways[:n]) % SUBSEQUENCE_MOD


def count_winning_arrays(n: int, k: int) -> int:
    """Count arrays of ``n`` values below ``2**k`` whose AND is at least their XOR."""
    if n < 1:
        raise ValueError("n must be positive")
    if k < 0:
        raise ValueError("k must be non-negative")
    if k == 0:
        return 1
    half = pow(2, n - 1, WINNING_MOD)
    if n % 2 == 1:
        return pow(half + 1, k, WINNING_MOD)
    tie = (half - 1) % WINNING_MOD
    full = pow(2, n, WINNING_MOD)
    total = pow(tie, k, WINNING_MOD)
    total += sum(
        pow(tie, bit - 1, WINNING_MOD) * pow(full, k - bit, WINNING_MOD)
        for bit in range(1, k + 1)
    )
    return total % WINNING_MOD