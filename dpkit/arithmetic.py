"""Modular arithmetic: extended gcd, fast powers, inverses and binomials."""

from __future__ import annotations

from itertools import accumulate


def ext_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(d, x, y)`` such that ``a*x + b*y == d == gcd(a, b)``."""
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    return old_r, old_x, old_y


def power_mod(base: int, exponent: int, modulus: int) -> int:
    """Return ``base ** exponent`` reduced modulo ``modulus``."""
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    return pow(base, exponent, modulus)


def mod_inverse(a: int, modulus: int) -> int:
    """Return the inverse of ``a`` modulo ``modulus`` (0 when the modulus is 1)."""
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    if modulus == 1:
        return 0
    d, x, _ = ext_gcd(a % modulus, modulus)
    if d != 1:
        raise ValueError(f"{a} has no inverse modulo {modulus}")
    return x % modulus


class Binomial:
    """Factorials and binomial coefficients up to ``limit`` modulo a prime."""

    def __init__(self, limit: int, modulus: int) -> None:
        if limit < 0:
            raise ValueError("limit must be non-negative")
        if modulus < 2:
            raise ValueError("modulus must be a prime")
        self.limit = limit
        self.modulus = modulus
        self._fact = list(
            accumulate(range(1, limit + 1), lambda acc, i: acc * i % modulus, initial=1)
        )
        top_inverse = power_mod(self._fact[limit], modulus - 2, modulus)
        descending = accumulate(
            range(limit, 0, -1), lambda acc, i: acc * i % modulus, initial=top_inverse
        )
        self._inv_fact = list(descending)[::-1]

    def _check(self, n: int) -> None:
        if not 0 <= n <= self.limit:
            raise ValueError(f"n must lie in 0..{self.limit}, got {n}")

    def factorial(self, n: int) -> int:
        """Return ``n!`` modulo the modulus."""
        self._check(n)
        return self._fact[n]

    def ncr(self, n: int, r: int) -> int:
        """Return ``C(n, r)`` modulo the modulus; zero when ``r`` is outside ``0..n``."""
        self._check(n)
        if not 0 <= r <= n:
            return 0
        m = self.modulus
        return self._fact[n] * self._inv_fact[r] % m * self._inv_fact[n - r] % m