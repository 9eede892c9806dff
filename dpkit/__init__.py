"""Dynamic-programming solvers, a range-maximum segment tree and modular arithmetic helpers."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "segtree", "counting", "optimization", "bitmask", "digits"]