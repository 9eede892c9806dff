"""Segment tree answering range-maximum queries with point assignment."""

from __future__ import annotations


class MaxSegmentTree:
    """Point-assign, range-max tree over positions ``0..size-1``."""

    EMPTY = -(10**17)

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self.size = size
        self._tree = [self.EMPTY] * (4 * size)

    def update(self, index: int, value: int) -> None:
        """Set position ``index`` to ``value``."""
        if not 0 <= index < self.size:
            raise IndexError(f"index {index} out of range")
        self._update(index, value, 0, 0, self.size)

    def _update(self, index: int, value: int, node: int, lo: int, hi: int) -> None:
        if hi - lo == 1:
            self._tree[node] = value
            return
        mid = (lo + hi) // 2
        if index < mid:
            self._update(index, value, 2 * node + 1, lo, mid)
        else:
            self._update(index, value, 2 * node + 2, mid, hi)
        self._tree[node] = max(self._tree[2 * node + 1], self._tree[2 * node + 2])

    def query(self, left: int, right: int) -> int:
        """Return the maximum over ``[left, right)``, or ``EMPTY`` if nothing is set there."""
        return self._query(left, right, 0, 0, self.size)

    def _query(self, left: int, right: int, node: int, lo: int, hi: int) -> int:
        if lo >= left and hi <= right:
            return self._tree[node]
        if hi <= left or lo >= right:
            return self.EMPTY
        mid = (lo + hi) // 2
        return max(
            self._query(left, right, 2 * node + 1, lo, mid),
            self._query(left, right, 2 * node + 2, mid, hi),
        )