"""Fenwick (binary indexed) tree over 0-indexed positions."""

from __future__ import annotations

from collections.abc import Sequence


class Fenwick:
    """Prefix sums with point updates, plus helpers for frequency tables.

    ``total`` tracks the running count used by count_gt: it starts at zero
    for an empty tree, or at the number of initial values, and follows every
    add.
    """

    def __init__(self, size_or_values: int | Sequence[int]) -> None:
        if isinstance(size_or_values, int):
            self.n = size_or_values
            self.tree = [0] * self.n
            self.total = 0
        else:
            values = list(size_or_values)
            self.n = len(values)
            self.tree = values
            for i in range(self.n):
                parent = i | (i + 1)
                if parent < self.n:
                    self.tree[parent] += self.tree[i]
            self.total = self.n

    def __len__(self) -> int:
        return self.n

    def prefix_sum(self, r: int) -> int:
        """Sum of positions 0..r; zero when r is negative."""
        r = min(r, self.n - 1)
        res = 0
        while r >= 0:
            res += self.tree[r]
            r = (r & (r + 1)) - 1
        return res

    def sum(self, l: int, r: int) -> int:
        """Sum of positions l..r inclusive."""
        return self.prefix_sum(r) - self.prefix_sum(l - 1)

    def _update(self, idx: int, delta: int) -> None:
        while idx < self.n:
            self.tree[idx] += delta
            idx |= idx + 1

    def add(self, idx: int, delta: int) -> None:
        """Add delta at position idx."""
        if not 0 <= idx < self.n:
            raise IndexError("position out of range")
        self.total += delta
        self._update(idx, delta)

    def range_add(self, l: int, r: int, delta: int) -> None:
        """Add delta to every point of l..r; read points back with prefix_sum."""
        if l > r:
            return
        if l < 0 or r >= self.n:
            raise IndexError("range out of bounds")
        self._update(l, delta)
        self._update(r + 1, -delta)

    def count_lt(self, x: int) -> int:
        """Weight stored at positions below x."""
        return self.prefix_sum(x - 1)

    def count_gt(self, x: int) -> int:
        """Weight stored at positions above x."""
        return self.total - self.prefix_sum(x)