"""Segment tree for range-minimum queries with point updates."""

from __future__ import annotations

from collections.abc import Sequence

DEFAULT = 10**9
"""Value of positions never assigned, and the neutral element of min."""


class MinSegmentTree:
    """Point assignment and range minimum over 0-indexed positions."""

    def __init__(self, values: int | Sequence[int]) -> None:
        if isinstance(values, int):
            if values < 1:
                raise ValueError("size must be positive")
            self.n = values
            self._tree = [DEFAULT] * (2 * self.n - 1)
            return
        data = list(values)
        if not data:
            raise ValueError("values must not be empty")
        self.n = len(data)
        self._tree = [DEFAULT] * (2 * self.n - 1)
        self._build(data, 0, 0, self.n - 1)

    def __len__(self) -> int:
        return self.n

    @staticmethod
    def _split(tidx: int, tl: int, tr: int) -> tuple[int, int, int]:
        tm = (tl + tr) // 2
        return tm, tidx + 1, tidx + 2 * (tm - tl + 1)

    def _build(self, data: list[int], tidx: int, tl: int, tr: int) -> None:
        if tl == tr:
            self._tree[tidx] = data[tl]
            return
        tm, lc, rc = self._split(tidx, tl, tr)
        self._build(data, lc, tl, tm)
        self._build(data, rc, tm + 1, tr)
        self._tree[tidx] = min(self._tree[lc], self._tree[rc])

    def point_update(self, index: int, value: int) -> None:
        """Set the value at index."""
        if not 0 <= index < self.n:
            raise IndexError(f"position {index} outside [0, {self.n - 1}]")
        self._update(index, value, 0, 0, self.n - 1)

    def _update(self, index: int, value: int, tidx: int, tl: int, tr: int) -> None:
        if tl == tr:
            self._tree[tidx] = value
            return
        tm, lc, rc = self._split(tidx, tl, tr)
        if index <= tm:
            self._update(index, value, lc, tl, tm)
        else:
            self._update(index, value, rc, tm + 1, tr)
        self._tree[tidx] = min(self._tree[lc], self._tree[rc])

    def range_query(self, l: int, r: int) -> int:
        """Minimum over positions l..r inclusive."""
        if not 0 <= l <= r < self.n:
            raise IndexError(f"range [{l}, {r}] outside [0, {self.n - 1}]")
        return self._query(l, r, 0, 0, self.n - 1)

    def _query(self, l: int, r: int, tidx: int, tl: int, tr: int) -> int:
        if l > tr or r < tl or l > r:
            return DEFAULT
        if l <= tl and tr <= r:
            return self._tree[tidx]
        tm, lc, rc = self._split(tidx, tl, tr)
        return min(
            self._query(l, min(r, tm), lc, tl, tm),
            self._query(max(l, tm + 1), r, rc, tm + 1, tr),
        )