"""Merge sort trees: smallest value not below x inside a range."""

from __future__ import annotations

from bisect import bisect_left, insort
from collections.abc import Sequence
from heapq import merge


def _split(tidx: int, tl: int, tr: int) -> tuple[int, int, int]:
    tm = tl + (tr - tl) // 2
    return tm, tidx + 1, tidx + 2 * (tm - tl + 1)


def _least_at_least(sorted_values: list[int], x: int) -> int | None:
    i = bisect_left(sorted_values, x)
    return sorted_values[i] if i < len(sorted_values) else None


def _smaller(a: int | None, b: int | None) -> int | None:
    if a is None:
        return b
    if b is None:
        return a
    return min(a, b)


class _Base:
    def __init__(self, values: Sequence[int]) -> None:
        data = list(values)
        if not data:
            raise ValueError("values must not be empty")
        self.n = len(data)
        self._tree: list[list[int]] = [[] for _ in range(2 * self.n - 1)]
        self._build(data, 0, 0, self.n - 1)

    def __len__(self) -> int:
        return self.n

    def _build(self, data: list[int], tidx: int, tl: int, tr: int) -> None:
        if tl == tr:
            self._tree[tidx] = [data[tl]]
            return
        tm, lc, rc = _split(tidx, tl, tr)
        self._build(data, lc, tl, tm)
        self._build(data, rc, tm + 1, tr)
        self._tree[tidx] = list(merge(self._tree[lc], self._tree[rc]))

    def _range_query(self, l: int, r: int, x: int) -> int | None:
        if not 0 <= l <= r < self.n:
            raise IndexError(f"range [{l}, {r}] outside [0, {self.n - 1}]")
        return self._query(0, 0, self.n - 1, l, r, x)

    def _query(self, tidx: int, tl: int, tr: int, l: int, r: int, x: int) -> int | None:
        if l > tr or tl > r or l > r:
            return None
        if l <= tl and tr <= r:
            return _least_at_least(self._tree[tidx], x)
        tm, lc, rc = _split(tidx, tl, tr)
        return _smaller(
            self._query(lc, tl, tm, l, min(r, tm), x),
            self._query(rc, tm + 1, tr, max(l, tm + 1), r, x),
        )


class MergeSortTree(_Base):
    """Static array; each node keeps its range's values in sorted order."""

    def __init__(self, values: Sequence[int]) -> None:
        super().__init__(values)

    def range_query(self, l: int, r: int, x: int) -> int | None:
        """Smallest value >= x among positions l..r, or None if there is none."""
        return self._range_query(l, r, x)


class MergeSortTreeWithUpdate(_Base):
    """Like MergeSortTree, but positions can be reassigned."""

    def __init__(self, values: Sequence[int]) -> None:
        super().__init__(values)
        self._values = list(values)

    def range_query(self, l: int, r: int, x: int) -> int | None:
        """Smallest value >= x among positions l..r, or None if there is none."""
        return self._range_query(l, r, x)

    def point_update(self, pos: int, value: int) -> None:
        """Set the value at pos."""
        if not 0 <= pos < self.n:
            raise IndexError(f"position {pos} outside [0, {self.n - 1}]")
        old = self._values[pos]
        tidx, tl, tr = 0, 0, self.n - 1
        while True:
            node = self._tree[tidx]
            del node[bisect_left(node, old)]
            insort(node, value)
            if tl == tr:
                break
            tm, lc, rc = _split(tidx, tl, tr)
            if pos <= tm:
                tidx, tr = lc, tm
            else:
                tidx, tl = rc, tm + 1
        self._values[pos] = value