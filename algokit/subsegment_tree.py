"""Segment tree answering maximum-sum subsegment queries."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class SubsegmentNode:
    """Summary of a range.

    ``total`` is the range sum; ``pref``, ``suff`` and ``curr`` are the best
    prefix, suffix and subsegment sums, where the empty choice counts as 0.
    """

    total: int = 0
    pref: int = 0
    suff: int = 0
    curr: int = 0

    @staticmethod
    def of(value: int) -> SubsegmentNode:
        """Summary of a single position holding value."""
        best = max(0, value)
        return SubsegmentNode(value, best, best, best)

    def __add__(self, right: SubsegmentNode) -> SubsegmentNode:
        return SubsegmentNode(
            total=self.total + right.total,
            pref=max(self.pref, self.total + right.pref),
            suff=max(right.suff, self.suff + right.total),
            curr=max(self.curr, right.curr, self.suff + right.pref),
        )


_EMPTY = SubsegmentNode()


class MaxSubsegmentTree:
    """Point assignment and range maximum-subsegment-sum queries."""

    def __init__(self, values: int | Sequence[int]) -> None:
        if isinstance(values, int):
            if values < 1:
                raise ValueError("size must be positive")
            data = [0] * values
        else:
            data = list(values)
            if not data:
                raise ValueError("values must not be empty")
        self.n = len(data)
        self._tree = [_EMPTY] * (2 * self.n - 1)
        self._build(data, 0, 0, self.n - 1)

    def __len__(self) -> int:
        return self.n

    @staticmethod
    def _split(tidx: int, tl: int, tr: int) -> tuple[int, int, int]:
        tm = tl + (tr - tl) // 2
        return tm, tidx + 1, tidx + 2 * (tm - tl + 1)

    def _build(self, data: list[int], tidx: int, tl: int, tr: int) -> None:
        if tl == tr:
            self._tree[tidx] = SubsegmentNode.of(data[tl])
            return
        tm, lc, rc = self._split(tidx, tl, tr)
        self._build(data, lc, tl, tm)
        self._build(data, rc, tm + 1, tr)
        self._tree[tidx] = self._tree[lc] + self._tree[rc]

    def point_update(self, pos: int, value: int) -> None:
        """Set the value at pos."""
        if not 0 <= pos < self.n:
            raise IndexError(f"position {pos} outside [0, {self.n - 1}]")
        self._update(0, 0, self.n - 1, pos, value)

    def _update(self, tidx: int, tl: int, tr: int, pos: int, value: int) -> None:
        if tl == tr:
            self._tree[tidx] = SubsegmentNode.of(value)
            return
        tm, lc, rc = self._split(tidx, tl, tr)
        if pos <= tm:
            self._update(lc, tl, tm, pos, value)
        else:
            self._update(rc, tm + 1, tr, pos, value)
        self._tree[tidx] = self._tree[lc] + self._tree[rc]

    def range_query(self, l: int, r: int) -> SubsegmentNode:
        """Summary of positions l..r inclusive."""
        if not 0 <= l <= r < self.n:
            raise IndexError(f"range [{l}, {r}] outside [0, {self.n - 1}]")
        return self._query(0, 0, self.n - 1, l, r)

    def _query(self, tidx: int, tl: int, tr: int, l: int, r: int) -> SubsegmentNode:
        if l > tr or tl > r or l > r:
            return _EMPTY
        if l <= tl and tr <= r:
            return self._tree[tidx]
        tm, lc, rc = self._split(tidx, tl, tr)
        return self._query(lc, tl, tm, l, min(tm, r)) + self._query(
            rc, tm + 1, tr, max(l, tm + 1), r
        )