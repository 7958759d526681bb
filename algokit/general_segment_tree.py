"""Segment tree with lazy propagation, parameterised by its operations."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any


class LazySegTree:
    """Range updates and range queries over 0-indexed positions.

    ``combine(a, b)`` merges two child summaries. ``propagate(current,
    value, length)`` applies a pending update ``value`` to a summary of
    ``length`` positions; with ``length`` 1 it also composes two pending
    updates. A pending update of 0 means there is nothing to apply.
    """

    def __init__(
        self,
        data: int | Sequence[Any],
        identity: Any,
        combine: Callable[[Any, Any], Any],
        propagate: Callable[[Any, Any, int], Any],
    ) -> None:
        if isinstance(data, int):
            if data < 1:
                raise ValueError("size must be positive")
            self.n = data
            values = None
        else:
            values = list(data)
            if not values:
                raise ValueError("data must not be empty")
            self.n = len(values)
        self.identity = identity
        self._combine = combine
        self._propagate = propagate
        self._tree = [identity] * (4 * self.n)
        self._lazy: list[Any] = [0] * (4 * self.n)
        if values is not None:
            self._build(values, 0, 0, self.n - 1)

    def __len__(self) -> int:
        return self.n

    def _build(self, values: list[Any], t: int, tl: int, tr: int) -> None:
        if tl == tr:
            self._tree[t] = values[tl]
            return
        tm = tl + (tr - tl) // 2
        self._build(values, 2 * t + 1, tl, tm)
        self._build(values, 2 * t + 2, tm + 1, tr)
        self._tree[t] = self._combine(self._tree[2 * t + 1], self._tree[2 * t + 2])

    def _apply(self, t: int, tl: int, tr: int) -> None:
        pending = self._lazy[t]
        if pending == 0:
            return
        self._tree[t] = self._propagate(self._tree[t], pending, tr - tl + 1)
        if tl != tr:
            for child in (2 * t + 1, 2 * t + 2):
                self._lazy[child] = self._propagate(self._lazy[child], pending, 1)
        self._lazy[t] = 0

    def _check_range(self, l: int, r: int) -> None:
        if not 0 <= l <= r < self.n:
            raise IndexError(f"range [{l}, {r}] outside [0, {self.n - 1}]")

    def _check_pos(self, pos: int) -> None:
        if not 0 <= pos < self.n:
            raise IndexError(f"position {pos} outside [0, {self.n - 1}]")

    def range_update(self, l: int, r: int, value: Any) -> None:
        """Apply the update value to every position in l..r inclusive."""
        self._check_range(l, r)
        self._range_update(0, 0, self.n - 1, l, r, value)

    def _range_update(self, t: int, tl: int, tr: int, l: int, r: int, value: Any) -> None:
        self._apply(t, tl, tr)
        if tl > r or tr < l:
            return
        if l <= tl and tr <= r:
            self._lazy[t] = self._propagate(self._lazy[t], value, 1)
            self._apply(t, tl, tr)
            return
        tm = tl + (tr - tl) // 2
        self._range_update(2 * t + 1, tl, tm, l, r, value)
        self._range_update(2 * t + 2, tm + 1, tr, l, r, value)
        self._tree[t] = self._combine(self._tree[2 * t + 1], self._tree[2 * t + 2])

    def range_query(self, l: int, r: int) -> Any:
        """Combined summary of positions l..r inclusive."""
        self._check_range(l, r)
        return self._range_query(0, 0, self.n - 1, l, r)

    def _range_query(self, t: int, tl: int, tr: int, l: int, r: int) -> Any:
        self._apply(t, tl, tr)
        if tl > r or tr < l:
            return self.identity
        if l <= tl and tr <= r:
            return self._tree[t]
        tm = tl + (tr - tl) // 2
        return self._combine(
            self._range_query(2 * t + 1, tl, tm, l, r),
            self._range_query(2 * t + 2, tm + 1, tr, l, r),
        )

    def point_update(self, pos: int, value: Any) -> None:
        """Set the value at pos."""
        self._check_pos(pos)
        self._point_update(0, 0, self.n - 1, pos, value)

    def _point_update(self, t: int, tl: int, tr: int, pos: int, value: Any) -> None:
        self._apply(t, tl, tr)
        if tl == tr:
            self._tree[t] = value
            return
        tm = tl + (tr - tl) // 2
        if pos <= tm:
            self._point_update(2 * t + 1, tl, tm, pos, value)
        else:
            self._point_update(2 * t + 2, tm + 1, tr, pos, value)
        self._apply(2 * t + 1, tl, tm)
        self._apply(2 * t + 2, tm + 1, tr)
        self._tree[t] = self._combine(self._tree[2 * t + 1], self._tree[2 * t + 2])

    def point_query(self, pos: int) -> Any:
        """Current value at pos."""
        self._check_pos(pos)
        t, tl, tr = 0, 0, self.n - 1
        while True:
            self._apply(t, tl, tr)
            if tl == tr:
                return self._tree[t]
            tm = tl + (tr - tl) // 2
            if pos <= tm:
                t, tr = 2 * t + 1, tm
            else:
                t, tl = 2 * t + 2, tm + 1