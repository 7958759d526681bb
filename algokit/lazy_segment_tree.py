"""Segment trees with lazy range updates.

Nodes are laid out in pre-order: the left child of node ``t`` covering
``[tl, tr]`` is ``t + 1`` and the right child is ``t + 2 * (tm - tl + 1)``,
so a tree over n positions uses exactly ``2 * n - 1`` slots.
"""

from __future__ import annotations

from collections.abc import Sequence


def _initial(values: int | Sequence[int]) -> list[int]:
    if isinstance(values, int):
        if values < 1:
            raise ValueError("size must be positive")
        return [0] * values
    result = list(values)
    if not result:
        raise ValueError("values must not be empty")
    return result


def _split(tidx: int, tl: int, tr: int) -> tuple[int, int, int]:
    tm = tl + (tr - tl) // 2
    return tm, tidx + 1, tidx + 2 * (tm - tl + 1)


def _check_range(l: int, r: int, n: int) -> None:
    if not 0 <= l <= r < n:
        raise IndexError(f"range [{l}, {r}] outside [0, {n - 1}]")


def _check_pos(pos: int, n: int) -> None:
    if not 0 <= pos < n:
        raise IndexError(f"position {pos} outside [0, {n - 1}]")


class RangeAddPointQuery:
    """Add a constant to a range of positions; read single positions."""

    def __init__(self, values: int | Sequence[int]) -> None:
        data = _initial(values)
        self.n = len(data)
        self._tree = [0] * (2 * self.n - 1)
        self._build(data, 0, 0, self.n - 1)

    def __len__(self) -> int:
        return self.n

    def _build(self, data: list[int], tidx: int, tl: int, tr: int) -> None:
        if tl == tr:
            self._tree[tidx] = data[tl]
            return
        tm, lc, rc = _split(tidx, tl, tr)
        self._build(data, lc, tl, tm)
        self._build(data, rc, tm + 1, tr)

    def range_update(self, l: int, r: int, add: int) -> None:
        """Add ``add`` to every position in l..r inclusive."""
        _check_range(l, r, self.n)
        self._update(0, 0, self.n - 1, l, r, add)

    def _update(self, tidx: int, tl: int, tr: int, l: int, r: int, add: int) -> None:
        if l > r:
            return
        if l == tl and r == tr:
            self._tree[tidx] += add
            return
        tm, lc, rc = _split(tidx, tl, tr)
        self._update(lc, tl, tm, l, min(r, tm), add)
        self._update(rc, tm + 1, tr, max(l, tm + 1), r, add)

    def point_query(self, pos: int) -> int:
        """Current value at pos."""
        _check_pos(pos, self.n)
        total = 0
        tidx, tl, tr = 0, 0, self.n - 1
        while True:
            total += self._tree[tidx]
            if tl == tr:
                return total
            tm, lc, rc = _split(tidx, tl, tr)
            if pos <= tm:
                tidx, tr = lc, tm
            else:
                tidx, tl = rc, tm + 1


class RangeAssignTree:
    """Assign one value to a whole range of positions; read single positions."""

    def __init__(self, values: int | Sequence[int]) -> None:
        data = _initial(values)
        self.n = len(data)
        self._tree = [0] * (2 * self.n - 1)
        self._marked = [False] * (2 * self.n - 1)
        self._build(data, 0, 0, self.n - 1)

    def __len__(self) -> int:
        return self.n

    def _build(self, data: list[int], tidx: int, tl: int, tr: int) -> None:
        if tl == tr:
            self._tree[tidx] = data[tl]
            return
        tm, lc, rc = _split(tidx, tl, tr)
        self._build(data, lc, tl, tm)
        self._build(data, rc, tm + 1, tr)
        self._tree[tidx] = self._tree[lc] + self._tree[rc]

    def _push(self, tidx: int, lc: int, rc: int) -> None:
        if self._marked[tidx]:
            self._tree[lc] = self._tree[rc] = self._tree[tidx]
            self._marked[lc] = self._marked[rc] = True
            self._marked[tidx] = False

    def range_update(self, l: int, r: int, value: int) -> None:
        """Set every position in l..r inclusive to value."""
        _check_range(l, r, self.n)
        self._update(0, 0, self.n - 1, l, r, value)

    def _update(self, tidx: int, tl: int, tr: int, l: int, r: int, value: int) -> None:
        if l > r:
            return
        if l == tl and r == tr:
            self._tree[tidx] = value
            self._marked[tidx] = True
            return
        tm, lc, rc = _split(tidx, tl, tr)
        self._push(tidx, lc, rc)
        self._update(lc, tl, tm, l, min(r, tm), value)
        self._update(rc, tm + 1, tr, max(l, tm + 1), r, value)

    def point_query(self, pos: int) -> int:
        """Current value at pos."""
        _check_pos(pos, self.n)
        tidx, tl, tr = 0, 0, self.n - 1
        while tl != tr:
            tm, lc, rc = _split(tidx, tl, tr)
            self._push(tidx, lc, rc)
            if pos <= tm:
                tidx, tr = lc, tm
            else:
                tidx, tl = rc, tm + 1
        return self._tree[tidx]


class RangeAddMaxTree:
    """Add a constant to a range of positions; query the maximum of a range."""

    def __init__(self, values: int | Sequence[int]) -> None:
        data = _initial(values)
        self.n = len(data)
        self._tree = [0] * (2 * self.n - 1)
        self._lazy = [0] * (2 * self.n - 1)
        self._build(data, 0, 0, self.n - 1)

    def __len__(self) -> int:
        return self.n

    def _build(self, data: list[int], tidx: int, tl: int, tr: int) -> None:
        if tl == tr:
            self._tree[tidx] = data[tl]
            return
        tm, lc, rc = _split(tidx, tl, tr)
        self._build(data, lc, tl, tm)
        self._build(data, rc, tm + 1, tr)
        self._tree[tidx] = max(self._tree[lc], self._tree[rc])

    def _push(self, tidx: int, lc: int, rc: int) -> None:
        delta = self._lazy[tidx]
        if delta:
            for child in (lc, rc):
                self._tree[child] += delta
                self._lazy[child] += delta
            self._lazy[tidx] = 0

    def range_update(self, l: int, r: int, value: int) -> None:
        """Add value to every position in l..r inclusive."""
        _check_range(l, r, self.n)
        self._update(0, 0, self.n - 1, l, r, value)

    def _update(self, tidx: int, tl: int, tr: int, l: int, r: int, value: int) -> None:
        if l > r:
            return
        if l == tl and r == tr:
            self._tree[tidx] += value
            self._lazy[tidx] += value
            return
        tm, lc, rc = _split(tidx, tl, tr)
        self._push(tidx, lc, rc)
        self._update(lc, tl, tm, l, min(r, tm), value)
        self._update(rc, tm + 1, tr, max(l, tm + 1), r, value)
        self._tree[tidx] = max(self._tree[lc], self._tree[rc])

    def range_query(self, l: int, r: int) -> int:
        """Maximum over positions l..r inclusive."""
        _check_range(l, r, self.n)
        return self._query(0, 0, self.n - 1, l, r)

    def _query(self, tidx: int, tl: int, tr: int, l: int, r: int) -> int:
        if l == tl and r == tr:
            return self._tree[tidx]
        tm, lc, rc = _split(tidx, tl, tr)
        self._push(tidx, lc, rc)
        if r <= tm:
            return self._query(lc, tl, tm, l, r)
        if l > tm:
            return self._query(rc, tm + 1, tr, l, r)
        return max(
            self._query(lc, tl, tm, l, tm),
            self._query(rc, tm + 1, tr, tm + 1, r),
        )