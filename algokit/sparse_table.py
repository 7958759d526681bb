"""Sparse table for range queries over a static array."""

from __future__ import annotations

import operator
from collections.abc import Callable, Sequence
from typing import Any


class SparseTable:
    """Level i holds func over every window of 2**i consecutive values."""

    def __init__(
        self, values: Sequence[Any], func: Callable[[Any, Any], Any] = operator.add
    ) -> None:
        data = list(values)
        if not data:
            raise ValueError("values must not be empty")
        self.n = len(data)
        self.func = func
        self._table = [data]
        length = 1
        while 2 * length <= self.n:
            prev = self._table[-1]
            self._table.append(
                [func(prev[j], prev[j + length]) for j in range(self.n - 2 * length + 1)]
            )
            length *= 2

    def __len__(self) -> int:
        return self.n

    def _check(self, l: int, r: int) -> None:
        if not 0 <= l <= r < self.n:
            raise IndexError(f"range [{l}, {r}] outside [0, {self.n - 1}]")

    def query(self, l: int, r: int) -> Any:
        """func folded over positions l..r using disjoint power-of-two blocks."""
        self._check(l, r)
        result = None
        for i in reversed(range(len(self._table))):
            width = 1 << i
            if width <= r - l + 1:
                block = self._table[i][l]
                result = block if result is None else self.func(result, block)
                l += width
        return result

    def idempotent_query(self, l: int, r: int) -> Any:
        """Constant-time answer from two overlapping blocks; only valid when
        func is idempotent, such as min or max."""
        self._check(l, r)
        i = (r - l + 1).bit_length() - 1
        return self.func(self._table[i][l], self._table[i][r - (1 << i) + 1])