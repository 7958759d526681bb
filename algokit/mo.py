"""Offline range queries with Mo's ordering: values of odd multiplicity."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

DEFAULT_SQRT_N = 450
"""Block width suited to arrays of about 2e5 elements."""


@dataclass(frozen=True)
class Query:
    """Inclusive 0-indexed range [l, r]; its answer goes to position idx."""

    l: int
    r: int
    idx: int
    sqrt_n: int = DEFAULT_SQRT_N

    def sort_key(self) -> tuple[int, int]:
        """Block of the left end, then the right end."""
        return self.l // self.sqrt_n, self.r


class Mo:
    """Counts, per range, how many distinct values occur an odd number of times."""

    def __init__(self, values: Sequence[int]) -> None:
        ranks = {v: i for i, v in enumerate(sorted(set(values)))}
        self.arr = [ranks[v] for v in values]
        self._freq = [0] * len(ranks)
        self._odd = 0
        self._left = 0
        self._right = -1

    def __len__(self) -> int:
        return len(self.arr)

    def _add(self, idx: int) -> None:
        x = self.arr[idx]
        self._freq[x] += 1
        self._odd += 1 if self._freq[x] & 1 else -1

    def _remove(self, idx: int) -> None:
        x = self.arr[idx]
        self._freq[x] -= 1
        self._odd += 1 if self._freq[x] & 1 else -1

    def process(self, queries: Iterable[Query]) -> list[int]:
        """Answer every query; result i belongs to the query whose idx is i."""
        ordered = sorted(queries, key=Query.sort_key)
        n = len(self.arr)
        answers: list[int | None] = [None] * len(ordered)
        for q in ordered:
            if not 0 <= q.l <= q.r < n:
                raise IndexError(f"range [{q.l}, {q.r}] outside [0, {n - 1}]")
            if not 0 <= q.idx < len(ordered):
                raise IndexError(f"query index {q.idx} out of range")
            while self._left > q.l:
                self._left -= 1
                self._add(self._left)
            while self._right < q.r:
                self._right += 1
                self._add(self._right)
            while self._left < q.l:
                self._remove(self._left)
                self._left += 1
            while self._right > q.r:
                self._remove(self._right)
                self._right -= 1
            answers[q.idx] = self._odd
        if any(a is None for a in answers):
            raise ValueError("query indices must be distinct")
        return [a for a in answers if a is not None]