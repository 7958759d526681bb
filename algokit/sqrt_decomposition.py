"""Square-root decomposition for range sums."""

from __future__ import annotations

import math
from collections.abc import Sequence


class SqrtDecomposition:
    """Values split into blocks of about sqrt(n), each with its sum."""

    def __init__(self, values: Sequence[int]) -> None:
        self.values = list(values)
        self.n = len(self.values)
        self.block = math.isqrt(self.n) + 1
        self.blocks = [0] * self.block
        for i, v in enumerate(self.values):
            self.blocks[i // self.block] += v

    def __len__(self) -> int:
        return self.n

    def query(self, l: int, r: int) -> int:
        """Sum of positions l..r inclusive."""
        if not 0 <= l <= r < self.n:
            raise IndexError(f"range [{l}, {r}] outside [0, {self.n - 1}]")
        s = self.block
        bl, br = l // s, r // s
        if bl == br:
            return sum(self.values[l : r + 1])
        return (
            sum(self.values[l : (bl + 1) * s])
            + sum(self.blocks[bl + 1 : br])
            + sum(self.values[br * s : r + 1])
        )