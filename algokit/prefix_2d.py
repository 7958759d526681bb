"""Two-dimensional prefix sums for constant-time rectangle queries."""

from __future__ import annotations

from collections.abc import Sequence


class Prefix2D:
    """Prefix sums over a rectangular matrix of numbers."""

    def __init__(self, mat: Sequence[Sequence[int]]) -> None:
        self.rows = len(mat)
        self.cols = len(mat[0]) if self.rows else 0
        self.pref = [[0] * (self.cols + 1) for _ in range(self.rows + 1)]
        for i, row in enumerate(mat):
            if len(row) != self.cols:
                raise ValueError("matrix rows must all have the same length")
            above, current = self.pref[i], self.pref[i + 1]
            for j, value in enumerate(row):
                current[j + 1] = value + current[j] + above[j + 1] - above[j]

    def query(self, l1: int, r1: int, l2: int, r2: int) -> int:
        """Sum of rows l1..l2 and columns r1..r2, all 1-indexed and inclusive."""
        if l1 < 1 or r1 < 1 or l2 > self.rows or r2 > self.cols:
            raise IndexError("rectangle lies outside the matrix")
        p = self.pref
        return p[l2][r2] - p[l1 - 1][r2] - p[l2][r1 - 1] + p[l1 - 1][r1 - 1]