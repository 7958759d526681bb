"""Disjoint-set union with path compression and union by size."""

from __future__ import annotations


class DSU:
    """Partition of 0..n-1 into disjoint sets."""

    def __init__(self, n: int) -> None:
        self.parent = list(range(n))
        self.size = [1] * n
        self.components = n

    def find(self, a: int) -> int:
        """Representative of the set containing a."""
        root = a
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[a] != root:
            self.parent[a], a = root, self.parent[a]
        return root

    def merge(self, a: int, b: int) -> bool:
        """Join the sets of a and b; False if they were already one set."""
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self.size[ra] < self.size[rb]:
            ra, rb = rb, ra
        self.size[ra] += self.size[rb]
        self.parent[rb] = ra
        self.components -= 1
        return True