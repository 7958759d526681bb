"""Rerooting dynamic programming over trees."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any


class ReRootDP:
    """Compute a tree DP value for every node taken as the root.

    ``merge(acc, child)`` folds a child's value into a node's accumulator,
    starting from ``base``. ``update(parent_value, child_value)`` turns the
    full value of a parent into the value its side contributes when the
    child becomes the root.
    """

    def __init__(
        self,
        adj: Sequence[Iterable[int]],
        base: Any,
        merge: Callable[[Any, Any], Any],
        update: Callable[[Any, Any], Any],
    ) -> None:
        self.adj = [list(a) for a in adj]
        self.base = base
        self.merge = merge
        self.update = update
        self.res: list[Any] = [base] * len(self.adj)

    def compute(self) -> list[Any]:
        """Fill and return ``res``, the value for each node as the root."""
        n = len(self.adj)
        if n == 0:
            return []
        parent = [-1] * n
        order = []
        stack = [0]
        while stack:
            u = stack.pop()
            order.append(u)
            for v in self.adj[u]:
                if v != parent[u]:
                    parent[v] = u
                    stack.append(v)

        for u in reversed(order):
            acc = self.base
            for v in self.adj[u]:
                if v != parent[u]:
                    acc = self.merge(acc, self.res[v])
            self.res[u] = acc

        for u in order:
            for v in self.adj[u]:
                if v != parent[u]:
                    outside = self.update(self.res[u], self.res[v])
                    self.res[v] = self.merge(self.res[v], outside)
        return list(self.res)