"""Satisfiability of 'at least two of three' constraints via 2-SAT."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


class TwoSAT:
    """Variables 1..n; literal k means variable k, -k its negation.

    Each clause (a, b, c) demands that at least two of its literals hold,
    which is the 2-SAT formula (a or b) and (a or c) and (b or c).
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("variable count must be non-negative")
        self.n = n
        self.assignment: list[bool] = []

    def _node(self, literal: int) -> int:
        if literal == 0 or abs(literal) > self.n:
            raise ValueError(f"literal {literal} out of range")
        return literal - 1 + self.n if literal > 0 else -literal - 1

    def _negate(self, node: int) -> int:
        return node - self.n if node >= self.n else node + self.n

    def solve(self, clauses: Iterable[Sequence[int]]) -> bool:
        """Decide the clauses; on success ``assignment`` holds variable values."""
        size = 2 * self.n
        adj: list[list[int]] = [[] for _ in range(size)]
        radj: list[list[int]] = [[] for _ in range(size)]

        def either(a: int, b: int) -> None:
            na = self._negate(a)
            adj[na].append(b)
            radj[b].append(na)

        for clause in clauses:
            a, b, c = (self._node(lit) for lit in clause)
            either(a, b)
            either(b, a)
            either(a, c)
            either(c, a)
            either(b, c)
            either(c, b)

        comp = [-1] * size
        label = 0
        for v in reversed(_finish_order(adj)):
            if comp[v] == -1:
                _mark(radj, v, label, comp)
                label += 1

        values = []
        for i in range(self.n):
            neg, pos = i, i + self.n
            if comp[neg] == comp[pos]:
                self.assignment = []
                return False
            values.append(comp[pos] > comp[neg])
        self.assignment = values
        return True


def _finish_order(adj: list[list[int]]) -> list[int]:
    used = [False] * len(adj)
    order = []
    for s in range(len(adj)):
        if used[s]:
            continue
        used[s] = True
        stack = [(s, iter(adj[s]))]
        while stack:
            v, it = stack[-1]
            for u in it:
                if not used[u]:
                    used[u] = True
                    stack.append((u, iter(adj[u])))
                    break
            else:
                stack.pop()
                order.append(v)
    return order


def _mark(radj: list[list[int]], start: int, label: int, comp: list[int]) -> None:
    comp[start] = label
    stack = [start]
    while stack:
        v = stack.pop()
        for u in radj[v]:
            if comp[u] == -1:
                comp[u] = label
                stack.append(u)