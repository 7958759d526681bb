"""Lowest common ancestors and ancestor jumps by binary lifting."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

DEFAULT = -(10**9)


def _levels(n: int) -> int:
    """ceil(log2(n)) + 1, at least 1."""
    return max(1, (n - 1).bit_length() + 1)


class BinaryLift:
    """Ancestor table of a rooted tree with entry and exit times."""

    def __init__(self, adj: Sequence[Iterable[int]], root: int = 0) -> None:
        self.adj = [list(a) for a in adj]
        n = len(self.adj)
        if n == 0:
            raise ValueError("tree has no nodes")
        self.levels = _levels(n)
        self.up = [[root] * self.levels for _ in range(n)]
        self.tin = [0] * n
        self.tout = [0] * n
        timer = 0

        def enter(u: int, parent: int) -> None:
            nonlocal timer
            timer += 1
            self.tin[u] = timer
            row = self.up[u]
            row[0] = parent
            for i in range(1, self.levels):
                row[i] = self.up[row[i - 1]][i - 1]

        enter(root, root)
        stack = [(root, root, iter(self.adj[root]))]
        while stack:
            u, parent, children = stack[-1]
            for v in children:
                if v != parent:
                    enter(v, u)
                    stack.append((v, u, iter(self.adj[v])))
                    break
            else:
                stack.pop()
                timer += 1
                self.tout[u] = timer

    def is_ancestor(self, u: int, v: int) -> bool:
        """Whether u is v or lies on the path from v to the root."""
        return self.tin[u] <= self.tin[v] and self.tout[u] >= self.tout[v]

    def lca(self, u: int, v: int) -> int:
        """Lowest common ancestor of u and v."""
        if self.is_ancestor(u, v):
            return u
        if self.is_ancestor(v, u):
            return v
        for i in range(self.levels - 1, -1, -1):
            if not self.is_ancestor(self.up[u][i], v):
                u = self.up[u][i]
        return self.up[u][0]


class BinLift:
    """Tree on nodes 0..n-1 rooted at 0, built edge by edge.

    Besides ancestors and distances it answers, for a node u and a bound k,
    how far the farthest node is whose path from u climbs at most k levels.
    Tables are built on the first query and again after new edges.
    """

    def __init__(self, n: int) -> None:
        if n < 1:
            raise ValueError("tree needs at least one node")
        self.n = n
        self.levels = _levels(n)
        self.adj: list[list[int]] = [[] for _ in range(n)]
        self._ready = False
        self._sub: list[tuple[int, int, int]] = []
        self._jump: list[list[tuple[int, int]]] = []

    def add_edge(self, u: int, v: int) -> None:
        """Connect u and v."""
        self.adj[u].append(v)
        self.adj[v].append(u)
        self._ready = False

    def _prepare(self) -> None:
        if self._ready:
            return
        n = self.n
        parent = [0] * n
        level = [0] * n
        order = []
        stack = [0]
        while stack:
            u = stack.pop()
            order.append(u)
            for v in self.adj[u]:
                if v != parent[u]:
                    parent[v] = u
                    level[v] = level[u] + 1
                    stack.append(v)

        best1 = [0] * n
        best2 = [0] * n
        for u in reversed(order):
            if u == 0:
                continue
            p = parent[u]
            d = best1[u] + 1
            if d > best1[p]:
                best2[p] = best1[p]
                best1[p] = d
            elif d > best2[p]:
                best2[p] = d
        self._sub = [(best1[u], best2[u], level[u]) for u in range(n)]

        jump = [[(0, DEFAULT)] * self.levels for _ in range(n)]
        for u in order:
            p = parent[u]
            pm1, pm2, plvl = self._sub[p]
            branch = pm2 if pm1 == best1[u] + 1 else pm1
            row = jump[u]
            row[0] = (p, branch - plvl)
            for i in range(1, self.levels):
                anc, d = row[i - 1]
                far, d2 = jump[anc][i - 1]
                row[i] = (far, max(d, d2))
        self._jump = jump
        self._ready = True

    def query(self, u: int, k: int) -> int:
        """Largest distance from u to a node whose path from u climbs at most k levels."""
        self._prepare()
        mx1, _, lvl = self._sub[u]
        k = min(k, lvl)
        res = DEFAULT
        for i in range(self.levels - 1, -1, -1):
            step = 1 << i
            if step <= k:
                anc, d = self._jump[u][i]
                res = max(res, d)
                u = anc
                k -= step
        return max(mx1, res + lvl)

    def lca(self, u: int, v: int) -> int:
        """Lowest common ancestor of u and v."""
        self._prepare()
        if self._sub[u][2] < self._sub[v][2]:
            u, v = v, u
        diff = self._sub[u][2] - self._sub[v][2]
        for i in range(self.levels):
            if diff >> i & 1:
                u = self._jump[u][i][0]
        if u == v:
            return u
        for i in range(self.levels - 1, -1, -1):
            if self._jump[u][i][0] != self._jump[v][i][0]:
                u = self._jump[u][i][0]
                v = self._jump[v][i][0]
        return self._jump[u][0][0]

    def distance(self, u: int, v: int) -> int:
        """Number of edges between u and v."""
        self._prepare()
        return self._sub[u][2] + self._sub[v][2] - 2 * self._sub[self.lca(u, v)][2]

    def kth_ancestor(self, u: int, k: int) -> int | None:
        """Ancestor k levels above u, or None if u is less deep than k."""
        self._prepare()
        if k > self._sub[u][2]:
            return None
        for i in range(self.levels):
            if k >> i & 1:
                u = self._jump[u][i][0]
        return u