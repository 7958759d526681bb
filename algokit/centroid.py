"""Subtree sizes and the centroid of a tree."""

from __future__ import annotations

from collections.abc import Sequence


def subtree_sizes(adj: Sequence[Sequence[int]], root: int = 0) -> list[int]:
    """Size of each node's subtree with the tree rooted at root.

    Nodes not reachable from root get 0.
    """
    n = len(adj)
    sizes = [0] * n
    parent = [-1] * n
    order = []
    stack = [root]
    while stack:
        u = stack.pop()
        order.append(u)
        for v in adj[u]:
            if v != parent[u]:
                parent[v] = u
                stack.append(v)
    for u in reversed(order):
        sizes[u] += 1
        if parent[u] != -1:
            sizes[parent[u]] += sizes[u]
    return sizes


def find_centroid(adj: Sequence[Sequence[int]], root: int = 0) -> int:
    """A node whose removal leaves no component larger than half the tree."""
    sizes = subtree_sizes(adj, root)
    total = sizes[root]
    u, parent = root, -1
    while True:
        for v in adj[u]:
            if v != parent and sizes[v] * 2 > total:
                u, parent = v, u
                break
        else:
            return u