"""Eulerian paths in directed multigraphs and Euler tours of trees."""

from __future__ import annotations

from collections import Counter, defaultdict, deque
from collections.abc import Sequence


def find_eulerian_path(pairs: Sequence[Sequence[int]]) -> list[tuple[int, int]]:
    """Order the directed edges (u, v) into a path using each edge once.

    The path starts at a vertex whose out-degree exceeds its in-degree by
    one, or at the tail of the first edge when there is none.
    """
    if not pairs:
        return []
    adj: dict[int, deque[int]] = defaultdict(deque)
    indeg: Counter[int] = Counter()
    outdeg: Counter[int] = Counter()
    for u, v in pairs:
        adj[u].append(v)
        indeg[v] += 1
        outdeg[u] += 1

    start = pairs[0][0]
    for vertex, out in outdeg.items():
        if out == indeg[vertex] + 1:
            start = vertex
            break

    order = []
    stack = [start]
    while stack:
        u = stack[-1]
        out_edges = adj.get(u)
        if out_edges:
            stack.append(out_edges.popleft())
        else:
            order.append(stack.pop())
    order.reverse()
    return list(zip(order, order[1:]))


def euler_tour(
    adj: Sequence[Sequence[int]], root: int = 0
) -> list[tuple[int, int] | None]:
    """Entry times and subtree-end times of a tree walk from root.

    Entry times count from 1; a node's second value is the largest entry
    time inside its subtree. Nodes not reached from root get None.
    """
    spans: list[tuple[int, int] | None] = [None] * len(adj)
    tin = [0] * len(adj)
    timer = 1
    tin[root] = timer
    stack = [(root, -1, iter(adj[root]))]
    while stack:
        u, parent, children = stack[-1]
        for v in children:
            if v != parent:
                timer += 1
                tin[v] = timer
                stack.append((v, u, iter(adj[v])))
                break
        else:
            stack.pop()
            spans[u] = (tin[u], timer)
    return spans