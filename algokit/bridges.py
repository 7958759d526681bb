"""Bridges of an undirected multigraph."""

from __future__ import annotations

from collections.abc import Sequence


def find_bridges(adj: Sequence[Sequence[int]]) -> list[tuple[int, int]]:
    """Edges whose removal disconnects their endpoints.

    Each bridge is reported as (parent, child) in the depth-first forest.
    Parallel edges are respected: only one copy of the edge to the parent
    is skipped, so a doubled edge is never a bridge.
    """
    n = len(adj)
    tin = [-1] * n
    low = [0] * n
    timer = 0
    bridges: list[tuple[int, int]] = []
    for start in range(n):
        if tin[start] != -1:
            continue
        tin[start] = low[start] = timer
        timer += 1
        stack = [[start, -1, iter(adj[start]), False]]
        while stack:
            frame = stack[-1]
            u, parent, neighbours = frame[0], frame[1], frame[2]
            descended = False
            for v in neighbours:
                if v == parent and not frame[3]:
                    frame[3] = True
                    continue
                if tin[v] != -1:
                    low[u] = min(low[u], tin[v])
                else:
                    tin[v] = low[v] = timer
                    timer += 1
                    stack.append([v, u, iter(adj[v]), False])
                    descended = True
                    break
            if descended:
                continue
            stack.pop()
            if stack:
                p = stack[-1][0]
                low[p] = min(low[p], low[u])
                if low[u] > tin[p]:
                    bridges.append((p, u))
    return bridges