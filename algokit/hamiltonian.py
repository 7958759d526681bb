"""Bitmask dynamic programming over vertex subsets."""

from __future__ import annotations

import math
from collections.abc import Sequence


def has_hamiltonian_path(adj: Sequence[Sequence[int]]) -> bool:
    """Whether a directed graph, given as an adjacency matrix, has a path
    visiting every vertex exactly once; adj[k][j] is truthy for an edge k -> j."""
    n = len(adj)
    if n == 0:
        return False
    preds = [0] * n
    for k in range(n):
        for j in range(n):
            if k != j and adj[k][j]:
                preds[j] |= 1 << k
    full = (1 << n) - 1
    ends = [0] * (full + 1)
    for i in range(n):
        ends[1 << i] = 1 << i
    for mask in range(1, full + 1):
        for j in range(n):
            bit = 1 << j
            if mask & bit and ends[mask ^ bit] & preds[j]:
                ends[mask] |= bit
    return ends[full] != 0


def tsp(dist: Sequence[Sequence[int]]) -> int:
    """Least total weight of a path that visits every vertex exactly once.

    dist[i][j] is the weight of moving from i to j; the path may start and
    end anywhere.
    """
    n = len(dist)
    if n == 0:
        raise ValueError("graph has no vertices")
    limit = 1 << n
    dp = [[math.inf] * limit for _ in range(n)]
    for i in range(n):
        dp[i][1 << i] = 0
    for mask in range(1, limit):
        for prev in range(n):
            cost = dp[prev][mask]
            if cost == math.inf:
                continue
            row = dist[prev]
            for nxt in range(n):
                if mask >> nxt & 1:
                    continue
                nmask = mask | (1 << nxt)
                candidate = cost + row[nxt]
                if candidate < dp[nxt][nmask]:
                    dp[nxt][nmask] = candidate
    return min(dp[i][limit - 1] for i in range(n))