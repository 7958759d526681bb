"""Cycle structure of permutations of 0..n-1."""

from __future__ import annotations

from collections.abc import Sequence


def cycles(perm: Sequence[int]) -> list[list[int]]:
    """Cycles of perm, each listed from its smallest index in walk order."""
    perm = list(perm)
    n = len(perm)
    if sorted(perm) != list(range(n)):
        raise ValueError("not a permutation of 0..n-1")
    seen = [False] * n
    result = []
    for start in range(n):
        if seen[start]:
            continue
        cycle = []
        cur = start
        while not seen[cur]:
            seen[cur] = True
            cycle.append(cur)
            cur = perm[cur]
        result.append(cycle)
    return result


def sum_half_cycle_lengths(perm: Sequence[int]) -> int:
    """Sum of (length - 1) // 2 over the cycles of perm."""
    return sum((len(cycle) - 1) // 2 for cycle in cycles(perm))