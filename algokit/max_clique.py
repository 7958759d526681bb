"""Maximum clique by Bron-Kerbosch enumeration of maximal cliques."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def max_clique(adj: Sequence[Iterable[int]]) -> set[int]:
    """Largest clique of an undirected graph given as neighbour sets.

    Among cliques of equal size the first one enumerated, taking vertices
    in ascending order, is returned. Worst case O(3**(n/3)).
    """
    neighbours = [set(a) for a in adj]
    best: set[int] = set()

    def expand(current: set[int], potential: set[int], processed: set[int]) -> None:
        nonlocal best
        if not potential and not processed:
            if len(current) > len(best):
                best = set(current)
            return
        while potential:
            u = min(potential)
            potential.remove(u)
            near = neighbours[u]
            expand(current | {u}, potential & near, processed & near)
            processed.add(u)

    expand(set(), set(range(len(neighbours))), set())
    return best