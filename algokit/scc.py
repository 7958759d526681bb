"""Strongly connected components (Kosaraju) and the condensed graph."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _graphs(
    n: int, edges: Iterable[Sequence[int]]
) -> tuple[list[list[int]], list[list[int]]]:
    g: list[list[int]] = [[] for _ in range(n)]
    rg: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise IndexError(f"edge ({u}, {v}) has a vertex outside [0, {n - 1}]")
        g[u].append(v)
        rg[v].append(u)
    return g, rg


def _finish_order(g: list[list[int]]) -> list[int]:
    seen = [False] * len(g)
    order = []
    for s in range(len(g)):
        if seen[s]:
            continue
        seen[s] = True
        stack = [(s, iter(g[s]))]
        while stack:
            u, it = stack[-1]
            for v in it:
                if not seen[v]:
                    seen[v] = True
                    stack.append((v, iter(g[v])))
                    break
            else:
                stack.pop()
                order.append(u)
    return order


def _collect(rg: list[list[int]], start: int, seen: list[bool]) -> list[int]:
    seen[start] = True
    component = [start]
    stack = [iter(rg[start])]
    while stack:
        for v in stack[-1]:
            if not seen[v]:
                seen[v] = True
                component.append(v)
                stack.append(iter(rg[v]))
                break
        else:
            stack.pop()
    return component


def _components(g: list[list[int]], rg: list[list[int]]) -> list[list[int]]:
    seen = [False] * len(g)
    result = []
    for u in reversed(_finish_order(g)):
        if not seen[u]:
            result.append(_collect(rg, u, seen))
    return result


def strongly_connected_components(n: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    """Components of a directed graph on 0..n-1.

    Components come in topological order of the condensed graph, and each
    lists its root, the vertex it was discovered from, first.
    """
    g, rg = _graphs(n, edges)
    return _components(g, rg)


def condensation(
    n: int, edges: Iterable[Sequence[int]]
) -> tuple[list[int], dict[int, list[int]]]:
    """Condense each component into its root.

    Returns (roots, adj): roots[v] is the root of v's component, and adj
    maps every root, in topological order, to the distinct roots its
    component has edges into.
    """
    g, rg = _graphs(n, edges)
    comps = _components(g, rg)
    roots = [0] * n
    for component in comps:
        for v in component:
            roots[v] = component[0]
    targets: dict[int, dict[int, None]] = {component[0]: {} for component in comps}
    for u in range(n):
        for v in g[u]:
            ru, rv = roots[u], roots[v]
            if ru != rv:
                targets[ru][rv] = None
    return roots, {root: list(succ) for root, succ in targets.items()}