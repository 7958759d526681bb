import random
from collections import deque

import pytest

from algokit.reroot import ReRootDP


def merge(acc, child):
    return acc[0] + child[0], acc[1] + child[1] + child[0]


def update(parent_value, child_value):
    size = parent_value[0] - child_value[0]
    total = parent_value[1] - child_value[1] - child_value[0]
    return size, total


def distances(adj, root):
    dist = [-1] * len(adj)
    dist[root] = 0
    queue = deque([root])
    while queue:
        u = queue.popleft()
        for v in adj[u]:
            if dist[v] == -1:
                dist[v] = dist[u] + 1
                queue.append(v)
    return dist


@pytest.mark.parametrize("seed", range(6))
def test_sum_of_distances_for_every_root(seed):
    rng = random.Random(seed)
    n = rng.randint(2, 30)
    adj = [[] for _ in range(n)]
    for i in range(1, n):
        p = rng.randrange(i)
        adj[p].append(i)
        adj[i].append(p)
    dp = ReRootDP(adj, (1, 0), merge, update)
    result = dp.compute()
    assert result == dp.res
    for u in range(n):
        assert result[u][0] == n
        assert result[u][1] == sum(distances(adj, u))


def test_single_node_keeps_base():
    dp = ReRootDP([[]], (1, 0), merge, update)
    assert dp.compute() == [(1, 0)]


def test_empty_tree():
    dp = ReRootDP([], (1, 0), merge, update)
    assert dp.compute() == []