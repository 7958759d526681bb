import random
from itertools import permutations

import pytest

from algokit.hamiltonian import has_hamiltonian_path, tsp


def brute_has_path(adj):
    n = len(adj)
    return any(
        all(adj[a][b] for a, b in zip(order, order[1:])) for order in permutations(range(n))
    )


def brute_tsp(dist):
    n = len(dist)
    return min(
        sum(dist[a][b] for a, b in zip(order, order[1:])) for order in permutations(range(n))
    )


@pytest.mark.parametrize("seed", range(10))
def test_hamiltonian_matches_brute_force(seed):
    rng = random.Random(seed)
    n = rng.randint(1, 6)
    adj = [[int(i != j and rng.random() < 0.35) for j in range(n)] for i in range(n)]
    assert has_hamiltonian_path(adj) == brute_has_path(adj)


def test_directed_chain_and_reversed_requirement():
    chain = [[0, 1, 0], [0, 0, 1], [0, 0, 0]]
    assert has_hamiltonian_path(chain)
    star = [[0, 1, 1], [0, 0, 0], [0, 0, 0]]
    assert not has_hamiltonian_path(star)


def test_single_and_empty_graph():
    assert has_hamiltonian_path([[0]])
    assert not has_hamiltonian_path([])


@pytest.mark.parametrize("seed", range(8))
def test_tsp_matches_brute_force(seed):
    rng = random.Random(40 + seed)
    n = rng.randint(1, 6)
    dist = [[0 if i == j else rng.randint(1, 30) for j in range(n)] for i in range(n)]
    assert tsp(dist) == brute_tsp(dist)


def test_tsp_single_vertex_and_empty():
    assert tsp([[0]]) == 0
    with pytest.raises(ValueError):
        tsp([])