from collections import Counter

from algokit.eulerian_path import euler_tour, find_eulerian_path


def _check_path(pairs, path):
    assert Counter(map(tuple, pairs)) == Counter(path)
    for (_, v), (u, _) in zip(path, path[1:]):
        assert v == u


def test_path_with_distinct_start():
    pairs = [[5, 1], [4, 5], [11, 9], [9, 4]]
    path = find_eulerian_path(pairs)
    _check_path(pairs, path)
    assert path[0][0] == 11


def test_path_through_cycle_and_tail():
    pairs = [[1, 2], [2, 3], [3, 1], [1, 4]]
    path = find_eulerian_path(pairs)
    _check_path(pairs, path)
    assert path[0][0] == 1 and path[-1][1] == 4


def test_cycle_starts_at_first_edge():
    pairs = [[2, 3], [3, 2], [2, 2]]
    path = find_eulerian_path(pairs)
    _check_path(pairs, path)
    assert path[0][0] == 2 and path[-1][1] == 2


def test_empty_input():
    assert find_eulerian_path([]) == []


def test_euler_tour_on_path():
    adj = [[1], [0, 2], [1]]
    assert euler_tour(adj) == [(1, 3), (2, 3), (3, 3)]


def test_euler_tour_intervals_nest():
    adj = [[1, 2], [0, 3, 4], [0], [1], [1]]
    spans = euler_tour(adj)
    assert sorted(s[0] for s in spans) == list(range(1, len(adj) + 1))
    for u, neighbours in enumerate(adj):
        for v in neighbours:
            if spans[v][0] > spans[u][0]:
                assert spans[u][0] < spans[v][0] <= spans[v][1] <= spans[u][1]


def test_unreached_nodes_are_none():
    adj = [[1], [0], []]
    spans = euler_tour(adj)
    assert spans[2] is None
    assert spans[0] == (1, 2)