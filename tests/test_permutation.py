import random

import pytest

from algokit.permutation import cycles, sum_half_cycle_lengths


def test_identity_has_fixed_points():
    assert cycles(range(4)) == [[0], [1], [2], [3]]
    assert sum_half_cycle_lengths(range(4)) == 0


def test_three_cycle():
    assert cycles([1, 2, 0]) == [[0, 1, 2]]
    assert sum_half_cycle_lengths([1, 2, 0]) == 1


def test_cycles_partition_and_follow_perm():
    rng = random.Random(6)
    perm = list(range(25))
    rng.shuffle(perm)
    found = cycles(perm)
    assert sorted(x for c in found for x in c) == list(range(25))
    for cycle in found:
        for a, b in zip(cycle, cycle[1:] + cycle[:1]):
            assert perm[a] == b
    assert sum_half_cycle_lengths(perm) == sum((len(c) - 1) // 2 for c in found)


def test_not_a_permutation():
    with pytest.raises(ValueError):
        cycles([0, 0, 1])
    with pytest.raises(ValueError):
        sum_half_cycle_lengths([1, 2])