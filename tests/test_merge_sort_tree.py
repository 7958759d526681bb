import random

import pytest

from algokit.merge_sort_tree import MergeSortTree, MergeSortTreeWithUpdate


def _least_at_least(part, x):
    return min((v for v in part if v >= x), default=None)


@pytest.mark.parametrize("cls", [MergeSortTree, MergeSortTreeWithUpdate])
def test_all_ranges_match_scan(cls):
    rng = random.Random(31)
    values = [rng.randint(-30, 30) for _ in range(12)]
    tree = cls(values)
    for l in range(len(values)):
        for r in range(l, len(values)):
            for x in (-31, -5, 0, 7, 31):
                assert tree.range_query(l, r, x) == _least_at_least(values[l : r + 1], x)


def test_exact_value_is_found():
    values = [9, 2, 6, 4]
    tree = MergeSortTree(values)
    assert tree.range_query(0, 3, 6) == 6
    assert tree.range_query(0, 3, max(values) + 1) is None


def test_updates_match_scan():
    rng = random.Random(32)
    values = [rng.randint(0, 50) for _ in range(13)]
    tree = MergeSortTreeWithUpdate(values)
    for _ in range(80):
        i = rng.randrange(len(values))
        values[i] = rng.randint(0, 50)
        tree.point_update(i, values[i])
        l = rng.randrange(len(values))
        r = rng.randrange(l, len(values))
        x = rng.randint(0, 55)
        assert tree.range_query(l, r, x) == _least_at_least(values[l : r + 1], x)


def test_update_removes_old_value():
    tree = MergeSortTreeWithUpdate([5, 10])
    tree.point_update(1, 3)
    assert tree.range_query(0, 1, 6) is None
    assert tree.range_query(0, 1, 0) == 3


@pytest.mark.parametrize("cls", [MergeSortTree, MergeSortTreeWithUpdate])
def test_errors(cls):
    tree = cls([1, 2, 3])
    with pytest.raises(IndexError):
        tree.range_query(0, 3, 0)
    with pytest.raises(ValueError):
        cls([])


def test_update_out_of_range():
    tree = MergeSortTreeWithUpdate([1])
    with pytest.raises(IndexError):
        tree.point_update(1, 4)