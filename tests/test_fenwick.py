import random

import pytest

from algokit.fenwick import Fenwick


def test_built_tree_gives_range_sums():
    rng = random.Random(2)
    values = [rng.randint(-10, 10) for _ in range(37)]
    fw = Fenwick(values)
    for l in range(len(values)):
        for r in range(l, len(values)):
            assert fw.sum(l, r) == sum(values[l : r + 1])


def test_point_adds():
    rng = random.Random(4)
    values = [0] * 20
    fw = Fenwick(20)
    for _ in range(100):
        i = rng.randrange(20)
        d = rng.randint(-5, 5)
        fw.add(i, d)
        values[i] += d
        r = rng.randrange(20)
        assert fw.prefix_sum(r) == sum(values[: r + 1])


def test_range_add_point_read():
    rng = random.Random(8)
    points = [0] * 15
    fw = Fenwick(15)
    for _ in range(50):
        l = rng.randrange(15)
        r = rng.randrange(l, 15)
        d = rng.randint(-3, 3)
        fw.range_add(l, r, d)
        for i in range(l, r + 1):
            points[i] += d
    assert [fw.prefix_sum(i) for i in range(15)] == points


def test_frequency_counts():
    values = [3, 1, 4, 1, 5, 9, 2, 6]
    fw = Fenwick(10)
    for v in values:
        fw.add(v, 1)
    for x in range(10):
        assert fw.count_lt(x) == sum(v < x for v in values)
        assert fw.count_gt(x) == sum(v > x for v in values)


def test_out_of_range_add():
    fw = Fenwick(3)
    with pytest.raises(IndexError):
        fw.add(3, 1)
    with pytest.raises(IndexError):
        fw.add(-1, 1)