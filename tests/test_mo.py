from collections import Counter

import pytest

from algokit.mo import Mo, Query


def _odd_values(values, l, r):
    return sum(1 for c in Counter(values[l : r + 1]).values() if c % 2)


def test_matches_counting_every_range():
    values = [5, 3, 5, 5, 7, 3, 9, 7, 5, 100]
    ranges = [(l, r) for l in range(len(values)) for r in range(l, len(values))]
    queries = [Query(l, r, i, sqrt_n=3) for i, (l, r) in enumerate(ranges)]
    answers = Mo(values).process(queries)
    assert answers == [_odd_values(values, l, r) for l, r in ranges]


def test_single_element_range_has_one_odd_value():
    values = [4, 4, 8]
    answers = Mo(values).process([Query(i, i, i) for i in range(3)])
    assert answers == [1, 1, 1]


def test_pairs_cancel_out():
    values = [2, 2, 6, 6]
    assert Mo(values).process([Query(0, 3, 0)]) == [0]


def test_out_of_range_query():
    with pytest.raises(IndexError):
        Mo([1, 2]).process([Query(0, 2, 0)])


def test_sort_key_uses_block():
    assert Query(7, 1, 0, sqrt_n=3).sort_key() == (2, 1)