import random

import pytest

from algokit.prefix_2d import Prefix2D


def _rect_sum(mat, l1, r1, l2, r2):
    return sum(sum(row[r1 - 1 : r2]) for row in mat[l1 - 1 : l2])


def test_every_rectangle_matches_direct_sum():
    rng = random.Random(7)
    mat = [[rng.randint(-9, 9) for _ in range(5)] for _ in range(4)]
    prefix = Prefix2D(mat)
    for l1 in range(1, 5):
        for l2 in range(l1, 5):
            for r1 in range(1, 6):
                for r2 in range(r1, 6):
                    assert prefix.query(l1, r1, l2, r2) == _rect_sum(mat, l1, r1, l2, r2)


def test_single_cells_return_matrix_values():
    mat = [[1, 2], [3, 4]]
    prefix = Prefix2D(mat)
    for i in range(2):
        for j in range(2):
            assert prefix.query(i + 1, j + 1, i + 1, j + 1) == mat[i][j]


def test_whole_matrix():
    mat = [[1, 2, 3], [4, 5, 6]]
    assert Prefix2D(mat).query(1, 1, 2, 3) == sum(map(sum, mat))


def test_out_of_range_raises():
    prefix = Prefix2D([[1, 2], [3, 4]])
    with pytest.raises(IndexError):
        prefix.query(0, 1, 1, 1)
    with pytest.raises(IndexError):
        prefix.query(1, 1, 3, 2)


def test_ragged_matrix_rejected():
    with pytest.raises(ValueError):
        Prefix2D([[1, 2], [3]])