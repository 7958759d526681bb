import pytest

from algokit.transition_matrix import MOD, apply_transitions, mat_mul, mat_pow

FIB = [[1, 1], [1, 0]]


def test_zero_power_is_identity():
    assert mat_pow(FIB, 0) == [[1, 0], [0, 1]]


def test_powers_add():
    t = [[2, 3, 1], [0, 1, 4], [5, 0, 2]]
    for a in range(4):
        for b in range(4):
            assert mat_pow(t, a + b) == mat_mul(mat_pow(t, a), mat_pow(t, b))


def test_fibonacci_through_transitions():
    assert apply_transitions(FIB, [1, 0], 10)[1] == 55


def test_results_reduced_modulo():
    result = mat_pow([[MOD - 1, MOD - 1], [MOD - 1, MOD - 1]], 5)
    assert all(0 <= x < MOD for row in result for x in row)


def test_bad_input_rejected():
    with pytest.raises(ValueError):
        mat_mul([[1, 2]], [[1, 2]])
    with pytest.raises(ValueError):
        mat_pow(FIB, -1)