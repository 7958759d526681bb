import pytest

from algokit.binary import from_binary, to_binary


@pytest.mark.parametrize("n", [1, 2, 5, 255, 1024, 123456789])
def test_to_binary_matches_format(n):
    assert to_binary(n) == format(n, "b")


def test_zero_is_empty():
    assert to_binary(0) == ""
    assert from_binary("") == 0


@pytest.mark.parametrize("n", range(0, 300))
def test_round_trip(n):
    assert from_binary(to_binary(n)) == n


@pytest.mark.parametrize("s", ["0", "0001", "101010", "1" * 40])
def test_from_binary_matches_int(s):
    assert from_binary(s) == int(s, 2)


def test_invalid_digit():
    with pytest.raises(ValueError):
        from_binary("1021")


def test_negative_rejected():
    with pytest.raises(ValueError):
        to_binary(-3)