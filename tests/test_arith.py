import math

import pytest

from algokit.arith import (
    MOD,
    add_strings,
    count_prime_factors,
    egcd,
    fibonacci,
    inclusion_exclusion,
    is_palindrome,
    is_prime,
    karatsuba,
    multiply_strings,
    subtract_strings,
)
from algokit.primes import sieve


@pytest.mark.parametrize("a,b", [(240, 46), (35, 64), (1, 0), (99, 78)])
def test_egcd_bezout(a, b):
    g, x, y = egcd(a, b)
    assert g == math.gcd(a, b)
    assert a * x + b * y == g


def test_is_prime_matches_sieve():
    assert [n for n in range(-5, 500) if is_prime(n)] == sieve(499)


def test_count_prime_factors_properties():
    for p in sieve(100):
        assert count_prime_factors(p) == 1
    assert count_prime_factors(1) == 0
    assert count_prime_factors(2**10) == 10
    for a in range(1, 40):
        for b in range(1, 40):
            assert count_prime_factors(a * b) == count_prime_factors(a) + count_prime_factors(b)


def test_count_prime_factors_rejects_zero():
    with pytest.raises(ValueError):
        count_prime_factors(0)


def test_is_palindrome():
    assert is_palindrome(12321)
    assert is_palindrome(7)
    assert not is_palindrome(123)
    assert not is_palindrome(-121)


def test_fibonacci_start():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1
    assert fibonacci(2) == 2


def test_fibonacci_recurrence():
    for n in range(3, 80):
        assert fibonacci(n) == (fibonacci(n - 1) + fibonacci(n - 2)) % MOD


def test_fibonacci_large_is_reduced():
    value = fibonacci(10**12)
    assert 0 <= value < MOD
    assert value == (fibonacci(10**12 - 1) + fibonacci(10**12 - 2)) % MOD


@pytest.mark.parametrize("n,nums", [(100, [2, 3]), (1000, [4, 6, 10]), (30, [7]), (50, [])])
def test_inclusion_exclusion_counts(n, nums):
    hit = sum(1 for k in range(1, n + 1) if any(k % v == 0 for v in nums))
    assert inclusion_exclusion(n, nums, -1) == hit
    assert inclusion_exclusion(n, nums, 1) == n - hit


def test_inclusion_exclusion_bad_sign():
    with pytest.raises(ValueError):
        inclusion_exclusion(10, [2], 0)


PAIRS = [("0", "123"), ("123", "0"), ("9", "9"), ("1234", "5678"), ("99999", "1"),
         ("123456789012345678901234567890", "98765432109876543210"), ("1000", "25")]


@pytest.mark.parametrize("a,b", PAIRS)
def test_multiply_strings(a, b):
    assert multiply_strings(a, b) == str(int(a) * int(b))


@pytest.mark.parametrize("a,b", PAIRS)
def test_karatsuba(a, b):
    assert karatsuba(a, b) == str(int(a) * int(b))


@pytest.mark.parametrize("a,b", PAIRS)
def test_add_strings(a, b):
    assert add_strings(a, b) == str(int(a) + int(b))


@pytest.mark.parametrize("a,b", PAIRS)
def test_subtract_strings(a, b):
    big, small = max(a, b, key=int), min(a, b, key=int)
    assert subtract_strings(big, small) == str(int(big) - int(small))


def test_subtract_strings_negative_result():
    with pytest.raises(ValueError):
        subtract_strings("12", "100")


def test_invalid_digits():
    with pytest.raises(ValueError):
        add_strings("12a", "3")