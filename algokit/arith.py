"""Assorted arithmetic helpers: primality, palindromes, a Fibonacci-type
sequence, inclusion-exclusion counting and decimal-string arithmetic."""

from __future__ import annotations

import math
from collections.abc import Sequence
from itertools import zip_longest

from .xgcd import xgcd

MOD = 10**9 + 7
_DIGITS = "0123456789"


def egcd(a: int, b: int) -> tuple[int, int, int]:
    """Return (g, x, y) with a*x + b*y == g."""
    return xgcd(a, b)


def is_prime(n: int) -> bool:
    """Trial-division primality test."""
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def count_prime_factors(n: int) -> int:
    """Number of prime factors of n counted with multiplicity."""
    if n < 1:
        raise ValueError("n must be positive")
    count = 0
    while n % 2 == 0:
        count += 1
        n >>= 1
    i = 3
    while i * i <= n:
        while n % i == 0:
            count += 1
            n //= i
        i += 2
    if n > 2:
        count += 1
    return count


def is_palindrome(n: int) -> bool:
    """Whether the decimal representation of n reads the same reversed."""
    digits = str(n)
    return digits == digits[::-1]


def _mat_mul(a, b):
    return [
        [
            (a[0][0] * b[0][0] + a[0][1] * b[1][0]) % MOD,
            (a[0][0] * b[0][1] + a[0][1] * b[1][1]) % MOD,
        ],
        [
            (a[1][0] * b[0][0] + a[1][1] * b[1][0]) % MOD,
            (a[1][0] * b[0][1] + a[1][1] * b[1][1]) % MOD,
        ],
    ]


def _mat_pow(m, n):
    if n == 1:
        return m
    half = _mat_pow(m, n // 2)
    result = _mat_mul(half, half)
    if n & 1:
        result = _mat_mul(result, m)
    return result


def fibonacci(n: int) -> int:
    """n-th term, modulo 1e9+7, of the sequence 0, 1, 2, 3, 5, 8, ...

    For n <= 1 the term is n itself; beyond that it is the top-left entry
    of [[1, 1], [1, 0]] raised to the n-th power.
    """
    if n <= 1:
        return n
    return _mat_pow([[1, 1], [1, 0]], n)[0][0]


def inclusion_exclusion(n: int, nums: Sequence[int], sign: int = -1) -> int:
    """Count integers in [1, n] by inclusion-exclusion over nums.

    With sign -1, count those divisible by at least one of nums; with
    sign 1, count those divisible by none of them.
    """
    if sign not in (1, -1):
        raise ValueError("sign must be 1 or -1")
    nums = list(nums)

    def walk(idx: int, d: int, current_sign: int, picked: bool) -> int:
        if idx == len(nums):
            if not picked and sign == -1:
                return 0
            return current_sign * (n // d)
        return walk(idx + 1, d, current_sign, picked) + walk(
            idx + 1, math.lcm(d, nums[idx]), -current_sign, True
        )

    return walk(0, 1, sign, False)


def _normalise(s: str) -> str:
    if not s or any(c not in _DIGITS for c in s):
        raise ValueError(f"not a non-negative decimal number: {s!r}")
    return s.lstrip("0") or "0"


def multiply_strings(a: str, b: str) -> str:
    """Product of two decimal strings by schoolbook multiplication."""
    a, b = _normalise(a), _normalise(b)
    if a == "0" or b == "0":
        return "0"
    result = [0] * (len(a) + len(b))
    for i, da in enumerate(reversed(a)):
        carry = 0
        for j, db in enumerate(reversed(b)):
            total = int(da) * int(db) + result[i + j] + carry
            result[i + j] = total % 10
            carry = total // 10
        result[i + len(b)] += carry
    return "".join(map(str, reversed(result))).lstrip("0") or "0"


def add_strings(a: str, b: str) -> str:
    """Sum of two decimal strings."""
    a, b = _normalise(a), _normalise(b)
    digits = []
    carry = 0
    for da, db in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        total = int(da) + int(db) + carry
        digits.append(str(total % 10))
        carry = total // 10
    if carry:
        digits.append(str(carry))
    return "".join(reversed(digits)).lstrip("0") or "0"


def subtract_strings(a: str, b: str) -> str:
    """Difference a - b of two decimal strings; a must not be less than b."""
    a, b = _normalise(a), _normalise(b)
    digits = []
    borrow = 0
    for da, db in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        x = int(da) - borrow
        y = int(db)
        borrow = 0
        if x < y:
            x += 10
            borrow = 1
        digits.append(str(x - y))
    if borrow:
        raise ValueError(f"{a} is less than {b}")
    return "".join(reversed(digits)).lstrip("0") or "0"


def karatsuba(a: str, b: str) -> str:
    """Product of two decimal strings by Karatsuba multiplication."""
    a, b = _normalise(a), _normalise(b)
    if len(a) == 1 or len(b) == 1:
        return multiply_strings(a, b)
    width = max(len(a), len(b))
    a, b = a.zfill(width), b.zfill(width)
    mid = width // 2
    high_a, low_a = a[:-mid], a[-mid:]
    high_b, low_b = b[:-mid], b[-mid:]

    z0 = karatsuba(low_a, low_b)
    z1 = karatsuba(add_strings(low_a, high_a), add_strings(low_b, high_b))
    z2 = karatsuba(high_a, high_b)

    middle = subtract_strings(subtract_strings(z1, z2), z0)
    total = add_strings(z2 + "0" * (2 * mid), middle + "0" * mid)
    return add_strings(total, z0)