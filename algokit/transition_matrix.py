"""Matrix products and powers modulo 1e9+7 for linear recurrences."""

from __future__ import annotations

from collections.abc import Sequence

MOD = 10**9 + 7

Matrix = list[list[int]]


def mat_mul(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Product a @ b with entries reduced modulo 1e9+7."""
    inner = len(b)
    if any(len(row) != inner for row in a):
        raise ValueError("matrix dimensions do not match")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) % MOD for col in columns] for row in a]


def mat_pow(t: Sequence[Sequence[int]], exponent: int) -> Matrix:
    """t raised to a non-negative power, modulo 1e9+7."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    n = len(t)
    result = [[int(i == j) for j in range(n)] for i in range(n)]
    base = [list(row) for row in t]
    while exponent > 0:
        if exponent & 1:
            result = mat_mul(result, base)
        base = mat_mul(base, base)
        exponent >>= 1
    return result


def apply_transitions(t: Sequence[Sequence[int]], v: Sequence[int], steps: int) -> list[int]:
    """Row vector v multiplied by t raised to steps."""
    return mat_mul([list(v)], mat_pow(t, steps))[0]