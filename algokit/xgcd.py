"""Extended Euclid, modular inverses, the Chinese remainder theorem and
linear Diophantine equations.

Integer division here truncates toward zero, as fixed-width machine
arithmetic does, so results for negative operands follow that convention.
"""

from __future__ import annotations

import math
from collections.abc import Iterable


def _tdiv(a: int, b: int) -> int:
    """Quotient of a by b, truncated toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _tmod(a: int, b: int) -> int:
    """Remainder matching truncated division."""
    return a - b * _tdiv(a, b)


def xgcd(a: int, b: int) -> tuple[int, int, int]:
    """Return (g, x, y) with a*x + b*y == g, computed iteratively."""
    x, x1 = 1, 0
    y, y1 = 0, 1
    while b:
        q, r = _tdiv(a, b), _tmod(a, b)
        x, x1 = x1, x - q * x1
        y, y1 = y1, y - q * y1
        a, b = b, r
    return a, x, y


def xgcd_rec(a: int, b: int) -> tuple[int, int, int]:
    """Return (g, x, y) with a*x + b*y == g, computed recursively."""
    if b == 0:
        return a, 1, 0
    g, x1, y1 = xgcd_rec(b, _tmod(a, b))
    return g, y1, x1 - _tdiv(a, b) * y1


def mod_inv(a: int, m: int) -> int:
    """Inverse of a modulo m in [0, m); ValueError if it does not exist."""
    g, x, _ = xgcd(a, m)
    if g != 1:
        raise ValueError(f"{a} has no inverse modulo {m}")
    return x % m


def crt(congruences: Iterable[tuple[int, int]]) -> int:
    """Solve x = a (mod m) for every (a, m) pair with pairwise coprime moduli.

    Returns the solution in [0, M) where M is the product of the moduli.
    Raises ValueError when the moduli are not pairwise coprime.
    """
    pairs = list(congruences)
    modulus = math.prod(m for _, m in pairs)
    total = 0
    for remainder, m in pairs:
        partial = modulus // m
        inverse = mod_inv(partial, m)
        total = (total + remainder * partial % modulus * inverse) % modulus
    return total


def find_solution(a: int, b: int, c: int) -> tuple[int, int, int]:
    """Find one solution of a*x + b*y == c.

    Returns (x, y, g) where g is gcd(|a|, |b|). Raises ValueError when the
    equation has no integer solution.
    """
    g, x, y = xgcd(abs(a), abs(b))
    if g == 0 or c % g != 0:
        raise ValueError(f"{a}*x + {b}*y = {c} has no integer solution")
    factor = c // g
    x *= factor
    y *= factor
    if a < 0:
        x = -x
    if b < 0:
        y = -y
    return x, y, g


def _shift(x: int, y: int, a: int, b: int, k: int) -> tuple[int, int]:
    return x + k * b, y - k * a


def count_solutions(
    a: int, b: int, c: int, min_x: int, max_x: int, min_y: int, max_y: int
) -> int:
    """Count solutions of a*x + b*y == c with x and y inside the given bounds."""
    try:
        x, y, g = find_solution(a, b, c)
    except ValueError:
        return 0

    a = _tdiv(a, g)
    b = _tdiv(b, g)
    sign_a = 1 if a > 0 else -1
    sign_b = 1 if b > 0 else -1

    x, y = _shift(x, y, a, b, _tdiv(min_x - x, b))
    if x < min_x:
        x, y = _shift(x, y, a, b, sign_b)
    if x > max_x:
        return 0
    lx1 = x

    x, y = _shift(x, y, a, b, _tdiv(max_x - x, b))
    if x > max_x:
        x, y = _shift(x, y, a, b, -sign_b)
    rx1 = x

    x, y = _shift(x, y, a, b, _tdiv(y - min_y, a))
    if y < min_y:
        x, y = _shift(x, y, a, b, -sign_a)
    if y > max_y:
        return 0
    lx2 = x

    x, y = _shift(x, y, a, b, _tdiv(y - max_y, a))
    if y > max_y:
        x, y = _shift(x, y, a, b, sign_a)
    rx2 = x

    if lx2 > rx2:
        lx2, rx2 = rx2, lx2

    lx = max(lx1, lx2)
    rx = min(rx1, rx2)
    if lx > rx:
        return 0
    return 1 + (rx - lx) // abs(b)