"""Binomial coefficients, exact and modulo a prime."""

from __future__ import annotations

MOD = 10**9 + 7


def ncr(n: int, r: int) -> int:
    """Exact binomial coefficient C(n, r); zero when r is out of range."""
    if r < 0 or r > n:
        return 0
    r = min(r, n - r)
    res = 1
    for i in range(r):
        res = res * (n - i) // (i + 1)
    return res


def pow_mod(a: int, b: int, mod: int = MOD) -> int:
    """a**b modulo mod for b > 0; 1 for b <= 0."""
    if b <= 0:
        return 1
    return pow(a, b, mod)


class Comb:
    """Factorial tables for computing C(n, r) modulo a prime."""

    def __init__(self, n: int, mod: int = MOD) -> None:
        self.mod = mod
        self.fact = [1] * (n + 1)
        for i in range(1, n + 1):
            self.fact[i] = self.fact[i - 1] * i % mod
        self.inv_fact = [1] * (n + 1)
        inv = self.pow_mod(self.fact[n], mod - 2)
        for i in range(n, -1, -1):
            self.inv_fact[i] = inv
            inv = inv * i % mod

    def pow_mod(self, a: int, b: int) -> int:
        """a**b modulo the table's modulus; a negative b inverts the result."""
        if b < 0:
            return self.pow_mod(self.pow_mod(a, -b), self.mod - 2)
        return pow(a % self.mod, b, self.mod)

    def ncr(self, n: int, r: int) -> int:
        """C(n, r) modulo the table's modulus."""
        if r < 0 or r > n:
            return 0
        if r == 0 or r == n:
            return 1
        return self.fact[n] * self.inv_fact[r] % self.mod * self.inv_fact[n - r] % self.mod

    def add(self, a: int, b: int) -> int:
        """(a + b) reduced into [0, mod)."""
        return (a + b) % self.mod

    def mul(self, a: int, b: int) -> int:
        """(a * b) reduced into [0, mod)."""
        return (a % self.mod) * (b % self.mod) % self.mod