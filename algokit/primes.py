"""Prime sieves, divisor tables and inclusion-exclusion counting."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

MOD = 10**9 + 7


def sieve(n: int) -> list[int]:
    """Return all primes p with p <= n."""
    if n < 2:
        return []
    marked = bytearray(n + 1)
    primes = []
    for i in range(2, n + 1):
        if marked[i]:
            continue
        primes.append(i)
        marked[i * i :: i] = bytes(len(range(i * i, n + 1, i)))
        for j in range(i * i, n + 1, i):
            marked[j] = 1
    return primes


def smallest_prime_factors(x: int) -> list[int]:
    """Return a list whose entry k is the smallest prime factor of k (k >= 2)."""
    res = list(range(x + 1))
    for i in range(2, math.isqrt(x) + 1):
        if res[i] != i:
            continue
        for j in range(i * i, x + 1, i):
            if res[j] == j:
                res[j] = i
    return res


def divisor_lists(limit: int) -> list[list[int]]:
    """Return the sorted divisors of every m below limit, indexed by m."""
    factors: list[list[int]] = [[] for _ in range(limit)]
    for i in range(1, limit):
        for m in range(i, limit, i):
            factors[m].append(i)
    return factors


def count_multiples(nums: Iterable[int], limit: int) -> list[int]:
    """For each j below limit, sum over divisors i of j the number of nums divisible by i.

    Every number in nums must lie in [1, limit).
    """
    factors = divisor_lists(limit)
    divisible = [0] * limit
    for x in nums:
        for f in factors[x]:
            divisible[f] += 1
    cnt = [0] * limit
    for i in range(1, limit):
        if divisible[i] == 0:
            continue
        for j in range(i, limit, i):
            cnt[j] += divisible[i]
    return cnt


def sum_of_divisors_up_to(n: int) -> int:
    """Sum of sigma(k) for k in 1..n, modulo 1e9+7."""

    def triangular(x: int) -> int:
        return x * (x + 1) // 2

    ans = 0
    i = 1
    while i <= n:
        q = n // i
        nxt = n // q
        block = (triangular(min(n, nxt)) - triangular(i - 1)) % MOD
        ans = (ans + block * q) % MOD
        i = nxt + 1
    return ans


def count_divisible(values: Sequence[int], limit: int) -> int:
    """Count integers in [1, limit] divisible by at least one of values."""
    values = list(values)

    def walk(idx: int, current: int, picked: int) -> int:
        if current > limit:
            return 0
        if idx == len(values):
            if picked == 0:
                return 0
            sign = 1 if picked % 2 else -1
            return sign * (limit // current)
        return walk(idx + 1, current, picked) + walk(
            idx + 1, math.lcm(current, values[idx]), picked + 1
        )

    return walk(0, 1, 0)


def count_pie(combs: Sequence[Iterable[int]], target: int) -> int:
    """Inclusion-exclusion count from precomputed subset lcms.

    combs[i] holds the lcm of every i-element subset; combs[0] is ignored.
    """
    res = 0
    for size, group in enumerate(combs):
        if size == 0:
            continue
        sign = 1 if size % 2 else -1
        res += sum(sign * (target // x) for x in group)
    return res