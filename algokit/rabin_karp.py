"""Double polynomial hashing of substrings."""

from __future__ import annotations


class RabinKarp:
    """Substring hashes under two bases and moduli.

    Character c has value ord(c) - ord('a') + 1, and a string hashes to
    sum(value(s[i]) * p**i) modulo the modulus.
    """

    def __init__(
        self,
        s: str,
        p1: int = 419,
        p2: int = 911,
        mod1: int = 10**9 + 7,
        mod2: int = 10**9 + 9,
    ) -> None:
        self.s = s
        self.p1, self.p2 = p1, p2
        self.mod1, self.mod2 = mod1, mod2
        self._pref1, self._inv1 = self._tables(s, p1, mod1)
        self._pref2, self._inv2 = self._tables(s, p2, mod2)

    @staticmethod
    def _tables(s: str, p: int, mod: int) -> tuple[list[int], list[int]]:
        pref = [0]
        h, power = 0, 1
        for c in s:
            h = (h + power * (ord(c) - ord("a") + 1)) % mod
            pref.append(h)
            power = power * p % mod
        inv_p = pow(p, mod - 2, mod)
        inv = [1]
        for _ in s:
            inv.append(inv[-1] * inv_p % mod)
        return pref, inv

    def __len__(self) -> int:
        return len(self.s)

    def query(self, l: int, r: int) -> tuple[int, int]:
        """Pair of hashes of s[l..r] inclusive, independent of its position."""
        if not 0 <= l <= r < len(self.s):
            raise IndexError(f"range [{l}, {r}] outside [0, {len(self.s) - 1}]")
        h1 = (self._pref1[r + 1] - self._pref1[l]) % self.mod1 * self._inv1[l] % self.mod1
        h2 = (self._pref2[r + 1] - self._pref2[l]) % self.mod2 * self._inv2[l] % self.mod2
        return h1, h2