"""Binary trie over integer bits for maximum-xor queries."""

from __future__ import annotations

from collections.abc import Iterable

_TOP_BIT = 1 << 20


class BitTrie:
    """Set of non-negative integers below 2**21, keyed by bits high to low."""

    def __init__(self) -> None:
        self._root: list = [None, None]

    def insert(self, num: int) -> None:
        """Add num to the set."""
        node = self._root
        b = _TOP_BIT
        while b:
            bit = 1 if num & b else 0
            if node[bit] is None:
                node[bit] = [None, None]
            node = node[bit]
            b >>= 1

    def remove(self, num: int) -> None:
        """Remove num from the set; nothing happens if it is absent."""
        self._remove(self._root, num, _TOP_BIT)

    def _remove(self, node: list, num: int, b: int) -> bool:
        if b == 0:
            return True
        bit = 1 if num & b else 0
        child = node[bit]
        if child is not None and self._remove(child, num, b >> 1):
            node[bit] = None
        return node[0] is None and node[1] is None

    def query(self, num: int) -> int:
        """Largest value of num xor x over the stored x."""
        if self._root[0] is None and self._root[1] is None:
            raise ValueError("query on empty trie")
        res = 0
        node = self._root
        b = _TOP_BIT
        while b:
            bit = 1 if num & b else 0
            if node[bit ^ 1] is not None:
                res |= b
                node = node[bit ^ 1]
            else:
                node = node[bit]
            b >>= 1
        return res


def maximum_strong_pair_xor(nums: Iterable[int]) -> int:
    """Largest x xor y over pairs with |x - y| <= min(x, y); 0 if there are none."""
    values = sorted(nums)
    trie = BitTrie()
    best = 0
    left = 0
    for value in values:
        trie.insert(value)
        while values[left] * 2 < value:
            trie.remove(values[left])
            left += 1
        best = max(best, trie.query(value))
    return best