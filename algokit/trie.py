"""Trie keyed on (prefix character, suffix character) pairs."""

from __future__ import annotations


class _Node:
    __slots__ = ("children", "count")

    def __init__(self) -> None:
        self.children: dict[tuple[str, str], _Node] = {}
        self.count = 0


class PairTrie:
    """Step i of a word of length n is the pair (s[i], s[n - 1 - i]).

    A stored word lies on the path of a query exactly when it is both a
    prefix and a suffix of the query.
    """

    def __init__(self) -> None:
        self._root = _Node()

    @staticmethod
    def _steps(s: str):
        return zip(s, reversed(s))

    def insert(self, s: str) -> None:
        """Store one copy of s."""
        node = self._root
        for key in self._steps(s):
            node = node.children.setdefault(key, _Node())
        node.count += 1

    def get_count(self, s: str) -> int:
        """Number of stored words that are both a prefix and a suffix of s."""
        node = self._root
        total = 0
        for key in self._steps(s):
            node = node.children.get(key)
            if node is None:
                break
            total += node.count
        return total