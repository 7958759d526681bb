"""Polynomial hashing modulo 2**64."""

from __future__ import annotations

_MASK = (1 << 64) - 1


class RollingHash:
    """Prefix hashes h[i] = h[i-1] * p + ord(s[i-1]), wrapping at 2**64."""

    def __init__(self, s: str, p: int = 911) -> None:
        self.p = p & _MASK
        n = len(s)
        self.pows = [1] * (n + 1)
        self.hashes = [0] * (n + 1)
        for i, c in enumerate(s, 1):
            self.pows[i] = self.pows[i - 1] * self.p & _MASK
            self.hashes[i] = (self.hashes[i - 1] * self.p + ord(c)) & _MASK

    def __len__(self) -> int:
        return len(self.hashes) - 1

    def get_hash(self, l: int | None = None, r: int | None = None) -> int:
        """Hash of s[l..r] inclusive; of the whole string when no range is given."""
        if l is None and r is None:
            return self.hashes[-1]
        if l is None or r is None:
            raise TypeError("give both ends of the range or neither")
        if not 0 <= l <= r < len(self):
            raise IndexError(f"range [{l}, {r}] outside [0, {len(self) - 1}]")
        return (self.hashes[r + 1] - self.hashes[l] * self.pows[r - l + 1]) & _MASK