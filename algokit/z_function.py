"""Z-function of a string."""

from __future__ import annotations

from collections.abc import Sequence


def z_function(s: Sequence) -> list[int]:
    """z[i] is the length of the longest common prefix of s and s[i:]; z[0] is 0."""
    n = len(s)
    z = [0] * n
    l = r = 0
    for i in range(1, n):
        if i < r:
            z[i] = min(r - i, z[i - l])
        while i + z[i] < n and s[z[i]] == s[i + z[i]]:
            z[i] += 1
        if i + z[i] > r:
            l, r = i, i + z[i]
    return z