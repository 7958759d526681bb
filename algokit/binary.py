"""Conversion between non-negative integers and binary digit strings."""

from __future__ import annotations


def to_binary(n: int) -> str:
    """Binary digits of n without leading zeros; zero gives an empty string."""
    if n < 0:
        raise ValueError("n must be non-negative")
    digits = []
    while n:
        digits.append("1" if n % 2 else "0")
        n //= 2
    return "".join(reversed(digits))


def from_binary(s: str) -> int:
    """Value of a string of binary digits; an empty string is zero."""
    n = 0
    for c in s:
        if c not in "01":
            raise ValueError(f"invalid binary digit {c!r}")
        n = 2 * n + (c == "1")
    return n