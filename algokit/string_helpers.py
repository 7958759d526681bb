"""Small string utilities."""

from __future__ import annotations


def split(s: str, delimiter: str) -> list[str]:
    """Pieces of s between delimiters, leaving out empty pieces."""
    if not delimiter:
        raise ValueError("empty delimiter")
    return [item for item in s.split(delimiter) if item]