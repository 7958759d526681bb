"""A sorted multiset with rank queries."""

from __future__ import annotations

from bisect import bisect_left, bisect_right, insort
from collections.abc import Iterator


class SortedList:
    """Values kept in ascending order, duplicates allowed."""

    def __init__(self) -> None:
        self._items: list = []

    def add(self, value) -> None:
        """Insert one copy of value."""
        insort(self._items, value)

    def remove(self, value) -> None:
        """Remove one copy of value; ValueError if it is absent."""
        i = bisect_left(self._items, value)
        if i == len(self._items) or self._items[i] != value:
            raise ValueError(f"{value!r} not in list")
        del self._items[i]

    def index(self, value) -> int:
        """Number of stored values strictly less than value."""
        return bisect_left(self._items, value)

    def __getitem__(self, i: int):
        return self._items[i]

    def lower_bound(self, value) -> int:
        """Position of the first stored value not less than value."""
        return bisect_left(self._items, value)

    def upper_bound(self, value) -> int:
        """Position of the first stored value greater than value."""
        return bisect_right(self._items, value)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator:
        return iter(self._items)

    def __contains__(self, value) -> bool:
        i = bisect_left(self._items, value)
        return i < len(self._items) and self._items[i] == value