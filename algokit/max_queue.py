"""A FIFO queue that reports its maximum in amortised constant time."""

from __future__ import annotations


class MaxQueue:
    """Queue built from two stacks, each entry carrying a running maximum."""

    def __init__(self) -> None:
        self._front: list[tuple[int, int]] = []
        self._back: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._front) + len(self._back)

    def push(self, value: int) -> None:
        """Append value at the back of the queue."""
        running = max(value, self._back[-1][1]) if self._back else value
        self._back.append((value, running))

    def pop(self) -> int:
        """Remove and return the value at the front of the queue."""
        if not self._front:
            while self._back:
                value, _ = self._back.pop()
                running = max(value, self._front[-1][1]) if self._front else value
                self._front.append((value, running))
        if not self._front:
            raise IndexError("pop from empty queue")
        return self._front.pop()[0]

    def get_max(self) -> int:
        """Largest value currently in the queue."""
        tops = [stack[-1][1] for stack in (self._front, self._back) if stack]
        if not tops:
            raise IndexError("get_max from empty queue")
        return max(tops)