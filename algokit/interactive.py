"""Binary search for the first prefix whose reported weight exceeds its expected weight."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator, Sequence
from itertools import accumulate


def find_heavy_prefix(
    weights: Sequence[int], ask: Callable[[list[int]], int]
) -> int | None:
    """Smallest 1-indexed position whose prefix is reported heavier than expected.

    ``weights`` are the expected weights of positions 1..n. ``ask`` receives
    a list of 1-indexed positions and returns their actual total weight.
    Returns None when no queried range was heavier.
    """
    prefix = [0, *accumulate(weights)]
    lo, hi = 1, len(weights)
    answer = None
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        reported = ask(list(range(lo, mid + 1)))
        if reported > prefix[mid] - prefix[lo - 1]:
            answer = mid
            hi = mid - 1
        else:
            lo = mid + 1
    return answer


def _tokens() -> Iterator[str]:
    for line in sys.stdin:
        yield from line.split()


def main(argv: Sequence[str] | None = None) -> int:
    """Play the judge dialogue over standard input and output."""
    tokens = _tokens()

    def read_int() -> int:
        try:
            return int(next(tokens))
        except StopIteration:
            raise EOFError("unexpected end of input") from None

    def ask(indices: list[int]) -> int:
        print("?", len(indices), *indices, flush=True)
        return read_int()

    for _ in range(read_int()):
        n = read_int()
        weights = [read_int() for _ in range(n)]
        answer = find_heavy_prefix(weights, ask)
        print("!", -1 if answer is None else answer, flush=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())