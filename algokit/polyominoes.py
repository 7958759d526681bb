"""Enumeration of fixed polyominoes with Redelmeier's algorithm."""

from __future__ import annotations

from collections.abc import Iterable

Point = tuple[int, int]

_STEPS = ((0, 1), (0, -1), (-1, 0), (1, 0))


def _neighbours(cells: Iterable[Point]) -> set[Point]:
    result = set()
    for x, y in cells:
        for dx, dy in _STEPS:
            nx, ny = x + dx, y + dy
            if ny < 0 or (ny == 0 and nx < 0):
                continue
            result.add((nx, ny))
    return result


def dimension(polyomino: Iterable[Point]) -> tuple[int, int]:
    """Width and height of the bounding box of a set of cells."""
    cells = list(polyomino)
    if not cells:
        raise ValueError("polyomino has no cells")
    xs = [x for x, _ in cells]
    ys = [y for _, y in cells]
    return max(xs) - min(xs) + 1, max(ys) - min(ys) + 1


class Polyominoes:
    """Counts and shapes of fixed polyominoes up to a given size p."""

    def __init__(self, p: int) -> None:
        if p < 0:
            raise ValueError("size must be non-negative")
        self.p = p
        self._counts = [0] * (p + 1)
        self._counts[0] = 1
        self._shapes: list[frozenset[Point]] = []
        self._processed = False

    def _ensure(self) -> None:
        if self._processed:
            return
        if self.p > 0:
            self._extend(frozenset(), {(0, 0)})
        self._processed = True

    def _extend(self, polyomino: frozenset[Point], untried: set[Point]) -> None:
        while untried:
            cell = min(untried)
            untried.remove(cell)
            grown = polyomino | {cell}
            size = len(grown)
            self._counts[size] += 1
            if size == self.p:
                self._shapes.append(grown)
            else:
                known = _neighbours(polyomino)
                next_untried = set(untried)
                next_untried.update(
                    pt for pt in _neighbours([cell]) if pt not in known and pt not in polyomino
                )
                self._extend(grown, next_untried)

    def counts(self) -> list[int]:
        """Entry k is the number of fixed polyominoes with k cells, k <= p."""
        self._ensure()
        return list(self._counts)

    def polyominoes(self) -> list[frozenset[Point]]:
        """Every fixed polyomino with exactly p cells."""
        self._ensure()
        return list(self._shapes)