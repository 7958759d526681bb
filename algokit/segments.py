"""Orientation tests and intersection of closed line segments."""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum

Point = Sequence[int]


class Orientation(IntEnum):
    """Turn direction of an ordered point triple."""

    CCW = -1
    COL = 0
    CW = 1


def orientation(p: Point, q: Point, r: Point) -> Orientation:
    """Orientation of (p, q, r): CW when (p - r) x (q - r) is positive."""
    direction = (p[0] - r[0]) * (q[1] - r[1]) - (p[1] - r[1]) * (q[0] - r[0])
    if direction == 0:
        return Orientation.COL
    return Orientation.CW if direction > 0 else Orientation.CCW


def _overlaps(s: int, t: int, x: int) -> bool:
    return min(s, t) <= x <= max(s, t)


def on_segment(p: Point, q: Point, r: Point) -> bool:
    """Whether r lies in the bounding box of segment pq."""
    return _overlaps(p[0], q[0], r[0]) and _overlaps(p[1], q[1], r[1])


def do_intersect(p1: Point, q1: Point, p2: Point, q2: Point) -> bool:
    """Whether the closed segments p1q1 and p2q2 share a point."""
    o1 = orientation(p1, q1, p2)
    o2 = orientation(p1, q1, q2)
    o3 = orientation(p2, q2, p1)
    o4 = orientation(p2, q2, q1)
    if o1 != o2 and o3 != o4:
        return True
    return (
        (o1 == Orientation.COL and on_segment(p1, q1, p2))
        or (o2 == Orientation.COL and on_segment(p1, q1, q2))
        or (o3 == Orientation.COL and on_segment(p2, q2, p1))
        or (o4 == Orientation.COL and on_segment(p2, q2, q1))
    )