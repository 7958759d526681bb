import itertools

from algokit.segments import Orientation, do_intersect, on_segment, orientation


def test_collinear_points():
    assert orientation((0, 0), (1, 1), (2, 2)) is Orientation.COL


def test_turn_directions_are_opposite_when_swapped():
    assert orientation((0, 0), (1, 0), (0, 1)) is Orientation.CW
    assert orientation((1, 0), (0, 0), (0, 1)) is Orientation.CCW


def test_orientation_cyclic_invariance():
    pts = [(0, 0), (3, 1), (1, 4)]
    base = orientation(*pts)
    assert orientation(pts[1], pts[2], pts[0]) == base
    assert orientation(pts[2], pts[0], pts[1]) == base


def test_on_segment_bounding_box():
    assert on_segment((0, 0), (4, 4), (2, 2))
    assert not on_segment((0, 0), (4, 4), (5, 5))


def test_crossing_segments():
    assert do_intersect((0, 0), (4, 4), (0, 4), (4, 0))


def test_parallel_segments_do_not_meet():
    assert not do_intersect((0, 0), (4, 0), (0, 1), (4, 1))


def test_touching_and_collinear_cases():
    assert do_intersect((0, 0), (2, 2), (2, 2), (3, 0))
    assert do_intersect((0, 0), (4, 0), (2, 0), (6, 0))
    assert not do_intersect((0, 0), (1, 0), (2, 0), (3, 0))


def test_intersection_is_symmetric():
    coords = [(0, 0), (2, 1), (1, 3), (3, 3), (2, 0)]
    for p1, q1, p2, q2 in itertools.permutations(coords, 4):
        assert do_intersect(p1, q1, p2, q2) == do_intersect(p2, q2, p1, q1)
        assert do_intersect(p1, q1, p2, q2) == do_intersect(q1, p1, q2, p2)