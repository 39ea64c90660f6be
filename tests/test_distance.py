import math

import pytest

from sc2kit.distance import (
    center,
    closer,
    closest,
    closest_distance,
    closest_distance_squared,
    distance,
    distance_squared,
    furthest,
    furthest_distance,
    furthest_distance_squared,
    further,
    is_closer,
    is_further,
    sort_by_distance,
)
from sc2kit.geometry import Point2, Point3

POINTS = [
    Point2(1.0, 1.0),
    Point2(5.0, 0.0),
    Point2(-3.0, 4.0),
    Point2(0.5, -0.5),
    Point2(10.0, 10.0),
]
ORIGIN = Point2(0.0, 0.0)


def test_distance_symmetric_and_consistent():
    a = Point2(1.0, 2.0)
    b = Point2(-4.0, 7.5)
    assert distance_squared(a, b) == distance_squared(b, a)
    assert distance(a, b) == pytest.approx(math.sqrt(distance_squared(a, b)))
    assert distance(a, a) == 0.0


def test_distance_accepts_tuples_and_ignores_height():
    assert distance(Point3(0.0, 0.0, 10.0), Point2(3.0, 4.0)) == pytest.approx(
        distance((0.0, 0.0), (3.0, 4.0))
    )


def test_distance_rejects_non_positions():
    with pytest.raises(TypeError):
        distance("abc", ORIGIN)


def test_is_closer_and_further_are_strict():
    a = Point2(0.0, 0.0)
    b = Point2(3.0, 0.0)
    assert not is_closer(a, 3.0, b)
    assert not is_further(a, 3.0, b)
    assert is_closer(a, 3.5, b)
    assert is_further(a, 2.5, b)


def test_closer_and_further_partition():
    near = list(closer(POINTS, 5.0, ORIGIN))
    far = list(further(POINTS, 5.0, ORIGIN))
    exact = [p for p in POINTS if distance(p, ORIGIN) == 5.0]
    assert len(near) + len(far) + len(exact) == len(POINTS)
    assert all(distance(p, ORIGIN) < 5.0 for p in near)
    assert all(distance(p, ORIGIN) > 5.0 for p in far)


def test_closest_and_furthest():
    c = closest(POINTS, ORIGIN)
    f = furthest(POINTS, ORIGIN)
    assert c is POINTS[3]
    assert f is POINTS[4]
    assert all(distance(c, ORIGIN) <= distance(p, ORIGIN) for p in POINTS)
    assert all(distance(f, ORIGIN) >= distance(p, ORIGIN) for p in POINTS)


def test_tie_breaking():
    first = Point2(1.0, 0.0)
    second = Point2(0.0, 1.0)
    assert closest([first, second], ORIGIN) is first
    assert furthest([first, second], ORIGIN) is second


def test_empty_inputs_give_none():
    assert closest([], ORIGIN) is None
    assert furthest([], ORIGIN) is None
    assert closest_distance([], ORIGIN) is None
    assert furthest_distance([], ORIGIN) is None
    assert closest_distance_squared([], ORIGIN) is None
    assert furthest_distance_squared([], ORIGIN) is None
    assert center([]) is None


def test_distance_aggregates_match_items():
    target = Point2(2.0, 2.0)
    assert closest_distance(POINTS, target) == pytest.approx(distance(closest(POINTS, target), target))
    assert furthest_distance(POINTS, target) == pytest.approx(distance(furthest(POINTS, target), target))
    assert closest_distance_squared(POINTS, target) == pytest.approx(
        distance_squared(closest(POINTS, target), target)
    )
    assert furthest_distance_squared(POINTS, target) == pytest.approx(
        distance_squared(furthest(POINTS, target), target)
    )


def test_sort_by_distance_is_ordered_permutation():
    ordered = sort_by_distance(POINTS, ORIGIN)
    dists = [distance_squared(p, ORIGIN) for p in ordered]
    assert dists == sorted(dists)
    assert sorted(map(id, ordered)) == sorted(map(id, POINTS))


def test_sort_by_distance_is_stable():
    a = Point2(1.0, 0.0)
    b = Point2(0.0, 1.0)
    c = Point2(-1.0, 0.0)
    ordered = sort_by_distance([a, Point2(5.0, 5.0), b, c], ORIGIN)
    assert ordered[:3] == [a, b, c]
    assert [id(p) for p in ordered[:3]] == [id(a), id(b), id(c)]


def test_center():
    square = [(0.0, 0.0), (2.0, 0.0), (2.0, 2.0), (0.0, 2.0)]
    assert center(square).as_tuple() == pytest.approx((1.0, 1.0))
    single = Point2(3.25, -1.5)
    assert center([single]).as_tuple() == single.as_tuple()


def test_center_moves_with_translation():
    shift = Point2(4.0, -2.0)
    base = center(POINTS)
    moved = center(p + shift for p in POINTS)
    assert (moved - base).as_tuple() == pytest.approx(shift.as_tuple())