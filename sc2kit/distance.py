"""Distance comparisons between points and collections of points.

Anything accepted as a position may be a ``Point2``, a ``Point3`` (its height
is ignored) or a pair of numbers.
"""

from __future__ import annotations

import math
from typing import Iterable, Iterator, List, Optional, TypeVar

from sc2kit.geometry import Point2, Point3

T = TypeVar("T")


def _as_point2(value: object) -> Point2:
    if isinstance(value, Point2):
        return value
    if isinstance(value, Point3):
        return value.to2()
    try:
        x, y = value  # type: ignore[misc]
    except (TypeError, ValueError):
        raise TypeError(f"cannot use {value!r} as a 2D position") from None
    return Point2(float(x), float(y))


def distance_squared(a, b) -> float:
    """Squared euclidean distance between two positions."""
    pa = _as_point2(a)
    pb = _as_point2(b)
    dx = pa.x - pb.x
    dy = pa.y - pb.y
    return dx * dx + dy * dy


def distance(a, b) -> float:
    """Euclidean distance between two positions."""
    return math.sqrt(distance_squared(a, b))


def is_closer(a, dist: float, b) -> bool:
    """Whether ``a`` and ``b`` are strictly nearer than ``dist``."""
    return distance_squared(a, b) < dist * dist


def is_further(a, dist: float, b) -> bool:
    """Whether ``a`` and ``b`` are strictly farther apart than ``dist``."""
    return distance_squared(a, b) > dist * dist


def closer(items: Iterable[T], dist: float, target) -> Iterator[T]:
    """Yield the items strictly nearer than ``dist`` to ``target``."""
    goal = _as_point2(target)
    return (item for item in items if is_closer(item, dist, goal))


def further(items: Iterable[T], dist: float, target) -> Iterator[T]:
    """Yield the items strictly farther than ``dist`` from ``target``."""
    goal = _as_point2(target)
    return (item for item in items if is_further(item, dist, goal))


def closest(items: Iterable[T], target) -> Optional[T]:
    """Item nearest to ``target`` (the first of equals), or ``None`` if empty."""
    goal = _as_point2(target)
    best: Optional[T] = None
    best_dist = math.inf
    for item in items:
        d = distance_squared(item, goal)
        if best is None or d < best_dist:
            best, best_dist = item, d
    return best


def furthest(items: Iterable[T], target) -> Optional[T]:
    """Item farthest from ``target`` (the last of equals), or ``None`` if empty."""
    goal = _as_point2(target)
    best: Optional[T] = None
    best_dist = -math.inf
    for item in items:
        d = distance_squared(item, goal)
        if best is None or d >= best_dist:
            best, best_dist = item, d
    return best


def closest_distance_squared(items: Iterable, target) -> Optional[float]:
    """Smallest squared distance from an item to ``target``, or ``None`` if empty."""
    goal = _as_point2(target)
    return min((distance_squared(item, goal) for item in items), default=None)


def furthest_distance_squared(items: Iterable, target) -> Optional[float]:
    """Largest squared distance from an item to ``target``, or ``None`` if empty."""
    goal = _as_point2(target)
    return max((distance_squared(item, goal) for item in items), default=None)


def closest_distance(items: Iterable, target) -> Optional[float]:
    """Smallest distance from an item to ``target``, or ``None`` if empty."""
    d = closest_distance_squared(items, target)
    return None if d is None else math.sqrt(d)


def furthest_distance(items: Iterable, target) -> Optional[float]:
    """Largest distance from an item to ``target``, or ``None`` if empty."""
    d = furthest_distance_squared(items, target)
    return None if d is None else math.sqrt(d)


def sort_by_distance(items: Iterable[T], target) -> List[T]:
    """Items ordered by distance to ``target``; equal distances keep their order."""
    goal = _as_point2(target)
    return sorted(items, key=lambda item: distance_squared(item, goal))


def center(points: Iterable) -> Optional[Point2]:
    """Mean of the given positions, or ``None`` if there are none."""
    sx = sy = 0.0
    count = 0
    for p in points:
        point = _as_point2(p)
        sx += point.x
        sy += point.y
        count += 1
    if count == 0:
        return None
    return Point2(sx / count, sy / count)