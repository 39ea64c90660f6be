"""Geometric primitives used on the game map: sizes, rectangles and points."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

Number = Union[int, float]


def _round_half_away(value: float) -> float:
    """Round to the nearest integer, halves away from zero."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


@dataclass(slots=True)
class Size:
    """Size of a 2D rectangle."""

    x: int = 0
    y: int = 0


@dataclass(slots=True)
class Rect:
    """Rectangle from (x0, y0) to (x1, y1)."""

    x0: int = 0
    y0: int = 0
    x1: int = 0
    y1: int = 0


@dataclass(frozen=True, eq=False, slots=True)
class Point2:
    """Point on the 2D grid.

    Two points are equal (and hash equally) when their coordinates fall into
    the same grid cell, i.e. when the truncated integer coordinates match.
    """

    x: float = 0.0
    y: float = 0.0

    # -- construction helpers -------------------------------------------------

    def towards(self, other: Point2, offset: float) -> Point2:
        """Point moved from ``self`` towards ``other`` by ``offset``.

        Raises ``ZeroDivisionError`` when both points coincide exactly.
        """
        dx = other.x - self.x
        dy = other.y - self.y
        dist = math.hypot(dx, dy)
        return Point2(self.x + dx / dist * offset, self.y + dy / dist * offset)

    def towards_angle(self, angle: float, offset: float) -> Point2:
        """Point moved from ``self`` in direction ``angle`` (radians) by ``offset``."""
        return self.offset(offset * math.cos(angle), offset * math.sin(angle))

    def offset(self, x: float, y: float) -> Point2:
        """Point shifted by the given amounts."""
        return Point2(self.x + x, self.y + y)

    def circle_intersection(
        self, other: Point2, radius: float
    ) -> Optional[Tuple[Point2, Point2]]:
        """Intersection points of two circles of ``radius`` centred on ``self`` and ``other``.

        Returns ``None`` when the points are equal or the circles do not meet.
        """
        if self == other:
            return None
        vec_to_center = (other - self) / 2.0
        half_distance = vec_to_center.length()
        if radius < half_distance:
            return None
        remaining = math.sqrt(radius * radius - half_distance * half_distance)
        stretched = vec_to_center * (remaining / half_distance)
        center = self + vec_to_center
        return (center + stretched.rotate90(True), center + stretched.rotate90(False))

    # -- vector operations ----------------------------------------------------

    def len_squared(self) -> float:
        """Squared length of the vector."""
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        """Length of the vector."""
        return math.sqrt(self.len_squared())

    def normalize(self) -> Point2:
        """Unit vector in the same direction. Raises ``ZeroDivisionError`` for a zero vector."""
        return self / self.length()

    def rotate(self, angle: float) -> Point2:
        """Vector rotated counter-clockwise by ``angle`` radians."""
        s, c = math.sin(angle), math.cos(angle)
        return Point2(c * self.x - s * self.y, s * self.x + c * self.y)

    def rotate90(self, clockwise: bool) -> Point2:
        """Vector rotated by a right angle."""
        if clockwise:
            return Point2(self.y, -self.x)
        return Point2(-self.y, self.x)

    def dot(self, other: Point2) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y

    def round(self) -> Point2:
        """Point with coordinates rounded, halves away from zero."""
        return Point2(_round_half_away(self.x), _round_half_away(self.y))

    def floor(self) -> Point2:
        """Point with coordinates rounded down."""
        return Point2(float(math.floor(self.x)), float(math.floor(self.y)))

    def ceil(self) -> Point2:
        """Point with coordinates rounded up."""
        return Point2(float(math.ceil(self.x)), float(math.ceil(self.y)))

    def abs(self) -> Point2:
        """Point with absolute coordinates."""
        return Point2(abs(self.x), abs(self.y))

    # -- neighbourhoods -------------------------------------------------------

    def neighbors4(self) -> Tuple[Point2, Point2, Point2, Point2]:
        """The four orthogonal neighbours."""
        return (
            self.offset(1.0, 0.0),
            self.offset(-1.0, 0.0),
            self.offset(0.0, 1.0),
            self.offset(0.0, -1.0),
        )

    def neighbors4diagonal(self) -> Tuple[Point2, Point2, Point2, Point2]:
        """The four diagonal neighbours."""
        return (
            self.offset(1.0, 1.0),
            self.offset(-1.0, -1.0),
            self.offset(1.0, -1.0),
            self.offset(-1.0, 1.0),
        )

    def neighbors8(self) -> Tuple[Point2, ...]:
        """All eight neighbours, orthogonal first."""
        return self.neighbors4() + self.neighbors4diagonal()

    # -- conversions ----------------------------------------------------------

    def as_tuple(self) -> Tuple[float, float]:
        """Coordinates as a tuple."""
        return (self.x, self.y)

    def to3(self, z: float) -> Point3:
        """3D point at height ``z``."""
        return Point3(self.x, self.y, z)

    def to_cell(self) -> Tuple[int, int]:
        """Grid cell holding the point (coordinates truncated towards zero)."""
        return (int(self.x), int(self.y))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    # -- equality -------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point2):
            return NotImplemented
        return self.to_cell() == other.to_cell()

    def __hash__(self) -> int:
        return hash(self.to_cell())

    # -- arithmetic -----------------------------------------------------------

    @staticmethod
    def _operand(other: object) -> Optional[Tuple[float, float]]:
        if isinstance(other, Point2):
            return other.x, other.y
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return float(other), float(other)
        return None

    def __add__(self, other: Union[Point2, Number]) -> Point2:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        return Point2(self.x + o[0], self.y + o[1])

    __radd__ = __add__

    def __sub__(self, other: Union[Point2, Number]) -> Point2:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        return Point2(self.x - o[0], self.y - o[1])

    def __mul__(self, other: Union[Point2, Number]) -> Point2:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        return Point2(self.x * o[0], self.y * o[1])

    __rmul__ = __mul__

    def __truediv__(self, other: Union[Point2, Number]) -> Point2:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        return Point2(self.x / o[0], self.y / o[1])

    def __neg__(self) -> Point2:
        return Point2(-self.x, -self.y)


def cell_center(x: int, y: int) -> Point2:
    """Centre point of the grid cell ``(x, y)``."""
    return Point2(x + 0.5, y + 0.5)


@dataclass(frozen=True, slots=True)
class Point3:
    """Point in the 3D game world."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def offset(self, x: float, y: float, z: float) -> Point3:
        """Point shifted by the given amounts."""
        return Point3(self.x + x, self.y + y, self.z + z)

    def round(self) -> Point3:
        """Point with each coordinate shifted by one half and truncated towards zero."""
        return Point3(
            float(int(self.x + 0.5)),
            float(int(self.y + 0.5)),
            float(int(self.z + 0.5)),
        )

    def as_tuple(self) -> Tuple[float, float, float]:
        """Coordinates as a tuple."""
        return (self.x, self.y, self.z)

    def to2(self) -> Point2:
        """The point projected onto the ground plane."""
        return Point2(self.x, self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    @staticmethod
    def _operand(other: object) -> Optional[Tuple[float, float, float]]:
        if isinstance(other, Point3):
            return other.x, other.y, other.z
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            v = float(other)
            return v, v, v
        return None

    def __add__(self, other: Union[Point3, Number]) -> Point3:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        return Point3(self.x + o[0], self.y + o[1], self.z + o[2])

    __radd__ = __add__

    def __sub__(self, other: Union[Point3, Number]) -> Point3:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        return Point3(self.x - o[0], self.y - o[1], self.z - o[2])

    def __mul__(self, other: Union[Point3, Number]) -> Point3:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        return Point3(self.x * o[0], self.y * o[1], self.z * o[2])

    __rmul__ = __mul__

    def __truediv__(self, other: Union[Point3, Number]) -> Point3:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        return Point3(self.x / o[0], self.y / o[1], self.z / o[2])