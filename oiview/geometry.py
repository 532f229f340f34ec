"""Two-dimensional points and axis-aligned rectangles."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Union

Number = Union[int, float]


def _sign(value: Number) -> int:
    return (value > 0) - (value < 0)


def _round_half_away(value: Number) -> int:
    return _sign(value) * math.floor(abs(value) + 0.5)


@dataclass(frozen=True)
class Point:
    """A 2D point or vector."""

    x: Number = 0
    y: Number = 0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def __mul__(self, other: Union[Point, Number]) -> Point:
        if isinstance(other, Point):
            return Point(self.x * other.x, self.y * other.y)
        return Point(self.x * other, self.y * other)

    __rmul__ = __mul__

    def abs(self) -> Point:
        """Component-wise absolute value."""
        return Point(abs(self.x), abs(self.y))

    def sign(self) -> Point:
        """Component-wise sign: -1, 0 or 1."""
        return Point(_sign(self.x), _sign(self.y))

    def distance_squared(self, other: Point) -> Number:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def rounded(self) -> Point:
        """Round each component to the nearest integer, halves away from zero."""
        return Point(_round_half_away(self.x), _round_half_away(self.y))


class Corner(Enum):
    NONE = "none"
    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"


@dataclass(frozen=True)
class Rect:
    """Rectangle spanned by a top-left point ``p0`` and a bottom-right point ``p1``."""

    p0: Point = Point()
    p1: Point = Point()

    def width(self) -> Number:
        return self.p1.x - self.p0.x

    def height(self) -> Number:
        return self.p1.y - self.p0.y

    def corner(self, corner: Corner) -> Point:
        if corner is Corner.TOP_LEFT:
            return self.p0
        if corner is Corner.BOTTOM_RIGHT:
            return self.p1
        if corner is Corner.TOP_RIGHT:
            return Point(self.p1.x, self.p0.y)
        if corner is Corner.BOTTOM_LEFT:
            return Point(self.p0.x, self.p1.y)
        raise ValueError(f"rectangle has no corner {corner!r}")

    def inflate(self, dx: Number, dy: Number) -> Rect:
        """Grow the rectangle by ``dx`` and ``dy`` on every side."""
        delta = Point(dx, dy)
        return Rect(self.p0 - delta, self.p1 + delta)

    def contains(self, point: Point) -> bool:
        """Whether ``point`` lies inside the rectangle, edges included."""
        return (
            self.p0.x <= point.x <= self.p1.x
            and self.p0.y <= point.y <= self.p1.y
        )

    def translated(self, offset: Point) -> Rect:
        return Rect(self.p0 + offset, self.p1 + offset)