# OutlineStroke - Stroke-to-Outline Path Conversion
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
OutlineStroke Types Point Module

Immutable 2D point/vector.  Cartesian (x, y) is stored; the polar form
(r, theta) is derived, with theta in degrees.  Every transform returns a new
Point.

Equality is approximate (see POINT_EPSILON): offset math routinely lands a
hair away from where an adjacent segment ends, and "already connected" has to
survive that.  Because approximate equality is not transitive, Points are
unhashable.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .constants import ANGLE_RADIAN, POINT_EPSILON


@dataclass(frozen=True, eq=False)
class Point:
    x: float
    y: float

    @staticmethod
    def from_point_like(point) -> Point:
        """Build a Point from anything with .x/.y, or an (x, y) pair."""
        if hasattr(point, "x"):
            return Point(float(point.x), float(point.y))
        return Point(float(point[0]), float(point[1]))

    @staticmethod
    def from_polar(theta: float, r: float) -> Point:
        return Point(
            r * math.cos(theta / ANGLE_RADIAN),
            r * math.sin(theta / ANGLE_RADIAN),
        )

    @property
    def r(self) -> float:
        return math.hypot(self.x, self.y)

    @property
    def theta(self) -> float:
        return math.atan2(self.y, self.x) * ANGLE_RADIAN

    def set_theta(self, theta: float) -> Point:
        return Point.from_polar(theta, self.r)

    def set_r(self, r: float) -> Point:
        return Point.from_polar(self.theta, r)

    def set_x(self, x: float) -> Point:
        return Point(x, self.y)

    def set_y(self, y: float) -> Point:
        return Point(self.x, y)

    def add(self, point: Point) -> Point:
        return Point(self.x + point.x, self.y + point.y)

    def sub(self, point: Point) -> Point:
        return Point(self.x - point.x, self.y - point.y)

    def scale(self, value: float) -> Point:
        return Point(self.x * value, self.y * value)

    def center(self, point: Point) -> Point:
        """Halfway from self towards point."""
        delta = self.sub(point)
        return Point(self.x - delta.x / 2, self.y - delta.y / 2)

    def distance(self, point: Point) -> float:
        return self.sub(point).r

    def rotate(self, angle: float, center: Point | None = None) -> Point:
        """Rotate by angle (degrees) around center (origin by default)."""
        if center is None:
            return self.set_theta(self.theta + angle)
        delta = self.sub(center)
        return center.add(delta.set_theta(delta.theta + angle))

    def lerp(self, point: Point, t: float) -> Point:
        return Point(self.x + (point.x - self.x) * t, self.y + (point.y - self.y) * t)

    def dot(self, other: Point) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Point) -> float:
        return self.x * other.y - self.y * other.x

    def normalized(self) -> Point:
        ln = self.r
        if ln < 1e-12:
            return Point(0.0, 0.0)
        return Point(self.x / ln, self.y / ln)

    def left_normal(self) -> Point:
        """Unit vector 90° counter-clockwise from this direction."""
        return Point(-self.y, self.x).normalized()

    def eql(self, point: Point, tolerance: float = POINT_EPSILON) -> bool:
        return (abs(self.x - point.x) <= tolerance
                and abs(self.y - point.y) <= tolerance)

    def __add__(self, other: Point) -> Point:
        return self.add(other)

    def __sub__(self, other: Point) -> Point:
        return self.sub(other)

    def __mul__(self, s: float) -> Point:
        return self.scale(s)

    def __rmul__(self, s: float) -> Point:
        return self.scale(s)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.eql(other)

    __hash__ = None

    def __iter__(self):
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"{self.x}, {self.y}"
