# OutlineStroke - Stroke-to-Outline Path Conversion
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
OutlineStroke Types Segment Module

The drawable primitives of a path: Line (2 points), QuadraticCurve (3) and
CubicCurve (4).  The first point is the start anchor, the last point the end
anchor; anything in between is a control point.

Segments are immutable.  Points are copied on construction and every
operation (offset, reverse, split, endpoint snapping) builds a new segment.
Curve arithmetic is delegated to the CurveOps instance the segment carries.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..curve_math import DEFAULT_CURVE_OPS, CurveOps
from .commands import CurveTo, LineTo, PathCommand, QuadTo
from .constants import LINE_NUDGE_DEGREES, TANGENT_EPSILON
from .point import Point


@dataclass(frozen=True)
class SegmentIntersection:
    """Where two segments cross: parameter on each and the crossing point."""
    t_self: float
    t_other: float
    point: Point


class Segment:
    """Base class of the segment variants."""

    command = ""
    point_count = 0

    def __init__(self, *points, ops: CurveOps | None = None) -> None:
        if len(points) != self.point_count:
            raise TypeError(
                f"{type(self).__name__} takes {self.point_count} points, got {len(points)}")
        self.points = tuple(Point.from_point_like(p) for p in points)
        self.ops = ops or DEFAULT_CURVE_OPS

    # ------------------------------------------------------------------
    # Anchors and tangents
    # ------------------------------------------------------------------

    def first_point(self) -> Point:
        return self.points[0]

    def last_point(self) -> Point:
        return self.points[-1]

    def start_tangent(self) -> Point:
        return self.ops.start_tangent(self.points)

    def end_tangent(self) -> Point:
        return self.ops.end_tangent(self.points)

    def is_degenerate(self) -> bool:
        """True when every point sits on the start anchor."""
        first = self.points[0]
        return all(p.distance(first) < TANGENT_EPSILON for p in self.points[1:])

    # ------------------------------------------------------------------
    # Rebuilding
    # ------------------------------------------------------------------

    def _rebuild(self, points) -> Segment:
        return type(self)(*points, ops=self.ops)

    def reverse_points(self) -> Segment:
        return self._rebuild(reversed(self.points))

    def with_first_point(self, point: Point) -> Segment:
        return self._rebuild((point,) + self.points[1:])

    def with_last_point(self, point: Point) -> Segment:
        return self._rebuild(self.points[:-1] + (point,))

    def split(self, t0: float, t1: float) -> Segment:
        """The piece of this segment between parameters t0 and t1."""
        return self._rebuild(self.ops.split(self.points, t0, t1))

    def point_at(self, t: float) -> Point:
        return self.ops.evaluate(self.points, t)

    def to_curve(self) -> list[Point]:
        """Control points handed to the curve intersector."""
        return list(self.points)

    def offset(self, radius: float):
        """Approximate offset at signed radius (positive = left of travel)."""
        from ...operators.strokepath_algorithm import Path

        pieces = self.ops.offset(self.points, radius)
        return Path([self._rebuild(p) for p in pieces], ops=self.ops)

    # ------------------------------------------------------------------
    # Intersections
    # ------------------------------------------------------------------

    def parameter_of(self, point: Point, t: float) -> float:
        """Parameter on this segment for an intersector hit at curve parameter t."""
        return t

    def intersections(self, other: Segment) -> list[SegmentIntersection]:
        """Every crossing of self and other, ordered along self."""
        hits = []
        for ta, tb in self.ops.intersects(self.to_curve(), other.to_curve()):
            t_self = self.parameter_of(self.ops.evaluate(self.to_curve(), ta), ta)
            point = self.point_at(t_self)
            hits.append(SegmentIntersection(t_self, other.parameter_of(point, tb), point))
        hits.sort(key=lambda hit: hit.t_self)
        return hits

    def intersects(self, other: Segment) -> SegmentIntersection | None:
        hits = self.intersections(other)
        return hits[0] if hits else None

    def extend_intersects(self, other: Segment) -> Point | None:
        """
        Intersection of the tangent line at self's end with the tangent line
        at other's start, or None when they are parallel.
        """
        end = self.last_point()
        start = other.first_point()
        return self.ops.line_intersection(
            end - self.end_tangent(), end,
            start, start + other.start_tangent())

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def to_command(self) -> PathCommand:
        raise NotImplementedError

    def __eq__(self, other) -> bool:
        if not isinstance(other, Segment):
            return NotImplemented
        return type(self) is type(other) and all(
            a.eql(b) for a, b in zip(self.points, other.points))

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({' | '.join(str(p) for p in self.points)})"


class Line(Segment):
    command = "L"
    point_count = 2

    def offset(self, radius: float):
        """Exact parallel translation along the left normal."""
        from ...operators.strokepath_algorithm import Path

        start, end = self.points
        n = (end - start).left_normal() * radius
        return Path([Line(start + n, end + n, ops=self.ops)], ops=self.ops)

    def split(self, t0: float, t1: float) -> Line:
        start, end = self.points
        return Line(start.lerp(end, t0), start.lerp(end, t1), ops=self.ops)

    def point_at(self, t: float) -> Point:
        return self.points[0].lerp(self.points[1], t)

    def to_curve(self) -> list[Point]:
        # A straight cubic has a zero-area hull; nudge the first handle off
        # the line so the subdivision intersector stays well conditioned.
        start, end = self.points
        delta = end - start
        return [start, start + delta.set_theta(delta.theta + LINE_NUDGE_DEGREES), end, end]

    def parameter_of(self, point: Point, t: float) -> float:
        start, end = self.points
        delta = end - start
        length2 = delta.dot(delta)
        if length2 == 0.0:
            return 0.0
        return min(1.0, max(0.0, (point - start).dot(delta) / length2))

    def intersections(self, other: Segment) -> list[SegmentIntersection]:
        if not isinstance(other, Line):
            return super().intersections(other)

        a0, a1 = self.points
        b0, b1 = other.points
        r = a1 - a0
        s = b1 - b0
        denom = r.cross(s)
        if abs(denom) <= 1e-12 * r.r * s.r:
            return []
        q = b0 - a0
        t = q.cross(s) / denom
        u = q.cross(r) / denom
        eps = 1e-9
        if not (-eps <= t <= 1 + eps and -eps <= u <= 1 + eps):
            return []
        t = min(1.0, max(0.0, t))
        u = min(1.0, max(0.0, u))
        return [SegmentIntersection(t, u, a0.lerp(a1, t))]

    def to_command(self) -> LineTo:
        end = self.points[1]
        return LineTo(end.x, end.y)


class QuadraticCurve(Segment):
    command = "Q"
    point_count = 3

    def to_command(self) -> QuadTo:
        _, c, end = self.points
        return QuadTo(c.x, c.y, end.x, end.y)


class CubicCurve(Segment):
    command = "C"
    point_count = 4

    def to_command(self) -> CurveTo:
        _, c1, c2, end = self.points
        return CurveTo(c1.x, c1.y, c2.x, c2.y, end.x, end.y)
