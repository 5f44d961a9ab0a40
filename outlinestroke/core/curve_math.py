# OutlineStroke - Stroke-to-Outline Path Conversion
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Curve math: the numeric primitives the geometry engine is built on.

Curves are plain lists of control Points: 2 for a line, 3 for a quadratic,
4 for a cubic Bézier.  Segments and Paths never do curve arithmetic
themselves; they call a CurveOps instance, so an alternative implementation
(a reference solver, an instrumented one in tests) can be injected.

Components:
1. Evaluation, derivatives and de Casteljau splitting
2. Curve/curve intersection (bounding-box subdivision + Newton refinement)
3. Curve offsetting (adaptive subdivision, same-degree output)
4. Quadratic through three points
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from typing import Sequence

from .error import CurveMathError
from .types.constants import (
    INTERSECTION_MAX_DEPTH,
    INTERSECTION_MAX_PAIRS,
    INTERSECTION_THRESHOLD,
    OFFSET_MAX_DEPTH,
    OFFSET_NORMAL_COS,
    OFFSET_TOLERANCE,
    TANGENT_EPSILON,
)
from .types.point import Point

logger = logging.getLogger(__name__)

Curve = Sequence[Point]
BBox = tuple[float, float, float, float]

_NEWTON_ITERATIONS = 16
_NEWTON_EPSILON = 1e-10


class CurveOps(ABC):
    """Curve-math capability: split, offset, intersect, fit a quadratic."""

    @abstractmethod
    def evaluate(self, points: Curve, t: float) -> Point: ...

    @abstractmethod
    def derivative(self, points: Curve, t: float, order: int = 1) -> Point: ...

    @abstractmethod
    def split(self, points: Curve, t0: float, t1: float) -> list[Point]: ...

    @abstractmethod
    def intersects(self, a: Curve, b: Curve) -> list[tuple[float, float]]: ...

    @abstractmethod
    def offset(self, points: Curve, distance: float) -> list[list[Point]]: ...

    @abstractmethod
    def quadratic_from_points(self, p1: Point, p2: Point, p3: Point,
                              t: float = 0.5) -> list[Point]: ...

    @abstractmethod
    def line_intersection(self, p1: Point, p2: Point,
                          p3: Point, p4: Point) -> Point | None: ...

    # ------------------------------------------------------------------
    # Helpers expressed through the primitives above
    # ------------------------------------------------------------------

    def start_tangent(self, points: Curve) -> Point:
        """Direction of travel at t=0, skipping handles that collapse onto the start."""
        t = Point(0.0, 0.0)
        for p in points[1:]:
            t = p - points[0]
            if t.r >= TANGENT_EPSILON:
                return t
        return t

    def end_tangent(self, points: Curve) -> Point:
        """Direction of travel at t=1, skipping handles that collapse onto the end."""
        t = Point(0.0, 0.0)
        for p in reversed(points[:-1]):
            t = points[-1] - p
            if t.r >= TANGENT_EPSILON:
                return t
        return t


class BezierCurveOps(CurveOps):
    """Default CurveOps over Bézier control polygons of degree 1 to 3."""

    def __init__(self, offset_tolerance: float = OFFSET_TOLERANCE,
                 offset_max_depth: int = OFFSET_MAX_DEPTH,
                 intersection_threshold: float = INTERSECTION_THRESHOLD) -> None:
        self.offset_tolerance = offset_tolerance
        self.offset_max_depth = offset_max_depth
        self.intersection_threshold = intersection_threshold

    # ------------------------------------------------------------------
    # Evaluation and splitting
    # ------------------------------------------------------------------

    def evaluate(self, points: Curve, t: float) -> Point:
        pts = list(points)
        while len(pts) > 1:
            pts = [a.lerp(b, t) for a, b in zip(pts, pts[1:])]
        return pts[0]

    def derivative(self, points: Curve, t: float, order: int = 1) -> Point:
        pts = list(points)
        for _ in range(order):
            if len(pts) < 2:
                return Point(0.0, 0.0)
            n = len(pts) - 1
            pts = [(b - a) * n for a, b in zip(pts, pts[1:])]
        return self.evaluate(pts, t)

    def split_at(self, points: Curve, t: float) -> tuple[list[Point], list[Point]]:
        """Split at parameter t. Returns (left, right) control points."""
        left = [points[0]]
        right = [points[-1]]
        pts = list(points)
        while len(pts) > 1:
            pts = [a.lerp(b, t) for a, b in zip(pts, pts[1:])]
            left.append(pts[0])
            right.append(pts[-1])
        right.reverse()
        return left, right

    def split(self, points: Curve, t0: float, t1: float) -> list[Point]:
        """Control points of the piece between t0 and t1 (same degree)."""
        if t0 <= 0.0:
            return self.split_at(points, t1)[0] if t1 < 1.0 else list(points)
        _, right = self.split_at(points, t0)
        if t1 >= 1.0:
            return right
        return self.split_at(right, (t1 - t0) / (1.0 - t0))[0]

    @staticmethod
    def bbox(points: Curve) -> BBox:
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return min(xs), min(ys), max(xs), max(ys)

    # ------------------------------------------------------------------
    # Intersections
    # ------------------------------------------------------------------

    def line_intersection(self, p1: Point, p2: Point,
                          p3: Point, p4: Point) -> Point | None:
        """Intersection of the infinite lines p1-p2 and p3-p4, None if parallel."""
        x1, y1, x2, y2 = p1.x, p1.y, p2.x, p2.y
        x3, y3, x4, y4 = p3.x, p3.y, p4.x, p4.y

        d = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
        scale = p1.distance(p2) * p3.distance(p4)
        if scale == 0.0 or abs(d) <= 1e-12 * scale:
            return None

        a = x1 * y2 - y1 * x2
        b = x3 * y4 - y3 * x4
        return Point(
            (a * (x3 - x4) - (x1 - x2) * b) / d,
            (a * (y3 - y4) - (y1 - y2) * b) / d,
        )

    def intersects(self, a: Curve, b: Curve) -> list[tuple[float, float]]:
        """
        All parameter pairs (ta, tb) where curves a and b meet, sorted by ta.

        Both curves are halved repeatedly; pairs whose bounding boxes stop
        overlapping are dropped, pairs whose boxes shrink below the threshold
        become hits.  Each hit is then polished by Newton iteration on
        a(ta) - b(tb) = 0.
        """
        threshold = self.intersection_threshold
        pairs = [(list(a), 0.0, 1.0, list(b), 0.0, 1.0)]
        hits: list[tuple[float, float]] = []
        depth = 0

        while pairs:
            if depth > INTERSECTION_MAX_DEPTH or len(pairs) > INTERSECTION_MAX_PAIRS:
                raise CurveMathError(
                    f"intersection search did not converge ({len(pairs)} candidate "
                    f"pairs at depth {depth})", "intersects")
            next_pairs = []
            for ca, a0, a1, cb, b0, b1 in pairs:
                box_a = self.bbox(ca)
                box_b = self.bbox(cb)
                if not _boxes_overlap(box_a, box_b):
                    continue
                if _box_size(box_a) + _box_size(box_b) < threshold:
                    hits.append(((a0 + a1) / 2.0, (b0 + b1) / 2.0))
                    continue
                am = (a0 + a1) / 2.0
                bm = (b0 + b1) / 2.0
                la, ra = self.split_at(ca, 0.5)
                lb, rb = self.split_at(cb, 0.5)
                next_pairs.append((la, a0, am, lb, b0, bm))
                next_pairs.append((la, a0, am, rb, bm, b1))
                next_pairs.append((ra, am, a1, lb, b0, bm))
                next_pairs.append((ra, am, a1, rb, bm, b1))
            pairs = next_pairs
            depth += 1

        refined = sorted(self._refine(a, b, ta, tb) for ta, tb in hits)

        result: list[tuple[float, float]] = []
        for ta, tb in refined:
            pt = self.evaluate(a, ta)
            if any(pt.distance(self.evaluate(a, sa)) < threshold for sa, _ in result):
                continue
            result.append((ta, tb))
        return result

    def _refine(self, a: Curve, b: Curve, ta: float, tb: float) -> tuple[float, float]:
        """Newton iteration on a(s) - b(t) = 0 starting from (ta, tb)."""
        s, t = ta, tb
        for _ in range(_NEWTON_ITERATIONS):
            diff = self.evaluate(a, s) - self.evaluate(b, t)
            if abs(diff.x) < _NEWTON_EPSILON and abs(diff.y) < _NEWTON_EPSILON:
                break
            da = self.derivative(a, s)
            db = self.derivative(b, t)
            det = -da.cross(db)
            if abs(det) < 1e-12:
                # tangential contact, keep the subdivision estimate
                return ta, tb
            s += diff.cross(db) / det
            t += diff.cross(da) / det
            if not (-0.05 <= s <= 1.05 and -0.05 <= t <= 1.05):
                logger.debug("Newton refinement left the curve domain at (%g, %g)", s, t)
                return ta, tb
        s = min(1.0, max(0.0, s))
        t = min(1.0, max(0.0, t))
        if self.evaluate(a, s).distance(self.evaluate(b, t)) > self.intersection_threshold:
            logger.debug("intersection refinement did not converge near (%g, %g)", ta, tb)
            return ta, tb
        return s, t

    # ------------------------------------------------------------------
    # Offsetting
    # ------------------------------------------------------------------

    def offset(self, points: Curve, distance: float) -> list[list[Point]]:
        """
        Approximate the curve at constant distance (left normal positive).

        Returns one or more control-point lists of the same degree as the
        input, end-to-start continuous.
        """
        points = list(points)
        if len(points) == 2 or distance == 0.0:
            n = (points[-1] - points[0]).left_normal()
            return [[p + n * distance for p in points]]

        # A curve much shorter than the offset distance has no meaningful
        # shape at that scale; translate it rigidly.
        hull = sum(p.distance(q) for p, q in zip(points, points[1:]))
        if hull < abs(distance) * 0.1:
            n = (points[-1] - points[0]).left_normal()
            if n.r == 0.0:
                n = self.start_tangent(points).left_normal()
            return [[p + n * distance for p in points]]

        result: list[list[Point]] = []
        self._offset_recursive(points, distance, 0, result)
        return result

    def _offset_recursive(self, points: list[Point], distance: float,
                          depth: int, result: list[list[Point]]) -> None:
        n0 = self.start_tangent(points).left_normal()
        n3 = self.end_tangent(points).left_normal()
        candidate = self._scale(points, n0, n3, distance)

        flat = (n0.dot(n3) >= OFFSET_NORMAL_COS
                and self._offset_error(points, candidate, distance) <= self.offset_tolerance)
        if not flat and depth >= self.offset_max_depth:
            logger.warning("offset subdivision depth limit reached; piece kept "
                           "outside tolerance %g", self.offset_tolerance)
            flat = True

        if flat:
            if result and result[-1][-1].eql(candidate[0]):
                candidate[0] = result[-1][-1]
            result.append(candidate)
            return

        left, right = self.split_at(points, 0.5)
        self._offset_recursive(left, distance, depth + 1, result)
        self._offset_recursive(right, distance, depth + 1, result)

    def _scale(self, points: list[Point], n0: Point, n3: Point,
               distance: float) -> list[Point]:
        """Offset a flat-enough piece by moving its control polygon."""
        start = points[0] + n0 * distance
        end = points[-1] + n3 * distance
        if len(points) == 4:
            # Tiller-Hanson: handles travel with their anchor's normal
            return [start, points[1] + n0 * distance, points[2] + n3 * distance, end]

        # Quadratic: the control point sits where the offset tangents meet
        control = self.line_intersection(
            start, start + self.start_tangent(points),
            end, end + self.end_tangent(points))
        if control is None or control.distance(points[1]) > 4.0 * abs(distance) + points[0].distance(points[2]):
            control = points[1] + (n0 + n3).normalized() * distance
        return [start, control, end]

    def _offset_error(self, points: list[Point], candidate: list[Point],
                      distance: float) -> float:
        """Largest deviation of candidate from |distance| away from the curve."""
        target = abs(distance)
        error = 0.0
        for t in (0.25, 0.5, 0.75):
            pt = self.evaluate(candidate, t)
            u = self._project(points, pt, t)
            error = max(error, abs(self.evaluate(points, u).distance(pt) - target))
        return error

    def _project(self, points: Curve, pt: Point, u: float) -> float:
        """Parameter of the curve point nearest pt, by Newton from u."""
        for _ in range(4):
            diff = self.evaluate(points, u) - pt
            d1 = self.derivative(points, u)
            d2 = self.derivative(points, u, 2)
            denom = d1.dot(d1) + diff.dot(d2)
            if abs(denom) < 1e-12:
                break
            u = min(1.0, max(0.0, u - diff.dot(d1) / denom))
        return u

    # ------------------------------------------------------------------
    # Fitting
    # ------------------------------------------------------------------

    def quadratic_from_points(self, p1: Point, p2: Point, p3: Point,
                              t: float = 0.5) -> list[Point]:
        """Quadratic from p1 to p3 that passes through p2 at parameter t."""
        if t == 0.0:
            return [p2, p2, p3]
        if t == 1.0:
            return [p1, p2, p2]
        bottom = t * t + (1 - t) * (1 - t)
        u = (1 - t) * (1 - t) / bottom
        ratio = abs((bottom - 1) / bottom)
        c = p3.lerp(p1, u)
        control = p2 + (p2 - c) * (1.0 / ratio)
        return [p1, control, p3]


def elevate_quadratic(points: Curve) -> list[Point]:
    """Exact cubic control points for a quadratic."""
    p0, q, p1 = points
    return [p0, p0 + (q - p0) * (2.0 / 3.0), p1 + (q - p1) * (2.0 / 3.0), p1]


def _boxes_overlap(a: BBox, b: BBox) -> bool:
    return a[0] <= b[2] and b[0] <= a[2] and a[1] <= b[3] and b[1] <= a[3]


def _box_size(box: BBox) -> float:
    return ((box[2] - box[0]) + (box[3] - box[1])) / 2.0


DEFAULT_CURVE_OPS = BezierCurveOps()
