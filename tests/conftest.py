# OutlineStroke - Stroke-to-Outline Path Conversion
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from outlinestroke.core.curve_math import BezierCurveOps
from outlinestroke.core.types.point import Point


@pytest.fixture
def ops():
    return BezierCurveOps()


def assert_point(actual, x, y, tol=1e-6):
    assert abs(actual.x - x) <= tol and abs(actual.y - y) <= tol, f"{actual} != {x}, {y}"


def assert_closed_contour(path):
    """A contour is closed and every neighbouring pair of segments touches."""
    assert path.closed
    assert path.segs
    assert path.is_continuous()
    assert path.last_point().eql(path.first_point())


def distance_to_line(point, a, b):
    d = b - a
    return abs(d.cross(point - a)) / d.r


def nearest_distance(ops, points, target, samples=2000):
    """Distance from target to a curve, by dense sampling."""
    return min(ops.evaluate(points, i / samples).distance(target) for i in range(samples + 1))


def P(x, y):
    return Point(float(x), float(y))
