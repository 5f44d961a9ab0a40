# OutlineStroke - Stroke-to-Outline Path Conversion
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from outlinestroke.core.curve_math import BezierCurveOps, elevate_quadratic
from outlinestroke.core.types.point import Point

from conftest import P, assert_point, nearest_distance

QUAD = [P(50, 50), P(100, 150), P(150, 50)]
CUBIC = [P(0, 0), P(0, 100), P(100, 100), P(100, 0)]


class TestEvaluation:

    def test_endpoints(self, ops):
        assert_point(ops.evaluate(CUBIC, 0), 0, 0)
        assert_point(ops.evaluate(CUBIC, 1), 100, 0)

    def test_quadratic_midpoint(self, ops):
        assert_point(ops.evaluate(QUAD, 0.5), 100, 100)

    def test_derivative(self, ops):
        assert_point(ops.derivative(QUAD, 0.5), 100, 0)
        assert_point(ops.derivative(QUAD, 0.5, 2), 0, -400)

    def test_derivative_of_line_has_no_curvature(self, ops):
        assert_point(ops.derivative([P(0, 0), P(10, 0)], 0.3, 2), 0, 0)

    def test_split_at_shares_midpoint(self, ops):
        left, right = ops.split_at(CUBIC, 0.5)
        assert len(left) == len(right) == 4
        assert_point(left[-1], 50, 75)
        assert_point(right[0], 50, 75)

    def test_split_range(self, ops):
        piece = ops.split(QUAD, 0.25, 0.75)
        assert_point(piece[0], *ops.evaluate(QUAD, 0.25))
        assert_point(piece[-1], *ops.evaluate(QUAD, 0.75))
        assert_point(ops.evaluate(piece, 0.5), *ops.evaluate(QUAD, 0.5))

    def test_split_whole_curve(self, ops):
        assert ops.split(QUAD, 0.0, 1.0) == QUAD


class TestTangents:

    def test_start_tangent_skips_collapsed_handle(self, ops):
        t = ops.start_tangent([P(0, 0), P(0, 0), P(10, 5), P(20, 0)])
        assert_point(t, 10, 5)

    def test_end_tangent_skips_collapsed_handle(self, ops):
        t = ops.end_tangent([P(0, 0), P(10, 5), P(20, 0), P(20, 0)])
        assert_point(t, 10, -5)


class TestLineIntersection:

    def test_crossing(self, ops):
        assert_point(ops.line_intersection(P(0, 0), P(10, 10), P(0, 10), P(10, 0)), 5, 5)

    def test_beyond_the_segments(self, ops):
        assert_point(ops.line_intersection(P(0, 0), P(1, 0), P(5, 1), P(5, 2)), 5, 0)

    def test_parallel(self, ops):
        assert ops.line_intersection(P(0, 0), P(10, 0), P(0, 5), P(10, 5)) is None

    def test_degenerate(self, ops):
        assert ops.line_intersection(P(0, 0), P(0, 0), P(0, 5), P(10, 5)) is None


class TestIntersects:

    def test_curve_crosses_line(self, ops):
        line = [P(0, 60), P(40, 60), P(80, 60), P(120, 60.001)]
        hits = ops.intersects(CUBIC, line)
        assert len(hits) == 2
        for ta, tb in hits:
            assert ops.evaluate(CUBIC, ta).distance(ops.evaluate(line, tb)) < 0.1
            assert ops.evaluate(CUBIC, ta).y == pytest.approx(60, abs=0.1)
        assert hits[0][0] < hits[1][0]

    def test_disjoint(self, ops):
        other = [P(200, 200), P(250, 300), P(300, 200)]
        assert ops.intersects(QUAD, other) == []

    def test_shared_endpoint(self, ops):
        other = [P(150, 50), P(200, 0), P(250, 50)]
        hits = ops.intersects(QUAD, other)
        assert len(hits) == 1
        assert_point(ops.evaluate(QUAD, hits[0][0]), 150, 50, tol=0.1)


class TestOffset:

    def test_line_offset_is_exact(self, ops):
        (piece,) = ops.offset([P(0, 0), P(10, 0)], 5)
        assert_point(piece[0], 0, 5)
        assert_point(piece[1], 10, 5)

    def test_quadratic_offset_keeps_degree(self, ops):
        pieces = ops.offset(QUAD, 10)
        assert len(pieces) > 1
        assert all(len(p) == 3 for p in pieces)

    def test_cubic_offset_keeps_degree(self, ops):
        pieces = ops.offset(CUBIC, -10)
        assert all(len(p) == 4 for p in pieces)

    def test_offset_pieces_are_continuous(self, ops):
        pieces = ops.offset(CUBIC, 10)
        for a, b in zip(pieces, pieces[1:]):
            assert a[-1].eql(b[0])

    @pytest.mark.parametrize("distance", [10, -10])
    def test_offset_within_tolerance(self, ops, distance):
        for piece in ops.offset(QUAD, distance):
            for t in (0.0, 0.1, 0.3, 0.5, 0.7, 0.9, 1.0):
                pt = ops.evaluate(piece, t)
                assert nearest_distance(ops, QUAD, pt) == pytest.approx(abs(distance), abs=0.3)

    def test_offset_endpoints_follow_normals(self, ops):
        pieces = ops.offset(QUAD, 10)
        # start tangent (50, 100) has left normal pointing to -x, +y
        start = pieces[0][0]
        n = Point(50, 100).left_normal()
        assert_point(start, 50 + 10 * n.x, 50 + 10 * n.y, tol=1e-6)

    def test_tiny_curve_is_translated(self, ops):
        tiny = [P(0, 0), P(0.1, 0.1), P(0.2, 0)]
        (piece,) = ops.offset(tiny, 10)
        assert_point(piece[0], 0, 10)
        assert_point(piece[2], 0.2, 10)

    def test_tighter_tolerance_subdivides_more(self):
        loose = BezierCurveOps(offset_tolerance=1.0).offset(CUBIC, 10)
        tight = BezierCurveOps(offset_tolerance=0.01).offset(CUBIC, 10)
        assert len(tight) >= len(loose)


class TestQuadraticFromPoints:

    def test_passes_through_midpoint(self, ops):
        p1, p2, p3 = P(0, 0), P(5, 5), P(10, 0)
        quad = ops.quadratic_from_points(p1, p2, p3)
        assert_point(quad[1], 5, 10)
        assert_point(ops.evaluate(quad, 0.5), 5, 5)

    def test_other_parameter(self, ops):
        p1, p2, p3 = P(0, 0), P(3, 4), P(10, 0)
        quad = ops.quadratic_from_points(p1, p2, p3, 0.25)
        assert_point(ops.evaluate(quad, 0.25), 3, 4)


def test_elevate_quadratic_is_same_curve(ops):
    cubic = elevate_quadratic(QUAD)
    for t in (0.1, 0.5, 0.8):
        assert_point(ops.evaluate(cubic, t), *ops.evaluate(QUAD, t))
