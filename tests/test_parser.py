# OutlineStroke - Stroke-to-Outline Path Conversion
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

import math

import pytest

from outlinestroke.core import error as os_error
from outlinestroke.core.parser import parse_path
from outlinestroke.core.types.commands import ClosePath, CurveTo, LineTo, MoveTo, QuadTo


class TestParsePath:

    def test_absolute(self):
        assert parse_path("M50,50L350,350") == [MoveTo(50, 50), LineTo(350, 350)]

    def test_separators(self):
        assert parse_path("M10-5 L 20 -5") == [MoveTo(10, -5), LineTo(20, -5)]

    def test_implicit_lineto_after_moveto(self):
        assert parse_path("M1 2 3 4 5 6") == [MoveTo(1, 2), LineTo(3, 4), LineTo(5, 6)]

    def test_relative_commands_are_made_absolute(self):
        assert parse_path("m10,10 l5,0 l0,5") == [MoveTo(10, 10), LineTo(15, 10), LineTo(15, 15)]

    def test_horizontal_and_vertical(self):
        assert parse_path("M1,1 v4 h-1 V0") == [
            MoveTo(1, 1), LineTo(1, 5), LineTo(0, 5), LineTo(0, 0),
        ]

    def test_closepath_draws_back_to_start(self):
        assert parse_path("M200,200L50,50H100Z") == [
            MoveTo(200, 200), LineTo(50, 50), LineTo(100, 50), LineTo(200, 200), ClosePath(),
        ]

    def test_returning_to_start_closes(self):
        assert parse_path("M0,0 L10,0 L10,10 L0,0")[-1] == ClosePath()
        assert not isinstance(parse_path("M0,0 L10,0 L10,10")[-1], ClosePath)

    def test_quadratic(self):
        assert parse_path("M50,50 Q100,150,150,50") == [MoveTo(50, 50), QuadTo(100, 150, 150, 50)]

    def test_smooth_quadratic_reflects_control(self):
        assert parse_path("M0,0 Q10,10 20,0 T40,0") == [
            MoveTo(0, 0), QuadTo(10, 10, 20, 0), QuadTo(30, -10, 40, 0),
        ]

    def test_smooth_cubic_reflects_control(self):
        assert parse_path("M0,0 C0,10 10,10 10,0 S20,-10 20,0") == [
            MoveTo(0, 0), CurveTo(0, 10, 10, 10, 10, 0), CurveTo(10, -10, 20, -10, 20, 0),
        ]

    def test_relative_cubic(self):
        assert parse_path("M10,10 c0,10 10,10 10,0") == [
            MoveTo(10, 10), CurveTo(10, 20, 20, 20, 20, 10),
        ]

    def test_subpaths(self):
        commands = parse_path("M50,50L150,50M50,150L150,150")
        assert commands == [MoveTo(50, 50), LineTo(150, 50), MoveTo(50, 150), LineTo(150, 150)]

    def test_empty(self):
        assert parse_path("   ") == []

    def test_moveto_only_has_nothing_to_draw(self):
        assert parse_path("M10,10") == []


class TestArcs:

    def test_half_circle_is_two_quarter_cubics(self):
        commands = parse_path("M0,0 A50,50 0 0 1 100,0")
        assert commands[0] == MoveTo(0, 0)
        assert len(commands) == 3
        assert all(isinstance(cmd, CurveTo) for cmd in commands[1:])
        assert (commands[-1].x, commands[-1].y) == (100, 0)
        mid = commands[1]
        assert math.hypot(mid.x - 50, mid.y) == pytest.approx(50)

    def test_pieces_stay_near_the_circle(self):
        cubic = parse_path("M100,200 A100,100 0 0 1 300,200")[1]
        # the curve midpoint of a 90 degree piece
        x = (cubic.x1 * 3 + cubic.x2 * 3 + 100 + cubic.x) / 8
        y = (cubic.y1 * 3 + cubic.y2 * 3 + 200 + cubic.y) / 8
        assert math.hypot(x - 200, y - 200) == pytest.approx(100, rel=5e-3)

    def test_small_radius_is_scaled_up(self):
        commands = parse_path("M0,0 A1,1 0 0 1 100,0")
        assert (commands[-1].x, commands[-1].y) == (100, 0)
        mid = commands[1]
        assert math.hypot(mid.x - 50, mid.y) == pytest.approx(50)

    def test_zero_radius_is_a_line(self):
        commands = parse_path("M0,0 A0,10 0 0 1 10,10")
        assert commands == [MoveTo(0, 0), LineTo(10, 10)]


class TestErrors:

    def test_must_start_with_moveto(self):
        with pytest.raises(os_error.NoCurrentPointError):
            parse_path("L10,10")

    @pytest.mark.parametrize("data", ["M10", "M10,", "M10,10 Lx", "M1,1Z2"])
    def test_syntax_errors(self, data):
        with pytest.raises(os_error.PathSyntaxError) as exc:
            parse_path(data)
        assert "syntaxerror" in str(exc.value)

    def test_overflowing_number(self):
        with pytest.raises(os_error.PathSyntaxError):
            parse_path("M0,0 L1e400,0")
