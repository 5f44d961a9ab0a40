# OutlineStroke - Stroke-to-Outline Path Conversion
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from outlinestroke.core.serializer import format_number, serialize, serialize_command
from outlinestroke.core.types.commands import ClosePath, CurveTo, LineTo, MoveTo, QuadTo


class TestFormatNumber:

    @pytest.mark.parametrize("value, expected", [
        (10.0, "10"),
        (10.5, "10.5"),
        (1.005001, "1.01"),
        (42.9289, "42.93"),
        (-3.1, "-3.1"),
        (-0.001, "0"),
        (0.0, "0"),
    ])
    def test_default_precision(self, value, expected):
        assert format_number(value) == expected

    def test_precision_zero(self):
        assert format_number(12.6, 0) == "13"

    def test_precision_four(self):
        assert format_number(1.23456, 4) == "1.2346"


class TestSerialize:

    def test_every_command(self):
        commands = [
            MoveTo(10, 20),
            LineTo(30, 40),
            QuadTo(1, 2, 3, 4),
            CurveTo(1, 2, 3, 4, 5, 6),
            ClosePath(),
        ]
        assert serialize(commands) == "M10,20L30,40Q1,2 3,4C1,2 3,4 5,6Z"

    def test_rounds_coordinates(self):
        assert serialize_command(LineTo(1.23456, 7.891), 2) == "L1.23,7.89"

    def test_empty(self):
        assert serialize([]) == ""

    def test_rejects_non_commands(self):
        with pytest.raises(TypeError):
            serialize_command("L1,2")
