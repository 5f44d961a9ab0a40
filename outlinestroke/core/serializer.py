# OutlineStroke - Stroke-to-Outline Path Conversion
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Path-data serializer.

Renders absolute commands as compact SVG path data:
"M10,20L30,40Q1,2 3,4C1,2 3,4 5,6Z".  Numbers are rounded to a fixed
number of decimals with trailing zeros dropped.
"""

from __future__ import annotations

from typing import Iterable

from .types.commands import ClosePath, CurveTo, LineTo, MoveTo, PathCommand, QuadTo
from .types.constants import DEFAULT_PRECISION


def format_number(value: float, precision: int = DEFAULT_PRECISION) -> str:
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def _pair(x: float, y: float, precision: int) -> str:
    return f"{format_number(x, precision)},{format_number(y, precision)}"


def serialize_command(cmd: PathCommand, precision: int = DEFAULT_PRECISION) -> str:
    if isinstance(cmd, MoveTo):
        return "M" + _pair(cmd.x, cmd.y, precision)
    if isinstance(cmd, LineTo):
        return "L" + _pair(cmd.x, cmd.y, precision)
    if isinstance(cmd, QuadTo):
        return f"Q{_pair(cmd.x1, cmd.y1, precision)} {_pair(cmd.x, cmd.y, precision)}"
    if isinstance(cmd, CurveTo):
        return (f"C{_pair(cmd.x1, cmd.y1, precision)} {_pair(cmd.x2, cmd.y2, precision)} "
                f"{_pair(cmd.x, cmd.y, precision)}")
    if isinstance(cmd, ClosePath):
        return "Z"
    raise TypeError(f"not a path command: {cmd!r}")


def serialize(commands: Iterable[PathCommand], precision: int = DEFAULT_PRECISION) -> str:
    """Render commands as path data with numbers rounded to precision decimals."""
    return "".join(serialize_command(cmd, precision) for cmd in commands)
