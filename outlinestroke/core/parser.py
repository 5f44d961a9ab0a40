# OutlineStroke - Stroke-to-Outline Path Conversion
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
SVG path-data parser.

svgpathtools does the reading (implicit repeats, relative coordinates,
H / V / S / T shorthands, elliptical arc parameterisation).  Its segments are
mapped onto absolute commands:

- Line -> LineTo
- QuadraticBezier -> QuadTo
- CubicBezier -> CurveTo
- Arc -> CurveTo pieces spanning at most 90° each

Each continuous run of segments starts with a MoveTo and ends with a
ClosePath when it finishes where it started.
"""

from __future__ import annotations

import math
from dataclasses import astuple

from svgpathtools import Arc, CubicBezier, Line, QuadraticBezier
from svgpathtools import parse_path as read_svg_path

from . import error as os_error
from .types.commands import ClosePath, CurveTo, LineTo, MoveTo, PathCommand, QuadTo

MOVETO_LETTERS = ("M", "m")


def _arc_commands(arc: Arc) -> list[PathCommand]:
    pieces = max(1, int(math.ceil(abs(arc.delta) / 90.0 - 1e-9)))
    cubics = list(arc.as_cubic_curves(pieces))
    result: list[PathCommand] = []
    for i, cubic in enumerate(cubics):
        # the last piece lands exactly on the arc's end point
        end = arc.end if i == len(cubics) - 1 else cubic.end
        result.append(CurveTo(cubic.control1.real, cubic.control1.imag,
                              cubic.control2.real, cubic.control2.imag,
                              end.real, end.imag))
    return result


def _segment_commands(seg) -> list[PathCommand]:
    if isinstance(seg, Line):
        return [LineTo(seg.end.real, seg.end.imag)]
    if isinstance(seg, QuadraticBezier):
        return [QuadTo(seg.control.real, seg.control.imag, seg.end.real, seg.end.imag)]
    if isinstance(seg, CubicBezier):
        return [CurveTo(seg.control1.real, seg.control1.imag,
                        seg.control2.real, seg.control2.imag,
                        seg.end.real, seg.end.imag)]
    if isinstance(seg, Arc):
        return _arc_commands(seg)
    raise os_error.PathSyntaxError(f"unsupported segment {type(seg).__name__}", func_name="parse_path")


def parse_path(data: str) -> list[PathCommand]:
    """Parse path data into absolute commands."""
    head = data.lstrip()[:1]
    if head and head not in MOVETO_LETTERS:
        raise os_error.NoCurrentPointError(
            f"path data must start with moveto, found {head!r}", "parse_path")

    try:
        svg_path = read_svg_path(data)
    except (ValueError, IndexError) as e:
        raise os_error.PathSyntaxError(str(e) or "truncated path data", func_name="parse_path") from e

    result: list[PathCommand] = []
    for subpath in svg_path.continuous_subpaths():
        if not len(subpath):
            continue
        result.append(MoveTo(subpath.start.real, subpath.start.imag))
        for seg in subpath:
            result.extend(_segment_commands(seg))
        if subpath.isclosed():
            result.append(ClosePath())

    for cmd in result:
        if not all(math.isfinite(v) for v in astuple(cmd)):
            raise os_error.PathSyntaxError(f"coordinate out of range in {cmd}", func_name="parse_path")
    return result
