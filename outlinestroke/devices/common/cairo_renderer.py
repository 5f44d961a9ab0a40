# OutlineStroke - Stroke-to-Outline Path Conversion
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Shared Cairo Rendering Module

Draws path commands on a Cairo context, either stroked by Cairo itself (the
reference rendering) or as the filled outline computed by the strokepath
algorithm.  Used by the PNG device and by visual_test.py.

The integer line cap / line join codes match Cairo's own enumerations, so
they are passed through unchanged.
"""

from __future__ import annotations

from typing import Iterable

import cairo

from ...core import types as os_types
from ...core.curve_math import elevate_quadratic

# No miter limit is applied to computed outlines; keep Cairo from beveling.
UNLIMITED_MITER = 1.0e6


def trace_commands(cairo_ctx, commands: Iterable[os_types.PathCommand]) -> None:
    """Append commands to the Cairo context's current path."""
    cx = cy = 0.0
    sx = sy = 0.0
    for cmd in commands:
        if isinstance(cmd, os_types.MoveTo):
            cairo_ctx.move_to(cmd.x, cmd.y)
            cx, cy = sx, sy = cmd.x, cmd.y
        elif isinstance(cmd, os_types.LineTo):
            cairo_ctx.line_to(cmd.x, cmd.y)
            cx, cy = cmd.x, cmd.y
        elif isinstance(cmd, os_types.QuadTo):
            # Cairo has no quadratic; elevate exactly to a cubic
            _, c1, c2, _ = elevate_quadratic(
                [os_types.Point(cx, cy), os_types.Point(cmd.x1, cmd.y1), os_types.Point(cmd.x, cmd.y)])
            cairo_ctx.curve_to(c1.x, c1.y, c2.x, c2.y, cmd.x, cmd.y)
            cx, cy = cmd.x, cmd.y
        elif isinstance(cmd, os_types.CurveTo):
            cairo_ctx.curve_to(cmd.x1, cmd.y1, cmd.x2, cmd.y2, cmd.x, cmd.y)
            cx, cy = cmd.x, cmd.y
        elif isinstance(cmd, os_types.ClosePath):
            cairo_ctx.close_path()
            cx, cy = sx, sy


def paint_background(cairo_ctx, width: int, height: int) -> None:
    cairo_ctx.set_source_rgb(1.0, 1.0, 1.0)
    cairo_ctx.rectangle(0, 0, width, height)
    cairo_ctx.fill()


def render_stroke(cairo_ctx, commands: Iterable[os_types.PathCommand],
                  attrs: os_types.StrokeAttrs, color=(0.0, 0.0, 0.0)) -> None:
    """Stroke the source path with Cairo's own stroker."""
    cairo_ctx.new_path()
    trace_commands(cairo_ctx, commands)
    cairo_ctx.set_source_rgb(*color)
    cairo_ctx.set_line_width(attrs.width)
    cairo_ctx.set_line_cap(attrs.linecap)
    cairo_ctx.set_line_join(attrs.linejoin)
    cairo_ctx.set_miter_limit(UNLIMITED_MITER)
    cairo_ctx.stroke()


def render_outline(cairo_ctx, outlines, color=(0.0, 0.0, 0.0), alpha: float = 1.0) -> None:
    """Fill computed outline Paths (non-zero winding, like a renderer's stroke)."""
    cairo_ctx.new_path()
    for path in outlines:
        trace_commands(cairo_ctx, path.to_commands())
    cairo_ctx.set_source_rgba(color[0], color[1], color[2], alpha)
    cairo_ctx.set_fill_rule(cairo.FILL_RULE_WINDING)
    cairo_ctx.fill()


def render_centerline(cairo_ctx, commands: Iterable[os_types.PathCommand],
                      color=(0.0, 0.0, 0.0)) -> None:
    cairo_ctx.new_path()
    trace_commands(cairo_ctx, commands)
    cairo_ctx.set_source_rgb(*color)
    cairo_ctx.set_line_width(1.0)
    cairo_ctx.set_line_cap(cairo.LINE_CAP_BUTT)
    cairo_ctx.set_line_join(cairo.LINE_JOIN_MITER)
    cairo_ctx.stroke()
