# OutlineStroke - Stroke-to-Outline Path Conversion
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

"""
PNG Output Device

Renders stroke previews to PNG image files using Cairo.  Three modes:

- "stroke":  the source path stroked by Cairo (reference)
- "outline": the computed outline filled
- "overlay": reference stroke in grey, outline in translucent red and the
             source centre line on top
"""

import cairo

from ...core import error as os_error
from ...core import types as os_types
from ..common.cairo_renderer import (
    paint_background,
    render_centerline,
    render_outline,
    render_stroke,
)

# Anti-aliasing mode for Cairo rendering.
# Options: cairo.ANTIALIAS_NONE, ANTIALIAS_FAST, ANTIALIAS_GOOD,
#          ANTIALIAS_BEST, ANTIALIAS_GRAY, ANTIALIAS_SUBPIXEL
ANTIALIAS_MODE = cairo.ANTIALIAS_GRAY

ANTIALIAS_MAP = {
    "none": cairo.ANTIALIAS_NONE,
    "fast": cairo.ANTIALIAS_FAST,
    "good": cairo.ANTIALIAS_GOOD,
    "best": cairo.ANTIALIAS_BEST,
    "gray": cairo.ANTIALIAS_GRAY,
    "subpixel": cairo.ANTIALIAS_SUBPIXEL,
}

RENDER_MODES = ("stroke", "outline", "overlay")


def render_surface(commands: list[os_types.PathCommand], outlines, attrs: os_types.StrokeAttrs,
                   width: int, height: int, mode: str = "overlay",
                   antialias: str = "gray") -> cairo.ImageSurface:
    """
    Render one preview image.

    Args:
        commands: absolute commands of the source path
        outlines: outline Paths computed for commands
        attrs: stroke settings used for the reference stroke
        width, height: image size in pixels
        mode: one of RENDER_MODES
        antialias: key of ANTIALIAS_MAP
    """
    if mode not in RENDER_MODES:
        raise os_error.ConfigurationError(f"unknown render mode {mode!r}", "write_png")

    surface = cairo.ImageSurface(cairo.FORMAT_RGB24, width, height)
    cc = cairo.Context(surface)
    cc.identity_matrix()
    paint_background(cc, width, height)
    cc.set_antialias(ANTIALIAS_MAP.get(antialias, ANTIALIAS_MODE))

    if mode == "stroke":
        render_stroke(cc, commands, attrs)
    elif mode == "outline":
        render_outline(cc, outlines)
    else:
        render_stroke(cc, commands, attrs, color=(0.8, 0.8, 0.8))
        render_outline(cc, outlines, color=(1.0, 0.0, 0.0), alpha=0.5)
        render_centerline(cc, commands, color=(1.0, 1.0, 0.0))

    surface.flush()
    return surface


def write_png(output_file: str, commands: list[os_types.PathCommand], outlines,
              attrs: os_types.StrokeAttrs, width: int = 400, height: int = 400,
              mode: str = "overlay", antialias: str = "gray") -> None:
    """Render a preview and write it to output_file."""
    surface = render_surface(commands, outlines, attrs, width, height, mode, antialias)
    surface.write_to_png(output_file)
