# OutlineStroke - Stroke-to-Outline Path Conversion
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Stroke outlining entry points.

Takes path data plus stroke settings and returns the path data of the
filled region a renderer would paint when stroking it.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from ..core import error as os_error
from ..core import parser, serializer
from ..core import types as os_types
from ..core.curve_math import BezierCurveOps
from . import strokepath_algorithm as algo

logger = logging.getLogger(__name__)


def _stroke_attrs(attrs: os_types.StrokeAttrs | Mapping[str, Any]) -> os_types.StrokeAttrs:
    if isinstance(attrs, os_types.StrokeAttrs):
        return attrs
    if isinstance(attrs, Mapping):
        return os_types.StrokeAttrs.from_mapping(attrs)
    raise os_error.ConfigurationError(
        f"stroke settings must be a mapping, got {type(attrs).__name__}", "strokepath")


def _path_commands(path_data: str | Iterable[os_types.PathCommand]) -> list[os_types.PathCommand]:
    if isinstance(path_data, str):
        commands = parser.parse_path(path_data)
    else:
        commands = list(path_data)
    if not commands:
        raise os_error.NoCurrentPointError("empty path data", "strokepath")
    return commands


def outline_stroke_paths(path_data: str | Iterable[os_types.PathCommand],
                         attrs: os_types.StrokeAttrs | Mapping[str, Any]) -> list[algo.Path]:
    """
    Outline a stroke and return the closed outline Paths.

    An open subpath yields one contour, a closed subpath two (outer and
    inner boundary).
    """
    attrs = _stroke_attrs(attrs)
    commands = _path_commands(path_data)

    # Thin strokes need a finer offset tolerance to keep their shape
    ops = BezierCurveOps(offset_tolerance=min(attrs.tolerance, attrs.width * 0.05))

    outlines = algo.outline_commands(commands, attrs.radius, attrs.linecap,
                                     attrs.linejoin, ops)
    logger.debug("outlined %d commands into %d contours (width %g)",
                 len(commands), len(outlines), attrs.width)
    return outlines


def outline_commands(path_data: str | Iterable[os_types.PathCommand],
                     attrs: os_types.StrokeAttrs | Mapping[str, Any]) -> list[os_types.PathCommand]:
    """Outline a stroke and return the absolute commands of every contour."""
    commands: list[os_types.PathCommand] = []
    for path in outline_stroke_paths(path_data, attrs):
        commands.extend(path.to_commands())
    return commands


def outline_stroke(path_data: str | Iterable[os_types.PathCommand],
                   attrs: os_types.StrokeAttrs | Mapping[str, Any]) -> str:
    """
    Path data of the filled outline of a stroke.

    attrs is a StrokeAttrs or a mapping with "width" (required, > 0),
    "linecap" (butt | square | round) and "linejoin" (miter | round | bevel).
    Numbers are rounded to attrs.precision decimals.
    """
    attrs = _stroke_attrs(attrs)
    return serializer.serialize(outline_commands(path_data, attrs), attrs.precision)
