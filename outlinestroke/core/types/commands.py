# OutlineStroke - Stroke-to-Outline Path Conversion
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
OutlineStroke Types Commands Module

Absolute path-drawing commands.  The parser produces them from path data,
the geometry engine consumes them to build Paths and emits them again for the
serializer and the devices.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float


@dataclass(frozen=True)
class QuadTo:
    x1: float; y1: float
    x: float; y: float


@dataclass(frozen=True)
class CurveTo:
    x1: float; y1: float
    x2: float; y2: float
    x: float; y: float


@dataclass(frozen=True)
class ClosePath:
    pass


PathCommand = MoveTo | LineTo | QuadTo | CurveTo | ClosePath


def split_subpaths(commands: list[PathCommand]) -> list[list[PathCommand]]:
    """Split a command list into subpaths, each starting with a MoveTo.

    A drawing command that follows a ClosePath without an explicit MoveTo
    starts a new subpath at the closed subpath's start point.
    """
    subpaths: list[list[PathCommand]] = []
    current: list[PathCommand] = []
    start: MoveTo | None = None
    for cmd in commands:
        if isinstance(cmd, MoveTo):
            if current:
                subpaths.append(current)
            current = [cmd]
            start = cmd
            continue
        if not current and start is not None:
            current = [start]
        current.append(cmd)
        if isinstance(cmd, ClosePath):
            subpaths.append(current)
            current = []
    if current:
        subpaths.append(current)
    return subpaths
