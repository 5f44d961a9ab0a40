# OutlineStroke - Stroke-to-Outline Path Conversion
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
OutlineStroke Types Package - Public API

Re-exports the value types so callers can write
`from outlinestroke.core import types as os_types` and use `os_types.Point`.

**Internal Module Organization:**
- constants.py: tolerances, angle conversion, line cap / join codes
- point.py: Point
- commands.py: absolute path commands (MoveTo, LineTo, QuadTo, CurveTo, ClosePath)
- graphics.py: StrokeAttrs
- segment.py: Line, QuadraticCurve, CubicCurve

segment.py depends on core.curve_math, which in turn imports Point from this
package, so it is imported from its own module rather than re-exported here.
"""

from .constants import *
from .point import *
from .commands import *
from .graphics import *
