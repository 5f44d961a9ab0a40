# OutlineStroke - Stroke-to-Outline Path Conversion
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
OutlineStroke Types Constants Module

Numeric tolerances, angle conversion and the integer line cap / line join
codes shared by the geometry engine, the parser and the devices.
"""

import math

# degrees per radian
ANGLE_RADIAN = 180 / math.pi

# line cap types
LINE_CAP_BUTT = 0
LINE_CAP_ROUND = 1
LINE_CAP_SQUARE = 2

# line join types
LINE_JOIN_MITER = 0
LINE_JOIN_ROUND = 1
LINE_JOIN_BEVEL = 2

LINE_CAP_NAMES = {
    "butt": LINE_CAP_BUTT,
    "round": LINE_CAP_ROUND,
    "square": LINE_CAP_SQUARE,
}

LINE_JOIN_NAMES = {
    "miter": LINE_JOIN_MITER,
    "round": LINE_JOIN_ROUND,
    "bevel": LINE_JOIN_BEVEL,
}

# Two points are "the same" when each coordinate differs by no more than
# this.  Matches the band of rounding to DEFAULT_PRECISION decimals, which is
# what decides whether offset endpoints are already connected.
POINT_EPSILON = 1e-2

# Curve offsetting: maximum deviation from the true offset curve and the
# subdivision depth limit (2**10 pieces at most per input curve).
OFFSET_TOLERANCE = 0.1
OFFSET_MAX_DEPTH = 10

# cos(15°): endpoint normals diverging more than this force a subdivision
OFFSET_NORMAL_COS = 0.966

# Curve/curve intersection: bounding boxes smaller than this (summed half
# perimeters) count as a hit before Newton refinement.
INTERSECTION_THRESHOLD = 0.5
INTERSECTION_MAX_DEPTH = 48
INTERSECTION_MAX_PAIRS = 1 << 16

# Lines are converted to cubics with their handle rotated by this many
# degrees so the intersector never sees a zero-area control polygon.
LINE_NUDGE_DEGREES = 0.001

# Below this a handle or tangent is treated as zero length
TANGENT_EPSILON = 1e-4

# decimals kept in serialized path data
DEFAULT_PRECISION = 2
