# OutlineStroke - Stroke-to-Outline Path Conversion
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
OutlineStroke Types Graphics Module

Stroke parameters: the subset of graphics state that decides what the
outline of a stroke looks like.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping

from ..error import ConfigurationError, RangeCheckError
from .constants import (
    DEFAULT_PRECISION,
    LINE_CAP_BUTT,
    LINE_CAP_NAMES,
    LINE_JOIN_MITER,
    LINE_JOIN_NAMES,
    OFFSET_TOLERANCE,
)


def _lookup(kind: str, value: Any, names: dict[str, int], default: int) -> int:
    if value is None:
        return default
    if isinstance(value, int) and not isinstance(value, bool):
        if value in names.values():
            return value
    elif isinstance(value, str) and value.lower() in names:
        return names[value.lower()]
    raise ConfigurationError(
        f"unknown {kind} {value!r} (expected one of: {', '.join(names)})", "setstroke")


@dataclass(frozen=True)
class StrokeAttrs:
    """
    Stroke settings.

    width:     stroke thickness, must be finite and > 0
    linecap:   LINE_CAP_BUTT / LINE_CAP_ROUND / LINE_CAP_SQUARE
    linejoin:  LINE_JOIN_MITER / LINE_JOIN_ROUND / LINE_JOIN_BEVEL
    tolerance: maximum deviation of offset curves from the true offset
    precision: decimals kept when the outline is serialized
    """
    width: float
    linecap: int = LINE_CAP_BUTT
    linejoin: int = LINE_JOIN_MITER
    tolerance: float = OFFSET_TOLERANCE
    precision: int = DEFAULT_PRECISION

    def __post_init__(self) -> None:
        if not isinstance(self.width, (int, float)) or isinstance(self.width, bool):
            raise RangeCheckError(f"width must be a number, got {self.width!r}", "setlinewidth")
        if not math.isfinite(self.width) or self.width <= 0:
            raise RangeCheckError(f"width must be > 0, got {self.width}", "setlinewidth")
        if self.linecap not in LINE_CAP_NAMES.values():
            raise ConfigurationError(f"unknown linecap code {self.linecap!r}", "setlinecap")
        if self.linejoin not in LINE_JOIN_NAMES.values():
            raise ConfigurationError(f"unknown linejoin code {self.linejoin!r}", "setlinejoin")
        if not math.isfinite(self.tolerance) or self.tolerance <= 0:
            raise RangeCheckError(f"tolerance must be > 0, got {self.tolerance}", "setflat")
        if self.precision < 0:
            raise RangeCheckError(f"precision must be >= 0, got {self.precision}", "setstroke")

    @property
    def radius(self) -> float:
        return self.width / 2.0

    @classmethod
    def from_mapping(cls, attrs: Mapping[str, Any]) -> StrokeAttrs:
        """
        Build from {"width", "linecap", "linejoin"[, "tolerance", "precision"]}.

        linecap / linejoin accept the SVG names (case-insensitive) or the
        integer codes; missing or None means butt / miter.
        """
        if "width" not in attrs or attrs["width"] is None:
            raise RangeCheckError("width is required", "setlinewidth")
        try:
            width = float(attrs["width"])
        except (TypeError, ValueError):
            raise RangeCheckError(f"width must be a number, got {attrs['width']!r}",
                                  "setlinewidth") from None
        unknown = set(attrs) - {"width", "linecap", "linejoin", "tolerance", "precision"}
        if unknown:
            raise ConfigurationError(
                f"unknown stroke option(s): {', '.join(sorted(unknown))}", "setstroke")
        return cls(
            width=width,
            linecap=_lookup("linecap", attrs.get("linecap"), LINE_CAP_NAMES, LINE_CAP_BUTT),
            linejoin=_lookup("linejoin", attrs.get("linejoin"), LINE_JOIN_NAMES, LINE_JOIN_MITER),
            tolerance=float(attrs.get("tolerance") or OFFSET_TOLERANCE),
            precision=int(attrs["precision"]) if attrs.get("precision") is not None
            else DEFAULT_PRECISION,
        )
