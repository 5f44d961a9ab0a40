# OutlineStroke - Stroke-to-Outline Path Conversion
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Error types raised at the library boundary.

The geometry engine itself never raises for degenerate geometry (parallel
tangents, zero determinants); it returns None and the caller picks the next
strategy.  These exceptions cover ill-formed input, bad stroke settings and
curve-math non-convergence.  Each carries the PostScript error name that
best describes it.
"""

SYNTAXERROR = "syntaxerror"
NOCURRENTPOINT = "nocurrentpoint"
RANGECHECK = "rangecheck"
CONFIGURATIONERROR = "configurationerror"
UNDEFINEDRESULT = "undefinedresult"


class OutlineError(ValueError):
    """Base class for every error raised by outlinestroke."""

    error_name = "unregistered"

    def __init__(self, message: str, func_name: str = "") -> None:
        super().__init__(message)
        self.func_name = func_name

    def __str__(self) -> str:
        message = super().__str__()
        if self.func_name:
            return f"/{self.error_name} in --{self.func_name}--: {message}"
        return f"/{self.error_name}: {message}"


class PathSyntaxError(OutlineError):
    """Malformed path data (unknown command, missing or bad number)."""

    error_name = SYNTAXERROR

    def __init__(self, message: str, offset: int = -1, func_name: str = "") -> None:
        if offset >= 0:
            message = f"{message} at offset {offset}"
        super().__init__(message, func_name)
        self.offset = offset


class NoCurrentPointError(OutlineError):
    """A drawing operation with no current point, or nothing to stroke."""

    error_name = NOCURRENTPOINT


class RangeCheckError(OutlineError):
    """A numeric setting outside its legal range (e.g. width <= 0)."""

    error_name = RANGECHECK


class ConfigurationError(OutlineError):
    """Unknown line cap / line join name or other unusable option."""

    error_name = CONFIGURATIONERROR


class CurveMathError(OutlineError, ArithmeticError):
    """A curve-math primitive failed to converge."""

    error_name = UNDEFINEDRESULT
