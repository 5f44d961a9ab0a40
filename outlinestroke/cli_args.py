# OutlineStroke - Stroke-to-Outline Path Conversion
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
CLI argument parsing for OutlineStroke.

Handles command-line argument definition and resolving where the path data
comes from (argument, file or stdin).
"""

from __future__ import annotations

import argparse
import sys
from importlib import metadata

from .core.types.constants import DEFAULT_PRECISION, LINE_CAP_NAMES, LINE_JOIN_NAMES, OFFSET_TOLERANCE


def _get_version() -> str:
    """Installed distribution version, or "unknown" when running from a checkout."""
    try:
        return metadata.version("outlinestroke")
    except metadata.PackageNotFoundError:
        return "unknown"


def build_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the OutlineStroke argument parser.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="outlinestroke",
        description="OutlineStroke - convert a stroked SVG path into its filled outline",
        epilog="If no path data or file is given, path data is read from stdin.",
    )

    parser.add_argument(
        "-V", "--version", action="version",
        version=f"OutlineStroke {_get_version()}"
    )
    parser.add_argument("path_data", nargs="?", help="SVG path data, e.g. \"M50,50L350,350\"")
    parser.add_argument(
        "-f", "--file", dest="inputfile",
        help="Read path data from a file ('-' for stdin)"
    )
    parser.add_argument(
        "-w", "--width", type=float, required=True,
        help="Stroke width (must be > 0)"
    )
    parser.add_argument(
        "--linecap", choices=list(LINE_CAP_NAMES), default="butt",
        help="Line cap style (default: butt)"
    )
    parser.add_argument(
        "--linejoin", choices=list(LINE_JOIN_NAMES), default="miter",
        help="Line join style (default: miter)"
    )
    parser.add_argument(
        "--precision", type=int, default=DEFAULT_PRECISION,
        help=f"Decimals kept in the output (default: {DEFAULT_PRECISION})"
    )
    parser.add_argument(
        "--tolerance", type=float, default=OFFSET_TOLERANCE,
        help=f"Maximum curve offset error (default: {OFFSET_TOLERANCE})"
    )
    parser.add_argument(
        "--svg", dest="svg_output",
        help="Also write an SVG preview comparing the stroke with its outline"
    )
    parser.add_argument(
        "--png", dest="png_output",
        help="Also write a PNG preview (requires pycairo)"
    )
    parser.add_argument(
        "--size", type=int, nargs=2, metavar=("WIDTH", "HEIGHT"), default=(400, 400),
        help="Preview canvas size (default: 400 400)"
    )
    parser.add_argument(
        "--antialias",
        choices=["none", "fast", "good", "best", "gray", "subpixel"], default="gray",
        help="Set anti-aliasing mode for Cairo rendering (default: gray)"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )
    return parser


def read_path_data(args: argparse.Namespace) -> str:
    """Path data from the positional argument, --file, or stdin."""
    if args.path_data is not None:
        return args.path_data
    if args.inputfile and args.inputfile != "-":
        with open(args.inputfile, "r", encoding="utf-8") as f:
            return f.read()
    return sys.stdin.read()
