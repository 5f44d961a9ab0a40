# OutlineStroke - Stroke-to-Outline Path Conversion
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
OutlineStroke command line.

Prints the outline path data of a stroked path and optionally writes SVG /
PNG previews of it.
"""

from __future__ import annotations

import logging
import sys

from .cli_args import build_argument_parser, read_path_data
from .core import error as os_error
from .core.parser import parse_path
from .core import types as os_types
from .core.serializer import serialize
from .devices.svg.svg import write_svg
from .operators.strokepath import outline_stroke_paths

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the outlinestroke command.

    Returns:
        Exit code: 0 for success, 1 for error
    """
    parser = build_argument_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        path_data = read_path_data(args).strip()
    except OSError as e:
        print(f"OutlineStroke Error: {e}", file=sys.stderr)
        return 1

    try:
        attrs = os_types.StrokeAttrs.from_mapping({
            "width": args.width,
            "linecap": args.linecap,
            "linejoin": args.linejoin,
            "tolerance": args.tolerance,
            "precision": args.precision,
        })
        commands = parse_path(path_data)
        outlines = outline_stroke_paths(commands, attrs)
    except os_error.OutlineError as e:
        print(f"OutlineStroke Error: {e}", file=sys.stderr)
        return 1

    outline_data = serialize(
        [cmd for path in outlines for cmd in path.to_commands()], attrs.precision)
    print(outline_data)

    width, height = args.size
    if args.svg_output:
        write_svg(args.svg_output, path_data, outline_data, attrs, width, height)
        logger.info("wrote %s", args.svg_output)

    if args.png_output:
        try:
            from .devices.png.png import write_png
        except ImportError:
            print("OutlineStroke Error: --png requires pycairo "
                  "(pip install 'outlinestroke[render]')", file=sys.stderr)
            return 1
        write_png(args.png_output, commands, outlines, attrs, width, height,
                  antialias=args.antialias)
        logger.info("wrote %s", args.png_output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
