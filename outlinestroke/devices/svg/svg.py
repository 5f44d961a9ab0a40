# OutlineStroke - Stroke-to-Outline Path Conversion
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
SVG Output Device

Writes a preview document comparing a browser's own stroke with the computed
outline: the source path stroked in grey at the requested width, the
outline filled in translucent red on top, and the source centre line in
yellow.  Where the two agree the grey is fully covered.
"""

import xml.etree.ElementTree as ET

from ...core import types as os_types

# SVG namespace
_SVG_NS = 'http://www.w3.org/2000/svg'

_CAP_NAMES = {code: name for name, code in os_types.LINE_CAP_NAMES.items()}
_JOIN_NAMES = {code: name for name, code in os_types.LINE_JOIN_NAMES.items()}


def preview_tree(source_data: str, outline_data: str, attrs: os_types.StrokeAttrs,
                 width: int = 400, height: int = 400) -> ET.Element:
    """
    Build the preview document.

    Args:
        source_data: path data of the stroked path
        outline_data: path data returned by outline_stroke
        attrs: stroke settings of the reference stroke
        width, height: canvas size in user units
    """
    ET.register_namespace('', _SVG_NS)

    root = ET.Element(f'{{{_SVG_NS}}}svg', {
        'width': str(width),
        'height': str(height),
        'viewBox': f'0 0 {width} {height}',
    })

    ET.SubElement(root, f'{{{_SVG_NS}}}path', {
        'd': source_data,
        'fill': 'none',
        'stroke': '#cccccc',
        'stroke-width': f'{attrs.width:g}',
        'stroke-linecap': _CAP_NAMES[attrs.linecap],
        'stroke-linejoin': _JOIN_NAMES[attrs.linejoin],
        'stroke-miterlimit': '1000000',
    })
    ET.SubElement(root, f'{{{_SVG_NS}}}path', {
        'd': outline_data,
        'fill': 'red',
        'fill-opacity': '0.5',
        'fill-rule': 'nonzero',
    })
    ET.SubElement(root, f'{{{_SVG_NS}}}path', {
        'd': source_data,
        'fill': 'none',
        'stroke': 'yellow',
        'stroke-width': '1',
    })
    return root


def preview_document(source_data: str, outline_data: str, attrs: os_types.StrokeAttrs,
                     width: int = 400, height: int = 400) -> str:
    root = preview_tree(source_data, outline_data, attrs, width, height)
    ET.indent(root)
    return ET.tostring(root, encoding='unicode', xml_declaration=True)


def write_svg(output_file: str, source_data: str, outline_data: str,
              attrs: os_types.StrokeAttrs, width: int = 400, height: int = 400) -> None:
    """Write the preview document to output_file."""
    with open(output_file, 'w', encoding='utf-8') as f:
        f.write(preview_document(source_data, outline_data, attrs, width, height))
