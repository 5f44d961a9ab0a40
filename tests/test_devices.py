# OutlineStroke - Stroke-to-Outline Path Conversion
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

import xml.etree.ElementTree as ET

import pytest

from outlinestroke.core import error as os_error
from outlinestroke.core import parser
from outlinestroke.core import types as os_types
from outlinestroke.devices.svg.svg import preview_document, preview_tree, write_svg
from outlinestroke.operators.strokepath import outline_stroke, outline_stroke_paths

SVG = "{http://www.w3.org/2000/svg}"
SOURCE = "M50,50L150,150L150,200"


@pytest.fixture
def attrs():
    return os_types.StrokeAttrs(20, os_types.LINE_CAP_ROUND, os_types.LINE_JOIN_BEVEL)


class TestSvgPreview:

    def test_layers(self, attrs):
        outline = outline_stroke(SOURCE, attrs)
        root = preview_tree(SOURCE, outline, attrs, 300, 200)
        assert root.get("viewBox") == "0 0 300 200"
        stroke, fill, centre = root.findall(f"{SVG}path")
        assert stroke.get("d") == SOURCE
        assert stroke.get("stroke-width") == "20"
        assert stroke.get("stroke-linecap") == "round"
        assert stroke.get("stroke-linejoin") == "bevel"
        assert fill.get("d") == outline
        assert fill.get("fill-rule") == "nonzero"
        assert centre.get("d") == SOURCE

    def test_document_parses(self, attrs):
        text = preview_document(SOURCE, outline_stroke(SOURCE, attrs), attrs)
        assert text.startswith("<?xml")
        root = ET.fromstring(text)
        assert root.tag == f"{SVG}svg"

    def test_write_svg(self, tmp_path, attrs):
        target = tmp_path / "out.svg"
        write_svg(str(target), SOURCE, outline_stroke(SOURCE, attrs), attrs)
        assert ET.parse(target).getroot().get("width") == "400"


class TestPngPreview:

    @pytest.fixture(autouse=True)
    def _cairo(self):
        pytest.importorskip("cairo")

    def _render(self, attrs, mode):
        from outlinestroke.devices.png.png import render_surface

        commands = parser.parse_path(SOURCE)
        outlines = outline_stroke_paths(commands, attrs)
        return render_surface(commands, outlines, attrs, 200, 220, mode)

    @pytest.mark.parametrize("mode", ["stroke", "outline", "overlay"])
    def test_modes(self, attrs, mode):
        surface = self._render(attrs, mode)
        assert surface.get_width() == 200
        assert surface.get_height() == 220

    def test_outline_covers_stroke(self, attrs):
        stroke = bytes(self._render(attrs, "stroke").get_data())
        outline = bytes(self._render(attrs, "outline").get_data())
        # RGB24 pixels are 4 bytes; count pixels that differ noticeably
        differing = sum(
            1 for i in range(0, len(stroke), 4)
            if max(abs(stroke[i + k] - outline[i + k]) for k in range(3)) > 64)
        assert differing / (len(stroke) // 4) < 0.01

    def test_bad_mode(self, attrs):
        with pytest.raises(os_error.ConfigurationError):
            self._render(attrs, "sketch")

    def test_write_png(self, tmp_path, attrs):
        from outlinestroke.devices.png.png import write_png

        target = tmp_path / "out.png"
        commands = parser.parse_path(SOURCE)
        write_png(str(target), commands, outline_stroke_paths(commands, attrs), attrs, 100, 100)
        assert target.read_bytes()[:4] == b"\x89PNG"


class TestImageComparison:

    def test_counts_only_pixels_past_tolerance(self, tmp_path):
        Image = pytest.importorskip("PIL.Image")
        import visual_test

        base = Image.new("RGB", (10, 10), (255, 255, 255))
        faint = base.copy()
        faint.putpixel((0, 0), (230, 230, 230))
        strong = base.copy()
        for x in range(5):
            strong.putpixel((x, 9), (0, 0, 0))
        paths = {}
        for name, img in (("base", base), ("faint", faint), ("strong", strong)):
            paths[name] = tmp_path / f"{name}.png"
            img.save(paths[name])

        pct, _ = visual_test.compare_images(paths["base"], paths["faint"])
        assert pct == 0
        pct, diff = visual_test.compare_images(paths["base"], paths["strong"])
        assert pct == pytest.approx(5.0)
        assert diff.getpixel((0, 9)) == (255, 255, 255)
        assert diff.getpixel((0, 0)) == (0, 0, 0)
