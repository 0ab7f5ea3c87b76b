"""End-to-end tests tracing rasters into SVG documents."""

import re
import xml.etree.ElementTree as ET

from PIL import Image, ImageDraw

from brandmark.core import png_to_color_svg, png_to_svg
from brandmark.io import svg_to_data_url
from brandmark.io.writer import png_data_url

SVG_NS = "{http://www.w3.org/2000/svg}"
STRIP = re.compile(r"M(\d+),(\d+)h(\d+)v1h-(\d+)z")


def covered_cells(d: str) -> set[tuple[int, int]]:
    """Cells covered by a run-length path."""
    cells = set()
    for x, y, length, back in STRIP.findall(d):
        assert length == back
        cells.update((int(x) + i, int(y)) for i in range(int(length)))
    return cells


class TestVectorizeEndToEnd:
    """Tracing of synthetic logo rasters."""

    def test_square_on_transparent_canvas(self):
        image = Image.new("RGBA", (120, 120), (0, 0, 0, 0))
        ImageDraw.Draw(image).rectangle((10, 10, 109, 109), fill=(0, 0, 0, 255))

        svg = png_to_svg(png_data_url(image))
        root = ET.fromstring(svg.split("\n", 1)[1])

        assert root.get("viewBox") == "0 0 120 120"
        paths = root.findall(f"{SVG_NS}path")
        assert len(paths) == 1

        d = paths[0].get("d")
        assert d is not None
        assert d.count("M") == 100
        assert all(length == "100" for _, _, length, _ in STRIP.findall(d))
        assert covered_cells(d) == {(x, y) for x in range(10, 110) for y in range(10, 110)}

    def test_two_shapes_and_noise(self):
        image = Image.new("RGBA", (60, 30), (255, 255, 255, 255))
        draw = ImageDraw.Draw(image)
        draw.rectangle((2, 2, 11, 11), fill=(0, 0, 0, 255))
        draw.ellipse((30, 5, 50, 25), fill=(20, 20, 120, 255))
        draw.point([(57, 27), (58, 27)], fill=(0, 0, 0, 255))

        svg = png_to_svg(png_data_url(image))
        root = ET.fromstring(svg.split("\n", 1)[1])
        paths = root.findall(f"{SVG_NS}path")

        assert len(paths) == 2
        square = covered_cells(paths[0].get("d") or "")
        assert square == {(x, y) for x in range(2, 12) for y in range(2, 12)}
        assert all(30 <= x <= 50 for x, _ in covered_cells(paths[1].get("d") or ""))

    def test_color_svg_as_data_url(self):
        image = Image.new("RGBA", (40, 40), (0, 0, 0, 255))
        svg = png_to_color_svg(png_data_url(image), "#E11D48")

        assert svg.count('fill="#E11D48"') == 1
        data_url = svg_to_data_url(svg)
        assert data_url.startswith("data:image/svg+xml,%3C%3Fxml")
        assert '"' not in data_url
