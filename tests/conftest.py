"""Shared fixtures: an in-memory TrueType font and icon rasters."""

from io import BytesIO
from pathlib import Path

import pytest
import requests
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from PIL import Image

from brandmark.config import FontConfig
from brandmark.io.fonts import FontLoader, FontRegistry

TEST_FAMILY = "Test Sans"

# Advance widths in font units (UPM 1000)
TEST_ADVANCES = {".notdef": 500, "space": 250, "A": 600, "B": 700}


def _square_glyph():
    pen = TTGlyphPen(None)
    pen.moveTo((50, 0))
    pen.lineTo((50, 700))
    pen.lineTo((450, 700))
    pen.lineTo((450, 0))
    pen.closePath()
    return pen.glyph()


def build_test_font() -> bytes:
    """Build a tiny TrueType font where every glyph is a filled square."""
    fb = FontBuilder(1000, isTTF=True)
    glyph_order = list(TEST_ADVANCES)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap({ord(" "): "space", ord("A"): "A", ord("B"): "B"})

    fb.setupGlyf({name: _square_glyph() for name in glyph_order})
    glyph_table = fb.font["glyf"]
    fb.setupHorizontalMetrics(
        {name: (advance, glyph_table[name].xMin) for name, advance in TEST_ADVANCES.items()}
    )
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable(
        {
            "familyName": TEST_FAMILY,
            "styleName": "Bold",
            "uniqueFontIdentifier": "TestSans-Bold",
            "fullName": "Test Sans Bold",
            "psName": "TestSans-Bold",
            "version": "Version 1.000",
        }
    )
    fb.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200)
    fb.setupPost()

    buf = BytesIO()
    fb.save(buf)
    return buf.getvalue()


def png_bytes(image: Image.Image) -> bytes:
    """Encode a Pillow image as PNG bytes."""
    buf = BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


def no_network(url: str) -> bytes:
    raise requests.ConnectionError(f"network disabled in tests: {url}")


@pytest.fixture(scope="session")
def test_font_bytes() -> bytes:
    """Raw bytes of the test font."""
    return build_test_font()


@pytest.fixture
def font_dir(tmp_path: Path, test_font_bytes: bytes) -> Path:
    """Directory holding the test font as a bundled Bold file."""
    directory = tmp_path / "fonts"
    directory.mkdir()
    (directory / "TestSans-Bold.ttf").write_bytes(test_font_bytes)
    return directory


@pytest.fixture
def offline_loader(font_dir: Path) -> FontLoader:
    """Font loader that only sees the bundled test font."""
    return FontLoader(
        registry=FontRegistry(),
        config=FontConfig(font_dir=font_dir, fallback_delay_ms=0),
        fetch=no_network,
    )


@pytest.fixture
def black_icon_png() -> bytes:
    """64x64 fully opaque black square."""
    return png_bytes(Image.new("RGBA", (64, 64), (0, 0, 0, 255)))


@pytest.fixture
def encode_png():
    """Function encoding a Pillow image as PNG bytes."""
    return png_bytes
