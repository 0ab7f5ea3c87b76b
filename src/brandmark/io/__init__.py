"""I/O layer for brandmark.

This module handles everything that crosses the process boundary: decoding
image references into pixels, encoding composited rasters and traced SVGs,
and fetching fonts.

Key classes:
- ImageReader: Decode data URLs, http(s) URLs, paths and bytes
- FontRegistry: Record of requested font families
- FontLoader: Best-effort font readiness
- FontFace: Text measurement and drawing for one family/weight
"""

from brandmark.io.fonts import (
    FONT_REGISTRY,
    FontFace,
    FontInfo,
    FontLoader,
    FontRegistry,
    get_bundled_fonts,
    get_font_info,
    github_font_urls,
    google_font_css_url,
    is_font_bundled,
)
from brandmark.io.reader import ImageReader, decode_image, image_to_sample, load_image
from brandmark.io.writer import png_data_url, save_data_url, save_svg, svg_to_data_url

__all__ = [
    "FONT_REGISTRY",
    "FontFace",
    "FontInfo",
    "FontLoader",
    "FontRegistry",
    "ImageReader",
    "decode_image",
    "get_bundled_fonts",
    "get_font_info",
    "github_font_urls",
    "google_font_css_url",
    "image_to_sample",
    "is_font_bundled",
    "load_image",
    "png_data_url",
    "save_data_url",
    "save_svg",
    "svg_to_data_url",
]
