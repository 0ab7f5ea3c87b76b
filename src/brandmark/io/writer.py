"""Encoders and writers for composited rasters and traced SVGs."""

import base64
from io import BytesIO
from pathlib import Path
from urllib.parse import quote

from PIL import Image

PNG_DATA_URL_PREFIX = "data:image/png;base64,"
SVG_DATA_URL_PREFIX = "data:image/svg+xml,"


def png_data_url(image: Image.Image) -> str:
    """Encode a Pillow image as a PNG data URL.

    Args:
        image: Image to encode

    Returns:
        ``data:image/png;base64,...`` string
    """
    buf = BytesIO()
    image.save(buf, format="PNG")
    return PNG_DATA_URL_PREFIX + base64.b64encode(buf.getvalue()).decode("ascii")


def decode_png_data_url(data_url: str) -> bytes:
    """Return the PNG bytes carried by a data URL from png_data_url."""
    if not data_url.startswith(PNG_DATA_URL_PREFIX):
        raise ValueError("Not a base64 PNG data URL")
    return base64.b64decode(data_url[len(PNG_DATA_URL_PREFIX):])


def svg_to_data_url(svg: str) -> str:
    """Percent-encode an SVG document into a data URL.

    Quotes are always escaped so the result can sit inside HTML attributes.
    """
    # Same unreserved set as JavaScript's encodeURIComponent.
    encoded = quote(svg, safe="!*'()").replace("'", "%27").replace('"', "%22")
    return SVG_DATA_URL_PREFIX + encoded


def save_svg(svg: str, path: Path) -> Path:
    """Write an SVG document to disk as UTF-8.

    Args:
        svg: SVG document text
        path: Destination file

    Returns:
        The written path
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(svg, encoding="utf-8")
    return path


def save_data_url(data_url: str, path: Path) -> Path:
    """Write the PNG payload of a data URL to disk."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(decode_png_data_url(data_url))
    return path
