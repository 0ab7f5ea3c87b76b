"""Bitmap extractor for loading icon rasters.

This module provides the ImageReader class for turning an image reference
(data URL, http(s) URL, file path or raw bytes) into a Pillow image or a
RasterSample of its RGBA pixels.
"""

import asyncio
import base64
import binascii
from io import BytesIO
from pathlib import Path
from urllib.parse import unquote_to_bytes

import requests
from PIL import Image, UnidentifiedImageError

from brandmark.domain.raster import RasterSample
from brandmark.exceptions import DecodeError

ImageSource = str | bytes | Path


def describe_source(source: ImageSource) -> str:
    """Short, log-safe description of an image reference."""
    if isinstance(source, bytes):
        return f"<{len(source)} bytes>"
    text = str(source)
    if text.startswith("data:"):
        header = text.split(",", 1)[0]
        return f"{header},..."
    return text


def is_remote(source: ImageSource) -> bool:
    """True for http(s) URLs that need a network fetch."""
    return isinstance(source, str) and source.startswith(("http://", "https://"))


def image_to_sample(image: Image.Image) -> RasterSample:
    """Convert a Pillow image into a RasterSample at its natural size."""
    rgba = image if image.mode == "RGBA" else image.convert("RGBA")
    return RasterSample(width=rgba.width, height=rgba.height, data=rgba.tobytes())


class ImageReader:
    """Decodes image references into pixels.

    A single decode attempt is made per call; retrying is left to callers.

    Example:
        reader = ImageReader()
        sample = reader.read_sample("data:image/png;base64,iVBORw0...")
        print(sample.width, sample.height)
    """

    def __init__(
        self,
        timeout: float = 30.0,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the image reader.

        Args:
            timeout: HTTP timeout in seconds for remote images
            session: Optional requests session for remote images
        """
        self._timeout = timeout
        self._session = session

    def read_bytes(self, source: ImageSource) -> bytes:
        """Resolve an image reference to encoded image bytes.

        Raises:
            DecodeError: If the reference is empty or cannot be fetched
        """
        if isinstance(source, bytes):
            if not source:
                raise DecodeError("<0 bytes>", "empty image data")
            return source

        if isinstance(source, str) and not source:
            raise DecodeError("", "empty image reference")

        if isinstance(source, str) and source.startswith("data:"):
            return self._decode_data_url(source)

        if is_remote(source):
            return self._fetch(str(source))

        path = Path(source)
        try:
            return path.read_bytes()
        except (OSError, ValueError) as e:
            raise DecodeError(str(path), str(e)) from e

    def decode(self, data: bytes, source: ImageSource = b"") -> Image.Image:
        """Decode encoded image bytes into an RGBA Pillow image.

        Raises:
            DecodeError: If the bytes are corrupt or in an unsupported format
        """
        label = describe_source(source or data)
        try:
            with Image.open(BytesIO(data)) as img:
                img.load()
                return img.convert("RGBA")
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
            raise DecodeError(label, str(e) or type(e).__name__) from e

    def read_image(self, source: ImageSource) -> Image.Image:
        """Load and decode an image reference."""
        return self.decode(self.read_bytes(source), source)

    def read_sample(self, source: ImageSource) -> RasterSample:
        """Load an image reference as a RasterSample."""
        return image_to_sample(self.read_image(source))

    async def load_image(self, source: ImageSource) -> Image.Image:
        """Asynchronously load and decode an image reference.

        Remote fetches run off the event loop; decoding happens on it.
        """
        if is_remote(source):
            data = await asyncio.to_thread(self.read_bytes, source)
        else:
            data = self.read_bytes(source)
        return self.decode(data, source)

    async def load_sample(self, source: ImageSource) -> RasterSample:
        """Asynchronously load an image reference as a RasterSample."""
        return image_to_sample(await self.load_image(source))

    def _decode_data_url(self, url: str) -> bytes:
        label = describe_source(url)
        header, sep, payload = url.partition(",")
        if not sep:
            raise DecodeError(label, "malformed data URL")
        if header.endswith(";base64"):
            try:
                return base64.b64decode(payload, validate=False)
            except (binascii.Error, ValueError) as e:
                raise DecodeError(label, f"invalid base64 payload: {e}") from e
        return unquote_to_bytes(payload)

    def _fetch(self, url: str) -> bytes:
        getter = self._session.get if self._session is not None else requests.get
        try:
            response = getter(url, timeout=self._timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise DecodeError(url, str(e)) from e
        return response.content


def decode_image(source: ImageSource) -> RasterSample:
    """Decode an image reference into a RasterSample with a default reader."""
    return ImageReader().read_sample(source)


async def load_image(source: ImageSource) -> RasterSample:
    """Asynchronously decode an image reference into a RasterSample."""
    return await ImageReader().load_sample(source)
