"""Vector document assembler.

Wraps traced path fragments in a self-contained SVG document whose viewBox,
width and height match the source raster, and provides one-shot helpers
that run the whole decode, mask, trace, assemble pipeline.
"""

from collections.abc import Iterable
from xml.sax.saxutils import escape

from brandmark.config import TraceConfig
from brandmark.core.mask import to_mask
from brandmark.core.tracer import trace
from brandmark.domain import PathFragment, RasterSample
from brandmark.exceptions import DecodeError, VectorizationError
from brandmark.io.reader import ImageReader, ImageSource

DEFAULT_TITLE = "Vectorized Logo"


def build_document(
    width: int,
    height: int,
    paths: Iterable[PathFragment | str],
    title: str = DEFAULT_TITLE,
) -> str:
    """Assemble an SVG document around path elements.

    Args:
        width: Source raster width in pixels
        height: Source raster height in pixels
        paths: Path fragments or pre-rendered <path> elements
        title: Document title

    Returns:
        SVG document text with an XML prolog

    Raises:
        ValueError: If width or height is negative
    """
    if width < 0 or height < 0:
        raise ValueError(f"Document size must be non-negative, got {width}x{height}")

    elements = "\n  ".join(str(p) for p in paths)
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {width} {height}" '
        f'width="{width}" height="{height}">\n'
        f"  <title>{escape(title)}</title>\n"
        f"  {elements}\n"
        "</svg>"
    )


def vectorize(
    sample: RasterSample,
    config: TraceConfig | None = None,
    fill: str | None = None,
) -> str:
    """Trace a decoded raster into an SVG document.

    Args:
        sample: Decoded RGBA pixels
        config: Tracing configuration (defaults when None)
        fill: Override fill colour applied uniformly to every region

    Returns:
        SVG document text
    """
    config = config or TraceConfig()
    mask = to_mask(sample, threshold=config.threshold, alpha_floor=config.alpha_floor)
    fragments = trace(
        mask,
        stroke_color=fill or config.fill,
        min_region_size=config.min_region_size,
    )
    return build_document(sample.width, sample.height, fragments, title=config.title)


def png_to_svg(
    source: ImageSource,
    threshold: int = 128,
    reader: ImageReader | None = None,
) -> str:
    """Decode an image reference and trace it into a black SVG.

    Raises:
        VectorizationError: If the image cannot be decoded
    """
    sample = _read(source, reader)
    return vectorize(sample, TraceConfig(threshold=threshold))


def png_to_color_svg(
    source: ImageSource,
    primary_color: str = "#000000",
    reader: ImageReader | None = None,
) -> str:
    """Decode an image reference and trace it filled with one brand colour.

    Per-pixel colours are not extracted; every region gets primary_color.

    Raises:
        VectorizationError: If the image cannot be decoded
    """
    sample = _read(source, reader)
    return vectorize(sample, TraceConfig(threshold=128), fill=primary_color)


def _read(source: ImageSource, reader: ImageReader | None) -> RasterSample:
    try:
        return (reader or ImageReader()).read_sample(source)
    except DecodeError as e:
        raise VectorizationError(e.reason) from e
