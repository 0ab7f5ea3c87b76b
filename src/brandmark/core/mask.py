"""Binary mask builder.

Thresholds a RasterSample into foreground ("ink") cells: a pixel is ink when
it is more opaque than the alpha floor and darker than the luminance
threshold. Luminance uses the ITU-R BT.601 weights.
"""

from brandmark.domain import BinaryMask, Pixel, RasterSample

LUMA_RED = 0.299
LUMA_GREEN = 0.587
LUMA_BLUE = 0.114

DEFAULT_THRESHOLD = 128
DEFAULT_ALPHA_FLOOR = 128


def luminance(r: int, g: int, b: int) -> float:
    """Perceptual luminance of an RGB triple on a 0-255 scale.

    Examples:
        >>> luminance(0, 0, 0)
        0.0
        >>> round(luminance(255, 255, 255), 6)
        255.0
    """
    return LUMA_RED * r + LUMA_GREEN * g + LUMA_BLUE * b


def is_ink(
    pixel: Pixel,
    threshold: int = DEFAULT_THRESHOLD,
    alpha_floor: int = DEFAULT_ALPHA_FLOOR,
) -> bool:
    """Decide whether a single pixel is foreground."""
    r, g, b, a = pixel
    return a > alpha_floor and luminance(r, g, b) < threshold


def to_mask(
    sample: RasterSample,
    threshold: int = DEFAULT_THRESHOLD,
    alpha_floor: int = DEFAULT_ALPHA_FLOOR,
) -> BinaryMask:
    """Threshold a raster into a foreground mask of the same dimensions.

    Args:
        sample: Decoded RGBA pixels
        threshold: Pixels with luminance below this are foreground
        alpha_floor: Pixels must have alpha above this to be foreground

    Returns:
        BinaryMask with the sample's width and height. An empty sample
        yields an empty mask.
    """
    data = sample.data
    stride = sample.width * 4
    rows: list[tuple[bool, ...]] = []

    for y in range(sample.height):
        start = y * stride
        row = tuple(
            data[i + 3] > alpha_floor
            and LUMA_RED * data[i] + LUMA_GREEN * data[i + 1] + LUMA_BLUE * data[i + 2] < threshold
            for i in range(start, start + stride, 4)
        )
        rows.append(row)

    return BinaryMask(width=sample.width, height=sample.height, cells=tuple(rows))
