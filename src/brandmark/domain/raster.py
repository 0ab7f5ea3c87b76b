"""Pixel grid types for raster analysis.

This module defines the two grids the tracing pipeline works on:
- RasterSample: decoded RGBA pixels of a source image
- BinaryMask: per-pixel foreground flags derived from a RasterSample
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

Pixel = tuple[int, int, int, int]


@dataclass(frozen=True, slots=True)
class RasterSample:
    """A decoded image as a flat, row-major RGBA byte buffer.

    Immutable; produced once per input image by the bitmap extractor.

    Attributes:
        width: Image width in pixels
        height: Image height in pixels
        data: RGBA bytes, 4 per pixel, rows top to bottom
    """

    width: int
    height: int
    data: bytes

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("Raster dimensions must be non-negative")
        expected = self.width * self.height * 4
        if len(self.data) != expected:
            raise ValueError(
                f"Expected {expected} bytes for {self.width}x{self.height} RGBA, "
                f"got {len(self.data)}"
            )

    def pixel(self, x: int, y: int) -> Pixel:
        """Return the (r, g, b, a) channels at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height}")
        idx = (y * self.width + x) * 4
        d = self.data
        return (d[idx], d[idx + 1], d[idx + 2], d[idx + 3])

    def iter_pixels(self) -> Iterator[tuple[int, int, Pixel]]:
        """Yield (x, y, pixel) in row-major order."""
        d = self.data
        idx = 0
        for y in range(self.height):
            for x in range(self.width):
                yield x, y, (d[idx], d[idx + 1], d[idx + 2], d[idx + 3])
                idx += 4

    def is_empty(self) -> bool:
        """True when the sample has no pixels."""
        return self.width == 0 or self.height == 0

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Pixel]]) -> "RasterSample":
        """Build a sample from nested rows of (r, g, b, a) tuples.

        Args:
            rows: Rows of equal length, top to bottom

        Returns:
            RasterSample instance
        """
        height = len(rows)
        width = len(rows[0]) if height else 0
        buf = bytearray()
        for row in rows:
            if len(row) != width:
                raise ValueError("All rows must have the same length")
            for r, g, b, a in row:
                buf.extend((r, g, b, a))
        return cls(width=width, height=height, data=bytes(buf))


@dataclass(frozen=True, slots=True)
class BinaryMask:
    """Foreground ("ink") flags with the dimensions of its source raster.

    Attributes:
        width: Mask width in cells
        height: Mask height in cells
        cells: Rows of booleans, top to bottom
    """

    width: int
    height: int
    cells: tuple[tuple[bool, ...], ...]

    def __post_init__(self) -> None:
        if len(self.cells) != self.height:
            raise ValueError("Row count does not match mask height")
        for row in self.cells:
            if len(row) != self.width:
                raise ValueError("Row length does not match mask width")

    def is_foreground(self, x: int, y: int) -> bool:
        """Check a single cell; out-of-range coordinates are background."""
        if 0 <= x < self.width and 0 <= y < self.height:
            return self.cells[y][x]
        return False

    def foreground_count(self) -> int:
        """Number of foreground cells."""
        return sum(sum(row) for row in self.cells)

    def is_blank(self) -> bool:
        """True when no cell is foreground."""
        return not any(any(row) for row in self.cells)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[bool]]) -> "BinaryMask":
        """Build a mask from nested rows of booleans."""
        cells = tuple(tuple(bool(v) for v in row) for row in rows)
        height = len(cells)
        width = len(cells[0]) if height else 0
        return cls(width=width, height=height, cells=cells)

    @classmethod
    def blank(cls, width: int, height: int) -> "BinaryMask":
        """Build an all-background mask."""
        row = (False,) * width
        return cls(width=width, height=height, cells=(row,) * height)
