"""Domain models for brandmark.

This module contains the core domain models for raster tracing and logo
compositing. Models are plain dataclasses, frozen where the data is
produced once and only read afterwards.

Key classes:
- RasterSample: Decoded RGBA pixels
- BinaryMask: Foreground flags derived from a RasterSample
- Region: A 4-connected cluster of foreground cells
- PathFragment: SVG path data for one region
- LogoAsset: Icon-only raster plus compositing inputs
- LogoLayout: The three canonical layouts
- LayoutGeometry: Computed placement for one layout
- VariationSet: Composited rasters for all layouts
"""

from brandmark.domain.logo import Box, LayoutGeometry, LogoAsset, LogoLayout, VariationSet
from brandmark.domain.raster import BinaryMask, Pixel, RasterSample
from brandmark.domain.region import PathFragment, Region

__all__: list[str] = [
    # Enums
    "LogoLayout",
    # Raster types
    "Pixel",
    "RasterSample",
    "BinaryMask",
    # Tracing types
    "Region",
    "PathFragment",
    # Compositing types
    "Box",
    "LogoAsset",
    "LayoutGeometry",
    "VariationSet",
]
