"""Core processing algorithms for brandmark.

This module contains the core algorithms for:

- Mask building (luminance thresholding)
- Tracing (flood-fill regions, run-length path data)
- Document assembly (SVG wrapping, one-shot raster to SVG)
- Layout geometry and compositing (icon + company name rasters)
- Orchestration (all layouts concurrently, aggregated results)

Key functions:
- to_mask: Threshold a raster into a foreground mask
- trace: Turn a mask into path fragments
- build_document: Wrap path fragments into an SVG document
- png_to_svg / png_to_color_svg: Decode, trace and assemble in one call
- compute_geometry: Icon and text placement for a layout

Key classes:
- LogoCompositor: Renders one layout to a PNG data URL
- LogoVariationOrchestrator: Renders all layouts into a VariationSet
"""

from brandmark.core.compositor import CompositionState, LogoCompositor, drawing_surface
from brandmark.core.document import build_document, png_to_color_svg, png_to_svg, vectorize
from brandmark.core.layout import canvas_size, compute_geometry, font_size_for
from brandmark.core.mask import is_ink, luminance, to_mask
from brandmark.core.orchestrator import LogoVariationOrchestrator
from brandmark.core.tracer import MIN_REGION_SIZE, find_regions, flood_fill, region_to_path, trace

__all__ = [
    "MIN_REGION_SIZE",
    # Compositing
    "CompositionState",
    "LogoCompositor",
    "LogoVariationOrchestrator",
    # Document assembly
    "build_document",
    # Layout
    "canvas_size",
    "compute_geometry",
    "drawing_surface",
    # Tracing
    "find_regions",
    "flood_fill",
    "font_size_for",
    # Mask
    "is_ink",
    "luminance",
    "png_to_color_svg",
    "png_to_svg",
    "region_to_path",
    "to_mask",
    "trace",
    "vectorize",
]
