"""Logo layout engine.

Composites an icon-only raster and a company name into one of the canonical
layouts and exports a flattened PNG data URL. Each call runs

    idle -> loading (icon decode and font readiness, joined) -> rendering
         -> ready | failed

and either returns a complete export or raises CompositionError; nothing
partial is ever returned. Rendering is deterministic for identical icon
pixels, font data and inputs.
"""

import asyncio
from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum

import structlog
from PIL import Image, ImageDraw, ImageFont, features

from brandmark.config import LayoutConfig
from brandmark.core.layout import canvas_size, compute_geometry, font_size_for
from brandmark.domain import LayoutGeometry, LogoAsset, LogoLayout
from brandmark.exceptions import CompositionError, DecodeError
from brandmark.io.fonts import FontFace, FontLoader
from brandmark.io.reader import ImageReader, ImageSource
from brandmark.io.writer import png_data_url


class CompositionState(str, Enum):
    """Lifecycle of a single composite call."""

    IDLE = "idle"
    LOADING = "loading"
    RENDERING = "rendering"
    READY = "ready"
    FAILED = "failed"


@contextmanager
def drawing_surface(width: int, height: int, background: str) -> Iterator[Image.Image]:
    """Acquire a private opaque canvas, released on every exit path.

    Raises:
        CompositionError: If the surface cannot be created
    """
    try:
        surface = Image.new("RGB", (width, height), background)
    except (ValueError, MemoryError) as e:
        raise CompositionError(f"{width}x{height}", f"cannot create drawing surface: {e}") from e
    try:
        yield surface
    finally:
        surface.close()


class LogoCompositor:
    """Renders icon + company name layouts onto fixed-size canvases.

    The compositor holds no per-call state, so one instance can serve
    several concurrent composite calls.

    Example:
        compositor = LogoCompositor(FontLoader())
        data_url = await compositor.composite(
            icon="icon.png",
            company_name="Acme Labs",
            font_family="Inter",
            primary_color="#1E40AF",
            layout=LogoLayout.HORIZONTAL,
        )
    """

    def __init__(
        self,
        font_loader: FontLoader | None = None,
        reader: ImageReader | None = None,
        config: LayoutConfig | None = None,
    ) -> None:
        """Initialize the compositor.

        Args:
            font_loader: Loader used to make the header font measurable
            reader: Image reader for icon references
            config: Layout constants
        """
        self.font_loader = font_loader if font_loader is not None else FontLoader()
        self.reader = reader if reader is not None else ImageReader()
        self.config = config if config is not None else LayoutConfig()
        self.logger = structlog.get_logger("brandmark")

    async def composite(
        self,
        icon: ImageSource,
        company_name: str,
        font_family: str,
        primary_color: str,
        layout: LogoLayout,
        is_rtl: bool = False,
    ) -> str:
        """Composite one layout and export it as a PNG data URL.

        Icon decode and font readiness start together and both finish
        before anything is drawn.

        Raises:
            CompositionError: If the icon cannot be loaded or drawing fails
        """
        log = self.logger.bind(layout=layout.value)
        log.debug("Composition state", state=CompositionState.LOADING.value)

        try:
            icon_image, face = await asyncio.gather(
                self.reader.load_image(icon),
                self.font_loader.ensure_font_ready(font_family, self.config.font_weight),
            )
        except DecodeError as e:
            log.debug("Composition state", state=CompositionState.FAILED.value)
            raise CompositionError(layout.value, f"icon could not be loaded: {e.reason}") from e

        log.debug("Composition state", state=CompositionState.RENDERING.value)
        try:
            data_url = self.render(icon_image, face, company_name, primary_color, layout, is_rtl)
        except CompositionError:
            log.debug("Composition state", state=CompositionState.FAILED.value)
            raise
        finally:
            icon_image.close()

        log.debug("Composition state", state=CompositionState.READY.value)
        return data_url

    async def composite_asset(self, asset: LogoAsset, layout: LogoLayout) -> str:
        """Composite one layout from a LogoAsset."""
        return await self.composite(
            icon=asset.icon,
            company_name=asset.company_name,
            font_family=asset.font_family,
            primary_color=asset.primary_color,
            layout=layout,
            is_rtl=asset.is_rtl,
        )

    def geometry(
        self,
        face: FontFace,
        company_name: str,
        layout: LogoLayout,
        is_rtl: bool = False,
    ) -> LayoutGeometry:
        """Measure the company name and compute the layout geometry."""
        font_size = font_size_for(layout, self.config)
        text_width = face.text_width(company_name, font_size) if font_size else 0.0
        return compute_geometry(layout, text_width, is_rtl, self.config)

    def render(
        self,
        icon_image: Image.Image,
        face: FontFace,
        company_name: str,
        primary_color: str,
        layout: LogoLayout,
        is_rtl: bool = False,
    ) -> str:
        """Draw a layout synchronously and export it.

        Raises:
            CompositionError: If any drawing step fails
        """
        geometry = self.geometry(face, company_name, layout, is_rtl)
        size = canvas_size(layout, self.config)

        try:
            with drawing_surface(size.width, size.height, self.config.background) as surface:
                self._draw_icon(surface, icon_image, geometry)
                if geometry.has_text and company_name:
                    self._draw_text(surface, face, company_name, primary_color, geometry, is_rtl)
                return png_data_url(surface)
        except CompositionError as e:
            raise CompositionError(layout.value, e.reason) from e
        except (OSError, ValueError, TypeError) as e:
            raise CompositionError(layout.value, str(e) or type(e).__name__) from e

    def _draw_icon(
        self,
        surface: Image.Image,
        icon_image: Image.Image,
        geometry: LayoutGeometry,
    ) -> None:
        box = geometry.icon
        side = max(1, round(box.width))
        scaled = icon_image.convert("RGBA").resize((side, side), Image.Resampling.LANCZOS)
        try:
            surface.paste(scaled, (round(box.x), round(box.y)), scaled)
        finally:
            scaled.close()

    def _draw_text(
        self,
        surface: Image.Image,
        face: FontFace,
        text: str,
        color: str,
        geometry: LayoutGeometry,
        is_rtl: bool,
    ) -> None:
        if geometry.text_x is None or geometry.text_y is None:
            raise CompositionError(geometry.layout.value, "layout has no text position")

        draw = ImageDraw.Draw(surface)
        font = face.pillow_font(geometry.font_size)
        direction = "rtl" if is_rtl and features.check_feature("raqm") else None

        if isinstance(font, ImageFont.FreeTypeFont):
            draw.text(
                (geometry.text_x, geometry.text_y),
                text,
                font=font,
                fill=color,
                anchor=geometry.text_anchor,
                direction=direction,
            )
            return

        bbox = draw.textbbox((0, 0), text, font=font)
        draw.text(bitmap_text_origin(geometry, bbox), text, font=font, fill=color)


def bitmap_text_origin(
    geometry: LayoutGeometry,
    bbox: tuple[float, float, float, float],
) -> tuple[float, float]:
    """Drawing origin for fonts without anchor support.

    Bitmap fonts are placed by their top-left corner, so the ink box measured
    at (0, 0) is shifted onto the layout's alignment and baseline.

    Raises:
        CompositionError: If the layout has no text position
    """
    span = geometry.text_span()
    if span is None or geometry.text_y is None:
        raise CompositionError(geometry.layout.value, "layout has no text position")

    _, top, _, bottom = bbox
    y = geometry.text_y - top
    if geometry.text_baseline == "middle":
        y -= (bottom - top) / 2
    return (span[0], y)
