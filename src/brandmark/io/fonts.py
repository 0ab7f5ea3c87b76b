"""Font metrics loader for logo text layout.

This module makes a font family measurable before any text is laid out:

- FONT_REGISTRY: known families with script and weight metadata
- FontRegistry: injected record of requested families and loaded faces
- FontFace: advance-width text measurement via fontTools, drawing via Pillow
- FontLoader: best-effort fetch (bundled file, then google/fonts on GitHub)
  with a fixed fallback delay when the font cannot be made ready
"""

import asyncio
import re
from collections.abc import Callable
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path

import requests
import structlog
from fontTools.ttLib import TTFont, TTLibError
from PIL import ImageFont

from brandmark.config import FontConfig
from brandmark.exceptions import FontLoadError

logger = structlog.get_logger("brandmark")

GOOGLE_FONTS_CSS = "https://fonts.googleapis.com/css2"
GITHUB_FONTS_RAW = "https://raw.githubusercontent.com/google/fonts/main/ofl"


@dataclass(frozen=True)
class FontInfo:
    """Metadata about a known font family.

    Attributes:
        name: Family name as used in CSS and identity responses
        slug: Directory name in the google/fonts repository
        category: sans-serif, serif, display, handwriting or monospace
        weights: Weights the family ships
        is_bundled: Whether Regular/Bold files are expected in the font dir
        language: latin, arabic or both
    """

    name: str
    slug: str
    category: str
    weights: tuple[int, ...]
    is_bundled: bool = True
    language: str = "latin"


FONT_REGISTRY: dict[str, FontInfo] = {
    info.name: info
    for info in (
        # Latin
        FontInfo("Inter", "inter", "sans-serif", (400, 500, 600, 700)),
        FontInfo("Roboto", "roboto", "sans-serif", (400, 500, 700)),
        FontInfo("Montserrat", "montserrat", "sans-serif", (400, 500, 600, 700)),
        FontInfo("Lato", "lato", "sans-serif", (400, 700)),
        FontInfo("Open Sans", "opensans", "sans-serif", (400, 600, 700)),
        FontInfo("Poppins", "poppins", "sans-serif", (400, 500, 600, 700)),
        FontInfo("Playfair Display", "playfairdisplay", "serif", (400, 700)),
        # Arabic
        FontInfo("Tajawal", "tajawal", "sans-serif", (400, 500, 700), language="arabic"),
        FontInfo("Cairo", "cairo", "sans-serif", (400, 600, 700), language="arabic"),
        FontInfo("Almarai", "almarai", "sans-serif", (400, 700), language="arabic"),
        FontInfo(
            "IBM Plex Sans Arabic",
            "ibmplexsansarabic",
            "sans-serif",
            (400, 500, 600, 700),
            language="arabic",
        ),
    )
}


def get_font_info(family: str) -> FontInfo | None:
    """Look up a family in the font registry."""
    return FONT_REGISTRY.get(family)


def is_font_bundled(family: str) -> bool:
    """Check whether a family is expected in the bundled font directory."""
    info = FONT_REGISTRY.get(family)
    return info.is_bundled if info else False


def get_bundled_fonts(language: str | None = None) -> list[FontInfo]:
    """List bundled families, optionally restricted to one script."""
    return [
        info
        for info in FONT_REGISTRY.values()
        if info.is_bundled
        and (language is None or info.language in (language, "both"))
    ]


def font_file_name(family: str, weight: str = "Regular") -> str:
    """File name convention: "Open Sans" Bold -> OpenSans-Bold.ttf."""
    compact = re.sub(r"\s", "", family)
    return f"{compact}-{weight}.ttf"


def registration_id(family: str) -> str:
    """Identifier a family is registered under: "Open Sans" -> font-Open-Sans."""
    return "font-" + re.sub(r"\s", "-", family)


def google_font_css_url(family: str, weights: list[int] | tuple[int, ...] = (400, 700)) -> str:
    """Google Fonts stylesheet URL for a family."""
    weight_str = ";".join(str(w) for w in weights)
    encoded = re.sub(r"\s", "+", family)
    return f"{GOOGLE_FONTS_CSS}?family={encoded}:wght@{weight_str}&display=swap"


def github_font_urls(family: str, weight: str = "Regular") -> list[str]:
    """Candidate raw URLs for a font file in the google/fonts repository.

    Tried in order: top-level file, static/ folder, and for Regular the
    variable font.
    """
    info = FONT_REGISTRY.get(family)
    slug = info.slug if info else re.sub(r"\s", "", family).lower()
    file_name = font_file_name(family, weight)
    urls = [
        f"{GITHUB_FONTS_RAW}/{slug}/{file_name}",
        f"{GITHUB_FONTS_RAW}/{slug}/static/{file_name}",
    ]
    if weight == "Regular":
        compact = re.sub(r"\s", "", family)
        urls.append(f"{GITHUB_FONTS_RAW}/{slug}/{compact}-VariableFont_wght.ttf")
    return urls


class FontFace:
    """A family at one weight, measurable and drawable.

    When constructed without font data the face falls back to Pillow's
    default font for both measurement and drawing.
    """

    def __init__(self, family: str, weight: str = "Bold", data: bytes | None = None) -> None:
        """Initialize the face.

        Args:
            family: Font family name
            weight: Weight name (Regular, Bold)
            data: Raw TTF/OTF bytes, or None for the fallback font

        Raises:
            FontLoadError: If data is given but cannot be parsed
        """
        self.family = family
        self.weight = weight
        self._data = data
        self._pillow_fonts: dict[float, ImageFont.ImageFont | ImageFont.FreeTypeFont] = {}
        self._advances: dict[str, int] = {}
        self._cmap: dict[int, str] = {}
        self._upm = 1000

        if data is not None:
            try:
                font = TTFont(BytesIO(data))
                self._upm = font["head"].unitsPerEm  # type: ignore[attr-defined]
                self._cmap = font.getBestCmap() or {}
                hmtx = font["hmtx"]
                self._advances = {name: hmtx[name][0] for name in font.getGlyphOrder()}
                font.close()
            except (TTLibError, KeyError, AssertionError, ValueError, EOFError) as e:
                raise FontLoadError(family, f"unreadable font data: {e}") from e

    @classmethod
    def fallback(cls, family: str, weight: str = "Bold") -> "FontFace":
        """Face that measures and draws with Pillow's default font."""
        return cls(family, weight, data=None)

    @property
    def is_fallback(self) -> bool:
        return self._data is None

    @property
    def units_per_em(self) -> int:
        return self._upm

    def text_width(self, text: str, size: float) -> float:
        """Measure the advance width of text at a pixel size.

        Sums horizontal advances of the mapped glyphs (unmapped characters
        use .notdef), scaled by size / unitsPerEm. No kerning is applied.
        """
        if self.is_fallback:
            return float(self.pillow_font(size).getlength(text))

        notdef = self._advances.get(".notdef", 0)
        units = 0
        for ch in text:
            glyph_name = self._cmap.get(ord(ch))
            units += self._advances.get(glyph_name, notdef) if glyph_name else notdef
        return units * size / self._upm

    def pillow_font(self, size: float) -> ImageFont.ImageFont | ImageFont.FreeTypeFont:
        """Pillow font object for drawing at a pixel size."""
        font = self._pillow_fonts.get(size)
        if font is None:
            if self._data is not None:
                font = ImageFont.truetype(BytesIO(self._data), size=size)
            else:
                font = ImageFont.load_default(size=size)
            self._pillow_fonts[size] = font
        return font


class FontRegistry:
    """Record of requested font families and the faces loaded for them.

    Writes are idempotent check-then-add. Concurrent loads of the same face
    share one in-flight future. Holding one instance per process
    mirrors a page's stylesheet list; tests create or reset their own.
    """

    def __init__(self) -> None:
        self._stylesheets: dict[str, str] = {}
        self._faces: dict[tuple[str, str], FontFace] = {}
        self._pending: dict[tuple[str, str], asyncio.Future[FontFace]] = {}

    def has(self, family: str) -> bool:
        """Check whether a family has been registered."""
        return registration_id(family) in self._stylesheets

    def register(self, family: str, weights: list[int] | tuple[int, ...] = (400, 700)) -> bool:
        """Register a family's stylesheet if it is not registered yet.

        Returns:
            True if the family was newly registered
        """
        key = registration_id(family)
        if key in self._stylesheets:
            return False
        self._stylesheets[key] = google_font_css_url(family, weights)
        return True

    def stylesheet_url(self, family: str) -> str | None:
        return self._stylesheets.get(registration_id(family))

    def face(self, family: str, weight: str) -> FontFace | None:
        """Previously loaded face, if any."""
        return self._faces.get((family, weight))

    def store_face(self, face: FontFace) -> None:
        self._faces[(face.family, face.weight)] = face

    def pending(self, family: str, weight: str) -> asyncio.Future[FontFace] | None:
        """Load already in flight for a family and weight, if any."""
        return self._pending.get((family, weight))

    def track(self, family: str, weight: str, load: asyncio.Future[FontFace]) -> None:
        """Share an in-flight load until it finishes."""
        key = (family, weight)
        self._pending[key] = load

        def untrack(done: asyncio.Future[FontFace]) -> None:
            if self._pending.get(key) is done:
                del self._pending[key]

        load.add_done_callback(untrack)

    def reset(self) -> None:
        """Forget every registration and loaded face."""
        self._stylesheets.clear()
        self._faces.clear()
        self._pending.clear()

    def __contains__(self, family: object) -> bool:
        return isinstance(family, str) and self.has(family)

    def __len__(self) -> int:
        return len(self._stylesheets)


class FontLoader:
    """Ensures a font family is usable before layout.

    Loading is best effort: when the font cannot be fetched or parsed in
    time, the loader waits a fixed fallback delay and hands back a fallback
    face instead of failing the caller.

    Example:
        loader = FontLoader(FontRegistry(), FontConfig())
        face = await loader.ensure_font_ready("Inter")
        width = face.text_width("Acme", 48)
    """

    def __init__(
        self,
        registry: FontRegistry | None = None,
        config: FontConfig | None = None,
        fetch: Callable[[str], bytes] | None = None,
    ) -> None:
        """Initialize the font loader.

        Args:
            registry: Shared registry of requested families
            config: Font loading configuration
            fetch: Callable returning the bytes at a URL (raises on failure)
        """
        self.registry = registry if registry is not None else FontRegistry()
        self.config = config if config is not None else FontConfig()
        self._fetch = fetch if fetch is not None else self._http_fetch

    def bundled_path(self, family: str, weight: str) -> Path | None:
        """Path of the bundled file for a family, if configured and present."""
        if self.config.font_dir is None:
            return None
        path = self.config.font_dir / font_file_name(family, weight)
        return path if path.is_file() else None

    def fetch_font_bytes(self, family: str, weight: str = "Regular") -> bytes:
        """Fetch raw font bytes, trying the bundled file then GitHub.

        Raises:
            FontLoadError: If every source failed
        """
        bundled = self.bundled_path(family, weight)
        if bundled is not None:
            try:
                return bundled.read_bytes()
            except OSError as e:
                logger.warning(
                    "Failed to read bundled font",
                    family=family,
                    weight=weight,
                    error=str(e),
                )

        errors: list[str] = []
        for url in github_font_urls(family, weight):
            try:
                return self._fetch(url)
            except (requests.RequestException, OSError) as e:
                errors.append(f"{url}: {e}")

        raise FontLoadError(family, "; ".join(errors) or "no font source available")

    async def ensure_font_ready(self, family: str, weight: str = "Bold") -> FontFace:
        """Make a family measurable, falling back after a fixed delay.

        Concurrent callers asking for the same face share one load, so the
        download and any fallback delay happen once.

        Args:
            family: Font family name
            weight: Weight name to load

        Returns:
            A loaded face, or a fallback face if loading failed
        """
        if self.registry.register(family, self.config.weights):
            logger.debug(
                "Registered font stylesheet",
                family=family,
                id=registration_id(family),
            )

        cached = self.registry.face(family, weight)
        if cached is not None:
            return cached

        load = self.registry.pending(family, weight)
        if load is None:
            load = asyncio.ensure_future(self._load(family, weight))
            self.registry.track(family, weight, load)
        return await asyncio.shield(load)

    async def _load(self, family: str, weight: str) -> FontFace:
        try:
            data = await asyncio.wait_for(
                asyncio.to_thread(self.fetch_font_bytes, family, weight),
                timeout=self.config.ready_timeout_seconds,
            )
            face = FontFace(family, weight, data)
        except (FontLoadError, asyncio.TimeoutError) as e:
            logger.warning(
                "Font not ready, using fallback",
                family=family,
                weight=weight,
                error=str(e) or type(e).__name__,
            )
            await asyncio.sleep(self.config.fallback_delay_ms / 1000)
            return FontFace.fallback(family, weight)

        self.registry.store_face(face)
        logger.info("Font ready", family=family, weight=weight)
        return face

    def _http_fetch(self, url: str) -> bytes:
        response = requests.get(url, timeout=self.config.request_timeout_seconds)
        response.raise_for_status()
        return response.content
