"""Logo compositing domain models.

This module defines the inputs and outputs of the logo layout engine:
the icon-only asset, the three canonical layouts, the computed per-layout
geometry and the aggregated set of composited variations.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar


class LogoLayout(str, Enum):
    """Canonical logo compositions."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    ICON_ONLY = "icon-only"

    @property
    def key(self) -> str:
        """Key used for this layout in serialized variation sets."""
        return "iconOnly" if self is LogoLayout.ICON_ONLY else self.value


@dataclass(frozen=True)
class LogoAsset:
    """Icon-only raster plus what is needed to composite it.

    Created by the image generation step and never mutated afterwards.

    Attributes:
        icon: Image reference (data URL, http(s) URL, file path or raw bytes)
        company_name: Name set next to or below the icon
        font_family: Header font family for the company name
        primary_color: Text colour as a hex string
        is_rtl: Right-to-left text direction
    """

    icon: str | bytes
    company_name: str
    font_family: str
    primary_color: str = "#000000"
    is_rtl: bool = False

    def has_icon(self) -> bool:
        """True when an icon reference is present."""
        return bool(self.icon)


@dataclass(frozen=True, slots=True)
class Box:
    """Axis-aligned pixel rectangle."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


_ALIGN_ANCHORS = {"left": "l", "right": "r", "center": "m"}
_BASELINE_ANCHORS = {"middle": "m", "top": "t"}


@dataclass(frozen=True)
class LayoutGeometry:
    """Computed placement for one layout.

    Derived from the canvas size and measured text width on every render.
    For the icon-only layout the text fields are unset.

    Attributes:
        layout: Layout this geometry belongs to
        canvas_width: Canvas width in pixels
        canvas_height: Canvas height in pixels
        icon: Where the icon is drawn
        font_size: Company name font size in pixels (0 when no text)
        text_width: Measured company name width in pixels
        text_x: Text anchor x coordinate
        text_y: Text anchor y coordinate
        text_align: "left", "right" or "center"
        text_baseline: "middle" or "top"
    """

    layout: LogoLayout
    canvas_width: int
    canvas_height: int
    icon: Box
    font_size: float = 0.0
    text_width: float = 0.0
    text_x: float | None = None
    text_y: float | None = None
    text_align: str | None = None
    text_baseline: str | None = None

    @property
    def has_text(self) -> bool:
        return self.text_x is not None and self.text_y is not None

    @property
    def text_anchor(self) -> str | None:
        """Two-letter Pillow text anchor for the alignment and baseline."""
        if self.text_align is None or self.text_baseline is None:
            return None
        return _ALIGN_ANCHORS[self.text_align] + _BASELINE_ANCHORS[self.text_baseline]

    def text_span(self) -> tuple[float, float] | None:
        """Horizontal extent (left, right) covered by the text."""
        x = self.text_x
        if x is None or self.text_y is None:
            return None
        if self.text_align == "left":
            return (x, x + self.text_width)
        if self.text_align == "right":
            return (x - self.text_width, x)
        half = self.text_width / 2
        return (x - half, x + half)


@dataclass
class VariationSet:
    """Composited rasters for all three layouts.

    Built incrementally as layouts finish. Complete only once every layout
    has a non-empty export. Failed layouts are recorded in ``failures``.
    """

    horizontal: str | None = None
    vertical: str | None = None
    icon_only: str | None = None
    failures: dict[LogoLayout, str] = field(default_factory=dict)

    _ATTRS: ClassVar[dict[LogoLayout, str]] = {
        LogoLayout.HORIZONTAL: "horizontal",
        LogoLayout.VERTICAL: "vertical",
        LogoLayout.ICON_ONLY: "icon_only",
    }

    def get(self, layout: LogoLayout) -> str | None:
        return getattr(self, self._ATTRS[layout])

    def set(self, layout: LogoLayout, data_url: str) -> None:
        """Store a finished export, clearing any earlier failure."""
        setattr(self, self._ATTRS[layout], data_url)
        self.failures.pop(layout, None)

    def record_failure(self, layout: LogoLayout, reason: str) -> None:
        self.failures[layout] = reason

    def missing(self) -> list[LogoLayout]:
        """Layouts without an export yet."""
        return [layout for layout in LogoLayout if not self.get(layout)]

    def is_complete(self) -> bool:
        return not self.missing()

    def to_dict(self) -> dict[str, Any]:
        """Serialize populated exports keyed horizontal/vertical/iconOnly."""
        return {
            layout.key: self.get(layout)
            for layout in LogoLayout
            if self.get(layout)
        }
