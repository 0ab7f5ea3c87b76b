"""Configuration settings for Brandmark."""

from pathlib import Path

from pydantic import BaseModel, Field


class CanvasSize(BaseModel):
    """Fixed pixel size of a layout canvas."""

    width: int = Field(ge=1, description="Canvas width in pixels")
    height: int = Field(ge=1, description="Canvas height in pixels")


class TraceConfig(BaseModel):
    """Configuration for raster to vector tracing."""

    threshold: int = Field(
        default=128,
        ge=0,
        le=255,
        description="Luminance cutoff; darker pixels become foreground",
    )
    alpha_floor: int = Field(
        default=128,
        ge=0,
        le=255,
        description="Pixels must be more opaque than this to become foreground",
    )
    min_region_size: int = Field(
        default=10,
        ge=0,
        description="Regions must have more cells than this to be emitted",
    )
    fill: str = Field(
        default="#000000",
        description="Fill colour applied to traced paths",
    )
    title: str = Field(
        default="Vectorized Logo",
        description="Title element written into traced SVG documents",
    )


class LayoutConfig(BaseModel):
    """Geometry constants for the canonical logo layouts.

    Ratios are relative to the canvas dimension named in the field, sizes
    and gaps are in pixels.
    """

    horizontal: CanvasSize = Field(default_factory=lambda: CanvasSize(width=800, height=200))
    vertical: CanvasSize = Field(default_factory=lambda: CanvasSize(width=400, height=400))
    icon_only: CanvasSize = Field(default_factory=lambda: CanvasSize(width=300, height=300))

    icon_only_ratio: float = Field(
        default=0.8,
        gt=0.0,
        le=1.0,
        description="Icon size as a fraction of min(width, height)",
    )
    horizontal_icon_ratio: float = Field(
        default=0.7,
        gt=0.0,
        le=1.0,
        description="Icon size as a fraction of canvas height",
    )
    horizontal_gutter: float = Field(
        default=30.0,
        ge=0.0,
        description="Gap between icon and company name",
    )
    horizontal_max_font_size: float = Field(default=48.0, gt=0.0)
    horizontal_font_ratio: float = Field(
        default=0.25,
        gt=0.0,
        description="Font size as a fraction of canvas height",
    )
    vertical_icon_ratio: float = Field(
        default=0.5,
        gt=0.0,
        le=1.0,
        description="Icon size as a fraction of canvas width",
    )
    vertical_top_ratio: float = Field(
        default=0.15,
        ge=0.0,
        lt=1.0,
        description="Icon top offset as a fraction of canvas height",
    )
    vertical_gap: float = Field(
        default=20.0,
        ge=0.0,
        description="Gap between icon bottom and text top",
    )
    vertical_max_font_size: float = Field(default=36.0, gt=0.0)
    vertical_font_ratio: float = Field(
        default=0.12,
        gt=0.0,
        description="Font size as a fraction of canvas width",
    )
    background: str = Field(
        default="#FFFFFF",
        description="Solid background colour painted before compositing",
    )
    font_weight: str = Field(
        default="Bold",
        description="Font weight used for the company name",
    )


class FontConfig(BaseModel):
    """Configuration for font loading."""

    font_dir: Path | None = Field(
        default=None,
        description="Directory containing bundled {Family}-{Weight}.ttf files",
    )
    ready_timeout_seconds: float = Field(
        default=10.0,
        gt=0.0,
        description="How long to wait for a font before falling back",
    )
    fallback_delay_ms: int = Field(
        default=500,
        ge=0,
        description="Fixed wait applied when the font cannot be loaded",
    )
    request_timeout_seconds: float = Field(
        default=30.0,
        gt=0.0,
        description="HTTP timeout for font downloads",
    )
    weights: list[int] = Field(
        default_factory=lambda: [400, 700],
        description="Weights requested from the web font stylesheet",
    )


class RetryConfig(BaseModel):
    """Retry policy for generative collaborator calls."""

    max_retries: int = Field(
        default=3,
        ge=0,
        le=10,
        description="Retries after the first attempt for transient errors",
    )
    base_delay_ms: int = Field(
        default=1000,
        ge=0,
        description="Initial backoff delay, doubled after each retry",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class BrandmarkSettings(BaseModel):
    """Main application settings."""

    trace: TraceConfig = Field(default_factory=TraceConfig)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    fonts: FontConfig = Field(default_factory=FontConfig)
    retry: RetryConfig = Field(default_factory=RetryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> BrandmarkSettings:
    """Get default application settings."""
    return BrandmarkSettings()
