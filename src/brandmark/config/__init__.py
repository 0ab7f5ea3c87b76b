"""Configuration management for brandmark.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- TraceConfig: Raster tracing settings
- LayoutConfig: Logo layout geometry
- FontConfig: Font loading settings
- RetryConfig: Collaborator retry policy
- LoggingConfig: Logging settings
- BrandmarkSettings: Main application settings
"""

from brandmark.config.settings import (
    BrandmarkSettings,
    CanvasSize,
    FontConfig,
    LayoutConfig,
    LoggingConfig,
    RetryConfig,
    TraceConfig,
    get_default_settings,
)

__all__ = [
    "BrandmarkSettings",
    "CanvasSize",
    "FontConfig",
    "LayoutConfig",
    "LoggingConfig",
    "RetryConfig",
    "TraceConfig",
    "get_default_settings",
]
