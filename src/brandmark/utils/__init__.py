"""Utility functions for brandmark.

This module provides:

- Logging setup and configuration
- Per-layout progress and run statistics
"""

from brandmark.utils.logging import (
    CompositionLogger,
    RunStats,
    configure_logging,
)

__all__ = [
    "CompositionLogger",
    "RunStats",
    "configure_logging",
]
