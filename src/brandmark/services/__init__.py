"""Generative collaborator contracts for brandmark.

The identity and image generators live outside this package. This module
defines what they accept and return, and calls them with retries for
transient failures.

Key classes:
- BrandIdentity: Structured identity response
- IdentityGenerator / ImageGenerator: Collaborator protocols
- BrandService: Retrying facade over the collaborators
"""

from brandmark.services.brand import (
    BrandService,
    IdentityGenerator,
    ImageGenerator,
    build_image_prompt,
    build_logo_mark_prompt,
)
from brandmark.services.models import (
    BrandIdentity,
    ColorInfo,
    DesignSystem,
    FontPair,
    IdentityRequest,
    Locale,
    LogoSpec,
    LogoVariations,
)
from brandmark.services.retry import is_transient_error, with_retry

__all__ = [
    "BrandIdentity",
    "BrandService",
    "ColorInfo",
    "DesignSystem",
    "FontPair",
    "IdentityGenerator",
    "IdentityRequest",
    "ImageGenerator",
    "Locale",
    "LogoSpec",
    "LogoVariations",
    "build_image_prompt",
    "build_logo_mark_prompt",
    "is_transient_error",
    "with_retry",
]
