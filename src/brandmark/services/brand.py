"""Generative collaborator contracts and the brand service.

The identity and image generators are external services. This module fixes
the request/response contract they must honour and wraps every call in the
transient-error retry policy.
"""

from typing import Protocol

import structlog

from brandmark.config import RetryConfig
from brandmark.exceptions import PermanentServiceError
from brandmark.services.models import BrandIdentity, IdentityRequest
from brandmark.services.retry import with_retry

logger = structlog.get_logger("brandmark")

IMAGE_STYLE_SUFFIX = "vector logo, solid clean background, high resolution, minimalist"

LOGO_MARK_INSTRUCTIONS = """
    CRITICAL INSTRUCTIONS:
    - Create a clean, flat vector-style ICON/SYMBOL ONLY
    - Do NOT include any text, letters, words, or the company name
    - Use a solid white or transparent background
    - High contrast, simple shapes"""


class IdentityGenerator(Protocol):
    """Produces a structured brand identity from a mission statement."""

    async def generate_identity(self, request: IdentityRequest) -> BrandIdentity: ...


class ImageGenerator(Protocol):
    """Produces one inline raster image for a prompt.

    Returns a data URL, or None when the service produced no image.
    """

    async def generate_image(self, prompt: str) -> str | None: ...


def build_image_prompt(prompt: str, colors: list[str] | None = None) -> str:
    """Frame a logo prompt with style guidance and descriptive colour names."""
    full_prompt = f"{prompt}, {IMAGE_STYLE_SUFFIX}"
    if colors:
        full_prompt += (
            ". The color palette should primarily feature these descriptive colors: "
            f"{', '.join(colors)}. Do not use or display any hex codes."
        )
    return full_prompt


def build_logo_mark_prompt(identity: BrandIdentity) -> str:
    """Prompt for an icon-only mark with no lettering."""
    return f"{identity.logo.prompt}.{LOGO_MARK_INSTRUCTIONS}"


class BrandService:
    """Calls the generative collaborators under the retry policy.

    Example:
        service = BrandService(identity_client, image_client)
        identity = await service.generate_identity(IdentityRequest(mission="..."))
        identity.logo_mark = await service.generate_logo_mark(identity)
    """

    def __init__(
        self,
        identity_generator: IdentityGenerator,
        image_generator: ImageGenerator,
        config: RetryConfig | None = None,
    ) -> None:
        self.identity_generator = identity_generator
        self.image_generator = image_generator
        self.config = config if config is not None else RetryConfig()

    async def generate_identity(self, request: IdentityRequest) -> BrandIdentity:
        """Generate a brand identity.

        Raises:
            TransientServiceError: If the service stayed unavailable
            PermanentServiceError: On any other failure
        """
        identity = await with_retry(
            lambda: self.identity_generator.generate_identity(request),
            retries=self.config.max_retries,
            base_delay=self.config.base_delay_ms / 1000,
        )
        logger.info(
            "Identity generated",
            company=identity.company_name,
            locale=request.locale.value,
        )
        return identity

    async def generate_image(self, prompt: str, colors: list[str] | None = None) -> str:
        """Generate one image as a data URL.

        Raises:
            TransientServiceError: If the service stayed unavailable
            PermanentServiceError: If no image came back or the call failed
        """
        full_prompt = build_image_prompt(prompt, colors)

        async def attempt() -> str:
            image = await self.image_generator.generate_image(full_prompt)
            if not image:
                raise PermanentServiceError(
                    "Image generation did not return an image. This could be due to "
                    "safety filters or a temporary issue."
                )
            return image

        return await with_retry(
            attempt,
            retries=self.config.max_retries,
            base_delay=self.config.base_delay_ms / 1000,
        )

    async def generate_primary_logo(self, identity: BrandIdentity) -> str:
        """Generate the full logo from the identity's logo prompt."""
        colors = [c.name for c in identity.color_palette]
        return await self.generate_image(identity.logo.prompt, colors)

    async def generate_logo_mark(self, identity: BrandIdentity) -> str:
        """Generate the icon-only mark used for compositing."""
        colors = [c.name for c in identity.color_palette]
        return await self.generate_image(build_logo_mark_prompt(identity), colors)
