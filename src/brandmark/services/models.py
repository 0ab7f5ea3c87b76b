"""Brand identity models returned by the identity generator.

Field names follow Python conventions; the camelCase names used on the wire
are accepted and produced through aliases.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from brandmark.domain import LogoAsset


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Locale(str, Enum):
    """Supported output languages."""

    EN = "en"
    AR = "ar"

    @property
    def is_rtl(self) -> bool:
        return self is Locale.AR


class ColorInfo(_WireModel):
    """One palette entry."""

    hex: str = Field(pattern=r"^#[0-9A-Fa-f]{6}$")
    name: str
    usage: str


class FontPair(_WireModel):
    """Header and body font recommendation."""

    header: str
    body: str
    notes: str = ""


class DesignSystem(_WireModel):
    """Layout hints for document and slide templates."""

    layout_style: str = Field(default="minimal", pattern=r"^(minimal|bold|corporate)$")
    title_alignment: str = Field(default="left", pattern=r"^(left|center|right)$")
    border_radius: int = Field(default=0, ge=0)
    accent_position: str = Field(default="top", pattern=r"^(top|bottom|left|right)$")


class LogoSpec(_WireModel):
    """Image prompt and style description for the logo."""

    prompt: str
    style: str


class LogoVariations(_WireModel):
    """Composited logo rasters attached to an identity."""

    horizontal: str | None = None
    vertical: str | None = None
    icon_only: str | None = None


class IdentityRequest(_WireModel):
    """Input to the identity generator."""

    mission: str = Field(min_length=1)
    locale: Locale = Locale.EN
    company_name: str | None = None
    logo_concept: str | None = None


class BrandIdentity(_WireModel):
    """Structured brand identity.

    All strings are in the locale of the request that produced them.
    """

    company_name: str
    logo: LogoSpec
    logo_concepts: list[str] = Field(min_length=2, max_length=3)
    color_palette: list[ColorInfo] = Field(min_length=5, max_length=5)
    font_pairings: FontPair
    design_system: DesignSystem | None = None
    logo_image: str | None = None
    logo_mark: str | None = None
    logo_variations: LogoVariations | None = None

    @property
    def primary_color(self) -> str:
        """First palette colour, black when the palette is empty."""
        return self.color_palette[0].hex if self.color_palette else "#000000"

    def to_logo_asset(self, is_rtl: bool = False) -> LogoAsset:
        """Derive compositing inputs: icon-only mark preferred over full logo."""
        return LogoAsset(
            icon=self.logo_mark or self.logo_image or "",
            company_name=self.company_name,
            font_family=self.font_pairings.header,
            primary_color=self.primary_color,
            is_rtl=is_rtl,
        )
