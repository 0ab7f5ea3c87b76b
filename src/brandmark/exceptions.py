"""Exception hierarchy for Brandmark."""


class BrandmarkError(Exception):
    """Base exception for all Brandmark errors."""

    pass


class DecodeError(BrandmarkError):
    """Source image could not be fetched or decoded."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to decode image '{source}': {reason}")


class VectorizationError(BrandmarkError):
    """Raster to vector conversion failed."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to convert image to SVG: {reason}")


class CompositionError(BrandmarkError):
    """A logo layout failed to render."""

    def __init__(self, layout: str, reason: str) -> None:
        self.layout = layout
        self.reason = reason
        super().__init__(f"Failed to generate '{layout}' logo: {reason}")


class FontLoadError(BrandmarkError):
    """A font family could not be fetched or parsed."""

    def __init__(self, family: str, reason: str) -> None:
        self.family = family
        self.reason = reason
        super().__init__(f"Failed to load font '{family}': {reason}")


class ServiceError(BrandmarkError):
    """Errors raised by the generative collaborators."""

    pass


class TransientServiceError(ServiceError):
    """Collaborator kept failing with a transient signature."""

    def __init__(self, attempts: int, reason: str) -> None:
        self.attempts = attempts
        self.reason = reason
        super().__init__(f"Service unavailable after {attempts} attempts: {reason}")


class PermanentServiceError(ServiceError):
    """Collaborator failed in a way retrying will not fix."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)
