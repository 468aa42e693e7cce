"""Custom exceptions for resume-pdf."""

from typing import Optional


class ResumePdfError(Exception):
    """Base exception for resume-pdf errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class InputError(ResumePdfError):
    """Exception raised when the résumé record cannot be read."""

    pass


class LayoutError(ResumePdfError):
    """Exception raised during layout calculation."""

    pass


class GeometryError(LayoutError):
    """Exception raised for unusable page geometry."""

    pass


class CompilationError(ResumePdfError):
    """Exception raised during PDF compilation."""

    pass


class ObjectTableError(CompilationError):
    """Raised when the PDF object table is inconsistent.

    This never happens for valid layout output; it signals a bug in the
    object graph construction.
    """

    pass


class ConfigurationError(ResumePdfError):
    """Exception raised for missing or invalid settings."""

    pass


class ImageGenerationError(ResumePdfError):
    """Exception raised when the image API fails."""

    pass


class PostProcessError(ResumePdfError):
    """Exception raised while cropping or resizing a generated image."""

    pass
