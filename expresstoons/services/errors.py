"""Errors raised by the studio services."""

from typing import Literal


GenerationContext = Literal["generate", "edit"]

UNKNOWN_ERROR = "An unknown error occurred."


class StudioError(Exception):
    """Base exception for all studio errors."""


class ImageEncodingError(StudioError):
    """An uploaded file could not be turned into inline image data."""


class NoImageGeneratedError(StudioError):
    """The model answered without any inline image data.

    The message differs per call site so the user can tell a failed
    generation from a failed edit.
    """

    MESSAGES: dict[str, str] = {
        "generate": "No image generated.",
        "edit": "No image generated from edit.",
    }

    def __init__(self, context: GenerationContext):
        self.context = context
        super().__init__(self.MESSAGES[context])


class UpstreamError(StudioError):
    """The image API call failed before producing a response."""
