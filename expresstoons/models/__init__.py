"""Data models for the application."""

from .request import GenerateContentRequest, Content, Part, InlineData, GenerationConfig
from .response import (
    GenerateContentResponse,
    Candidate,
    UsageMetadata,
    ErrorResponse,
    ErrorDetail,
    ImageResult,
)
from .studio import CartoonRequest, EditRequest, StyleType, ColorOption

__all__ = [
    "GenerateContentRequest",
    "Content",
    "Part",
    "InlineData",
    "GenerationConfig",
    "GenerateContentResponse",
    "Candidate",
    "UsageMetadata",
    "ErrorResponse",
    "ErrorDetail",
    "ImageResult",
    "CartoonRequest",
    "EditRequest",
    "StyleType",
    "ColorOption",
]
