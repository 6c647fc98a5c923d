"""Services for the application."""

from .provider import GeminiImageProvider
from .session import get_session
from .studio import StudioService

__all__ = [
    "GeminiImageProvider",
    "StudioService",
    "get_session",
]
