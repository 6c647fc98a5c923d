"""
Shared pytest fixtures and configuration for all tests
"""
import os

# Settings are loaded once at import time and a missing key is fatal
os.environ.setdefault("API_KEY", "test-key")

import pytest

from expresstoons.models.response import GenerateContentResponse


PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-image-body"


def make_response(*parts, candidates=None) -> GenerateContentResponse:
    """Build a generateContent response whose first candidate holds `parts`."""
    if candidates is None:
        candidates = [{"content": {"role": "model", "parts": list(parts)}, "finishReason": "STOP"}]
    return GenerateContentResponse.model_validate({"candidates": candidates})


class FakeProvider:
    """Stands in for GeminiImageProvider and records every call."""

    def __init__(self, response=None, error=None, exc=None):
        self.response = response
        self.error = error
        self.exc = exc
        self.calls = []

    async def generate_content(self, parts):
        self.calls.append(parts)
        if self.exc is not None:
            raise self.exc
        return self.response, self.error


@pytest.fixture
def png_bytes():
    return PNG_BYTES


@pytest.fixture
def image_response():
    return make_response(
        {"text": "Here is your cartoon"},
        {"inlineData": {"mimeType": "image/png", "data": "QUJD"}},
    )
