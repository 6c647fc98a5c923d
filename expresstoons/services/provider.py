"""Gemini image provider for cartoon generation and image editing."""

import json
from curl_cffi.requests import AsyncSession
from curl_cffi.requests.exceptions import Timeout
from loguru import logger
from pydantic import ValidationError

from expresstoons.config import settings
from expresstoons.models.request import GenerateContentRequest, Part
from expresstoons.models.response import GenerateContentResponse, ErrorResponse
from expresstoons.services.errors import UNKNOWN_ERROR


class GeminiImageProvider:
    """Provider for the Gemini generateContent API with image output."""

    def __init__(self, session: AsyncSession, model: str | None = None):
        self.session = session
        self.model = model or settings.model

    @property
    def url(self) -> str:
        return f"{settings.gemini_base_api}/v1beta/models/{self.model}:generateContent"

    async def generate_content(
        self, parts: list[Part]
    ) -> tuple[GenerateContentResponse | None, str | None]:
        """
        Send one generateContent request. There is a single attempt.

        Args:
            parts: Ordered parts of the user turn

        Returns:
            Tuple of (response, error_message)
        """
        body = GenerateContentRequest.from_parts(parts).model_dump(exclude_none=True)
        headers = {
            "x-goog-api-key": settings.api_key,
            "Content-Type": "application/json",
        }
        request_kwargs = {"headers": headers, "json": body}
        if settings.timeout is not None:
            request_kwargs["timeout"] = settings.timeout

        logger.debug(f"Calling {self.model} with {len(parts)} part(s)")

        try:
            response = await self.session.post(self.url, **request_kwargs)

            if response.status_code != 200:
                message = self._error_message(response)
                logger.error(
                    f"API request failed - status: {response.status_code}, "
                    f"message: {message}"
                )
                return None, message

            return GenerateContentResponse.model_validate(response.json()), None

        except Timeout as e:
            logger.error(f"Request timeout: {e}")
            return None, "Request timeout"
        except json.JSONDecodeError as e:
            logger.error(f"JSON decode error: {e}, response text: {response.text[:500] if response.text else 'empty'}")
            return None, "Invalid JSON response"
        except ValidationError as e:
            logger.error(f"Unexpected response format: {e}")
            return None, "Unexpected response format"
        except Exception as e:
            logger.exception(f"Unexpected error: {e}")
            message = f"Unexpected error: {e}" if str(e) else UNKNOWN_ERROR
            return None, message

    @staticmethod
    def _error_message(response) -> str:
        """Prefer the upstream error message over the bare status code."""
        try:
            error = ErrorResponse.model_validate(response.json()).error
        except (json.JSONDecodeError, ValidationError, ValueError):
            return f"API request failed: status {response.status_code}"
        return f"API request failed: {error.message}"
