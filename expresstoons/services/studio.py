"""The two studio flows: compose, call the model, extract the image."""

from loguru import logger

from expresstoons.models.studio import CartoonRequest, EditRequest
from expresstoons.services.composer import compose_cartoon_parts, compose_edit_parts
from expresstoons.services.errors import UpstreamError
from expresstoons.services.extractor import extract_image_data_url
from expresstoons.services.provider import GeminiImageProvider


class StudioService:
    """Runs each user action as exactly one upstream request."""

    def __init__(self, provider: GeminiImageProvider):
        self.provider = provider

    async def generate_cartoon(self, request: CartoonRequest) -> str:
        """Generate a cartoon and return it as a data URL."""
        logger.info(
            f"Generating cartoon in {request.style_type} style '{request.style_name}' "
            f"({request.color_option}, character image: {request.character_image is not None})"
        )
        parts = compose_cartoon_parts(request)

        response, error = await self.provider.generate_content(parts)
        if error:
            raise UpstreamError(error)

        return extract_image_data_url(response, "generate")

    async def edit_image(self, request: EditRequest) -> str:
        """Apply an edit instruction and return the result as a data URL."""
        logger.info(f"Editing {request.image.mimeType} image: {request.instruction[:60]}")
        parts = compose_edit_parts(request)

        response, error = await self.provider.generate_content(parts)
        if error:
            raise UpstreamError(error)

        return extract_image_data_url(response, "edit")
