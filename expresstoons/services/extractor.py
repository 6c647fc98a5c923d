"""Pull the generated image out of a Gemini response."""

from expresstoons.models.response import GenerateContentResponse
from expresstoons.services.errors import GenerationContext, NoImageGeneratedError


def to_data_url(mime_type: str, data: str) -> str:
    return f"data:{mime_type};base64,{data}"


def extract_image_data_url(
    response: GenerateContentResponse, context: GenerationContext
) -> str:
    """
    Return the first inline image of the first candidate as a data URL.

    Args:
        response: Parsed generateContent response
        context: Call site, selects the error message when nothing is found

    Raises:
        NoImageGeneratedError: No part of the candidate carries inline data
    """
    if response.candidates:
        content = response.candidates[0].content
        for part in content.parts if content else []:
            if part.inlineData:
                return to_data_url(part.inlineData.mimeType, part.inlineData.data)

    raise NoImageGeneratedError(context)
