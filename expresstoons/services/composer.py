"""Turn studio requests into ordered Gemini part lists."""

import base64

from expresstoons.models.request import InlineData, Part
from expresstoons.models.studio import CartoonRequest, ColorOption, EditRequest, StyleType
from expresstoons.services.errors import ImageEncodingError


CHARACTER_INSTRUCTION = " Feature the character from the provided image in the scene."
COLOR_INSTRUCTIONS: dict[str, str] = {
    "color": " The cartoon should be in full color.",
    "black_and_white": " The cartoon should be in black and white.",
}
CLOSING_INSTRUCTION = (
    " The cartoon should be humorous and thought-provoking,"
    " capturing the essence of the specified style."
)


def encode_image(content: bytes, mime_type: str) -> InlineData:
    """Base64-encode a fully read image file."""
    if not isinstance(content, (bytes, bytearray)):
        raise ImageEncodingError(
            f"Expected image bytes, got {type(content).__name__}"
        )
    if not content:
        raise ImageEncodingError("Uploaded image is empty")

    return InlineData(
        mimeType=mime_type,
        data=base64.b64encode(content).decode("ascii"),
    )


def style_clause(style_type: StyleType, style_name: str) -> str:
    if style_type == "magazine":
        return f"in the distinct artistic style of {style_name} magazine"
    return f"in the distinct artistic style of cartoonist {style_name}"


def build_cartoon_prompt(
    description: str,
    style_type: StyleType,
    style_name: str,
    signature: str,
    has_character_image: bool,
    color_option: ColorOption,
) -> str:
    """
    Render the natural-language cartoon instruction.

    Args:
        description: What happens in the scene
        style_type: "magazine" or "cartoonist"
        style_name: Publication or artist to imitate
        signature: Text to sign the cartoon with, empty for none
        has_character_image: Whether a character reference is attached
        color_option: "color" or "black_and_white"

    Returns:
        The prompt sent as the single text part
    """
    character = CHARACTER_INSTRUCTION if has_character_image else ""
    color = COLOR_INSTRUCTIONS.get(color_option, COLOR_INSTRUCTIONS["color"])
    signature_text = (
        f" Subtly place the signature '{signature}' in one of the bottom corners of the image."
        if signature
        else ""
    )

    return (
        f"Generate a single-panel cartoon {style_clause(style_type, style_name)}."
        f" The scene is: {description}."
        f"{character}{color}{CLOSING_INSTRUCTION}{signature_text}"
    )


def compose_cartoon_parts(request: CartoonRequest) -> list[Part]:
    """Character image first when present, then the composed prompt."""
    prompt = build_cartoon_prompt(
        request.description,
        request.style_type,
        request.style_name,
        request.signature,
        request.character_image is not None,
        request.color_option,
    )

    parts = []
    if request.character_image is not None:
        parts.append(Part(inlineData=request.character_image))
    parts.append(Part(text=prompt))
    return parts


def compose_edit_parts(request: EditRequest) -> list[Part]:
    """The image, then the user's instruction untouched."""
    return [Part(inlineData=request.image), Part(text=request.instruction)]
