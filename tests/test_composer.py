"""Tests for prompt rendering and part assembly."""

import base64

import pytest
from pydantic import ValidationError

from expresstoons.models.request import InlineData
from expresstoons.models.studio import CartoonRequest, EditRequest
from expresstoons.services.composer import (
    CHARACTER_INSTRUCTION,
    COLOR_INSTRUCTIONS,
    build_cartoon_prompt,
    compose_cartoon_parts,
    compose_edit_parts,
    encode_image,
)
from expresstoons.services.errors import ImageEncodingError


CHARACTER = InlineData(mimeType="image/png", data="QUJD")


def prompt(**overrides) -> str:
    args = {
        "description": "A cat trying to use a laptop",
        "style_type": "magazine",
        "style_name": "The New Yorker",
        "signature": "",
        "has_character_image": False,
        "color_option": "color",
    }
    args.update(overrides)
    return build_cartoon_prompt(**args)


# ---------------------------------------------------------------------------
# Prompt template
# ---------------------------------------------------------------------------


class TestCartoonPrompt:
    """Test build_cartoon_prompt."""

    def test_full_prompt_text(self) -> None:
        assert prompt(signature="AI Artist") == (
            "Generate a single-panel cartoon in the distinct artistic style of "
            "The New Yorker magazine. The scene is: A cat trying to use a laptop."
            " The cartoon should be in full color."
            " The cartoon should be humorous and thought-provoking, capturing the"
            " essence of the specified style."
            " Subtly place the signature 'AI Artist' in one of the bottom corners of the image."
        )

    @pytest.mark.parametrize("style_name", ["Punch", "Mad Magazine", "A"])
    def test_magazine_clause(self, style_name) -> None:
        text = prompt(style_type="magazine", style_name=style_name)
        assert f"in the distinct artistic style of {style_name} magazine" in text
        assert "cartoonist" not in text

    @pytest.mark.parametrize("style_name", ["Gary Larson", "Dr. Seuss", "R. Crumb"])
    def test_cartoonist_clause(self, style_name) -> None:
        text = prompt(style_type="cartoonist", style_name=style_name)
        assert f"in the distinct artistic style of cartoonist {style_name}" in text
        assert f"{style_name} magazine" not in text

    @pytest.mark.parametrize("signature", ["AI Artist", "J. Doe", "it's me"])
    def test_signature_clause(self, signature) -> None:
        text = prompt(signature=signature)
        assert text.endswith(
            f" Subtly place the signature '{signature}' in one of the bottom corners of the image."
        )

    def test_empty_signature_has_no_clause(self) -> None:
        assert "signature" not in prompt(signature="")

    @pytest.mark.parametrize(
        "color_option, expected, other",
        [
            ("color", COLOR_INSTRUCTIONS["color"], COLOR_INSTRUCTIONS["black_and_white"]),
            ("black_and_white", COLOR_INSTRUCTIONS["black_and_white"], COLOR_INSTRUCTIONS["color"]),
        ],
    )
    def test_exactly_one_color_clause(self, color_option, expected, other) -> None:
        text = prompt(color_option=color_option)
        assert text.count(expected) == 1
        assert other not in text

    def test_character_clause_only_with_image(self) -> None:
        assert CHARACTER_INSTRUCTION in prompt(has_character_image=True)
        assert CHARACTER_INSTRUCTION not in prompt(has_character_image=False)

    def test_character_clause_precedes_color_clause(self) -> None:
        text = prompt(has_character_image=True, color_option="black_and_white")
        assert text.index(CHARACTER_INSTRUCTION) < text.index(COLOR_INSTRUCTIONS["black_and_white"])


# ---------------------------------------------------------------------------
# Part assembly
# ---------------------------------------------------------------------------


class TestComposeParts:
    """Test part ordering for both flows."""

    def _cartoon(self, **overrides) -> CartoonRequest:
        fields = {
            "description": "A programmer arguing with a rubber duck",
            "style_type": "cartoonist",
            "style_name": "Roz Chast",
        }
        fields.update(overrides)
        return CartoonRequest(**fields)

    def test_cartoon_without_character_is_text_only(self) -> None:
        parts = compose_cartoon_parts(self._cartoon())
        assert len(parts) == 1
        assert parts[0].inlineData is None
        assert "cartoonist Roz Chast" in parts[0].text

    def test_cartoon_with_character_puts_image_first(self) -> None:
        parts = compose_cartoon_parts(self._cartoon(character_image=CHARACTER))
        assert [p.inlineData is not None for p in parts] == [True, False]
        assert parts[0].inlineData == CHARACTER
        assert CHARACTER_INSTRUCTION in parts[1].text

    def test_edit_is_image_then_raw_instruction(self) -> None:
        instruction = "  Make it look like a 1980s VHS cover!  "
        parts = compose_edit_parts(EditRequest(image=CHARACTER, instruction=instruction))
        assert parts[0].inlineData == CHARACTER
        assert parts[0].text is None
        assert parts[1].text == instruction
        assert parts[1].inlineData is None

    def test_requests_are_immutable(self) -> None:
        request = self._cartoon()
        with pytest.raises(ValidationError):
            request.description = "changed"


# ---------------------------------------------------------------------------
# Image encoding
# ---------------------------------------------------------------------------


class TestEncodeImage:
    """Test encode_image."""

    def test_base64_payload_and_mime(self, png_bytes) -> None:
        inline = encode_image(png_bytes, "image/png")
        assert inline.mimeType == "image/png"
        assert base64.b64decode(inline.data) == png_bytes

    def test_known_payload(self) -> None:
        assert encode_image(b"ABC", "image/jpeg").data == "QUJD"

    def test_non_bytes_is_an_error(self) -> None:
        with pytest.raises(ImageEncodingError):
            encode_image("data:image/png;base64,QUJD", "image/png")

    def test_empty_file_is_an_error(self) -> None:
        with pytest.raises(ImageEncodingError):
            encode_image(b"", "image/png")
