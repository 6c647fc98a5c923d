"""Immutable request types captured from the UI at submission time."""

from typing import Literal
from pydantic import BaseModel, ConfigDict, Field

from .request import InlineData


StyleType = Literal["magazine", "cartoonist"]
ColorOption = Literal["color", "black_and_white"]


class CartoonRequest(BaseModel):
    """Everything needed to compose a cartoon generation call."""

    model_config = ConfigDict(frozen=True)

    description: str = Field(..., description="Scene description")
    style_type: StyleType = Field(..., description="Style category")
    style_name: str = Field(..., description="Resolved magazine or cartoonist name")
    signature: str = Field(default="", description="Optional signature text")
    color_option: ColorOption = Field(default="color", description="Color rendering")
    character_image: InlineData | None = Field(
        default=None, description="Optional character reference image"
    )


class EditRequest(BaseModel):
    """An uploaded image and the instruction to apply to it."""

    model_config = ConfigDict(frozen=True)

    image: InlineData = Field(..., description="Image to edit")
    instruction: str = Field(..., description="Free-text edit instruction")
