"""Request models for the Gemini generateContent endpoint."""

from typing import Literal
from pydantic import BaseModel, Field


class InlineData(BaseModel):
    """Inline data for image content."""

    mimeType: str = Field(..., description="MIME type of the data")
    data: str = Field(..., description="Base64 encoded data")


class Part(BaseModel):
    """Part of content, can be text or inline data."""

    text: str | None = Field(default=None, description="Text content")
    inlineData: InlineData | None = Field(default=None, description="Inline data")


class Content(BaseModel):
    """Content with role and parts."""

    role: Literal["user", "model"] = Field(default="user", description="Role of the content")
    parts: list[Part] = Field(default_factory=list, description="Parts of the content")


class GenerationConfig(BaseModel):
    """Generation configuration."""

    responseModalities: list[str] = Field(
        default=["IMAGE"], description="Response modalities"
    )


class GenerateContentRequest(BaseModel):
    """Request model for generateContent endpoint."""

    contents: list[Content] = Field(..., description="Contents to generate from")
    generationConfig: GenerationConfig = Field(
        default_factory=GenerationConfig, description="Generation configuration"
    )

    @classmethod
    def from_parts(cls, parts: list[Part]) -> "GenerateContentRequest":
        """Wrap an ordered part list into a single user turn."""
        return cls(contents=[Content(role="user", parts=parts)])
