"""Response models for Gemini responses and the studio API."""

from pydantic import BaseModel, Field
from .request import Content


class Candidate(BaseModel):
    """Candidate response from the model."""

    content: Content | None = Field(default=None, description="Content of the candidate")
    finishReason: str | None = Field(default=None, description="Reason for finishing")
    index: int = Field(default=0, description="Index of the candidate")


class UsageMetadata(BaseModel):
    """Usage metadata for the response."""

    promptTokenCount: int = Field(default=0, description="Prompt token count")
    candidatesTokenCount: int = Field(default=0, description="Candidates token count")
    totalTokenCount: int = Field(default=0, description="Total token count")


class GenerateContentResponse(BaseModel):
    """Response model for generateContent endpoint."""

    candidates: list[Candidate] = Field(
        default_factory=list, description="Candidates from generation"
    )
    usageMetadata: UsageMetadata = Field(
        default_factory=UsageMetadata, description="Usage metadata"
    )
    modelVersion: str | None = Field(default=None, description="Model version used")


class ErrorDetail(BaseModel):
    """Error detail in response."""

    code: int = Field(..., description="Error code")
    message: str = Field(..., description="Error message")
    status: str = Field(..., description="Error status")


class ErrorResponse(BaseModel):
    """Error response model."""

    error: ErrorDetail = Field(..., description="Error details")


class ImageResult(BaseModel):
    """Successful studio response."""

    image: str = Field(..., description="Generated image as a data URL")
