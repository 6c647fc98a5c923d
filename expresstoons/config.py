"""Configuration management for the application."""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings


class ConfigurationError(RuntimeError):
    """Raised when the process cannot start with the current environment."""


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Credentials
    api_key: str = Field(..., description="Gemini API key")

    # Server Configuration
    host: str = Field(default="127.0.0.1", description="Server host")
    port: int = Field(default=8000, description="Server port")
    log_level: str = Field(default="INFO", description="Log level for the stdout sink")

    # Upstream Configuration
    model: str = Field(
        default="gemini-2.5-flash-image", description="Image model used for both flows"
    )
    gemini_base_api: str = Field(
        default="https://generativelanguage.googleapis.com",
        description="Gemini API base URL",
    )

    # Proxy Configuration
    proxy: str | None = Field(default=None, description="HTTP proxy URL")

    # Timeout Configuration, unset means the HTTP client's own default
    timeout: float | None = Field(default=None, description="Request timeout in seconds")

    @field_validator("api_key")
    @classmethod
    def _api_key_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("API key must not be blank")
        return value

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def load_settings(**overrides) -> Settings:
    """Build settings from the environment, failing fast on a missing API key."""
    try:
        return Settings(**overrides)
    except ValidationError as e:
        if any(err["loc"] == ("api_key",) for err in e.errors()):
            raise ConfigurationError("API_KEY environment variable not set") from e
        raise


# Global settings instance
settings = load_settings()
