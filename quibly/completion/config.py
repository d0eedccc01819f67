"""Completion client configuration with environment variable loading.

Pydantic-based configuration for the Gemini generateContent endpoint.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"


class CompletionConfig(BaseModel):
    """Configuration for the completion client.

    The API key travels in the request URL as a query parameter; there is
    no rotation or secret management.

    Attributes:
        api_key: Gemini API key.
        model_name: Model identifier to use.
        base_url: API base URL, without a trailing slash.
        timeout: Seconds to wait for the completion API.
    """

    api_key: str = Field(
        default_factory=lambda: os.getenv("GEMINI_API_KEY", os.getenv("GOOGLE_API_KEY", "")),
        description="API key for the Gemini API",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("GEMINI_MODEL", "gemini-2.0-flash"),
        description="Model to use",
    )
    base_url: str = Field(
        default_factory=lambda: os.getenv("GEMINI_BASE_URL") or DEFAULT_BASE_URL,
        description="API base URL",
    )
    timeout: float = Field(
        default_factory=lambda: float(os.getenv("GEMINI_TIMEOUT", "120")),
        gt=0.0,
        description="Request timeout in seconds",
    )

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate that API key is provided and non-empty."""
        if not v or not v.strip():
            raise ValueError("API key required. Set GEMINI_API_KEY or GOOGLE_API_KEY in .env")
        return v.strip()

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def endpoint(self) -> str:
        """Full generateContent URL for the configured model (key not included)."""
        return f"{self.base_url}/models/{self.model_name}:generateContent"


def get_completion_config() -> CompletionConfig:
    """Create completion configuration from environment.

    Returns:
        Configured CompletionConfig instance.

    Raises:
        ValueError: If no API key is set.
    """
    return CompletionConfig()
