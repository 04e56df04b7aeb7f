"""LLM configuration with environment variable loading.

Pydantic-based configuration for the quiz generator's chat completion client.
Supports OpenAI and OpenAI-compatible APIs via custom base URL.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()


class LLMConfig(BaseModel):
    """Configuration for the chat completion client.

    Attributes:
        api_key: API key for model access.
        base_url: API base URL (None for OpenAI default).
        model_name: Model identifier to use.
        quiz_max_content_chars: Content budget for quiz prompts.
        topics_max_content_chars: Content budget for topic analysis prompts.
    """

    model_config = ConfigDict(validate_default=True)

    api_key: str = Field(
        default_factory=lambda: os.getenv("LLM_API_KEY") or os.getenv("OPENAI_API_KEY", ""),
        description="API key for LLM provider",
    )
    base_url: str | None = Field(
        default_factory=lambda: os.getenv("LLM_BASE_URL") or None,
        description="API base URL (None for OpenAI default)",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("LLM_MODEL", "gpt-4o"),
        description="Model to use",
    )
    quiz_max_content_chars: int = Field(
        default=12000,
        ge=1,
        description="Maximum characters of source content sent for quiz generation",
    )
    topics_max_content_chars: int = Field(
        default=8000,
        ge=1,
        description="Maximum characters of source content sent for topic analysis",
    )

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate that API key is provided and non-empty."""
        if not v or not v.strip():
            raise ValueError(
                "API key required. Set LLM_API_KEY or OPENAI_API_KEY in .env"
            )
        return v.strip()


def get_llm_config() -> LLMConfig:
    """Create LLM configuration from environment.

    Returns:
        Configured LLMConfig instance.

    Raises:
        ValueError: If no API key is set.
    """
    return LLMConfig()
