"""Application settings with environment variable loading.

Pydantic-based configuration for the HTTP server and upload handling.
"""

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
_PROJECT_ROOT = Path(__file__).parent.parent

ALLOWED_MEDIA_TYPES: frozenset[str] = frozenset(
    {
        "application/pdf",
        "image/jpeg",
        "image/png",
        "image/gif",
        "image/webp",
        "text/plain",
    }
)


class AppSettings(BaseModel):
    """Server and upload configuration.

    Attributes:
        max_file_size: Largest accepted upload, in bytes.
        upload_dir: Directory holding temporary uploads.
        host: Interface the server binds to.
        port: Port the server listens on.
        log_level: Root logging level name.
        tesseract_cmd: Path to the tesseract binary (None uses PATH).
    """

    # Values read from the environment arrive through default factories
    model_config = ConfigDict(validate_default=True)

    max_file_size: int = Field(
        default_factory=lambda: int(os.getenv("MAX_FILE_SIZE") or DEFAULT_MAX_FILE_SIZE),
        ge=1,
        description="Maximum upload size in bytes",
    )
    upload_dir: Path = Field(
        default_factory=lambda: Path(os.getenv("UPLOAD_DIR") or _PROJECT_ROOT / "uploads"),
        description="Directory for temporary uploaded files",
    )
    host: str = Field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = Field(default_factory=lambda: int(os.getenv("PORT", "5000")), ge=1, le=65535)
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    tesseract_cmd: str | None = Field(
        default_factory=lambda: os.getenv("TESSERACT_CMD") or None,
        description="Tesseract executable (None to look it up on PATH)",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the logging level name."""
        level = v.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Unknown LOG_LEVEL: {v}")
        return level

    @property
    def max_file_size_mb(self) -> float:
        return self.max_file_size / (1024 * 1024)


@lru_cache
def get_app_settings() -> AppSettings:
    """Return the process-wide application settings.

    Returns:
        AppSettings loaded from the environment.
    """
    return AppSettings()
