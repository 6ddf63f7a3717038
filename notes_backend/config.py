import logging
import os
from typing import List

from pydantic import BaseModel, Field, field_validator


def _env_flag(name: str, default: str) -> bool:
    return (os.getenv(name) or default).strip().lower() in ("1", "true", "yes", "on")


def _parse_allowed_origins() -> List[str]:
    """
    Parse comma-separated ALLOWED_ORIGINS from env.

    Falls back to localhost dev origins when not set.
    """
    raw = (os.getenv("ALLOWED_ORIGINS") or "").strip()
    if not raw:
        return ["http://localhost:3000", "http://127.0.0.1:3000"]

    origins = [o.strip() for o in raw.split(",")]
    return [o for o in origins if o]


class Settings(BaseModel):
    """Application settings, read from the environment once at startup."""

    # Base URL for a future notes service. Nothing reads it over the network.
    api_url: str = Field(default_factory=lambda: (os.getenv("NOTES_API_URL") or "").strip() or "http://localhost")
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL") or "INFO", validate_default=True)
    seed_sample_notes: bool = Field(default_factory=lambda: _env_flag("SEED_SAMPLE_NOTES", "true"))
    allowed_origins: List[str] = Field(default_factory=_parse_allowed_origins)
    allowed_origin_regex: str | None = Field(default_factory=lambda: (os.getenv("ALLOWED_ORIGIN_REGEX") or "").strip() or None)

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, value: str) -> str:
        """Normalize the level name; unknown names fall back to INFO."""
        name = value.strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            return "INFO"
        return name


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings()
