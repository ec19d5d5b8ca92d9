"""
Application Settings.

All configuration comes from environment variables / .env.
The Gemini API key is required: without it the service refuses to start.
"""

import logging
from functools import lru_cache

from pydantic import AliasChoices, Field, ValidationError as PydanticValidationError, field_validator
from pydantic_settings import BaseSettings

from brainstormer.core.errors import ConfigurationError


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    # --- App ---
    env: str = "development"
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    log_level: str = "INFO"

    # --- LLM (Gemini) ---
    api_key: str = Field(validation_alias=AliasChoices("API_KEY", "GEMINI_API_KEY"))
    gemini_model: str = "gemini-2.5-flash"

    # --- Feedback ---
    feedback_warn_threshold: int = 50

    # --- Sessions ---
    max_sessions: int = Field(default=1000, ge=1)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "populate_by_name": True,
    }

    @field_validator("api_key")
    @classmethod
    def _api_key_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("API key is blank")
        return value.strip()


API_KEY_NAMES = {"api_key", "gemini_api_key"}


def load_settings(**overrides) -> Settings:
    """Build Settings; any invalid or missing value raises ConfigurationError."""
    try:
        return Settings(**overrides)
    except PydanticValidationError as e:
        problems = []
        for err in e.errors():
            name = str(err["loc"][0]) if err["loc"] else "settings"
            if name.lower() in API_KEY_NAMES:
                problems.append("API_KEY environment variable not set or blank")
            else:
                problems.append(f"{name.upper()}: {err['msg']}")
        raise ConfigurationError("Invalid configuration: " + "; ".join(problems)) from e


@lru_cache
def get_settings() -> Settings:
    """Settings singleton."""
    return load_settings()


def configure_logging(level: str = "INFO") -> None:
    """Root logging setup; a no-op if handlers are already installed."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
