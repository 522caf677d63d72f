"""
KitchenMate - Configuration and settings.

Settings are read from the environment (or .env) and built lazily, so importing
any module never requires an OpenAI key. Only live recipe generation needs one.
"""

import logging
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # OpenAI
    openai_api_key: str = ""
    kitchenmate_model: str = "gpt-4.1-mini"

    # Application
    kitchenmate_env: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Prompt logging
    # KITCHENMATE_LOG_PROMPTS=1 - log to local files (dev only)
    kitchenmate_log_prompts: bool = False

    @property
    def is_development(self) -> bool:
        return self.kitchenmate_env == "development"

    @property
    def is_production(self) -> bool:
        return self.kitchenmate_env == "production"

    @property
    def has_openai_key(self) -> bool:
        return bool(self.openai_api_key)


@lru_cache
def get_settings() -> Settings:
    """Get cached Settings instance."""
    return Settings()


class _SettingsProxy:
    """Lazy proxy for Settings - resolved on first attribute access."""

    def __getattr__(self, name: str):
        return getattr(get_settings(), name)


settings = _SettingsProxy()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging from LOG_LEVEL (or an explicit level)."""
    logging.basicConfig(
        level=level or get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
