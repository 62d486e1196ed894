"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"

MIN_PAGE_LIMIT = 1
MAX_PAGE_LIMIT = 100


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    base_url: str = Field(
        default="http://localhost:3000",
        description="Public base URL of this instance, used to build actor and object URLs",
        min_length=1,
    )
    notifications_page_limit: int = Field(
        default=20,
        description="Number of notifications kept in a cached page",
        ge=MIN_PAGE_LIMIT,
        le=MAX_PAGE_LIMIT,
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level used by command line scripts",
    )

    @field_validator("base_url")
    @classmethod
    def _normalize_base_url(cls, value: str) -> str:
        normalized = value.strip().rstrip("/")
        if not normalized.startswith(("http://", "https://")):
            raise ValueError("BASE_URL must be an absolute http(s) URL")
        return normalized


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = [
    "MAX_PAGE_LIMIT",
    "MIN_PAGE_LIMIT",
    "Settings",
    "get_settings",
    "reset_settings_cache",
]
