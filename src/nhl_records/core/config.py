"""
Configuration management for the NHL records client.

Uses Pydantic settings for type-safe configuration with environment variable support.
Every setting can be overridden with an NHL_RECORDS_-prefixed environment variable,
e.g. NHL_RECORDS_TIMEOUT=10.
"""

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://records.nhl.com/site/api"


class Settings(BaseSettings):
    """Client settings shared by construction, not re-declared per call."""

    model_config = SettingsConfigDict(
        env_prefix="NHL_RECORDS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = Field(default=DEFAULT_BASE_URL, description="Records API root")
    timeout: float = Field(default=30.0, ge=1, le=300, description="Request timeout in seconds")
    user_agent: str = "nhl-records/0.1"
    log_level: str = Field(default="INFO", description="DEBUG, INFO, WARNING, ERROR")


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


def setup_logging(settings: Settings | None = None) -> None:
    """Configure root logging from settings. Never called on import."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
