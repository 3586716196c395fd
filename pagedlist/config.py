"""Library configuration using pydantic-settings."""

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PAGE_SIZE = 100


class Settings(BaseSettings):
    """Settings loaded from PAGEDLIST_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PAGEDLIST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Pagination defaults
    default_page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)

    # Logging
    log_level: str = "WARNING"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def setup_logging(settings: Settings | None = None) -> logging.Logger:
    """
    Apply the configured log level to the package logger.

    The package never installs handlers on import; call this from an
    application that wants pagedlist's debug records.

    Args:
        settings: Settings to read the level from (defaults to get_settings())

    Returns:
        The ``pagedlist`` logger
    """
    settings = settings or get_settings()
    logger = logging.getLogger("pagedlist")
    logger.setLevel(getattr(logging, settings.log_level.upper(), logging.WARNING))
    return logger
