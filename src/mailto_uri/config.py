"""Configuration management for mailto-uri.

Settings are loaded with Pydantic settings from environment variables or a
.env file.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings with environment variable support.

    All settings can be overridden via environment variables with
    the MAILTO_URI_ prefix (e.g., MAILTO_URI_LOG_LEVEL).
    """

    model_config = SettingsConfigDict(
        env_prefix="MAILTO_URI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode; forces DEBUG logging",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached library settings.

    Returns:
        Settings: Settings instance.
    """
    return Settings()
