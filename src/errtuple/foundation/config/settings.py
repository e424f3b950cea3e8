"""Environment-based configuration using pydantic-settings.

Provides type-safe, validated configuration from environment variables
with sensible defaults. Supports .env files and nested configuration.

Example:
    >>> from errtuple.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.log_callback_failures
    True
    >>> settings.logging.level
    'WARNING'

    # Or with environment variables:
    # ERRTUPLE_JSON_SORT_KEYS=true
    # ERRTUPLE_LOG_LEVEL=ERROR
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(BaseSettings):
    """Logging configuration for the error observer helpers."""

    model_config = SettingsConfigDict(
        env_prefix="ERRTUPLE_LOG_",
        extra="ignore",
    )

    level: LogLevel = Field(default="WARNING", description="Level used when logging observed errors")
    include_stack: bool = Field(default=False, description="Attach the source traceback to log records")

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        """Accept lowercase level names."""
        return v.upper() if isinstance(v, str) else v


class ErrtupleSettings(BaseSettings):
    """Root settings for errtuple.

    Loads configuration from environment variables with ERRTUPLE_ prefix.

    Example environment variables:
        ERRTUPLE_LOG_CALLBACK_FAILURES=false
        ERRTUPLE_JSON_SORT_KEYS=true
        ERRTUPLE_LOG_LEVEL=ERROR
        ERRTUPLE_LOG_INCLUDE_STACK=true
    """

    model_config = SettingsConfigDict(
        env_prefix="ERRTUPLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    log_callback_failures: bool = Field(
        default=True,
        description="Log exceptions raised by error observers and on_err callbacks",
    )
    json_sort_keys: bool = Field(
        default=False,
        description="Sort mapping keys when rendering object sources into Err.message",
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> ErrtupleSettings:
    """Get the global settings instance (cached).

    Example:
        >>> get_settings().json_sort_keys
        False
    """
    return ErrtupleSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
