"""Configuration management using pydantic-settings.

Provides environment-based configuration with type safety and validation.
"""

from .settings import (
    ErrtupleSettings,
    LoggingSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "ErrtupleSettings",
    "LoggingSettings",
    "clear_settings_cache",
    "get_settings",
]
