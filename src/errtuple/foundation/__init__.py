"""Foundation - shared building blocks for errtuple.

Contains: config.
"""

from .config import ErrtupleSettings, LoggingSettings, clear_settings_cache, get_settings

__all__ = ["ErrtupleSettings", "LoggingSettings", "clear_settings_cache", "get_settings"]
