"""Configuration management using pydantic-settings.

Provides environment-based configuration with type safety and validation.
"""

from .settings import (
    LOGGER_NAME,
    AdtkitSettings,
    LoggingSettings,
    ReprSettings,
    TrySettings,
    clear_settings_cache,
    configure_logging,
    get_settings,
)

__all__ = [
    "LOGGER_NAME",
    "AdtkitSettings",
    "LoggingSettings",
    "ReprSettings",
    "TrySettings",
    "clear_settings_cache",
    "configure_logging",
    "get_settings",
]
