"""Environment-based configuration using pydantic-settings.

Provides type-safe, validated configuration from environment variables
with sensible defaults. Supports .env files and nested configuration.

Example:
    >>> from adtkit.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.logging.level
    'WARNING'
    >>> settings.rendering.max_items
    50

    # Or with environment variables:
    # ADTKIT_LOG_LEVEL=DEBUG
    # ADTKIT_TRY_PROPAGATE_INTERRUPTS=true
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, PositiveInt, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOGGER_NAME = "adtkit"


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="ADTKIT_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        """Accept lower-case level names."""
        return v.upper() if isinstance(v, str) else v


class TrySettings(BaseSettings):
    """Fault capture policy for Try.of."""

    model_config = SettingsConfigDict(
        env_prefix="ADTKIT_TRY_",
        extra="ignore",
    )

    propagate_interrupts: bool = Field(
        default=False,
        description="Let KeyboardInterrupt and SystemExit escape Try.of instead of capturing them",
    )


class ReprSettings(BaseSettings):
    """Debug rendering of persistent lists."""

    model_config = SettingsConfigDict(
        env_prefix="ADTKIT_REPR_",
        extra="ignore",
    )

    max_items: PositiveInt = Field(default=50, description="Elements shown before repr is truncated")


class AdtkitSettings(BaseSettings):
    """Root settings for adtkit.

    Loads configuration from environment variables with ADTKIT_ prefix.
    Supports nested configuration and .env files.

    Example environment variables:
        ADTKIT_DEBUG=true
        ADTKIT_LOG_LEVEL=DEBUG
        ADTKIT_TRY_PROPAGATE_INTERRUPTS=true
        ADTKIT_REPR_MAX_ITEMS=20
    """

    model_config = SettingsConfigDict(
        env_prefix="ADTKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")

    # Nested settings (loaded with ADTKIT_LOG_, ADTKIT_TRY_, ADTKIT_REPR_)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    capture: TrySettings = Field(default_factory=TrySettings)
    rendering: ReprSettings = Field(default_factory=ReprSettings)

    @computed_field
    @property
    def effective_log_level(self) -> int:
        """Numeric level for the adtkit logger; debug mode forces DEBUG."""
        return logging.DEBUG if self.debug else logging.getLevelName(self.logging.level)


# Singleton pattern for settings
@lru_cache(maxsize=1)
def get_settings() -> AdtkitSettings:
    """Get the global settings instance (cached).

    Example:
        >>> settings = get_settings()
        >>> settings.debug
        False
    """
    return AdtkitSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()


def configure_logging(settings: AdtkitSettings | None = None) -> logging.Logger:
    """Apply the configured level to the adtkit logger and return it."""
    settings = settings or get_settings()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(settings.effective_log_level)
    return logger
