"""Foundation - Core building blocks for adtkit.

Contains: error handling, configuration.
"""

from __future__ import annotations

__all__ = [
    # Errors
    "ErrorCode", "AdtkitError", "classify_exception",
    "NoSuchElementError", "IllegalArgumentError", "ArgumentNullError", "IndexOutOfBoundsError",
    "require_not_none", "FaultTrace", "validate_trace",
    # Config
    "AdtkitSettings", "get_settings", "clear_settings_cache", "configure_logging",
    "LoggingSettings", "TrySettings", "ReprSettings",
]


def __getattr__(name: str):
    """Lazy imports to avoid circular dependencies."""
    if name in ("ErrorCode", "AdtkitError", "classify_exception",
                "NoSuchElementError", "IllegalArgumentError", "ArgumentNullError", "IndexOutOfBoundsError",
                "require_not_none", "FaultTrace", "validate_trace"):
        from . import errors
        return getattr(errors, name)

    if name in ("AdtkitSettings", "get_settings", "clear_settings_cache", "configure_logging",
                "LoggingSettings", "TrySettings", "ReprSettings"):
        from . import config
        return getattr(config, name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
