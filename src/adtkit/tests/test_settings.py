"""Tests for environment-driven configuration and logging setup."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from adtkit.foundation.config import (
    LOGGER_NAME,
    AdtkitSettings,
    clear_settings_cache,
    configure_logging,
    get_settings,
)
from adtkit.monads import FList, NonEmptyList


@pytest.fixture(autouse=True)
def fresh_settings() -> object:
    """Reset cached settings and the library logger level around each test."""
    clear_settings_cache()
    level = logging.getLogger(LOGGER_NAME).level
    yield
    clear_settings_cache()
    logging.getLogger(LOGGER_NAME).setLevel(level)


def test_defaults() -> None:
    settings = AdtkitSettings()
    assert settings.debug is False
    assert settings.logging.level == "WARNING"
    assert settings.capture.propagate_interrupts is False
    assert settings.rendering.max_items == 50
    assert settings.effective_log_level == logging.WARNING


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()
    first = get_settings()
    clear_settings_cache()
    assert get_settings() is not first


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ADTKIT_LOG_LEVEL", "debug")
    monkeypatch.setenv("ADTKIT_TRY_PROPAGATE_INTERRUPTS", "1")
    monkeypatch.setenv("ADTKIT_REPR_MAX_ITEMS", "3")

    settings = AdtkitSettings()

    assert settings.logging.level == "DEBUG"
    assert settings.capture.propagate_interrupts is True
    assert settings.rendering.max_items == 3


def test_debug_forces_debug_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ADTKIT_DEBUG", "true")
    assert AdtkitSettings().effective_log_level == logging.DEBUG


def test_invalid_values_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ADTKIT_REPR_MAX_ITEMS", "0")
    with pytest.raises(ValidationError):
        AdtkitSettings()


def test_configure_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ADTKIT_LOG_LEVEL", "ERROR")
    clear_settings_cache()

    logger = configure_logging()

    assert logger.name == "adtkit"
    assert logger.level == logging.ERROR
    assert configure_logging(AdtkitSettings(debug=True)).level == logging.DEBUG


def test_library_logger_has_null_handler() -> None:
    import adtkit  # noqa: F401

    handlers = logging.getLogger(LOGGER_NAME).handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)


def test_repr_truncation(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ADTKIT_REPR_MAX_ITEMS", "3")
    clear_settings_cache()

    assert repr(FList.of(1, 2, 3)) == "FList(1, 2, 3)"
    assert repr(FList.of(1, 2, 3, 4, 5)) == "FList(1, 2, 3, ...)"
    assert repr(NonEmptyList.of(*range(10))) == "NonEmptyList(0, 1, 2, ...)"
