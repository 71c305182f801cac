"""Standardized error taxonomy for the algebraic data types.

Every failure the library raises on its own behalf is an ``AdtkitError`` carrying an
``ErrorCode``. Each concrete error also subclasses the matching builtin so callers can
catch it the ordinary Python way (``LookupError``, ``ValueError``, ``IndexError``).
"""

from __future__ import annotations

from enum import StrEnum
from functools import lru_cache
from typing import TypeVar

T = TypeVar("T")


class ErrorCode(StrEnum):
    """Standard error codes for library failures."""
    NO_SUCH_ELEMENT = "NO_SUCH_ELEMENT"
    ILLEGAL_ARGUMENT = "ILLEGAL_ARGUMENT"
    ARGUMENT_NULL = "ARGUMENT_NULL"
    INDEX_OUT_OF_BOUNDS = "INDEX_OUT_OF_BOUNDS"
    CAPTURED_FAULT = "CAPTURED_FAULT"
    UNKNOWN = "UNKNOWN"


class AdtkitError(Exception):
    """Base class for errors raised by adtkit itself."""

    code: ErrorCode = ErrorCode.UNKNOWN

    def __init__(self, message: str = "") -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class NoSuchElementError(AdtkitError, LookupError):
    """Payload of the wrong variant was requested (``get`` on ``Left``, ``Nothing``, ``Failure``...)."""

    code = ErrorCode.NO_SUCH_ELEMENT


class IllegalArgumentError(AdtkitError, ValueError):
    """Argument rejected before any work was done (e.g. empty source for a non-empty list)."""

    code = ErrorCode.ILLEGAL_ARGUMENT


class ArgumentNullError(IllegalArgumentError):
    """A required function, supplier or value was ``None``."""

    code = ErrorCode.ARGUMENT_NULL


class IndexOutOfBoundsError(AdtkitError, IndexError):
    """Index outside ``[0, size)`` of a persistent list."""

    code = ErrorCode.INDEX_OUT_OF_BOUNDS

    def __init__(self, index: int, size: int) -> None:
        self.index, self.size = index, size
        super().__init__(f"Index: {index}, Size: {size}")


def require_not_none(value: T | None, name: str) -> T:
    """Return value unchanged, raising ArgumentNullError if it is None."""
    if value is None:
        raise ArgumentNullError(f"{name} is None")
    return value


# Builtin families checked in order; subclasses listed before their bases
_TYPE_CODES: tuple[tuple[type[BaseException], ErrorCode], ...] = (
    (ArgumentNullError, ErrorCode.ARGUMENT_NULL),
    (IndexError, ErrorCode.INDEX_OUT_OF_BOUNDS),
    (LookupError, ErrorCode.NO_SUCH_ELEMENT),
    (ValueError, ErrorCode.ILLEGAL_ARGUMENT),
    (TypeError, ErrorCode.ILLEGAL_ARGUMENT),
)


@lru_cache(maxsize=256)
def _classify_cached(exc_type: type[BaseException]) -> ErrorCode:
    """Cached classification by exception type."""
    if issubclass(exc_type, AdtkitError):
        return exc_type.code
    for base, code in _TYPE_CODES:
        if issubclass(exc_type, base):
            return code
    return ErrorCode.CAPTURED_FAULT


def classify_exception(exc: BaseException) -> ErrorCode:
    """Map exception to error code by its type."""
    return _classify_cached(type(exc))
