"""adtkit - Persistent lists and algebraic data types for Python.

Immutable, structurally shared collections (FList, NonEmptyList) and the value containers
Option, Either, Try and Lazy. Either can combine up to ten independent results while
accumulating every failure instead of stopping at the first.

Quick Start:
    >>> from adtkit import Either, FList, Option, Try
    >>>
    >>> FList.of(1, 2, 3).map(lambda x: x * 10)
    FList(10, 20, 30)
    >>> Option.of(None).get_or_else("fallback")
    'fallback'
    >>> Try.of(lambda: 1 / 0).is_failure()
    True

Accumulating failures:
    >>> Either.zip_or_accumulate(Either.right(10), Either.right(20), lambda a, b: a + b)
    Right(30)
    >>> Either.zip_or_accumulate(Either.left("e1"), Either.right(2), lambda a, b: a + b)
    Left(NonEmptyList('e1'))

Configuration (environment, prefix ``ADTKIT_``):
    >>> from adtkit import configure_logging
    >>> configure_logging()  # applies ADTKIT_LOG_LEVEL to the "adtkit" logger  # doctest: +SKIP
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Config
from .foundation.config import (
    AdtkitSettings,
    clear_settings_cache,
    configure_logging,
    get_settings,
)

# Errors
from .foundation.errors import (
    AdtkitError,
    ArgumentNullError,
    ErrorCode,
    FaultTrace,
    IllegalArgumentError,
    IndexOutOfBoundsError,
    NoSuchElementError,
    classify_exception,
)

# Collections and containers
from .monads import (
    MAX_ZIP_ARITY,
    Either,
    Failure,
    FList,
    Lazy,
    Left,
    NonEmptyList,
    Nothing,
    Option,
    Right,
    Some,
    Success,
    Try,
    Value,
    accumulate,
    sequence,
    traverse,
)

# Library logging stays silent unless the application configures handlers
logging.getLogger("adtkit").addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Collections
    "FList",
    "NonEmptyList",
    # Containers
    "Value",
    "Option",
    "Some",
    "Nothing",
    "Either",
    "Left",
    "Right",
    "Try",
    "Success",
    "Failure",
    "Lazy",
    "MAX_ZIP_ARITY",
    "sequence",
    "traverse",
    "accumulate",
    # Errors
    "ErrorCode",
    "AdtkitError",
    "NoSuchElementError",
    "IllegalArgumentError",
    "ArgumentNullError",
    "IndexOutOfBoundsError",
    "FaultTrace",
    "classify_exception",
    # Config
    "AdtkitSettings",
    "get_settings",
    "clear_settings_cache",
    "configure_logging",
]
