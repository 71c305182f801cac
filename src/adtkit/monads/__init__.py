"""Persistent collections and value containers.

Provides:
- FList: immutable singly linked list with structural sharing
- NonEmptyList: list guaranteed to hold at least one element
- Option / Either / Try / Lazy: single-value containers sharing the Value combinators
- Either.zip_or_accumulate: combine 2 to 10 Eithers, collecting every Left in order

Example:
    >>> from adtkit.monads import Either, NonEmptyList
    >>>
    >>> def positive(n: int) -> Either[str, int]:
    ...     return Either.right(n) if n > 0 else Either.left(f"{n} is not positive")
    >>>
    >>> Either.zip_or_accumulate(positive(1), positive(-2), positive(-3), lambda a, b, c: a + b + c)
    Left(NonEmptyList('-2 is not positive', '-3 is not positive'))
"""

from .attempt import Failure, Success, Try
from .either import (
    MAX_ZIP_ARITY,
    MIN_ZIP_ARITY,
    Either,
    Left,
    Right,
    accumulate,
    sequence,
    traverse,
)
from .flist import FList
from .lazy import Lazy
from .nel import NonEmptyList
from .option import Nothing, Option, Some
from .value import Value

__all__ = [
    # Collections
    "FList",
    "NonEmptyList",
    # Containers
    "Value",
    "Option", "Some", "Nothing",
    "Either", "Left", "Right",
    "Try", "Success", "Failure",
    "Lazy",
    # Either combination
    "MIN_ZIP_ARITY",
    "MAX_ZIP_ARITY",
    "sequence",
    "traverse",
    "accumulate",
]
