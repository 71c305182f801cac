"""Shared capability of the single-value containers (Option, Either, Try, Lazy).

A ``Value`` holds zero or one element. Subclasses supply ``get``, ``is_empty`` and ``map``;
everything else (queries, fallbacks, conversions between container kinds) is derived here.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Generic, TypeVar

from adtkit.foundation.errors import require_not_none

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .attempt import Try
    from .either import Either
    from .option import Option

T = TypeVar("T")
U = TypeVar("U")
L = TypeVar("L")


class Value(ABC, Generic[T]):
    """Container of zero or one element with derived combinators."""

    __slots__ = ()

    @abstractmethod
    def get(self) -> T:
        """The contained element. Raises NoSuchElementError when empty."""

    @abstractmethod
    def is_empty(self) -> bool:
        """True when no element is present."""

    @abstractmethod
    def map(self, f: Callable[[T], U]) -> Value[U]: ...

    # ─── Queries ─────────────────────────────────────────────────────

    def contains(self, value: T) -> bool:
        return self.exists(lambda e: e == value)

    def exists(self, predicate: Callable[[T], bool]) -> bool:
        require_not_none(predicate, "predicate")
        return any(predicate(e) for e in self)

    def for_all(self, predicate: Callable[[T], bool]) -> bool:
        """True when every element satisfies predicate (vacuously true when empty)."""
        require_not_none(predicate, "predicate")
        return all(predicate(e) for e in self)

    def for_each(self, action: Callable[[T], object]) -> None:
        require_not_none(action, "action")
        for e in self:
            action(e)

    # ─── Fallbacks ───────────────────────────────────────────────────

    def get_or_else(self, default: T) -> T:
        return default if self.is_empty() else self.get()

    def get_or_else_get(self, supplier: Callable[[], T]) -> T:
        require_not_none(supplier, "supplier")
        return supplier() if self.is_empty() else self.get()

    def get_or_else_raise(self, exc_supplier: Callable[[], BaseException]) -> T:
        """Element, or raise the exception produced by exc_supplier when empty."""
        require_not_none(exc_supplier, "exc_supplier")
        if self.is_empty():
            raise exc_supplier()
        return self.get()

    def get_or_else_try(self, supplier: Callable[[], T]) -> T:
        """Element, or the result of supplier run through Try (NoSuchElementError if it fails)."""
        require_not_none(supplier, "supplier")
        from .attempt import Try
        return Try.of(supplier).get() if self.is_empty() else self.get()

    def get_or_none(self) -> T | None:
        return None if self.is_empty() else self.get()

    # ─── Conversion ──────────────────────────────────────────────────

    def to_either(self, left: L) -> Either[L, T]:
        """Right of the element, or Left(left) when empty."""
        from .either import Either
        return Either.left(left) if self.is_empty() else Either.right(self.get())

    def to_option(self) -> Option[T]:
        from .option import Option
        return Option.none() if self.is_empty() else Option.some(self.get())

    def to_try(self) -> Try[T]:
        """Success of the element, or Failure(NoSuchElementError) when empty."""
        from .attempt import Try
        return Try.of(self.get)

    def __iter__(self) -> Iterator[T]:
        if not self.is_empty():
            yield self.get()
