"""Try: outcome of a deferred computation that may raise.

``Try.of(supplier)`` runs the supplier once, immediately, on the caller's thread. A normal
return becomes ``Success(value)``; a raised exception is captured as data in
``Failure(fault)`` and is not re-raised by the factory. Faults come back out only through
accessors the caller chooses (``get_or_raise``, or ``get_cause`` to inspect them).

Example:
    >>> Try.of(lambda: int("42")).map(lambda n: n + 1)
    Success(43)
    >>> Try.of(lambda: int("x")).is_failure()
    True
    >>> Try.of(lambda: int("x")).get_or_else(0)
    0
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, NoReturn, TypeVar, final

from adtkit.foundation.config import get_settings
from adtkit.foundation.errors import FaultTrace, NoSuchElementError, require_not_none

from .value import Value

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .either import Either

logger = logging.getLogger("adtkit.attempt")

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")

# Interpreter-level signals that may be let through when configured
_INTERRUPTS = (KeyboardInterrupt, SystemExit)


class Try(Value[T]):
    """Sum type Success(value) | Failure(fault).

    ``map`` and ``flat_map`` short-circuit: a Failure is returned unchanged and the mapper
    is never called.

    Examples:
        >>> def boom() -> int:
        ...     raise ValueError("boom")
        >>> t = Try.of(boom)
        >>> type(t.get_cause()).__name__
        'ValueError'
        >>> t.map(lambda x: x * 2) is t
        True
    """

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: Any) -> None:
        if type(self) is Try:
            raise TypeError("Try is sealed; use Try.of()")
        self._value = value

    @property
    def value(self) -> Any:
        """Result on Success, captured exception on Failure."""
        return self._value

    # ─── Factories ───────────────────────────────────────────────────

    @staticmethod
    def of(supplier: Callable[[], U]) -> Try[U]:
        """Run supplier now and capture its outcome.

        Every exception is captured, BaseException subclasses included. KeyboardInterrupt
        and SystemExit propagate instead when ``ADTKIT_TRY_PROPAGATE_INTERRUPTS`` is set.
        """
        require_not_none(supplier, "supplier")
        try:
            return Success(supplier())
        except BaseException as exc:
            if isinstance(exc, _INTERRUPTS) and get_settings().capture.propagate_interrupts:
                raise
            # Type name only: str(exc) may itself raise
            logger.debug("Try.of captured %s", type(exc).__name__)
            return Failure(exc)

    @staticmethod
    def from_either(either: Either[Any, U]) -> Try[U]:
        """Rebuild a Try from an Either through the deferred factory.

        Right becomes Success. A Left holding an exception becomes Failure of that
        exception; any other Left payload becomes Failure(NoSuchElementError).
        """
        require_not_none(either, "either")
        return either.fold(lambda left: Try.of(lambda: _raise(_as_fault(left))), lambda right: Try.of(lambda: right))

    # ─── Type Checking ───────────────────────────────────────────────

    def is_success(self) -> bool:
        return isinstance(self, Success)

    def is_failure(self) -> bool:
        return isinstance(self, Failure)

    def is_empty(self) -> bool:
        return self.is_failure()

    # ─── Value Extraction ────────────────────────────────────────────

    def get(self) -> T:
        """Success value. Raises NoSuchElementError on Failure (the fault is chained as context)."""
        if self.is_failure():
            raise NoSuchElementError("get() on Failure") from self._value
        return self._value

    def get_cause(self) -> BaseException:
        """Captured fault. Raises NoSuchElementError on Success."""
        if self.is_success():
            raise NoSuchElementError("get_cause() on Success")
        return self._value

    def get_or_raise(self) -> T:
        """Success value, or re-raise the captured fault itself."""
        if self.is_failure():
            raise self._value
        return self._value

    def trace(self) -> FaultTrace:
        """Serializable snapshot of the captured fault. Raises NoSuchElementError on Success."""
        return FaultTrace.from_exception(self.get_cause())

    # ─── Functor / Monad ─────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Try[U]:
        """Apply f to the Success value inside Try.of, so a raising f yields Failure."""
        require_not_none(f, "mapper")
        if self.is_failure():
            return self
        value = self._value
        return Try.of(lambda: f(value))

    def flat_map(self, f: Callable[[T], Try[U]]) -> Try[U]:
        require_not_none(f, "mapper")
        return self if self.is_failure() else f(self._value)

    def recover(self, f: Callable[[BaseException], T]) -> Try[T]:
        """On Failure, compute a replacement value from the fault (itself run through Try.of)."""
        require_not_none(f, "recovery")
        if self.is_success():
            return self
        fault = self._value
        return Try.of(lambda: f(fault))

    def fold(self, on_failure: Callable[[BaseException], R], on_success: Callable[[T], R]) -> R:
        require_not_none(on_failure, "on_failure")
        require_not_none(on_success, "on_success")
        return on_failure(self._value) if self.is_failure() else on_success(self._value)

    # ─── Conversion ──────────────────────────────────────────────────

    def to_either(self, left: Any = None) -> Either[BaseException, T]:
        """Failure → Left(fault), Success → Right(value).

        When left is given it replaces the fault as the Left payload.
        """
        from .either import Either
        if self.is_success():
            return Either.right(self._value)
        return Either.left(self._value if left is None else left)

    def to_try(self) -> Try[T]:
        return self

    # ─── Dunder Methods ──────────────────────────────────────────────

    def __bool__(self) -> bool:
        """True if Success."""
        return self.is_success()

    def __iter__(self) -> Iterator[T]:
        if self.is_success():
            yield self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


@final
class Success(Try[T]):
    """Normal completion. Equality and hashing delegate to the value."""

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Try):
            return NotImplemented
        return isinstance(other, Success) and self._value == other._value

    def __hash__(self) -> int:
        return hash(("Success", self._value))


@final
class Failure(Try[T]):
    """Captured fault. Two Failures are equal when their faults have the same type and args."""

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Try):
            return NotImplemented
        if not isinstance(other, Failure):
            return False
        a, b = self._value, other._value
        return a is b or (type(a) is type(b) and a.args == b.args)

    def __hash__(self) -> int:
        return hash(("Failure", type(self._value), str(self._value)))


def _as_fault(payload: object) -> BaseException:
    if isinstance(payload, BaseException):
        return payload
    return NoSuchElementError(f"Left({payload!r}) holds no exception")


def _raise(exc: BaseException) -> NoReturn:
    raise exc
