"""Either: disjoint union of a Left (failure/alternate) and a Right (success) value.

Implements a right-biased sum type with the usual operations:
- Functor: map, map_left
- Bifunctor: bimap
- Monad: flat_map (short-circuits on Left)
- Catamorphism: fold
- Validation: zip_or_accumulate, which inspects every input and accumulates all failures

``map``/``flat_map`` stop at the first Left. ``zip_or_accumulate`` does the opposite: it
looks at all of its (independently built) inputs and, when any failed, returns every
Left payload in positional order as one ``NonEmptyList``.

Example:
    >>> def positive(n: int) -> Either[str, int]:
    ...     return Either.right(n) if n > 0 else Either.left(f"{n} is not positive")
    >>> Either.zip_or_accumulate(positive(1), positive(2), lambda a, b: a + b)
    Right(3)
    >>> Either.zip_or_accumulate(positive(-1), positive(2), positive(-3), lambda a, b, c: a + b + c)
    Left(NonEmptyList('-1 is not positive', '-3 is not positive'))
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Generic, Iterable, TypeVar, final, overload

from adtkit.foundation.errors import (
    IllegalArgumentError,
    NoSuchElementError,
    require_not_none,
)

from .flist import FList
from .nel import NonEmptyList
from .value import Value

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger("adtkit.either")

L = TypeVar("L")  # Left (failure) type
R = TypeVar("R")  # Right (success) type
T = TypeVar("T")
U = TypeVar("U")
Z = TypeVar("Z")  # Combined result type

# Positional payload types for zip_or_accumulate
A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")
E = TypeVar("E")
F = TypeVar("F")
G = TypeVar("G")
H = TypeVar("H")
I = TypeVar("I")  # noqa: E741
J = TypeVar("J")

MIN_ZIP_ARITY = 2
MAX_ZIP_ARITY = 10


class Either(Value[R], Generic[L, R]):
    """Sum type Left(value) | Right(value) with exactly one payload.

    Reading the payload of the wrong side raises NoSuchElementError; it never falls back
    to a default silently.

    Examples:
        >>> Either.right(21).map(lambda x: x * 2)
        Right(42)
        >>> Either.left("boom").map(lambda x: x * 2)
        Left('boom')
        >>> Either.left("boom").fold(len, str)
        4
    """

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: Any) -> None:
        if type(self) is Either:
            raise TypeError("Either is sealed; use Either.left() or Either.right()")
        self._value = value

    @property
    def value(self) -> Any:
        """Payload of whichever side this is."""
        return self._value

    # ─── Factories ───────────────────────────────────────────────────

    @staticmethod
    def left(value: L) -> Either[L, Any]:
        return Left(value)

    @staticmethod
    def right(value: R) -> Either[Any, R]:
        return Right(value)

    # ─── Type Checking ───────────────────────────────────────────────

    def is_left(self) -> bool:
        return isinstance(self, Left)

    def is_right(self) -> bool:
        return isinstance(self, Right)

    def is_empty(self) -> bool:
        return self.is_left()

    # ─── Value Extraction ────────────────────────────────────────────

    def get(self) -> R:
        """Right payload. Raises NoSuchElementError on Left."""
        if self.is_left():
            raise NoSuchElementError("get() on Left")
        return self._value

    def get_left(self) -> L:
        """Left payload. Raises NoSuchElementError on Right."""
        if self.is_right():
            raise NoSuchElementError("get_left() on Right")
        return self._value

    def get_or_raise(self, mapper: Callable[[L], BaseException]) -> R:
        """Right payload, or raise the exception mapper builds from the Left payload."""
        require_not_none(mapper, "exception_mapper")
        if self.is_left():
            raise mapper(self._value)
        return self._value

    # ─── Functor Operations ──────────────────────────────────────────

    def map(self, f: Callable[[R], U]) -> Either[L, U]:
        """Apply f to Right payload; Left passes through unchanged."""
        require_not_none(f, "mapper")
        return Right(f(self._value)) if self.is_right() else self

    def map_left(self, f: Callable[[L], U]) -> Either[U, R]:
        """Apply f to Left payload; Right passes through unchanged."""
        require_not_none(f, "mapper")
        return Left(f(self._value)) if self.is_left() else self

    # ─── Bifunctor Operations ────────────────────────────────────────

    def bimap(self, left_fn: Callable[[L], T], right_fn: Callable[[R], U]) -> Either[T, U]:
        require_not_none(left_fn, "left_mapper")
        require_not_none(right_fn, "right_mapper")
        return Left(left_fn(self._value)) if self.is_left() else Right(right_fn(self._value))

    def fold(self, left_fn: Callable[[L], T], right_fn: Callable[[R], T]) -> T:
        """Collapse both sides to one type."""
        require_not_none(left_fn, "left_mapper")
        require_not_none(right_fn, "right_mapper")
        return left_fn(self._value) if self.is_left() else right_fn(self._value)

    def swap(self) -> Either[R, L]:
        return Right(self._value) if self.is_left() else Left(self._value)

    # ─── Monad Operations ────────────────────────────────────────────

    def flat_map(self, f: Callable[[R], Either[L, U]]) -> Either[L, U]:
        """Monadic bind. Short-circuits: a Left is returned untouched and f is not called."""
        require_not_none(f, "mapper")
        return f(self._value) if self.is_right() else self

    def or_else(self, f: Callable[[L], Either[T, R]]) -> Either[T, R]:
        """On Left, apply f to recover. On Right, pass through."""
        require_not_none(f, "mapper")
        return f(self._value) if self.is_left() else self

    # ─── Inspection ──────────────────────────────────────────────────

    def peek(self, action: Callable[[R], object]) -> Either[L, R]:
        """Call action with Right payload for side effects, return self."""
        require_not_none(action, "action")
        if self.is_right():
            action(self._value)
        return self

    def peek_left(self, action: Callable[[L], object]) -> Either[L, R]:
        """Call action with Left payload for side effects, return self."""
        require_not_none(action, "action")
        if self.is_left():
            action(self._value)
        return self

    def to_either(self, left: T) -> Either[T, R]:
        """Replace the Left payload with left; Right is unchanged."""
        return self.map_left(lambda _: left)

    # ─── Accumulation ────────────────────────────────────────────────

    @overload
    @staticmethod
    def zip_or_accumulate(a: Either[L, A], b: Either[L, B], transform: Callable[[A, B], Z], /) -> Either[NonEmptyList[L], Z]: ...
    @overload
    @staticmethod
    def zip_or_accumulate(
        a: Either[L, A], b: Either[L, B], c: Either[L, C], transform: Callable[[A, B, C], Z], /,
    ) -> Either[NonEmptyList[L], Z]: ...
    @overload
    @staticmethod
    def zip_or_accumulate(
        a: Either[L, A], b: Either[L, B], c: Either[L, C], d: Either[L, D],
        transform: Callable[[A, B, C, D], Z], /,
    ) -> Either[NonEmptyList[L], Z]: ...
    @overload
    @staticmethod
    def zip_or_accumulate(
        a: Either[L, A], b: Either[L, B], c: Either[L, C], d: Either[L, D], e: Either[L, E],
        transform: Callable[[A, B, C, D, E], Z], /,
    ) -> Either[NonEmptyList[L], Z]: ...
    @overload
    @staticmethod
    def zip_or_accumulate(
        a: Either[L, A], b: Either[L, B], c: Either[L, C], d: Either[L, D], e: Either[L, E],
        f: Either[L, F], transform: Callable[[A, B, C, D, E, F], Z], /,
    ) -> Either[NonEmptyList[L], Z]: ...
    @overload
    @staticmethod
    def zip_or_accumulate(
        a: Either[L, A], b: Either[L, B], c: Either[L, C], d: Either[L, D], e: Either[L, E],
        f: Either[L, F], g: Either[L, G], transform: Callable[[A, B, C, D, E, F, G], Z], /,
    ) -> Either[NonEmptyList[L], Z]: ...
    @overload
    @staticmethod
    def zip_or_accumulate(
        a: Either[L, A], b: Either[L, B], c: Either[L, C], d: Either[L, D], e: Either[L, E],
        f: Either[L, F], g: Either[L, G], h: Either[L, H],
        transform: Callable[[A, B, C, D, E, F, G, H], Z], /,
    ) -> Either[NonEmptyList[L], Z]: ...
    @overload
    @staticmethod
    def zip_or_accumulate(
        a: Either[L, A], b: Either[L, B], c: Either[L, C], d: Either[L, D], e: Either[L, E],
        f: Either[L, F], g: Either[L, G], h: Either[L, H], i: Either[L, I],
        transform: Callable[[A, B, C, D, E, F, G, H, I], Z], /,
    ) -> Either[NonEmptyList[L], Z]: ...
    @overload
    @staticmethod
    def zip_or_accumulate(
        a: Either[L, A], b: Either[L, B], c: Either[L, C], d: Either[L, D], e: Either[L, E],
        f: Either[L, F], g: Either[L, G], h: Either[L, H], i: Either[L, I], j: Either[L, J],
        transform: Callable[[A, B, C, D, E, F, G, H, I, J], Z], /,
    ) -> Either[NonEmptyList[L], Z]: ...

    @staticmethod
    def zip_or_accumulate(*args: Any) -> Either[NonEmptyList[Any], Any]:
        """Zip 2 to 10 independent results, accumulating every failure.

        Called as ``zip_or_accumulate(e1, ..., eN, transform)``. When every input is Right,
        returns ``Right(transform(v1, ..., vN))``. Otherwise returns a Left holding a
        NonEmptyList of all Left payloads in the order the inputs were given. Unlike
        ``flat_map``, no input is skipped after the first failure.

        Raises:
            ArgumentNullError: transform or an input is None
            IllegalArgumentError: fewer than 2 or more than 10 inputs
        """
        eithers, transform = _split_zip_args(args)
        return _zip_padded(eithers, transform, _left_payloads)

    @staticmethod
    def zip_or_accumulate_nel(*args: Any) -> Either[NonEmptyList[Any], Any]:
        """Like zip_or_accumulate for inputs whose Left payload is already a NonEmptyList.

        The failure lists of all Left inputs are concatenated, in positional order, into a
        single flat NonEmptyList.

        Raises:
            IllegalArgumentError: a Left input whose payload is not a NonEmptyList
        """
        eithers, transform = _split_zip_args(args)
        for pos, either in enumerate(eithers, 1):
            if either.is_left() and not isinstance(either.get_left(), NonEmptyList):
                raise IllegalArgumentError(
                    f"result {pos} must hold a NonEmptyList on the left, got {type(either.get_left()).__name__}"
                )
        return _zip_padded(eithers, transform, _flattened_left_payloads)

    # ─── Dunder Methods ──────────────────────────────────────────────

    def __bool__(self) -> bool:
        """True if Right."""
        return self.is_right()

    def __iter__(self) -> Iterator[R]:
        if self.is_right():
            yield self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Either):
            return NotImplemented
        return type(self) is type(other) and self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


@final
class Left(Either[L, R]):
    """Failure/alternate variant."""

    __slots__ = ()


@final
class Right(Either[L, R]):
    """Success variant."""

    __slots__ = ()


# Neutral filler for unused trailing slots of the arity-10 zip
_PLACEHOLDER: Either[Any, None] = Right(None)


# ═════════════════════════════════════════════════════════════════════════════
# Accumulation internals
# ═════════════════════════════════════════════════════════════════════════════


def _split_zip_args(args: tuple[Any, ...]) -> tuple[tuple[Either[Any, Any], ...], Callable[..., Any]]:
    """Validate (e1, ..., eN, transform) before any accumulation begins."""
    if not args:
        raise IllegalArgumentError("zip_or_accumulate requires results and a transform")
    *eithers, transform = args
    require_not_none(transform, "transform")
    if not callable(transform):
        raise IllegalArgumentError(f"transform must be callable, got {type(transform).__name__}")
    if not MIN_ZIP_ARITY <= len(eithers) <= MAX_ZIP_ARITY:
        raise IllegalArgumentError(
            f"zip_or_accumulate takes {MIN_ZIP_ARITY} to {MAX_ZIP_ARITY} results, got {len(eithers)}"
        )
    for pos, either in enumerate(eithers, 1):
        require_not_none(either, f"result {pos}")
        if not isinstance(either, Either):
            raise IllegalArgumentError(f"result {pos} must be an Either, got {type(either).__name__}")
    return tuple(eithers), transform


def _zip_padded(
    eithers: tuple[Either[Any, Any], ...],
    transform: Callable[..., Z],
    collect: Callable[[FList[Either[Any, Any]]], FList[Any]],
) -> Either[NonEmptyList[Any], Z]:
    """Pad to MAX_ZIP_ARITY with the neutral Right and delegate to the single full-width zip."""
    arity = len(eithers)
    padded = eithers + (_PLACEHOLDER,) * (MAX_ZIP_ARITY - arity)
    result = _zip_all(padded, lambda *values: transform(*values[:arity]), collect)
    if result.is_left():
        logger.debug(f"zip_or_accumulate: {result.get_left().size()} of {arity} results failed")
    return result


def _zip_all(
    eithers: tuple[Either[Any, Any], ...],
    transform: Callable[..., Z],
    collect: Callable[[FList[Either[Any, Any]]], FList[Any]],
) -> Either[NonEmptyList[Any], Z]:
    """Inspect every input; apply transform if all are Right, else gather all failures."""
    errors = collect(FList.of(*eithers))
    if errors.is_empty():
        return Right(transform(*(e.get() for e in eithers)))
    return Left(NonEmptyList.from_flist(errors))


def _left_payloads(eithers: FList[Either[Any, Any]]) -> FList[Any]:
    return eithers.filter(Either.is_left).map(Either.get_left)


def _flattened_left_payloads(eithers: FList[Either[Any, Any]]) -> FList[Any]:
    return _left_payloads(eithers).flat_map(lambda nel: FList.from_iterable(nel))


# ═════════════════════════════════════════════════════════════════════════════
# Collection Operations
# ═════════════════════════════════════════════════════════════════════════════


def sequence(eithers: Iterable[Either[L, R]]) -> Either[L, FList[R]]:
    """Iterable[Either[L, R]] → Either[L, FList[R]]. Fail-fast on first Left.

    Example:
        >>> sequence([Either.right(1), Either.right(2)])
        Right(FList(1, 2))
        >>> sequence([Either.right(1), Either.left("e1"), Either.left("e2")])
        Left('e1')
    """
    require_not_none(eithers, "eithers")
    values: list[R] = []
    for e in eithers:
        if e.is_left():
            return e
        values.append(e.get())
    return Right(FList.from_iterable(values))


def traverse(items: Iterable[T], f: Callable[[T], Either[L, U]]) -> Either[L, FList[U]]:
    """Map f over items, sequence results. Fail-fast: f is not called after the first Left."""
    require_not_none(items, "items")
    require_not_none(f, "mapper")
    values: list[U] = []
    for item in items:
        e = f(item)
        if e.is_left():
            return e
        values.append(e.get())
    return Right(FList.from_iterable(values))


def accumulate(eithers: Iterable[Either[L, R]]) -> Either[NonEmptyList[L], FList[R]]:
    """Collect any number of results, accumulating ALL Left payloads in order (not fail-fast).

    Example:
        >>> accumulate([Either.right(1), Either.left("e1"), Either.right(3), Either.left("e2")])
        Left(NonEmptyList('e1', 'e2'))
    """
    require_not_none(eithers, "eithers")
    values: list[R] = []
    errors: list[L] = []
    for e in eithers:
        (errors if e.is_left() else values).append(e._value)
    if errors:
        return Left(NonEmptyList.from_iterable(errors))
    return Right(FList.from_iterable(values))
