"""Option: presence (Some) or absence (Nothing) of a value.

Closed sum type of exactly two variants. ``Nothing`` is a process-wide singleton that
carries no payload. Presence is distinct from value-nullity: ``Option.some(None)`` is a
``Some`` and is not equal to ``Nothing``; only ``Option.of`` maps ``None`` to absence.

Example:
    >>> Option.of(5).map(lambda x: x + 1).get_or_else(0)
    6
    >>> Option.of(None).map(lambda x: x + 1).get_or_else(0)
    0
    >>> match Option.of("a").zip(Option.of(1)):
    ...     case Some((s, n)):
    ...         print(s * n)
    ...     case Nothing():
    ...         print("absent")
    a
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, ClassVar, TypeVar, final

from adtkit.foundation.errors import NoSuchElementError, require_not_none

from .value import Value

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


class Option(Value[T]):
    """Sum type Some(value) | Nothing. Combinators never mutate, they return new Options.

    Examples:
        >>> Option.some(3).filter(lambda x: x > 5)
        Nothing
        >>> Option.some(None) == Option.none()
        False
    """

    __slots__ = ()

    # ─── Factories ───────────────────────────────────────────────────

    @staticmethod
    def of(value: U | None) -> Option[U]:
        """Nothing when value is None, else Some(value)."""
        return _NOTHING if value is None else Some(value)

    @staticmethod
    def some(value: U) -> Option[U]:
        """Always Some(value), even for None."""
        return Some(value)

    @staticmethod
    def none() -> Option[U]:
        """The shared Nothing instance."""
        return _NOTHING

    # ─── Type Checking ───────────────────────────────────────────────

    def is_some(self) -> bool:
        return not self.is_empty()

    def is_none(self) -> bool:
        return self.is_empty()

    # ─── Functor / Monad ─────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Option[U]:
        require_not_none(f, "mapper")
        return _NOTHING if self.is_empty() else Some(f(self.get()))

    def flat_map(self, f: Callable[[T], Option[U]]) -> Option[U]:
        require_not_none(f, "mapper")
        return _NOTHING if self.is_empty() else f(self.get())

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keep Some only when predicate holds."""
        require_not_none(predicate, "predicate")
        return self if self.is_empty() or predicate(self.get()) else _NOTHING

    # ─── Combination ─────────────────────────────────────────────────

    def fold(self, if_none: Callable[[], R], if_some: Callable[[T], R]) -> R:
        require_not_none(if_none, "if_none")
        require_not_none(if_some, "if_some")
        return if_none() if self.is_empty() else if_some(self.get())

    def zip(self, other: Option[U]) -> Option[tuple[T, U]]:
        """Some((a, b)) when both are present, else Nothing."""
        require_not_none(other, "other")
        if self.is_empty() or other.is_empty():
            return _NOTHING
        return Some((self.get(), other.get()))

    def or_else(self, other: Option[T]) -> Option[T]:
        require_not_none(other, "other")
        return other if self.is_empty() else self

    def peek(self, action: Callable[[T], object]) -> Option[T]:
        """Call action with the value for side effects, return self."""
        require_not_none(action, "action")
        if not self.is_empty():
            action(self.get())
        return self

    def __bool__(self) -> bool:
        return not self.is_empty()


@final
class Some(Option[T]):
    """Present value. Equality and hashing delegate to the payload."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def get(self) -> T:
        return self._value

    def is_empty(self) -> bool:
        return False

    def __iter__(self) -> Iterator[T]:
        yield self._value

    def __eq__(self, other: object) -> bool:
        return self._value == other._value if isinstance(other, Some) else NotImplemented

    def __hash__(self) -> int:
        return hash(("Some", self._value))

    def __repr__(self) -> str:
        return f"Some({self._value!r})"


@final
class Nothing(Option[T]):
    """Absent value. Calling Nothing() always returns the shared instance."""

    __slots__ = ()
    _instance: ClassVar[Nothing[Any] | None] = None

    def __new__(cls) -> Nothing[T]:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def get(self) -> T:
        raise NoSuchElementError("get() on Nothing")

    def is_empty(self) -> bool:
        return True

    def __iter__(self) -> Iterator[T]:
        return iter(())

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Nothing) if isinstance(other, Option) else NotImplemented

    def __hash__(self) -> int:
        return hash("Nothing")

    def __repr__(self) -> str:
        return "Nothing"

    def __reduce__(self) -> tuple[object, ...]:
        return (Nothing, ())


_NOTHING: Nothing[object] = Nothing()
