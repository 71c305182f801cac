"""Non-empty list: a head plus a possibly empty persistent tail.

The at-least-one-element guarantee is enforced at construction, so code receiving a
``NonEmptyList`` (e.g. the accumulated failures of ``Either.zip_or_accumulate``) never
has to handle the empty case.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, Iterable, NoReturn, TypeVar

from adtkit.foundation.errors import (
    IllegalArgumentError,
    IndexOutOfBoundsError,
    require_not_none,
)

from .flist import FList, render_elements

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")
U = TypeVar("U")


class NonEmptyList(Generic[T]):
    """List statically guaranteed to hold at least one element.

    Examples:
        >>> NonEmptyList.of("e1", "e2").size()
        2
        >>> NonEmptyList.from_iterable([1, 2, 3]).map(lambda x: x * 2).to_list()
        [2, 4, 6]
        >>> NonEmptyList.from_iterable([])
        Traceback (most recent call last):
        ...
        adtkit.foundation.errors.errors.IllegalArgumentError: source cannot be None or empty
    """

    __slots__ = ("_head", "_tail")
    __match_args__ = ("head", "tail")

    def __init__(self, head: T, tail: FList[T] | None = None) -> None:
        """Direct construction. A None head is accepted as an element, as in FList;
        only ``of`` rejects arguments that are all None."""
        tail =FList.empty() if tail is None else tail
        if not isinstance(tail, FList):
            raise IllegalArgumentError(f"tail must be an FList, got {type(tail).__name__}")
        object.__setattr__(self, "_head", head)
        object.__setattr__(self, "_tail", tail)

    def __setattr__(self, name: str, value: object) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ─── Construction ────────────────────────────────────────────────

    @staticmethod
    def of(*elements: U) -> NonEmptyList[U]:
        """From loose values. Rejects no values, and values that are all None."""
        if not elements or all(e is None for e in elements):
            raise IllegalArgumentError("elements cannot be None or empty")
        return NonEmptyList(elements[0], FList.of(*elements[1:]))

    @staticmethod
    def from_iterable(source: Iterable[U] | None) -> NonEmptyList[U]:
        """From a host collection or FList: first element is the head, the rest the tail."""
        if source is None:
            raise IllegalArgumentError("source cannot be None or empty")
        if isinstance(source, FList):
            return NonEmptyList.from_flist(source)
        items = tuple(source)
        if not items:
            raise IllegalArgumentError("source cannot be None or empty")
        return NonEmptyList(items[0], FList.of(*items[1:]))

    @staticmethod
    def from_flist(flist: FList[U] | None) -> NonEmptyList[U]:
        if flist is None or flist.is_empty():
            raise IllegalArgumentError("source cannot be None or empty")
        return NonEmptyList(flist.head, flist.tail)

    # ─── Inspection ──────────────────────────────────────────────────

    @property
    def head(self) -> T:
        return self._head

    @property
    def tail(self) -> FList[T]:
        return self._tail

    def size(self) -> int:
        return 1 + self._tail.size()

    def get(self, index: int) -> T:
        """Element at index; out-of-range indices raise IndexOutOfBoundsError."""
        if index == 0:
            return self._head
        if index < 0:
            raise IndexOutOfBoundsError(index, self.size())
        try:
            return self._tail.get(index - 1)
        except IndexOutOfBoundsError:
            raise IndexOutOfBoundsError(index, self.size()) from None

    # ─── Transformations ─────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> NonEmptyList[U]:
        require_not_none(f, "mapper")
        return NonEmptyList(f(self._head), self._tail.map(f))

    def flat_map(self, f: Callable[[T], NonEmptyList[U]]) -> NonEmptyList[U]:
        """Concatenate f(x) for every element; the head of f(head) is the new head."""
        require_not_none(f, "mapper")
        first = f(self._head)
        rest = self._tail.flat_map(lambda x: f(x).to_flist())
        return NonEmptyList(first.head, first.tail.append_list(rest))

    # ─── Conversion ──────────────────────────────────────────────────

    def to_flist(self) -> FList[T]:
        return FList(self._head, self._tail)

    def to_list(self) -> list[T]:
        return list(self)

    # ─── Dunder Methods ──────────────────────────────────────────────

    def __iter__(self) -> Iterator[T]:
        yield self._head
        yield from self._tail

    def __len__(self) -> int:
        return self.size()

    def __getitem__(self, index: int) -> T:
        return self.get(index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NonEmptyList):
            return NotImplemented
        return self._head == other._head and self._tail == other._tail

    def __hash__(self) -> int:
        return hash(("NonEmptyList", self._head, self._tail))

    def __repr__(self) -> str:
        return f"NonEmptyList({render_elements(self)})"

    def __reduce__(self) -> tuple[object, ...]:
        return (NonEmptyList, (self._head, self._tail))
