"""Persistent singly-linked list with structural sharing.

An ``FList`` is either the shared empty list or a head value plus a reference to an
older, shorter ``FList``. Nodes are never mutated: ``prepend`` shares the receiver as the
new tail, ``append``/``append_list``/``update`` rebuild only the spine in front of the
shared suffix. Links only point at older nodes, so lists are acyclic by construction.

All traversals are iterative so long lists never hit the recursion limit.

Example:
    >>> xs = FList.of(1, 2, 3)
    >>> xs.prepend(0).to_list()
    [0, 1, 2, 3]
    >>> xs.flat_map(lambda x: FList.of(x, x * 10)).to_list()
    [1, 10, 2, 20, 3, 30]
    >>> xs.fold_right(0, lambda elem, acc: elem + acc)
    6
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, Iterable, NoReturn, TypeVar

from adtkit.foundation.errors import (
    IllegalArgumentError,
    IndexOutOfBoundsError,
    NoSuchElementError,
    require_not_none,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .nel import NonEmptyList

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


class FList(Generic[T]):
    """Immutable cons list. Use FList.of()/FList.empty() rather than the constructor.

    Emptiness is a property of the node (no tail), never of its head, so ``None`` is a
    legitimate element.
    """

    __slots__ = ("_head", "_tail")

    def __init__(self, head: T, tail: FList[T]) -> None:
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
    def empty() -> FList[T]:
        """The shared empty list."""
        return _EMPTY  # type: ignore[return-value]

    @staticmethod
    def of(*elements: U) -> FList[U]:
        """List of elements in argument order."""
        return _build(elements, _EMPTY)

    @staticmethod
    def from_iterable(elements: Iterable[U]) -> FList[U]:
        """List from any host collection, in iteration order."""
        require_not_none(elements, "elements")
        if isinstance(elements, FList):
            return elements
        return _build(tuple(elements), _EMPTY)

    # ─── Inspection ──────────────────────────────────────────────────

    def is_empty(self) -> bool:
        return self._tail is None

    @property
    def head(self) -> T:
        """First element. Raises NoSuchElementError on the empty list."""
        if self._tail is None:
            raise NoSuchElementError("head of empty FList")
        return self._head

    @property
    def tail(self) -> FList[T]:
        """Remainder after the head. Raises NoSuchElementError on the empty list."""
        if self._tail is None:
            raise NoSuchElementError("tail of empty FList")
        return self._tail

    def size(self) -> int:
        """Number of elements, counted by walking the spine (not cached)."""
        n, node = 0, self
        while node._tail is not None:
            n, node = n + 1, node._tail
        return n

    def get(self, index: int) -> T:
        """Element at index. Negative or too-large indices raise IndexOutOfBoundsError."""
        node = self._node_at(index)
        return node._head

    # ─── Growth ──────────────────────────────────────────────────────

    def prepend(self, element: T) -> FList[T]:
        """New list with element in front; the receiver becomes its tail."""
        return FList(element, self)

    def append(self, element: T) -> FList[T]:
        """New list with element at the end. Rebuilds the whole spine, O(n)."""
        return _build(self.to_tuple(), FList(element, _EMPTY))

    def append_list(self, other: FList[T]) -> FList[T]:
        """Concatenation sharing other as suffix. O(n) in the receiver's length."""
        require_not_none(other, "other")
        if not isinstance(other, FList):
            raise IllegalArgumentError(f"other must be an FList, got {type(other).__name__}")
        return _build(self.to_tuple(), other)

    def update(self, index: int, element: T) -> FList[T]:
        """New list with the index-th element replaced; nodes after index are shared."""
        node = self._node_at(index)
        return _build(self.to_tuple()[:index], FList(element, node._tail))

    # ─── Transformations ─────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> FList[U]:
        require_not_none(f, "mapper")
        return _build(tuple(f(x) for x in self), _EMPTY)

    def filter(self, predicate: Callable[[T], bool]) -> FList[T]:
        require_not_none(predicate, "predicate")
        return _build(tuple(x for x in self if predicate(x)), _EMPTY)

    def flat_map(self, f: Callable[[T], FList[U]]) -> FList[U]:
        """Map each element to a list and concatenate the results in order."""
        require_not_none(f, "mapper")
        return self.fold_right(FList.empty(), lambda elem, acc: FList.from_iterable(f(elem)).append_list(acc))

    def fold_right(self, identity: R, combine: Callable[[T, R], R]) -> R:
        """Right-associative fold: combine(x0, combine(x1, ... combine(xn, identity)))."""
        require_not_none(combine, "accumulator")
        acc = identity
        for elem in reversed(self.to_tuple()):
            acc = combine(elem, acc)
        return acc

    def fold_left(self, identity: R, combine: Callable[[R, T], R]) -> R:
        """Left-associative fold: combine(... combine(combine(identity, x0), x1) ..., xn)."""
        require_not_none(combine, "accumulator")
        acc = identity
        for elem in self:
            acc = combine(acc, elem)
        return acc

    def reverse(self) -> FList[T]:
        return self.fold_left(FList.empty(), FList.prepend)

    # ─── Conversion ──────────────────────────────────────────────────

    def to_list(self) -> list[T]:
        return list(self)

    def to_tuple(self) -> tuple[T, ...]:
        return tuple(self)

    def to_non_empty(self) -> NonEmptyList[T]:
        """NonEmptyList view. Raises IllegalArgumentError on the empty list."""
        from .nel import NonEmptyList
        return NonEmptyList.from_flist(self)

    # ─── Internals ───────────────────────────────────────────────────

    def _node_at(self, index: int) -> FList[T]:
        size = self.size()
        if index < 0 or index >= size:
            raise IndexOutOfBoundsError(index, size)
        node = self
        for _ in range(index):
            node = node._tail
        return node

    # ─── Dunder Methods ──────────────────────────────────────────────

    def __iter__(self) -> Iterator[T]:
        node = self
        while node._tail is not None:
            yield node._head
            node = node._tail

    def __len__(self) -> int:
        return self.size()

    def __getitem__(self, index: int) -> T:
        return self.get(index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FList):
            return NotImplemented
        a, b = self, other
        while a is not b:
            if a._tail is None or b._tail is None:
                return a._tail is None and b._tail is None
            if a._head != b._head:
                return False
            a, b = a._tail, b._tail
        return True

    def __hash__(self) -> int:
        return hash(("FList", self.to_tuple()))

    def __repr__(self) -> str:
        return f"FList({render_elements(self)})"

    def __str__(self) -> str:
        return "::".join(str(x) for x in self)

    def __reduce__(self) -> tuple[object, ...]:
        return (FList.from_iterable, (self.to_tuple(),))


def _build(elements: tuple[U, ...] | list[U], tail: FList[U]) -> FList[U]:
    """Cons elements, last to first, onto tail."""
    for elem in reversed(elements):
        tail = FList(elem, tail)
    return tail


def render_elements(elements: Iterable[object]) -> str:
    """Comma-separated reprs, truncated after the configured number of items."""
    from adtkit.foundation.config import get_settings
    limit = get_settings().rendering.max_items
    shown: list[str] = []
    for i, elem in enumerate(elements):
        if i == limit:
            shown.append("...")
            break
        shown.append(repr(elem))
    return ", ".join(shown)


_EMPTY: FList[object] = object.__new__(FList)
object.__setattr__(_EMPTY, "_head", None)
object.__setattr__(_EMPTY, "_tail", None)
