"""Lazy: a memoized, thread-safe deferred value.

The supplier runs at most once, on the first ``get()``. Concurrent first calls block on a
lock and all observe the same result. A supplier that raises leaves the Lazy unevaluated,
so the next ``get()`` retries.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any, Callable, TypeVar

from adtkit.foundation.errors import require_not_none

from .value import Value

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger("adtkit.lazy")

T = TypeVar("T")
U = TypeVar("U")


class Lazy(Value[T]):
    """Deferred value computed once on demand.

    Examples:
        >>> calls = []
        >>> lz = Lazy.of(lambda: calls.append(1) or 42)
        >>> lz
        Lazy(?)
        >>> lz.get(), lz.get(), len(calls)
        (42, 42, 1)
        >>> lz
        Lazy(42)
    """

    __slots__ = ("_supplier", "_value", "_lock")

    def __init__(self, supplier: Callable[[], T]) -> None:
        require_not_none(supplier, "supplier")
        self._supplier: Callable[[], T] | None = supplier
        self._value: Any = None
        self._lock = threading.Lock()

    @staticmethod
    def of(supplier: Callable[[], U] | Lazy[U]) -> Lazy[U]:
        """Wrap supplier. An existing Lazy is returned as is."""
        require_not_none(supplier, "supplier")
        return supplier if isinstance(supplier, Lazy) else Lazy(supplier)

    @staticmethod
    def val(value: U) -> Lazy[U]:
        """Already-evaluated Lazy holding value."""
        lz = Lazy(lambda: value)
        lz.get()
        return lz

    def get(self) -> T:
        # Fast path: the supplier is cleared only after the value is stored
        if self._supplier is None:
            return self._value
        with self._lock:
            if self._supplier is not None:
                self._value = self._supplier()
                self._supplier = None
                logger.debug(f"Lazy evaluated to {type(self._value).__name__}")
        return self._value

    def is_evaluated(self) -> bool:
        return self._supplier is None

    def is_empty(self) -> bool:
        return False

    def map(self, f: Callable[[T], U]) -> Lazy[U]:
        """New Lazy applying f to this one's value; neither is forced until the result is."""
        require_not_none(f, "mapper")
        return Lazy(lambda: f(self.get()))

    def __iter__(self) -> Iterator[T]:
        yield self.get()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Lazy):
            return NotImplemented
        return self is other or self.get() == other.get()

    def __hash__(self) -> int:
        return hash(self.get())

    def __repr__(self) -> str:
        return f"Lazy({self._value!r})" if self.is_evaluated() else "Lazy(?)"

    def __reduce__(self) -> tuple[object, ...]:
        # Locks do not pickle; ship the forced value instead
        return (_evaluated, (self.get(),))


def _evaluated(value: T) -> Lazy[T]:
    return Lazy.val(value)
