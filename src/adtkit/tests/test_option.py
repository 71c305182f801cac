"""Tests for Option (Some | Nothing).

Validates:
- Functor laws
- Presence versus value-nullity
- Combinators and argument checks
- Pattern matching
"""

from __future__ import annotations

import pickle
from typing import Callable

import pytest

from adtkit.foundation.errors import ArgumentNullError, NoSuchElementError
from adtkit.monads import Nothing, Option, Some


# ═════════════════════════════════════════════════════════════════════════════
# Property Tests - Functor Laws
# ═════════════════════════════════════════════════════════════════════════════


def test_functor_identity() -> None:
    """Functor law: fmap id = id"""
    assert Option.some(3).map(lambda x: x) == Option.some(3)
    assert Option.none().map(lambda x: x) is Option.none()


def test_functor_composition() -> None:
    """Functor law: fmap (f . g) = fmap f . fmap g"""
    f: Callable[[int], int] = lambda x: x + 1
    g: Callable[[int], int] = lambda x: x * 2
    opt = Option.some(5)
    assert opt.map(lambda x: f(g(x))) == opt.map(g).map(f)


# ═════════════════════════════════════════════════════════════════════════════
# Construction
# ═════════════════════════════════════════════════════════════════════════════


def test_of_maps_none_to_nothing() -> None:
    assert Option.of(None) == Option.none()
    assert Option.of(None) is Option.none()
    assert Option.of(0) == Option.some(0)


def test_some_none_is_present() -> None:
    """Presence is distinct from value-nullity."""
    opt = Option.some(None)
    assert opt != Option.none()
    assert opt.is_some()
    assert opt.get() is None


def test_nothing_is_singleton() -> None:
    assert Nothing() is Option.none()
    assert pickle.loads(pickle.dumps(Option.none())) is Option.none()


def test_nothing_get_raises() -> None:
    with pytest.raises(NoSuchElementError):
        Option.none().get()
    with pytest.raises(LookupError):
        Option.none().get()


# ═════════════════════════════════════════════════════════════════════════════
# Operational Tests
# ═════════════════════════════════════════════════════════════════════════════


def test_map_on_nothing_not_called() -> None:
    calls: list[int] = []
    assert Option.none().map(calls.append).is_none()
    assert calls == []


def test_flat_map() -> None:
    assert Option.some(4).flat_map(lambda x: Option.some(x + 1)) == Some(5)
    assert Option.some(4).flat_map(lambda x: Option.none()).is_none()
    assert Option.none().flat_map(lambda x: Option.some(x)) is Option.none()


def test_filter() -> None:
    assert Option.some(10).filter(lambda x: x > 5) == Some(10)
    assert Option.some(3).filter(lambda x: x > 5).is_none()
    assert Option.none().filter(lambda x: True).is_none()


def test_fold() -> None:
    assert Option.some(2).fold(lambda: "none", lambda x: f"some {x}") == "some 2"
    assert Option.none().fold(lambda: "none", lambda x: f"some {x}") == "none"


def test_zip() -> None:
    assert Option.some("a").zip(Option.some(1)) == Some(("a", 1))
    assert Option.some("a").zip(Option.none()).is_none()
    assert Option.none().zip(Option.some(1)).is_none()


def test_or_else() -> None:
    assert Option.none().or_else(Option.some(1)) == Some(1)
    assert Option.some(2).or_else(Option.some(1)) == Some(2)


def test_get_or_else() -> None:
    assert Option.some(1).get_or_else(0) == 1
    assert Option.none().get_or_else(0) == 0
    assert Option.none().get_or_else_get(lambda: 7) == 7


def test_peek() -> None:
    seen: list[int] = []
    opt = Option.some(9)
    assert opt.peek(seen.append) is opt
    Option.none().peek(seen.append)
    assert seen == [9]


def test_null_arguments_rejected() -> None:
    opt = Option.some(1)
    with pytest.raises(ArgumentNullError):
        opt.map(None)
    with pytest.raises(ArgumentNullError):
        opt.flat_map(None)
    with pytest.raises(ArgumentNullError):
        opt.filter(None)
    with pytest.raises(ArgumentNullError):
        opt.zip(None)
    with pytest.raises(ArgumentNullError):
        opt.or_else(None)
    with pytest.raises(ArgumentNullError):
        Option.none().map(None)


# ═════════════════════════════════════════════════════════════════════════════
# Dunder Methods
# ═════════════════════════════════════════════════════════════════════════════


def test_truthiness_and_iteration() -> None:
    assert bool(Option.some(0)) is True
    assert bool(Option.none()) is False
    assert list(Option.some(1)) == [1]
    assert list(Option.none()) == []


def test_equality_and_hash() -> None:
    assert Some(1) == Some(1)
    assert Some(1) != Some(2)
    assert Some(1) != Option.none()
    assert hash(Some(1)) == hash(Some(1))
    assert len({Option.none(), Nothing(), Option.of(None)}) == 1


def test_repr() -> None:
    assert repr(Option.some("x")) == "Some('x')"
    assert repr(Option.none()) == "Nothing"


def test_pattern_matching() -> None:
    def describe(opt: Option[int]) -> str:
        match opt:
            case Some(value):
                return f"some {value}"
            case Nothing():
                return "nothing"
        return "unreachable"

    assert describe(Option.of(3)) == "some 3"
    assert describe(Option.of(None)) == "nothing"
