"""Tests for NonEmptyList."""

from __future__ import annotations

import pickle

import pytest

from adtkit.foundation.errors import ArgumentNullError, IllegalArgumentError, IndexOutOfBoundsError
from adtkit.monads import FList, NonEmptyList


# ═════════════════════════════════════════════════════════════════════════════
# Construction
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize("source", [[1], [1, 2, 3], ("a", "b"), range(5)])
def test_from_iterable_size_and_head(source: list[object]) -> None:
    nel = NonEmptyList.from_iterable(source)
    assert nel.size() == len(source)
    assert nel.head == source[0]
    assert nel.to_list() == list(source)


@pytest.mark.parametrize("source", [None, [], (), FList.empty()])
def test_from_iterable_rejects_empty(source: object) -> None:
    with pytest.raises(IllegalArgumentError, match="source cannot be None or empty"):
        NonEmptyList.from_iterable(source)


def test_from_iterable_copies_source() -> None:
    """Later mutation of the caller's list is not observed."""
    src = [1, 2]
    nel = NonEmptyList.from_iterable(src)
    src.append(3)
    assert nel.size() == 2


def test_from_flist() -> None:
    nel = NonEmptyList.from_flist(FList.of(1, 2, 3))
    assert nel.head == 1
    assert nel.tail == FList.of(2, 3)
    with pytest.raises(IllegalArgumentError):
        NonEmptyList.from_flist(FList.empty())
    with pytest.raises(IllegalArgumentError):
        NonEmptyList.from_flist(None)


def test_of() -> None:
    nel = NonEmptyList.of("e1", "e2")
    assert nel.to_list() == ["e1", "e2"]
    assert NonEmptyList.of("e1", None).size() == 2


def test_of_rejects_empty_and_all_none() -> None:
    with pytest.raises(IllegalArgumentError):
        NonEmptyList.of()
    with pytest.raises(IllegalArgumentError):
        NonEmptyList.of(None)
    with pytest.raises(IllegalArgumentError):
        NonEmptyList.of(None, None)


def test_constructor() -> None:
    assert NonEmptyList(1).to_list() == [1]
    assert NonEmptyList(1, FList.of(2)).to_list() == [1, 2]
    assert NonEmptyList(None).size() == 1
    with pytest.raises(IllegalArgumentError):
        NonEmptyList(1, [2])


def test_immutable() -> None:
    with pytest.raises(AttributeError):
        NonEmptyList.of(1)._head = 2


# ═════════════════════════════════════════════════════════════════════════════
# Access
# ═════════════════════════════════════════════════════════════════════════════


def test_get() -> None:
    nel = NonEmptyList.of("a", "b", "c")
    assert nel.get(0) == "a"
    assert nel.get(2) == "c"
    assert nel[1] == "b"
    assert len(nel) == 3


def test_get_out_of_bounds_reports_full_size() -> None:
    nel = NonEmptyList.of("a", "b", "c")
    with pytest.raises(IndexOutOfBoundsError, match="Index: 3, Size: 3"):
        nel.get(3)
    with pytest.raises(IndexOutOfBoundsError, match="Index: -1, Size: 3"):
        nel.get(-1)


# ═════════════════════════════════════════════════════════════════════════════
# Transformations
# ═════════════════════════════════════════════════════════════════════════════


def test_map() -> None:
    nel = NonEmptyList.of(1, 2, 3)
    assert nel.map(lambda x: x * 2) == NonEmptyList.of(2, 4, 6)
    assert nel.map(lambda x: x) == nel
    with pytest.raises(ArgumentNullError):
        nel.map(None)


def test_flat_map() -> None:
    nel = NonEmptyList.of(1, 2)
    result = nel.flat_map(lambda x: NonEmptyList.of(x, x * 10))
    assert result == NonEmptyList.of(1, 10, 2, 20)


def test_to_flist() -> None:
    assert NonEmptyList.of(1, 2).to_flist() == FList.of(1, 2)


# ═════════════════════════════════════════════════════════════════════════════
# Dunder Methods
# ═════════════════════════════════════════════════════════════════════════════


def test_equality_and_hash() -> None:
    assert NonEmptyList.of(1, 2) == NonEmptyList.from_iterable([1, 2])
    assert NonEmptyList.of(1, 2) != NonEmptyList.of(1)
    assert hash(NonEmptyList.of(1, 2)) == hash(NonEmptyList.of(1, 2))
    assert NonEmptyList.of(1) != FList.of(1)


def test_repr() -> None:
    assert repr(NonEmptyList.of("e1", "e2")) == "NonEmptyList('e1', 'e2')"


def test_pattern_matching() -> None:
    match NonEmptyList.of(1, 2, 3):
        case NonEmptyList(head, tail):
            assert head == 1
            assert tail == FList.of(2, 3)
        case _:
            pytest.fail("NonEmptyList did not match")


def test_pickle() -> None:
    nel = NonEmptyList.of("a", "b")
    assert pickle.loads(pickle.dumps(nel)) == nel
