"""Runtime value domain for nlisp.

Atoms reuse the plain Python types of the reader (int, str, bool, Symbol,
Keyword, Nil). This module adds the compound values:

- LispList / Vector: immutable tuple subclasses, interchangeable for equality.
- HashMap: dict keyed by hashable values (int, str, Keyword).
- Atom: a mutable cell shared by reference.

It also holds the coercion helpers the evaluator and builtins rely on.
"""

from __future__ import annotations

from typing import Any, Iterable

from nlisp import LispValue
from nlisp.errors import HashError, NotASeq
from nlisp.types.nil import Nil
from nlisp.types.symbol import Keyword, Symbol


class _Sequence(tuple):
    """Common base of List and Vector: equality follows values_equal."""

    __slots__ = ()

    def __new__(cls, items: Iterable[LispValue] = ()):
        return super().__new__(cls, items)

    def __eq__(self, other: object) -> bool:
        return values_equal(self, other)

    def __ne__(self, other: object) -> bool:
        return not values_equal(self, other)

    __hash__ = tuple.__hash__

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(x) for x in self)})"


class LispList(_Sequence):
    __slots__ = ()


class Vector(_Sequence):
    __slots__ = ()


class HashMap(dict):
    """Mapping from hashable values to values, in insertion order."""

    def __eq__(self, other: object) -> bool:
        return values_equal(self, other)

    def __ne__(self, other: object) -> bool:
        return not values_equal(self, other)

    __hash__ = None  # type: ignore[assignment]


class Atom:
    """Mutable reference cell; every holder sees `reset!`/`swap!` updates."""

    __slots__ = ("value",)

    def __init__(self, value: LispValue):
        self.value = value

    def __repr__(self) -> str:
        return f"Atom({self.value!r})"


# Integers are signed 64-bit
INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1


def fits_integer(n: int) -> bool:
    return INT_MIN <= n <= INT_MAX


# ---------------------------------------------------------------------------
# Coercions
# ---------------------------------------------------------------------------

def is_hashable(value: LispValue) -> bool:
    """Only integers, strings and keywords may be map keys."""
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, str, Keyword))


def to_hashable(value: LispValue) -> LispValue:
    if not is_hashable(value):
        raise HashError(value)
    return value


def to_seq(value: LispValue) -> tuple[LispValue, ...]:
    """View a value as an ordered sequence; nil is the empty sequence."""
    if isinstance(value, _Sequence):
        return tuple(value)
    if value is Nil:
        return ()
    raise NotASeq(value)


def is_truthy(value: LispValue) -> bool:
    """Only `false` and `nil` are falsy; 0 and empty sequences are truthy."""
    if value is Nil:
        return False
    if isinstance(value, bool):
        return value
    return True


# ---------------------------------------------------------------------------
# Structural equality
# ---------------------------------------------------------------------------

def values_equal(a: Any, b: Any) -> bool:
    """Deep equality for values, treating List and Vector as interchangeable.

    Nil is only equal to Nil: it is never coerced to an empty sequence here,
    even though `count` and `empty?` treat it as one.
    """
    if a is b:
        return True
    if isinstance(a, _Sequence) and isinstance(b, _Sequence):
        if len(a) != len(b):
            return False
        return all(values_equal(x, y) for x, y in zip(tuple(a), tuple(b)))
    if isinstance(a, HashMap) and isinstance(b, HashMap):
        if a.keys() != b.keys():
            return False
        return all(values_equal(dict.__getitem__(a, k), dict.__getitem__(b, k)) for k in a)
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    if isinstance(a, int) and isinstance(b, int):
        return a == b
    if isinstance(a, str) and isinstance(b, str):
        return a == b
    if isinstance(a, (Symbol, Keyword)) or a is Nil:
        return a == b
    # Functions and atoms only equal themselves
    return False
