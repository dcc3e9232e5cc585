"""Parsed syntax produced by the reader.

Atoms are plain Python values:

    - integers -> int
    - strings  -> str
    - booleans -> bool
    - nil      -> Nil
    - symbols  -> Symbol
    - keywords -> Keyword

Compound forms are frozen dataclasses over tuples, so a parsed program is
immutable and compares structurally.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ListExpr:
    items: tuple[Any, ...] = ()

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class VectorExpr:
    items: tuple[Any, ...] = ()

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class HashMapExpr:
    pairs: tuple[tuple[Any, Any], ...] = ()

    def __len__(self) -> int:
        return len(self.pairs)


@dataclass(frozen=True)
class Quote:
    expr: Any


@dataclass(frozen=True)
class Quasiquote:
    expr: Any


@dataclass(frozen=True)
class Unquote:
    expr: Any


@dataclass(frozen=True)
class SpliceUnquote:
    expr: Any


QUOTE_FORMS: dict[type, str] = {
    Quote: "quote",
    Quasiquote: "quasiquote",
    Unquote: "unquote",
    SpliceUnquote: "splice-unquote",
}


def list_expr(*items: Any) -> ListExpr:
    """Convenience constructor used by tests and embedding code."""
    return ListExpr(tuple(items))


def vector_expr(*items: Any) -> VectorExpr:
    return VectorExpr(tuple(items))
