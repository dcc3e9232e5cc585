from __future__ import annotations
import sys


class Symbol:
    __slots__ = ("id",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.id = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return type(other) is Symbol and self.id == other.id

    def __hash__(self) -> int:
        return hash(("symbol", self.id))

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id


class Keyword:
    """A self-evaluating name such as `:foo`; the id keeps the leading colon."""

    __slots__ = ("id",)

    def __init__(self, name: str):
        if not name.startswith(":"):
            name = ":" + name
        self.id = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return type(other) is Keyword and self.id == other.id

    def __hash__(self) -> int:
        return hash(("keyword", self.id))

    def __repr__(self):
        return f"Keyword({self.id!r})"

    def __str__(self):
        return self.id
