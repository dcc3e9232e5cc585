"""Runtime environment for nlisp.

An Environment is one frame of bindings from symbol names to evaluated values,
plus an optional `outer` link. Frames are shared by reference: closures and
child frames hold the frame object itself, so a `def!` into a frame is seen by
every holder, while bindings made in a child never reach its parent.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional, Union

from nlisp import LispValue
from nlisp.errors import UnboundSymbol
from nlisp.types.symbol import Symbol

Name = Union[str, Symbol]


def _key(name: Name) -> str:
    return name.id if isinstance(name, Symbol) else name


class Environment:
    """Hierarchical mapping from names to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Name, value: LispValue) -> None:
        """Bind `name` to `value` in this frame only."""
        self.vars[_key(name)] = value

    def update(self, mapping: dict[str, LispValue]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def child(self) -> Environment:
        """Allocate a new frame whose parent is this frame."""
        return Environment(outer=self)

    def find(self, name: Name) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        key = _key(name)
        env: Optional[Environment] = self
        while env is not None:
            if key in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Name) -> Optional[LispValue]:
        """Return the value bound to `name`, or None if no frame binds it."""
        env = self.find(name)
        if env is None:
            return None
        return env.vars[_key(name)]

    def lookup_or_error(self, name: Name) -> LispValue:
        """Like lookup, but an unbound name raises UnboundSymbol."""
        env = self.find(name)
        if env is None:
            raise UnboundSymbol(_key(name))
        return env.vars[_key(name)]

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def frames(self) -> Iterator[Environment]:
        env: Optional[Environment] = self
        while env is not None:
            yield env
            env = env.outer

    def __contains__(self, name: Name) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging; frames are listed innermost first."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            for env in self.frames():
                with StringIO() as env_buf:
                    env._write_vars(env_buf)
                    chain.append(env_buf.getvalue())
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
