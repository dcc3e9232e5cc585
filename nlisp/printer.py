"""Printer for nlisp values and syntax.

`print_value(value, readably)` renders runtime values. Readable output quotes
and escapes strings (`pr-str`, `prn`, the REPL); display output writes them raw
(`str`, `println`). `print_expr(expr)` renders parsed syntax back to source.
"""

from __future__ import annotations

from io import StringIO
from typing import Any, Iterable

from nlisp.types.expr import (
    HashMapExpr,
    ListExpr,
    Quasiquote,
    Quote,
    SpliceUnquote,
    Unquote,
    VectorExpr,
)
from nlisp.types.function import BuiltinOnExpressions, BuiltinOnValues, Closure
from nlisp.types.nil import Nil
from nlisp.types.symbol import Keyword, Symbol
from nlisp.types.values import Atom, HashMap, LispList, Vector

ESCAPES = {
    '"': '\\"',
    "\n": "\\n",
    "\\": "\\\\",
}


def escape_string(s: str) -> str:
    return "".join(ESCAPES.get(c, c) for c in s)


def _write_seq(buffer: StringIO, open_delim: str, items: Iterable[str], close_delim: str) -> None:
    buffer.write(open_delim)
    buffer.write(" ".join(items))
    buffer.write(close_delim)


def print_value(value: Any, readably: bool = True) -> str:
    """Render a runtime value as text."""
    if value is Nil:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return f'"{escape_string(value)}"' if readably else value
    if isinstance(value, (Symbol, Keyword)):
        return value.id

    with StringIO() as buffer:
        if isinstance(value, LispList):
            _write_seq(buffer, "(", (print_value(v, readably) for v in value), ")")
        elif isinstance(value, Vector):
            _write_seq(buffer, "[", (print_value(v, readably) for v in value), "]")
        elif isinstance(value, HashMap):
            _write_seq(
                buffer,
                "{",
                (f"{print_value(k, readably)} {print_value(v, readably)}" for k, v in value.items()),
                "}",
            )
        elif isinstance(value, Closure):
            # Bodies are not printed back
            buffer.write("(fn ...)")
        elif isinstance(value, (BuiltinOnValues, BuiltinOnExpressions)):
            buffer.write(f"#<builtin {value.name}>")
        elif isinstance(value, Atom):
            buffer.write(f"(atom {print_value(value.value, readably)})")
        else:
            buffer.write(repr(value))
        return buffer.getvalue()


def print_expr(expr: Any) -> str:
    """Render parsed syntax back to source text."""
    if isinstance(expr, ListExpr):
        return "(" + " ".join(print_expr(e) for e in expr.items) + ")"
    if isinstance(expr, VectorExpr):
        return "[" + " ".join(print_expr(e) for e in expr.items) + "]"
    if isinstance(expr, HashMapExpr):
        return "{" + " ".join(f"{print_expr(k)} {print_expr(v)}" for k, v in expr.pairs) + "}"
    if isinstance(expr, Quote):
        return f"(quote {print_expr(expr.expr)})"
    if isinstance(expr, Quasiquote):
        return f"(quasiquote {print_expr(expr.expr)})"
    if isinstance(expr, Unquote):
        return f"(unquote {print_expr(expr.expr)})"
    if isinstance(expr, SpliceUnquote):
        return f"(splice-unquote {print_expr(expr.expr)})"
    return print_value(expr, readably=True)
