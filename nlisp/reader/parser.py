"""
  nlisp Reader, Lexer and Parser

- Streaming, lazy parsing
- Emits Python primitives for atoms and frozen dataclasses for compound forms:

    - nil          -> Nil
    - true / #t    -> True
    - false / #f   -> False
    - integers     -> int
    - strings      -> str
    - :name        -> Keyword
    - other atoms  -> Symbol
    - ( ... )      -> ListExpr
    - [ ... ]      -> VectorExpr
    - { k v ... }  -> HashMapExpr
    - 'x `x ~x ~@x -> Quote / Quasiquote / Unquote / SpliceUnquote

Commas are whitespace. Comments run from `;` to the end of the line.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from nlisp import Expr
from nlisp.errors import (
    EmptyExpr,
    HashmapMissingValue,
    IntegerContainsNonNumericChar,
    IntegerParseError,
    InvalidExpr,
    InvalidString,
    StringInvalidBackslash,
    UnbalancedParens,
)
from nlisp.types.expr import (
    HashMapExpr,
    ListExpr,
    Quasiquote,
    Quote,
    SpliceUnquote,
    Unquote,
    VectorExpr,
)
from nlisp.printer import print_expr
from nlisp.types.nil import Nil
from nlisp.types.symbol import Keyword, Symbol
from nlisp.types.values import fits_integer


TOKEN_RE = re.compile(
    r"[\s,]*(?:"
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<splice_unquote>~@)"  # ~@
    r"|(?P<unquote>~)"  # ~
    r"|(?P<quote>')"  # '
    r"|(?P<quasiquote>`)"  # `
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbracket>\[)"  # [
    r"|(?P<rbracket>\])"  # ]
    r"|(?P<lbrace>\{)"  # {
    r"|(?P<rbrace>\})"  # }
    r'|(?P<string>"(?:\\.|[^\\"])*"?)'  # double-quoted strings, maybe unterminated
    r"|(?P<atom>[^\s\[\]{}()'\"`~;,]+)"  # symbols, keywords, numbers
    r")",
    re.DOTALL,
)

INTEGER_RE = re.compile(r"-?\d+")

STRING_ESCAPES: dict[str, str] = {
    '"': '"',
    "n": "\n",
    "\\": "\\",
}

CLOSERS = {
    "lparen": "rparen",
    "lbracket": "rbracket",
    "lbrace": "rbrace",
}

QUOTE_TOKENS = {
    "quote": Quote,
    "quasiquote": Quasiquote,
    "unquote": Unquote,
    "splice_unquote": SpliceUnquote,
}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m or m.lastgroup is None:
            # only whitespace and commas remain
            break
        pos = m.end()
        if m.lastgroup == "comment":
            continue
        yield m.lastgroup, m.group(m.lastgroup)


def read_string(token: str) -> str:
    """Decode a string token, including its surrounding quotes."""
    chars = iter(token[1:])
    out: list[str] = []
    for c in chars:
        if c == '"':
            return "".join(out)
        if c == "\\":
            escaped = next(chars, None)
            if escaped not in STRING_ESCAPES:
                raise StringInvalidBackslash()
            out.append(STRING_ESCAPES[escaped])
            continue
        out.append(c)
    raise InvalidString()


def read_atom(token: str) -> Expr:
    if token == "nil":
        return Nil
    if token in ("true", "#t"):
        return True
    if token in ("false", "#f"):
        return False
    if INTEGER_RE.fullmatch(token):
        n = int(token)
        if not fits_integer(n):
            raise IntegerParseError(token)
        return n
    digits = token[1:] if token.startswith("-") else token
    if digits[:1].isdigit():
        bad = next(c for c in digits if not c.isdigit())
        raise IntegerContainsNonNumericChar(bad)
    if token.startswith(":"):
        return Keyword(token)
    return Symbol(token)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> Expr:
        tok_type, tok_val = self.advance()
        if tok_type is None:
            raise EmptyExpr()

        if tok_type == "atom":
            return read_atom(tok_val)

        if tok_type == "string":
            return read_string(tok_val)

        if tok_type in QUOTE_TOKENS:
            if self.peek()[0] is None:
                raise InvalidExpr(f"nothing follows `{tok_val}`")
            return QUOTE_TOKENS[tok_type](self.parse_expr())

        if tok_type in CLOSERS:
            items = self._parse_until(CLOSERS[tok_type])
            if tok_type == "lparen":
                return ListExpr(items)
            if tok_type == "lbracket":
                return VectorExpr(items)
            if len(items) % 2 != 0:
                raise HashmapMissingValue(print_expr(items[-1]))
            return HashMapExpr(tuple(zip(items[::2], items[1::2])))

        # A closing delimiter with no matching opener
        raise UnbalancedParens()

    def _parse_until(self, closer: str) -> tuple[Expr, ...]:
        items = []
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                raise UnbalancedParens()
            if tok_type == closer:
                self.advance()
                return tuple(items)
            if tok_type in ("rparen", "rbracket", "rbrace"):
                raise UnbalancedParens()
            items.append(self.parse_expr())

    def parse_all(self) -> Iterator[Expr]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def parse_text_to_expression(text: str) -> Expr:
    """Read the first expression in `text`; EmptyExpr if there is none."""
    return TokenStream(lex(text)).parse_expr()


def parse_text_to_expressions(text: str) -> list[Expr]:
    """Read every top-level expression in `text`."""
    return list(TokenStream(lex(text)).parse_all())
