from __future__ import annotations

from typing import Optional, Sequence

from nlisp import Expr, LispValue
from nlisp.errors import InvalidParameterList, WrongNumberOfArgs
from nlisp.types.environment import Environment
from nlisp.types.symbol import Symbol
from nlisp.types.values import LispList

VARIADIC_MARKER = "&"


def parse_parameter_list(formals: Sequence[Expr]) -> tuple[list[str], Optional[str]]:
    """
    Split a `fn*` parameter list into positional names and the variadic name.

    Accepted shapes are `(a b c)` and `(a b & rest)`: every entry a Symbol,
    at most one `&`, and the `&` followed by exactly one name which ends the
    list. Anything else raises InvalidParameterList.
    """
    positional: list[str] = []
    variadic: Optional[str] = None
    entries = list(formals)

    while entries:
        formal = entries.pop(0)
        if not isinstance(formal, Symbol):
            raise InvalidParameterList(f"fn* parameter `{formal}` is not a symbol")
        if formal.id != VARIADIC_MARKER:
            positional.append(formal.id)
            continue

        if not entries:
            raise InvalidParameterList("`&` must be followed by a parameter name")
        rest = entries.pop(0)
        if not isinstance(rest, Symbol):
            raise InvalidParameterList(f"fn* parameter `{rest}` is not a symbol")
        if rest.id == VARIADIC_MARKER:
            raise InvalidParameterList("`&` may appear only once in a parameter list")
        if entries:
            raise InvalidParameterList("only one parameter may follow `&`")
        variadic = rest.id

    return positional, variadic


def check_arity(params: Sequence[str], variadic: Optional[str], given: int) -> None:
    """At least len(params) arguments, and exactly that many without `&`."""
    expected = len(params)
    if given < expected or (variadic is None and given != expected):
        raise WrongNumberOfArgs(given=given, expected=expected)


def bind_arguments(
    params: Sequence[str],
    variadic: Optional[str],
    supplied_args: Sequence[LispValue],
    closure_env: Environment,
) -> Environment:
    """
    Single source of truth for closure argument binding.

    Returns a new Environment whose outer is `closure_env` (the definition
    site, never the caller), with positional parameters bound in order and
    the remaining arguments collected into a List under the variadic name.
    """
    check_arity(params, variadic, len(supplied_args))

    local_env = closure_env.child()
    for name, value in zip(params, supplied_args):
        local_env.define(name, value)

    if variadic is not None:
        local_env.define(variadic, LispList(supplied_args[len(params):]))

    return local_env
