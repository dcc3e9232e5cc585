"""Core evaluator for the nlisp interpreter.

`evaluate(expr, env)` is a structural recursion over the parsed syntax.
Literals evaluate to themselves, symbols are looked up through the
environment chain, vectors and maps evaluate their elements in order, and a
non-empty list applies its evaluated head to the remaining expressions.
"""

from __future__ import annotations

from nlisp import Expr, LispValue
from nlisp.errors import CannotApplyNonFunction, IncorrectType, UnimplementedForm
from nlisp.evaluation.apply import apply
from nlisp.types.environment import Environment
from nlisp.types.expr import QUOTE_FORMS, HashMapExpr, ListExpr, VectorExpr
from nlisp.types.function import FunctionBody
from nlisp.types.nil import Nil
from nlisp.types.symbol import Keyword, Symbol
from nlisp.types.values import Atom, HashMap, LispList, Vector, to_hashable


def evaluate(expr: Expr, env: Environment) -> LispValue:
    """Evaluate one expression against `env`; the first error aborts it."""
    match expr:
        case bool() | int() | str() | Keyword():
            return expr

        case Symbol():
            return env.lookup_or_error(expr)

        case ListExpr(items=()):
            # The empty list is self-quoting
            return LispList()

        case ListExpr(items=(head_expr, *arg_exprs)):
            head = evaluate(head_expr, env)
            if not isinstance(head, FunctionBody):
                raise CannotApplyNonFunction(head)
            return apply(head, arg_exprs, env, evaluate)

        case VectorExpr(items=items):
            return Vector([evaluate(item, env) for item in items])

        case HashMapExpr(pairs=pairs):
            result = HashMap()
            for key_expr, value_expr in pairs:
                key = evaluate(key_expr, env)
                value = evaluate(value_expr, env)
                result[to_hashable(key)] = value
            return result

    if expr is Nil:
        return Nil

    if type(expr) in QUOTE_FORMS:
        # Quoting is parsed but not evaluated yet
        raise UnimplementedForm(QUOTE_FORMS[type(expr)])

    # Values spliced into syntax by embedding code evaluate to themselves
    if isinstance(expr, (FunctionBody, Atom, LispList, Vector, HashMap)):
        return expr

    raise IncorrectType(f"cannot evaluate {expr!r}")
