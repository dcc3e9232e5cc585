"""Application engine for nlisp.

This module centralizes function application for the interpreter:
- Special forms (BuiltinOnExpressions) receive the raw argument syntax and the
  caller's environment and decide for themselves what to evaluate.
- Builtins (BuiltinOnValues) receive the arguments evaluated left to right.
- Closures check arity, evaluate arguments in the caller's environment, and
  run their body in a child of the environment captured at creation time.

Keeping this logic in one place prevents duplication between the evaluator
and builtins that call back into user functions (`swap!`).
"""

from __future__ import annotations

import logging
from typing import Sequence

from nlisp import Expr, EvaluatorFn, LispValue
from nlisp.errors import CannotApplyNonFunction, IncorrectType
from nlisp.types.bind import bind_arguments, check_arity
from nlisp.types.environment import Environment
from nlisp.types.function import (
    BuiltinOnExpressions,
    BuiltinOnValues,
    Closure,
    FunctionBody,
)

logger = logging.getLogger(__name__)


def apply_closure(
    fn: Closure,
    args: Sequence[LispValue],
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Closure to already-evaluated argument values.

    Arguments are bound into a fresh child of the closure's captured
    environment, so the body sees its definition site, not its call site.
    """
    new_env = bind_arguments(fn.params, fn.variadic, args, fn.env)
    logger.debug("calling %s with %d argument(s)", fn, len(args))
    return evaluate_fn(fn.body, new_env)


def apply(
    head: LispValue,
    arg_exprs: Sequence[Expr],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a function value to unevaluated argument expressions.

    - BuiltinOnExpressions: invoked directly with the expressions and `env`.
    - BuiltinOnValues: every argument is evaluated left to right in `env`.
    - Closure: arity is checked first, then arguments are evaluated in `env`
      (the caller's environment) and bound positionally; extra arguments are
      collected into a List for the variadic parameter.
    """
    if isinstance(head, BuiltinOnExpressions):
        return head(list(arg_exprs), env, evaluate_fn)

    if isinstance(head, BuiltinOnValues):
        args = [evaluate_fn(arg, env) for arg in arg_exprs]
        return head(env, args)

    if isinstance(head, Closure):
        check_arity(head.params, head.variadic, len(arg_exprs))
        args = [evaluate_fn(arg, env) for arg in arg_exprs]
        return apply_closure(head, args, evaluate_fn)

    raise CannotApplyNonFunction(head)


def apply_values(
    head: LispValue,
    args: Sequence[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a function value to argument values that are already evaluated.

    Special forms need syntax rather than values, so they cannot be applied
    this way.
    """
    if isinstance(head, BuiltinOnValues):
        return head(env, list(args))
    if isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn)
    if isinstance(head, FunctionBody):
        raise IncorrectType(f"special form {head.name} cannot be applied to values")
    raise CannotApplyNonFunction(head)
