import logging

from nlisp import EvaluatorFn
from nlisp import Expr, LispValue
from nlisp.builtin.arity import assert_arity
from nlisp.errors import ExpectedToBindSymbol
from nlisp.printer import print_expr
from nlisp.types.environment import Environment
from nlisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def define_form(
    tail: list[Expr],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def! name value)
    Binds in the caller's own frame and returns the bound value.
    """
    assert_arity(tail, 2)

    name, val_expr = tail
    value = evaluate_fn(val_expr, env)
    if not isinstance(name, Symbol):
        raise ExpectedToBindSymbol(f"def! expected a symbol to bind, got `{print_expr(name)}`")
    env.define(name, value)
    logger.debug("def! %s", name)
    return value
