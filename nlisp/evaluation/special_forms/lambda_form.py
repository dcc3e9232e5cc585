import logging

from nlisp import EvaluatorFn
from nlisp import Expr, LispValue
from nlisp.builtin.arity import assert_arity
from nlisp.errors import InvalidParameterList
from nlisp.printer import print_expr
from nlisp.types.bind import parse_parameter_list
from nlisp.types.environment import Environment
from nlisp.types.expr import ListExpr, VectorExpr
from nlisp.types.function import Closure

logger = logging.getLogger(__name__)


def lambda_form(
    tail: list[Expr],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (fn* (a b & rest) body)
    The closure keeps a reference to `env`, not a copy.
    """
    assert_arity(tail, 2)

    params, body = tail
    if not isinstance(params, (ListExpr, VectorExpr)):
        raise InvalidParameterList(f"fn* parameters must be a list or vector, got `{print_expr(params)}`")

    positional, variadic = parse_parameter_list(params.items)
    closure = Closure(env, positional, variadic, body)
    logger.debug("created %s", closure)
    return closure
