from nlisp import EvaluatorFn
from nlisp import Expr, LispValue
from nlisp.builtin.arity import assert_arity_at_least
from nlisp.types.environment import Environment


def do_form(
    tail: list[Expr],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    assert_arity_at_least(tail, 1)
    for e in tail[:-1]:
        evaluate_fn(e, env)
    return evaluate_fn(tail[-1], env)
