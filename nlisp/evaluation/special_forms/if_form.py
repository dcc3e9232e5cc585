from nlisp import EvaluatorFn
from nlisp import Expr, LispValue
from nlisp.builtin.arity import assert_arity_between
from nlisp.types.environment import Environment
from nlisp.types.nil import Nil
from nlisp.types.values import is_truthy


def if_form(
    tail: list[Expr],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    assert_arity_between(tail, 2, 3)

    cond = evaluate_fn(tail[0], env)
    # Only false and nil are falsy; 0 and empty sequences are true
    if is_truthy(cond):
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return Nil
