from nlisp import EvaluatorFn
from nlisp import Expr, LispValue
from nlisp.builtin.arity import assert_arity
from nlisp.errors import ExpectedToBindSymbol, IncorrectType, UnmatchedLetBindingID
from nlisp.printer import print_expr
from nlisp.types.environment import Environment
from nlisp.types.expr import ListExpr, VectorExpr
from nlisp.types.symbol import Symbol


def let_form(
    tail: list[Expr],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (let* (name expr name expr ...) body)
    Each binding is evaluated in the frame being built, so later bindings
    see earlier ones. The new frame is discarded with the result.
    """
    assert_arity(tail, 2)

    bindings, body = tail
    if not isinstance(bindings, (ListExpr, VectorExpr)):
        raise IncorrectType(f"let* bindings must be a list or vector, got `{print_expr(bindings)}`")

    items = bindings.items
    if len(items) % 2 != 0:
        raise UnmatchedLetBindingID(print_expr(items[-1]))

    let_env = env.child()
    for name, value_expr in zip(items[::2], items[1::2]):
        if not isinstance(name, Symbol):
            raise ExpectedToBindSymbol(f"let* expected a symbol to bind, got `{print_expr(name)}`")
        let_env.define(name, evaluate_fn(value_expr, let_env))

    return evaluate_fn(body, let_env)
