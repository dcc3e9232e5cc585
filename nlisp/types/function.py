"""Function values for nlisp.

There are three shapes of callable value, and the evaluator dispatches on the
shape rather than on the name:

- BuiltinOnValues:      primitive receiving already-evaluated arguments.
- BuiltinOnExpressions: special form receiving unevaluated argument syntax and
                        the caller's environment.
- Closure:              user function created by `fn*`, closing over the
                        environment it was created in.
"""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING, Callable, Optional, Sequence

from nlisp import Expr, EvaluatorFn, LispValue

if TYPE_CHECKING:
    from nlisp.types.environment import Environment


ValuesFn = Callable[["Environment", list[LispValue]], LispValue]
ExpressionsFn = Callable[[list[Expr], "Environment", EvaluatorFn], LispValue]


class FunctionBody:
    """Base of every function value."""

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)


class BuiltinOnValues(FunctionBody):
    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: ValuesFn):
        self.name = name
        self.fn = fn

    def __call__(self, env: Environment, args: list[LispValue]) -> LispValue:
        return self.fn(env, args)

    def __repr__(self) -> str:
        return f"<builtin {self.name}>"


class BuiltinOnExpressions(FunctionBody):
    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: ExpressionsFn):
        self.name = name
        self.fn = fn

    def __call__(
        self, tail: list[Expr], env: Environment, evaluate_fn: EvaluatorFn
    ) -> LispValue:
        return self.fn(tail, env, evaluate_fn)

    def __repr__(self) -> str:
        return f"<special form {self.name}>"


class Closure(FunctionBody):
    """A first-class function with parameter names, body, and captured env."""

    __slots__ = ("env", "params", "variadic", "body")

    def __init__(
        self,
        env: Environment,
        params: Sequence[str],
        variadic: Optional[str],
        body: Expr,
    ):
        # Captured by reference: later def! in `env` is visible to the body
        self.env: Environment = env
        self.params: tuple[str, ...] = tuple(params)
        self.variadic: Optional[str] = variadic
        self.body: Expr = body

    def formals(self) -> list[str]:
        """Parameter list as written, including the `&` marker."""
        names = list(self.params)
        if self.variadic is not None:
            names += ["&", self.variadic]
        return names

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(fn* (")
            buffer.write(" ".join(self.formals()))
            buffer.write(") ...)")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)
