from nlisp import EvaluatorFn
from nlisp import Expr, LispValue
from nlisp.errors import UnimplementedForm
from nlisp.types.environment import Environment


def _unimplemented(form: str):
    def special_form(tail: list[Expr], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
        raise UnimplementedForm(form)

    special_form.__name__ = f"{form.replace('-', '_')}_form"
    return special_form


# Parsed but not evaluated: the reader produces these for ' ` ~ ~@ and the
# named forms route to the same error.
quote_form = _unimplemented("quote")
quasiquote_form = _unimplemented("quasiquote")
unquote_form = _unimplemented("unquote")
splice_unquote_form = _unimplemented("splice-unquote")
