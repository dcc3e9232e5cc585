"""Registry of special forms for the nlisp evaluator.

Maps names to handlers that receive unevaluated argument syntax. Unlike a
table consulted before lookup, these are installed into the root environment
as BuiltinOnExpressions values, so the evaluator dispatches on the value the
head symbol resolves to.
"""

from nlisp.evaluation.special_forms.define_form import define_form
from nlisp.evaluation.special_forms.do_form import do_form
from nlisp.evaluation.special_forms.if_form import if_form
from nlisp.evaluation.special_forms.lambda_form import lambda_form
from nlisp.evaluation.special_forms.let_form import let_form
from nlisp.evaluation.special_forms.quote_forms import (
    quasiquote_form,
    quote_form,
    splice_unquote_form,
    unquote_form,
)

SPECIAL_FORMS = {
    "if": if_form,
    "do": do_form,
    "def!": define_form,
    "let*": let_form,
    "fn*": lambda_form,
    "quote": quote_form,
    "quasiquote": quasiquote_form,
    "unquote": unquote_form,
    "splice-unquote": splice_unquote_form,
}
