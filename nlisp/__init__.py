# Core type aliases for nlisp's data model.
# Atoms are plain Python types (int, str, bool) plus Symbol, Keyword and Nil.
# Compound syntax lives in nlisp.types.expr, compound runtime values in
# nlisp.types.values.
#
# Naming guidance:
# - Expr:      Use in reader/printer/special-form code to denote parsed syntax.
# - LispValue: Use in evaluator/builtin code to denote evaluated values.
# Both aliases resolve to `Any`; the concrete shapes are documented on the
# classes themselves.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Parsed syntax alias
Expr = Any

# Evaluator function type: evaluate(expr, env) passed into special forms
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
