from nlisp.evaluation.evaluator import evaluate
from nlisp.evaluation.apply import apply, apply_values

__all__ = ["evaluate", "apply", "apply_values"]
