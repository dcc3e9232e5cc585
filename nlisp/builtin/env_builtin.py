"""Built-in functions for the nlisp runtime environment.

This module defines arithmetic, comparison, sequence operations, atoms,
string building and printing, and `root_environment()`, which returns a new
root frame holding these builtins and the special forms.
"""
from __future__ import annotations

import sys

from nlisp import LispValue
from nlisp.builtin.arity import assert_arity, assert_arity_at_least
from nlisp.errors import DivisionByZero, IncorrectType, IntegerOverflow
from nlisp.evaluation.apply import apply_values
from nlisp.evaluation.evaluator import evaluate
from nlisp.evaluation.special_forms import SPECIAL_FORMS
from nlisp.printer import print_value
from nlisp.types.environment import Environment
from nlisp.types.function import BuiltinOnExpressions, BuiltinOnValues
from nlisp.types.nil import Nil
from nlisp.types.values import Atom, LispList, Vector, fits_integer, to_seq, is_truthy, values_equal


def _integers(name: str, args: list[LispValue]) -> tuple[int, int]:
    """Unpack exactly two Integer operands; booleans are not integers."""
    assert_arity(args, 2)
    a, b = args
    if type(a) is not int or type(b) is not int:
        raise IncorrectType(f"{name} expects two integers")
    return a, b


def _checked(name: str, result: int) -> int:
    if not fits_integer(result):
        raise IntegerOverflow(name)
    return result


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[LispValue]) -> int:
    a, b = _integers("+", args)
    return _checked("+", a + b)


def sub(env: Environment, args: list[LispValue]) -> int:
    a, b = _integers("-", args)
    return _checked("-", a - b)


def mul(env: Environment, args: list[LispValue]) -> int:
    a, b = _integers("*", args)
    return _checked("*", a * b)


def div(env: Environment, args: list[LispValue]) -> int:
    """Integer division truncating toward zero; dividing by zero is an error."""
    a, b = _integers("/", args)
    if b == 0:
        raise DivisionByZero()
    q = abs(a) // abs(b)
    return _checked("/", q if (a < 0) == (b < 0) else -q)


# -------------------------------
# Comparison
# -------------------------------
def equals(env: Environment, args: list[LispValue]) -> bool:
    """Structural equality; lists and vectors with equal elements are equal."""
    assert_arity(args, 2)
    return values_equal(args[0], args[1])


def lt(env: Environment, args: list[LispValue]) -> bool:
    a, b = _integers("<", args)
    return a < b


def lte(env: Environment, args: list[LispValue]) -> bool:
    a, b = _integers("<=", args)
    return a <= b


def gt(env: Environment, args: list[LispValue]) -> bool:
    a, b = _integers(">", args)
    return a > b


def gte(env: Environment, args: list[LispValue]) -> bool:
    a, b = _integers(">=", args)
    return a >= b


def logical_not(env: Environment, args: list[LispValue]) -> bool:
    assert_arity(args, 1)
    return not is_truthy(args[0])


# -------------------------------
# Sequences
# -------------------------------
def list_builtin(env: Environment, args: list[LispValue]) -> LispList:
    return LispList(args)


def is_list(env: Environment, args: list[LispValue]) -> bool:
    assert_arity(args, 1)
    return isinstance(args[0], LispList)


def vector_builtin(env: Environment, args: list[LispValue]) -> Vector:
    return Vector(args)


def is_vector(env: Environment, args: list[LispValue]) -> bool:
    assert_arity(args, 1)
    return isinstance(args[0], Vector)


def is_empty(env: Environment, args: list[LispValue]) -> bool:
    """(empty? x): nil counts as an empty sequence here."""
    assert_arity(args, 1)
    return len(to_seq(args[0])) == 0


def count(env: Environment, args: list[LispValue]) -> int:
    assert_arity(args, 1)
    return len(to_seq(args[0]))


def is_nil(env: Environment, args: list[LispValue]) -> bool:
    assert_arity(args, 1)
    return args[0] is Nil


# -------------------------------
# Atoms
# -------------------------------
def atom(env: Environment, args: list[LispValue]) -> Atom:
    assert_arity(args, 1)
    return Atom(args[0])


def is_atom(env: Environment, args: list[LispValue]) -> bool:
    assert_arity(args, 1)
    return isinstance(args[0], Atom)


def _expect_atom(name: str, value: LispValue) -> Atom:
    if not isinstance(value, Atom):
        raise IncorrectType(f"{name} expects an atom")
    return value


def deref(env: Environment, args: list[LispValue]) -> LispValue:
    assert_arity(args, 1)
    return _expect_atom("deref", args[0]).value


def reset(env: Environment, args: list[LispValue]) -> LispValue:
    """(reset! a v): store v in the atom and return it."""
    assert_arity(args, 2)
    cell = _expect_atom("reset!", args[0])
    cell.value = args[1]
    return cell.value


def swap(env: Environment, args: list[LispValue]) -> LispValue:
    """(swap! a f x ...): store (f @a x ...) in the atom and return it."""
    assert_arity_at_least(args, 2)
    cell = _expect_atom("swap!", args[0])
    fn, extra = args[1], args[2:]
    cell.value = apply_values(fn, [cell.value, *extra], env, evaluate)
    return cell.value


# -------------------------------
# Strings and output
# -------------------------------
def pr_str(env: Environment, args: list[LispValue]) -> str:
    """Readable representations joined by spaces."""
    return " ".join(print_value(a, readably=True) for a in args)


def str_builtin(env: Environment, args: list[LispValue]) -> str:
    """Display representations concatenated."""
    return "".join(print_value(a, readably=False) for a in args)


def prn(env: Environment, args: list[LispValue]) -> LispValue:
    assert_arity(args, 1)
    sys.stdout.write(print_value(args[0], readably=True) + "\n")
    return Nil


def println(env: Environment, args: list[LispValue]) -> LispValue:
    assert_arity(args, 1)
    sys.stdout.write(print_value(args[0], readably=False) + "\n")
    return Nil


BUILTINS = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "=": equals,
    "<": lt,
    "<=": lte,
    ">": gt,
    ">=": gte,
    "not": logical_not,
    "list": list_builtin,
    "list?": is_list,
    "vector": vector_builtin,
    "vector?": is_vector,
    "empty?": is_empty,
    "count": count,
    "nil?": is_nil,
    "atom": atom,
    "atom?": is_atom,
    "deref": deref,
    "reset!": reset,
    "swap!": swap,
    "pr-str": pr_str,
    "str": str_builtin,
    "prn": prn,
    "println": println,
}


def register(env: Environment) -> None:
    """Register all builtin functions and special forms into the given environment."""
    env.update({name: BuiltinOnValues(name, fn) for name, fn in BUILTINS.items()})
    env.update({name: BuiltinOnExpressions(name, fn) for name, fn in SPECIAL_FORMS.items()})


def root_environment() -> Environment:
    """Return a new, fully populated root frame."""
    env = Environment()
    register(env)
    return env
