from fractions import Fraction
import math

import pytest
from hypothesis import given, strategies as st

from nlisp.builtin.env_builtin import root_environment
from nlisp.errors import DivisionByZero, IntegerOverflow
from nlisp.evaluation.apply import apply_values
from nlisp.evaluation.evaluator import evaluate
from nlisp.printer import print_value
from nlisp.reader.parser import parse_text_to_expression
from nlisp.types.values import INT_MAX, INT_MIN, LispList, Vector, fits_integer, values_equal

ENV = root_environment()

ints = st.integers(min_value=INT_MIN, max_value=INT_MAX)


def call(name, *args):
    return apply_values(ENV.lookup(name), list(args), ENV, evaluate)


def check_op(name, expected, a, b):
    if fits_integer(expected):
        assert call(name, a, b) == expected
    else:
        with pytest.raises(IntegerOverflow):
            call(name, a, b)


@given(ints, ints)
def test_arithmetic_matches_python(a, b):
    check_op("+", a + b, a, b)
    check_op("-", a - b, a, b)
    check_op("*", a * b, a, b)
    assert call("<", a, b) is (a < b)
    assert call(">=", a, b) is (a >= b)


@given(ints, ints.filter(lambda n: n != 0))
def test_division_truncates_toward_zero(a, b):
    check_op("/", math.trunc(Fraction(a, b)), a, b)


@given(ints)
def test_division_by_zero_always_fails(a):
    try:
        call("/", a, 0)
    except DivisionByZero:
        pass
    else:
        raise AssertionError("expected DivisionByZero")


@given(st.lists(ints, max_size=8))
def test_list_and_vector_with_same_elements_are_equal(xs):
    assert LispList(xs) == Vector(xs)
    assert call("=", LispList(xs), Vector(xs)) is True
    assert call("count", Vector(xs)) == len(xs)


@given(st.lists(ints, max_size=8), st.lists(ints, max_size=8))
def test_sequence_equality_is_elementwise(xs, ys):
    assert values_equal(LispList(xs), Vector(ys)) is (xs == ys)


@given(st.text())
def test_readable_strings_read_back(s):
    assert parse_text_to_expression(print_value(s, readably=True)) == s


@given(st.recursive(
    ints | st.booleans(),
    lambda children: st.lists(children, max_size=4).map(Vector),
    max_leaves=12,
))
def test_printed_data_evaluates_to_equal_value(value):
    # Vectors of integers and booleans are self-describing
    assert values_equal(evaluate(parse_text_to_expression(print_value(value)), ENV), value)
