"""Arity checks shared by builtins and special forms."""

from __future__ import annotations

from typing import Sized

from nlisp.errors import WrongNumberOfArgs


def assert_arity(args: Sized, expected: int) -> None:
    if len(args) != expected:
        raise WrongNumberOfArgs(given=len(args), expected=expected)


def assert_arity_between(args: Sized, low: int, high: int) -> None:
    """Accept low..high arguments inclusive; report `low` when too few."""
    given = len(args)
    if given < low:
        raise WrongNumberOfArgs(given=given, expected=low)
    if given > high:
        raise WrongNumberOfArgs(given=given, expected=high)


def assert_arity_at_least(args: Sized, minimum: int) -> None:
    if len(args) < minimum:
        raise WrongNumberOfArgs(given=len(args), expected=minimum)
