"""Error taxonomy for nlisp.

Every failure is an exception derived from NlispError. Reader failures are
ParseError subclasses; evaluation failures are NlispRuntimeError subclasses.
Errors keep their payload as attributes and compare equal by type and payload,
so callers can match on exactly what went wrong.
"""

from __future__ import annotations

from typing import Any


class NlispError(Exception):
    """ Base class for all nlisp errors"""

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash(type(self))


# ---------------------------------------------------------------------------
# Reader errors
# ---------------------------------------------------------------------------

class ParseError(NlispError):
    """ Raised by the reader; never partially evaluated"""

    def __str__(self) -> str:
        return f"parse error: `{self.describe()}`"

    def describe(self) -> str:
        return "the input string was invalid"


class EmptyExpr(ParseError):
    """ Raised when an expression was expected but the input was empty"""

    def describe(self) -> str:
        return "expected an expression but got an empty string"


class IntegerParseError(ParseError):
    """ Raised when an integer literal does not fit in a signed 64-bit integer"""

    def __init__(self, token: str):
        super().__init__(token)
        self.token = token

    def describe(self) -> str:
        return f"invalid integer: `{self.token}`"


class UnbalancedParens(ParseError):
    def describe(self) -> str:
        return "parentheses were unbalanced in expression"


class IntegerContainsNonNumericChar(ParseError):
    def __init__(self, char: str):
        super().__init__(char)
        self.char = char

    def describe(self) -> str:
        return f"integer contained a non-numeric character: `{self.char}`"


class InvalidString(ParseError):
    def describe(self) -> str:
        return "string was invalid"


class StringInvalidBackslash(ParseError):
    def describe(self) -> str:
        return "invalid backslash character in string"


class HashmapMissingValue(ParseError):
    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def describe(self) -> str:
        return f"hashmap is missing a value for key `{self.key}`"


class InvalidExpr(ParseError):
    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

    def describe(self) -> str:
        return f"the input string was invalid: {self.detail}"


# ---------------------------------------------------------------------------
# Evaluation errors
# ---------------------------------------------------------------------------

class NlispRuntimeError(NlispError):
    """ Base class for errors raised while evaluating an expression"""


class UnboundSymbol(NlispRuntimeError):
    """ Raised when symbol lookup exhausts the environment chain"""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"attempted to access an unbound symbol: `{self.name}`"


class CannotApplyNonFunction(NlispRuntimeError):
    """ Raised when the head of a list does not evaluate to a function"""

    def __init__(self, value: Any = None):
        super().__init__(value)
        self.value = value

    def __str__(self) -> str:
        if self.value is None:
            return "cannot apply a non-function"
        from nlisp.printer import print_value
        return f"cannot apply a non-function: `{print_value(self.value)}`"


class WrongNumberOfArgs(NlispRuntimeError):
    """ Raised when a builtin, special form or closure gets the wrong arity"""

    def __init__(self, given: int, expected: int):
        super().__init__(given, expected)
        self.given = given
        self.expected = expected

    def __str__(self) -> str:
        return (
            f"function was applied with the wrong number of arguments: "
            f"given {self.given}, expected {self.expected}"
        )


class IncorrectType(NlispRuntimeError):
    """ Raised when an operand has the wrong runtime type"""

    def __init__(self, detail: str = "operand had an incorrect type"):
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"incorrect type: {self.detail}"


class NotASeq(IncorrectType):
    """ Raised when a value cannot be viewed as a sequence"""

    def __init__(self, value: Any = None):
        from nlisp.printer import print_value
        super().__init__(f"`{print_value(value)}` is not a sequence")
        self.value = value


class ExpectedToBindSymbol(NlispRuntimeError):
    """ Raised when a binding position holds something other than a symbol"""

    def __init__(self, detail: str = "expected a symbol to bind"):
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return self.detail


class InvalidParameterList(ExpectedToBindSymbol):
    """ Raised when a fn* parameter list is malformed"""


class UnmatchedLetBindingID(NlispRuntimeError):
    """ Raised when let* bindings have an odd number of elements"""

    def __init__(self, name: str = ""):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"let* binding `{self.name}` has no value"


class HashError(NlispRuntimeError):
    """ Raised when a non-hashable value is used as a map key"""

    def __init__(self, value: Any):
        super().__init__(value)
        self.value = value

    def __eq__(self, other: object) -> bool:
        # List/Vector values are tuples, so compare the payload structurally
        from nlisp.types.values import values_equal
        return type(self) is type(other) and values_equal(self.value, other.value)

    __hash__ = NlispError.__hash__

    def __str__(self) -> str:
        from nlisp.printer import print_value
        return f"attempted to hash an unhashable value: `{print_value(self.value)}`"


class DivisionByZero(NlispRuntimeError):
    def __init__(self):
        super().__init__()

    def __str__(self) -> str:
        return "attempted to divide by zero"


class IntegerOverflow(NlispRuntimeError):
    """ Raised when an arithmetic result leaves the signed 64-bit range"""

    def __init__(self, op: str):
        super().__init__(op)
        self.op = op

    def __str__(self) -> str:
        return f"integer overflow in `{self.op}`"


class UnimplementedForm(NlispRuntimeError):
    """ Raised for syntax the evaluator does not implement (quote forms)"""

    def __init__(self, form: str):
        super().__init__(form)
        self.form = form

    def __str__(self) -> str:
        return f"evaluation of `{self.form}` is not implemented"
