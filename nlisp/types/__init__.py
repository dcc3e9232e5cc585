from nlisp.types.nil import Nil, NilType
from nlisp.types.symbol import Symbol, Keyword
from nlisp.types.values import LispList, Vector, HashMap, Atom
from nlisp.types.function import FunctionBody, BuiltinOnValues, BuiltinOnExpressions, Closure
from nlisp.types.environment import Environment

__all__ = [
    "Nil",
    "NilType",
    "Symbol",
    "Keyword",
    "LispList",
    "Vector",
    "HashMap",
    "Atom",
    "FunctionBody",
    "BuiltinOnValues",
    "BuiltinOnExpressions",
    "Closure",
    "Environment",
]
