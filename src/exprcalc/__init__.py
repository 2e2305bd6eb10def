"""
exprcalc - arithmetic expression evaluator.

Usage:
    from exprcalc import evaluate, parse_expr

    evaluate("1 + 2*3.5 - 4 / 2^2")
    # 7.0

    parse_expr("2^3^2")
    # Power(base=Number(value=2.0), exponent=Power(...))
"""

from __future__ import annotations

from ._version import __version__
from .core.errors import ExprCalcError, LexError, ParseError
from .core.evaluator import evaluate, evaluate_node
from .core.lexer import tokenize
from .core.parser import parse_expr

__all__ = [
    "__version__",
    "ExprCalcError",
    "LexError",
    "ParseError",
    "evaluate",
    "evaluate_node",
    "parse_expr",
    "tokenize",
]
