"""Core exprcalc functionality: lexer, parser, expression tree, evaluator."""

from .errors import ErrorContext, ExprCalcError, LexError, ParseError
from .evaluator import evaluate, evaluate_node
from .lexer import Lexer, Precedence, Token, TokenKind, tokenize
from .nodes import Add, Divide, Multiply, Negative, Node, Number, Power, Subtract
from .parser import Parser, parse_expr

__all__ = [
    "ExprCalcError",
    "LexError",
    "ParseError",
    "ErrorContext",
    "Lexer",
    "Token",
    "TokenKind",
    "Precedence",
    "tokenize",
    "Parser",
    "parse_expr",
    "evaluate",
    "evaluate_node",
    "Node",
    "Number",
    "Add",
    "Subtract",
    "Multiply",
    "Divide",
    "Power",
    "Negative",
]
