"""
Precedence-climbing parser for exprcalc expressions.

Grammar (precedence low to high):
    expr    → term (("+" | "-") term)*
    term    → power (("*" | "/") power)*
    power   → unary ("^" power)?
    unary   → "-" unary | primary
    primary → NUMBER | "(" expr ")" ["(" expr ")"]

A parenthesised group directly followed by another group multiplies the
two: ``(1+2)(3+4)`` is ``(1+2)*(3+4)``.

Tokens are pulled from the lexer one at a time; the parser only ever
holds the current token.
"""

from __future__ import annotations

import logging

from exprcalc.core.errors import make_parse_error
from exprcalc.core.lexer import Lexer, Precedence, Token, TokenKind
from exprcalc.core.nodes import (
    Add,
    BinaryNode,
    Divide,
    Multiply,
    Negative,
    Node,
    Number,
    Power,
    Subtract,
)

logger = logging.getLogger(__name__)

_LEFT_ASSOC: dict[TokenKind, tuple[type[BinaryNode], Precedence]] = {
    TokenKind.PLUS: (Add, Precedence.ADD_SUB),
    TokenKind.MINUS: (Subtract, Precedence.ADD_SUB),
    TokenKind.STAR: (Multiply, Precedence.MUL_DIV),
    TokenKind.SLASH: (Divide, Precedence.MUL_DIV),
}

# "^" parses its right side one level below its own precedence so that a
# following "^" is folded into the exponent.
_POWER_RHS_BOUND = Precedence(Precedence.POWER - 1)


class Parser:
    """Recursive descent parser with one token of lookahead."""

    def __init__(self, source: str | Lexer) -> None:
        self.lexer = source if isinstance(source, Lexer) else Lexer(source)
        self.current: Token = self.lexer.next_token()

    @property
    def source(self) -> str:
        return self.lexer.source

    def advance(self) -> Token:
        tok = self.current
        self.current = self.lexer.next_token()
        return tok

    # -- Grammar rules --

    def parse(self, *, strict: bool = False) -> Node:
        """Parse a complete expression.

        With ``strict`` the whole input must be consumed; otherwise
        anything after a structurally complete expression is never read.
        """
        try:
            node = self.parse_expression(Precedence.DEFAULT)
        except RecursionError:
            raise make_parse_error(
                "expression nested too deeply", self.source, self.lexer.pos
            ) from None
        if strict and self.current.kind != TokenKind.EOF:
            raise make_parse_error(
                f"unexpected trailing token {self._describe(self.current)}",
                self.source,
                self.current.pos,
            )
        return node

    def parse_expression(self, min_prec: Precedence) -> Node:
        """Parse a primary, then fold operators binding tighter than min_prec."""
        left = self.parse_primary()
        while self.current.kind.precedence > min_prec:
            if self.current.kind == TokenKind.EOF:
                break
            left = self.fold_operator(left)
        return left

    def fold_operator(self, left: Node) -> Node:
        """Combine left with the operator at the cursor and its right operand."""
        tok = self.current

        if tok.kind in _LEFT_ASSOC:
            node_type, prec = _LEFT_ASSOC[tok.kind]
            self.advance()
            right = self.parse_expression(prec)
            return node_type(left=left, right=right)

        if tok.kind == TokenKind.CARET:
            self.advance()
            exponent = self.parse_expression(_POWER_RHS_BOUND)
            return Power(base=left, exponent=exponent)

        raise make_parse_error(
            f"unsupported operator {self._describe(tok)}", self.source, tok.pos
        )

    def parse_primary(self) -> Node:
        """NUMBER | '-' operand | '(' expr ')' [group]"""
        tok = self.current

        if tok.kind == TokenKind.NUMBER:
            self.advance()
            assert tok.value is not None
            return Number(value=tok.value)

        if tok.kind == TokenKind.MINUS:
            self.advance()
            operand = self.parse_expression(Precedence.NEGATIVE)
            return Negative(operand=operand)

        if tok.kind == TokenKind.LPAREN:
            self.advance()
            node = self.parse_expression(Precedence.DEFAULT)
            if self.current.kind != TokenKind.RPAREN:
                raise make_parse_error(
                    "missing right parenthesis", self.source, self.current.pos
                )
            self.advance()

            # Implicit multiplication by one adjacent group
            if self.current.kind == TokenKind.LPAREN:
                right = self.parse_expression(Precedence.MUL_DIV)
                node = Multiply(left=node, right=right)
            return node

        raise make_parse_error(
            f"unsupported token {self._describe(tok)}", self.source, tok.pos
        )

    @staticmethod
    def _describe(tok: Token) -> str:
        if tok.kind == TokenKind.EOF:
            return "end of input"
        if tok.kind == TokenKind.NUMBER:
            return f"number {tok.value!r}"
        return repr(_TOKEN_TEXT.get(tok.kind, str(tok.kind)))


_TOKEN_TEXT: dict[TokenKind, str] = {
    TokenKind.PLUS: "+",
    TokenKind.MINUS: "-",
    TokenKind.STAR: "*",
    TokenKind.SLASH: "/",
    TokenKind.CARET: "^",
    TokenKind.LPAREN: "(",
    TokenKind.RPAREN: ")",
}


def parse_expr(source: str, *, strict: bool = False) -> Node:
    """Parse an expression string into a tree.

    Args:
        source: Expression string (e.g., "1 + 2*3.5")
        strict: Reject tokens left over after the expression

    Returns:
        Parsed expression tree.

    Raises:
        ParseError: If the tokens do not form an expression.
        LexError: If the text contains an invalid character or number.
    """
    node = Parser(source).parse(strict=strict)
    logger.debug("Parsed %r -> %s", source, node)
    return node
