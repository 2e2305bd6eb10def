"""
Lexer for exprcalc arithmetic expressions.

Produces tokens on demand, one per ``next_token()`` call, reading the
source left to right with one character of lookahead.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import IntEnum, StrEnum, auto

from exprcalc.core.errors import make_lex_error


class Precedence(IntEnum):
    """Operator binding strength, lowest first."""

    DEFAULT = 0
    ADD_SUB = 1
    MUL_DIV = 2
    POWER = 3
    NEGATIVE = 4


class TokenKind(StrEnum):
    """Token types for arithmetic expressions."""

    # Literals
    NUMBER = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    CARET = auto()

    # Punctuation
    LPAREN = auto()
    RPAREN = auto()

    # End of input
    EOF = auto()

    @property
    def precedence(self) -> Precedence:
        """Binding precedence of this token when it follows an operand."""
        return _PRECEDENCE.get(self, Precedence.DEFAULT)


_PRECEDENCE: dict[TokenKind, Precedence] = {
    TokenKind.PLUS: Precedence.ADD_SUB,
    TokenKind.MINUS: Precedence.ADD_SUB,
    TokenKind.STAR: Precedence.MUL_DIV,
    TokenKind.SLASH: Precedence.MUL_DIV,
    TokenKind.CARET: Precedence.POWER,
}

_SINGLE_CHAR: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "^": TokenKind.CARET,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}

_DIGITS = "0123456789"
# Skipped inside a number literal without being collected
_NUMBER_SEPARATORS = "_ "


class Token:
    """A single token from the expression lexer."""

    __slots__ = ("kind", "value", "pos")

    def __init__(self, kind: TokenKind, value: float | None = None, pos: int = 0) -> None:
        self.kind = kind
        self.value = value
        self.pos = pos

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self.kind == other.kind and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.kind, self.value))

    def __repr__(self) -> str:
        if self.kind == TokenKind.NUMBER:
            return f"Token({self.kind}, {self.value!r}, pos={self.pos})"
        return f"Token({self.kind}, pos={self.pos})"


class Lexer:
    """
    On-demand tokenizer.

    Only ASCII space counts as whitespace. Once the input is exhausted
    every further ``next_token()`` call returns an EOF token.
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0

    def peek_char(self) -> str | None:
        """Current character, or None at end of input."""
        if self.pos >= len(self.source):
            return None
        return self.source[self.pos]

    def advance(self) -> str | None:
        """Consume and return the current character."""
        c = self.peek_char()
        if c is not None:
            self.pos += 1
        return c

    def next_token(self) -> Token:
        """Scan and return the next token."""
        while self.peek_char() == " ":
            self.advance()

        start = self.pos
        c = self.advance()

        if c is None:
            return Token(TokenKind.EOF, pos=len(self.source))

        kind = _SINGLE_CHAR.get(c)
        if kind is not None:
            return Token(kind, pos=start)

        if c in _DIGITS:
            return self._read_number(c, start)

        raise make_lex_error(f"invalid character {c!r}", self.source, start)

    def _read_number(self, first: str, start: int) -> Token:
        """Read the rest of a number literal whose first digit is consumed."""
        chars = [first]
        while True:
            c = self.peek_char()
            if c is None:
                break
            if c in _DIGITS or c == ".":
                chars.append(c)
            elif c not in _NUMBER_SEPARATORS:
                break
            self.advance()

        text = "".join(chars)
        try:
            value = float(text)
        except ValueError:
            raise make_lex_error(
                f"invalid number literal {text!r}", self.source, start
            ) from None
        return Token(TokenKind.NUMBER, value, start)

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including EOF."""
        while True:
            tok = self.next_token()
            yield tok
            if tok.kind == TokenKind.EOF:
                return


def tokenize(source: str) -> list[Token]:
    """Tokenize an expression string into a list of tokens, EOF included."""
    return list(Lexer(source))
