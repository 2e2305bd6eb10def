"""
Error types for exprcalc lexing and parsing.
"""

from dataclasses import dataclass
from typing import Optional


class ExprCalcError(Exception):
    """Base exception for all exprcalc errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.message}\n{self.context.format()}"
        return self.message

    @property
    def position(self) -> int | None:
        """0-based offset of the offending character, if known."""
        if self.context:
            return self.context.position
        return None


class LexError(ExprCalcError):
    """
    Raised when expression text cannot be split into tokens.

    Examples:
    - A character outside digits, space and ``+ - * / ^ ( )``
    - A number literal that does not convert to a float (``1.2.3``)
    """

    pass


class ParseError(ExprCalcError):
    """
    Raised when a token stream does not form an expression.

    Examples:
    - An operator or ``)`` where a number or group is expected
    - A parenthesised group left open at end of input
    - Trailing tokens after a complete expression (strict mode)
    """

    pass


@dataclass
class ErrorContext:
    """
    Location of an error inside the expression text.

    Attributes:
        source: The full expression being processed
        position: 0-based character offset of the error
    """

    source: str
    position: int

    @property
    def column(self) -> int:
        """1-based column number."""
        return self.position + 1

    def format(self) -> str:
        """
        Format the expression with a marker under the error column.

        Returns:
            Two lines like::

                   1 | 2 $ 3
                         ^
        """
        prefix = "   1 | "
        marker = " " * (len(prefix) + self.position) + "^"
        return f"{prefix}{self.source}\n{marker}"


def make_lex_error(message: str, source: str, position: int) -> LexError:
    """
    Helper to create a LexError with context.

    Args:
        message: Error description
        source: Expression text
        position: 0-based offset of the offending character

    Returns:
        LexError with context attached
    """
    return LexError(message, ErrorContext(source=source, position=position))


def make_parse_error(message: str, source: str, position: int) -> ParseError:
    """
    Helper to create a ParseError with context.

    Args:
        message: Error description
        source: Expression text
        position: 0-based offset of the offending token

    Returns:
        ParseError with context attached
    """
    return ParseError(message, ErrorContext(source=source, position=position))
