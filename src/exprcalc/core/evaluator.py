"""
Expression evaluator for exprcalc.

Walks a parsed tree post-order and returns an IEEE double. Evaluation
never fails: division by zero, overflow and undefined powers produce
infinities or NaN, the way C's ``/`` and ``pow`` do, instead of Python's
ZeroDivisionError/OverflowError/ValueError.
"""

from __future__ import annotations

import logging
import math

from exprcalc.core.nodes import (
    Add,
    Divide,
    Multiply,
    Negative,
    Node,
    Number,
    Power,
    Subtract,
)
from exprcalc.core.parser import parse_expr

logger = logging.getLogger(__name__)


def evaluate(source: str, *, strict: bool = False) -> float:
    """Parse and evaluate an expression string.

    Args:
        source: Expression string (e.g., "1 + 2*3.5 - 4 / 2^2")
        strict: Reject tokens left over after the expression

    Returns:
        The computed value, possibly ``inf`` or ``nan``.

    Raises:
        LexError: If the text contains an invalid character or number.
        ParseError: If the tokens do not form an expression.
    """
    result = evaluate_node(parse_expr(source, strict=strict))
    logger.debug("Evaluated %r = %r", source, result)
    return result


def evaluate_node(node: Node) -> float:
    """Evaluate a parsed expression tree."""
    if isinstance(node, Number):
        return node.value

    if isinstance(node, Add):
        return evaluate_node(node.left) + evaluate_node(node.right)

    if isinstance(node, Subtract):
        return evaluate_node(node.left) - evaluate_node(node.right)

    if isinstance(node, Multiply):
        return evaluate_node(node.left) * evaluate_node(node.right)

    if isinstance(node, Divide):
        return _divide(evaluate_node(node.left), evaluate_node(node.right))

    if isinstance(node, Power):
        return _power(evaluate_node(node.base), evaluate_node(node.exponent))

    if isinstance(node, Negative):
        return -evaluate_node(node.operand)

    raise TypeError(f"Unknown node type: {type(node).__name__}")


def _divide(left: float, right: float) -> float:
    if right != 0.0:
        return left / right
    if left == 0.0 or math.isnan(left):
        return math.nan
    # Sign follows the signs of both operands, including -0.0
    return math.copysign(math.inf, left) * math.copysign(1.0, right)


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value.is_integer() and int(value) % 2 == 1


def _power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0.0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        # 0 ** negative is a pole, not a domain error
        if base == 0.0:
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan
