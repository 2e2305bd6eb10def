"""
Expression tree types for exprcalc.

Every node is an immutable pydantic model. Binary nodes own exactly two
children and ``Negative`` owns one; trees are built bottom-up by the
parser and never share subtrees.

Examples:
    - ``1+2``   → Add(left=Number(value=1.0), right=Number(value=2.0))
    - ``-2^3``  → Power(base=Negative(operand=Number(value=2.0)), exponent=Number(value=3.0))
"""

from __future__ import annotations

import math
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field


def _format_value(value: float) -> str:
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


# ---------------------------------------------------------------------------
# Leaf
# ---------------------------------------------------------------------------


class Number(BaseModel):
    """A numeric literal."""

    value: float = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return _format_value(self.value)


# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class BinaryNode(BaseModel):
    """Shared shape of the left/right arithmetic operators."""

    symbol: ClassVar[str] = "?"

    left: Node
    right: Node

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"({self.left} {self.symbol} {self.right})"


class Add(BinaryNode):
    """Addition: left + right."""

    symbol: ClassVar[str] = "+"


class Subtract(BinaryNode):
    """Subtraction: left - right."""

    symbol: ClassVar[str] = "-"


class Multiply(BinaryNode):
    """Multiplication, explicit or implied by adjacent groups."""

    symbol: ClassVar[str] = "*"


class Divide(BinaryNode):
    """Division: left / right."""

    symbol: ClassVar[str] = "/"


class Power(BaseModel):
    """Exponentiation: base ^ exponent."""

    base: Node
    exponent: Node

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"({self.base} ^ {self.exponent})"


class Negative(BaseModel):
    """Unary minus."""

    operand: Node

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"-{self.operand}"


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Node = Number | Add | Subtract | Multiply | Divide | Power | Negative

# Rebuild models for recursive forward references
BinaryNode.model_rebuild()
Add.model_rebuild()
Subtract.model_rebuild()
Multiply.model_rebuild()
Divide.model_rebuild()
Power.model_rebuild()
Negative.model_rebuild()


def children(node: Node) -> tuple[Node, ...]:
    """Return the direct children of a node, left to right."""
    if isinstance(node, BinaryNode):
        return (node.left, node.right)
    if isinstance(node, Power):
        return (node.base, node.exponent)
    if isinstance(node, Negative):
        return (node.operand,)
    return ()
