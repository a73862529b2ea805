"""Expression tree node types.

A compiled expression is a tree built from four immutable node kinds.
Nodes own their children outright; the grammar cannot produce cycles.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Union


class Operator(Enum):
    """Binary arithmetic operators."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


@dataclass(frozen=True)
class Constant:
    """A literal numeric value."""
    value: Decimal


@dataclass(frozen=True)
class Variable:
    """A reference into the argument vector."""
    index: int


@dataclass(frozen=True)
class BinaryOp:
    """Binary operation (e.g., a + b, x / 2)."""
    operator: Operator
    left: "Node"
    right: "Node"


@dataclass(frozen=True)
class Negate:
    """Unary minus."""
    operand: "Node"


Node = Union[Constant, Variable, BinaryOp, Negate]


def to_text(node: Node) -> str:
    """Render a tree as fully parenthesized source text.

    Variables are rendered in positional form, so the output parses back
    to an equivalent tree.
    """
    match node:
        case Constant(value=value):
            return format(value, "f")
        case Variable(index=index):
            return f"{{{index}}}"
        case BinaryOp():
            # Walk the left spine in a loop so long flat chains don't recurse
            spine = []
            while isinstance(node, BinaryOp):
                spine.append(node)
                node = node.left
            text = to_text(node)
            for op in reversed(spine):
                text = f"({text} {op.operator.value} {to_text(op.right)})"
            return text
        case Negate(operand=operand):
            return f"-{to_text(operand)}"
    raise TypeError(f"Unknown node type: {type(node).__name__}")
