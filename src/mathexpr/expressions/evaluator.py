"""Evaluator for compiled arithmetic expressions.

Walks an expression tree and computes a Decimal result against an
argument vector. Evaluation is pure: the tree and the arguments are never
modified.
"""

import numbers
from collections.abc import Sequence
from decimal import Decimal, DivisionByZero, InvalidOperation, Overflow
from typing import Any

from mathexpr.expressions.errors import EvaluationError, EvaluationErrorKind
from mathexpr.expressions.nodes import (
    BinaryOp,
    Constant,
    Negate,
    Node,
    Operator,
    Variable,
)
from mathexpr.expressions.parser import parse


def to_decimal(value: Any) -> Decimal:
    """Convert an argument value to Decimal.

    Accepts Decimal, bool, int, float, other rationals and numeric strings.
    None converts to zero.

    Raises:
        EvaluationError: If the value has no finite decimal equivalent
    """
    if value is None:
        return Decimal(0)

    try:
        if isinstance(value, Decimal):
            result = value
        elif isinstance(value, (bool, int)):
            result = Decimal(int(value))
        elif isinstance(value, float):
            # Shortest repr avoids carrying binary rounding noise into Decimal
            result = Decimal(repr(value))
        elif isinstance(value, numbers.Rational):
            result = Decimal(value.numerator) / Decimal(value.denominator)
        elif isinstance(value, str):
            result = Decimal(value.strip())
        else:
            raise EvaluationError(
                EvaluationErrorKind.INVALID_ARGUMENT,
                f"Cannot convert {type(value).__name__} to a number",
            )
    except InvalidOperation:
        raise EvaluationError(
            EvaluationErrorKind.INVALID_ARGUMENT,
            f"'{value}' is not a valid number",
        )
    except Overflow:
        raise EvaluationError(
            EvaluationErrorKind.OVERFLOW,
            f"'{value}' is out of range",
        )

    if not result.is_finite():
        raise EvaluationError(
            EvaluationErrorKind.INVALID_ARGUMENT,
            f"'{value}' is not a finite number",
        )
    return result


class Evaluator:
    """Evaluates an expression tree against an argument vector.

    Usage:
        evaluator = Evaluator([2, 3])
        result = evaluator.evaluate(parse("x * y"))  # Decimal("6")
    """

    def __init__(self, args: Sequence[Any]):
        self.args = args

    def evaluate(self, node: Node) -> Decimal:
        """Evaluate a node and return its value."""
        match node:
            case Constant(value=value):
                return value
            case Variable(index=index):
                return self._eval_variable(index)
            case BinaryOp():
                return self._eval_chain(node)
            case Negate(operand=operand):
                return self._negate(self.evaluate(operand))
        raise TypeError(f"Unknown node type: {type(node).__name__}")

    def _eval_chain(self, node: BinaryOp) -> Decimal:
        # Flat chains like 1+2+3+... build a left-deep spine; fold it in a loop
        spine = []
        while isinstance(node, BinaryOp):
            spine.append(node)
            node = node.left

        result = self.evaluate(node)
        for op in reversed(spine):
            result = self._apply(op.operator, result, self.evaluate(op.right))
        return result

    def _negate(self, value: Decimal) -> Decimal:
        try:
            return -value
        except Overflow:
            raise EvaluationError(
                EvaluationErrorKind.OVERFLOW,
                f"Result of -{value} is out of range",
            )

    def _eval_variable(self, index: int) -> Decimal:
        if index >= len(self.args):
            raise EvaluationError(
                EvaluationErrorKind.INDEX_OUT_OF_RANGE,
                f"parameter index {index} is out of range. "
                f"{len(self.args)} parameter(s) supplied",
            )
        return to_decimal(self.args[index])

    def _apply(self, operator: Operator, left: Decimal, right: Decimal) -> Decimal:
        if operator is Operator.DIV and right == 0:
            raise EvaluationError(EvaluationErrorKind.DIVISION_BY_ZERO, "Division by zero")

        try:
            if operator is Operator.ADD:
                return left + right
            if operator is Operator.SUB:
                return left - right
            if operator is Operator.MUL:
                return left * right
            return left / right
        except Overflow:
            raise EvaluationError(
                EvaluationErrorKind.OVERFLOW,
                f"Result of {left} {operator.value} {right} is out of range",
            )
        except DivisionByZero:
            raise EvaluationError(EvaluationErrorKind.DIVISION_BY_ZERO, "Division by zero")


def evaluate(source: str, args: Sequence[Any] = ()) -> Decimal:
    """Parse and evaluate an expression string without caching.

    Example:
        result = evaluate("(x + y) / 2", [3, 5])
        # result = Decimal("4")
    """
    return Evaluator(args).evaluate(parse(source))
