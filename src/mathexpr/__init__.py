"""mathexpr: a cached arithmetic expression engine for data binding.

Expressions such as "(x + y) / 2" or "{0} * -{1}" are parsed once into an
immutable tree and evaluated against an argument vector on each call.

Usage:
    from mathexpr import ExpressionEngine

    engine = ExpressionEngine()
    engine.evaluate("(x + y) / 2", [3, 5])  # Decimal("4")
"""

from mathexpr.config import EngineConfig
from mathexpr.converter import UNSET, MathConverter, coerce_result
from mathexpr.engine import ExpressionEngine
from mathexpr.expressions import (
    EvaluationError,
    EvaluationErrorKind,
    ExpressionCache,
    MathExpressionError,
    ParseError,
)

__all__ = [
    "EngineConfig",
    "EvaluationError",
    "EvaluationErrorKind",
    "ExpressionCache",
    "ExpressionEngine",
    "MathConverter",
    "MathExpressionError",
    "ParseError",
    "UNSET",
    "coerce_result",
]
