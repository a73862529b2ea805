"""Error types raised by the expression engine.

Two kinds of failure exist:
- ParseError: the source text is not a valid expression (compile time)
- EvaluationError: a valid tree could not be evaluated against its arguments
"""

from enum import Enum


class MathExpressionError(Exception):
    """Base class for all expression engine errors."""


class ParseError(MathExpressionError):
    """Error while parsing an expression.

    Attributes:
        position: Cursor offset where the failure was detected
        message: Short description of the problem
        source: The expression text being parsed
    """

    def __init__(self, message: str, position: int, source: str = ""):
        self.message = message
        self.position = position
        self.source = source
        super().__init__(
            f"error parsing expression '{source}'. {message} at position {position}"
        )


class EvaluationErrorKind(Enum):
    """Why evaluation of a compiled expression failed."""

    INDEX_OUT_OF_RANGE = "index_out_of_range"
    DIVISION_BY_ZERO = "division_by_zero"
    OVERFLOW = "overflow"
    INVALID_ARGUMENT = "invalid_argument"


class EvaluationError(MathExpressionError):
    """Error while evaluating a compiled expression.

    Attributes:
        kind: The failure category
        detail: Human-readable description
    """

    def __init__(self, kind: EvaluationErrorKind, detail: str):
        self.kind = kind
        self.detail = detail
        super().__init__(detail)
