"""Arithmetic expression language.

This module provides:
- Scanner: Cursor-driven character scanner
- Parser: Produces an expression tree from source text
- Evaluator: Evaluates a tree against an argument vector
- ExpressionCache: Compiles each distinct source once
"""

from mathexpr.expressions.cache import ExpressionCache
from mathexpr.expressions.errors import (
    EvaluationError,
    EvaluationErrorKind,
    MathExpressionError,
    ParseError,
)
from mathexpr.expressions.evaluator import Evaluator, evaluate, to_decimal
from mathexpr.expressions.lexer import VARIABLES, Scanner
from mathexpr.expressions.nodes import (
    BinaryOp,
    Constant,
    Negate,
    Node,
    Operator,
    Variable,
    to_text,
)
from mathexpr.expressions.parser import Parser, parse

__all__ = [
    # Cache
    "ExpressionCache",
    # Errors
    "EvaluationError",
    "EvaluationErrorKind",
    "MathExpressionError",
    "ParseError",
    # Evaluator
    "Evaluator",
    "evaluate",
    "to_decimal",
    # Lexer
    "VARIABLES",
    "Scanner",
    # Nodes
    "BinaryOp",
    "Constant",
    "Negate",
    "Node",
    "Operator",
    "Variable",
    "to_text",
    # Parser
    "Parser",
    "parse",
]
