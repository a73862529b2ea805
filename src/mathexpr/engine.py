"""Expression engine facade.

Ties the cache, parser and evaluator together behind a single
evaluate(source, args) entry point.
"""

from __future__ import annotations

import decimal
from collections.abc import Sequence
from decimal import Decimal
from typing import Any

from mathexpr.config import EngineConfig
from mathexpr.expressions.cache import ExpressionCache
from mathexpr.expressions.evaluator import Evaluator
from mathexpr.expressions.nodes import Node


class ExpressionEngine:
    """Compiles expressions once and evaluates them on demand.

    Each engine owns its cache. Errors from parsing or evaluation are
    raised to the caller unchanged.

    Usage:
        engine = ExpressionEngine()
        engine.evaluate("x * 2 + {1}", [3, 4])  # Decimal("10")
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        cache: ExpressionCache | None = None,
    ):
        self.config = config or EngineConfig()
        self.cache = cache if cache is not None else ExpressionCache()

    def compile(self, source: str) -> Node:
        """Return the compiled tree for source, parsing it on first use.

        Raises:
            TypeError: If source is not a string
            ParseError: If source is not a valid expression
        """
        if not isinstance(source, str):
            raise TypeError(f"expression source must be str, got {type(source).__name__}")
        return self.cache.get_or_compile(source)

    def evaluate(self, source: str, args: Sequence[Any] = ()) -> Decimal:
        """Evaluate an expression against an argument vector.

        Args:
            source: The expression text
            args: Values referenced by x/y/z/t, a/b/c/d or {N}

        Returns:
            The Decimal result

        Raises:
            ParseError: If source is not a valid expression
            EvaluationError: If the expression cannot be evaluated against args
        """
        tree = self.compile(source)
        with decimal.localcontext() as ctx:
            ctx.prec = self.config.precision
            return Evaluator(args).evaluate(tree)
