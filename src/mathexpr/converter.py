"""Value converter for data-binding hosts.

MathConverter is the boundary between the expression engine and a binding
pipeline: it takes bound values and an expression parameter, and returns
the result coerced to the type the binding target expects. Failures never
propagate into the host; they are logged and reported as UNSET.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from decimal import Decimal
from typing import Any

from mathexpr.engine import ExpressionEngine

logger = logging.getLogger(__name__)


class _Unset:
    """Sentinel telling the host that no value was produced."""

    _instance: _Unset | None = None

    def __new__(cls) -> _Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = _Unset()


def coerce_result(result: Decimal, target_type: type) -> Any:
    """Coerce an engine result to the requested target type.

    int conversion truncates toward zero. Python ints are unbounded, so int
    also serves hosts that ask for a long result.

    Raises:
        ValueError: If target_type is not Decimal, str, int or float
    """
    if target_type is Decimal:
        return result
    if target_type is str:
        return str(result)
    if target_type is int:
        return int(result)
    if target_type is float:
        return float(result)
    raise ValueError(f"Unsupported target type {target_type.__module__}.{target_type.__qualname__}")


class MathConverter:
    """Converter that performs arithmetic over bound values.

    The parameter holds an expression over the converter arguments. A
    single value may be referred to as x, a or {0}; multiple values as
    x, y, z, t (first to fourth), a, b, c, d, or {0}, {1}, {2}, ...

    Example:
        converter = MathConverter()
        converter.convert(10, float, "x / 4")  # 2.5
        converter.convert_many([3, 4], int, "(a + b) * 2")  # 14
    """

    def __init__(self, engine: ExpressionEngine | None = None):
        self.engine = engine or ExpressionEngine()

    def convert(self, value: Any, target_type: type, parameter: Any) -> Any:
        """Convert a single bound value."""
        return self.convert_many([value], target_type, parameter)

    def convert_many(self, values: Sequence[Any], target_type: type, parameter: Any) -> Any:
        """Convert several bound values.

        Returns:
            The coerced result, or UNSET if anything failed
        """
        try:
            result = self.engine.evaluate(str(parameter), values)
            return coerce_result(result, target_type)
        except Exception as e:
            self.process_exception(e)

        return UNSET

    def convert_back(self, value: Any, target_types: Any, parameter: Any) -> Any:
        raise NotImplementedError("MathConverter does not support converting back")

    def process_exception(self, exc: Exception) -> None:
        """Report a conversion failure. Override to change reporting."""
        logger.warning("MathConverter: %s", exc)
