"""Tests for the binding value converter."""

import logging
from decimal import Decimal

import pytest

from mathexpr import UNSET, ExpressionEngine, MathConverter, ParseError, coerce_result


@pytest.fixture
def converter():
    return MathConverter()


class TestCoerceResult:
    def test_decimal(self):
        assert coerce_result(Decimal("1.50"), Decimal) == Decimal("1.50")

    def test_str(self):
        assert coerce_result(Decimal("2.5"), str) == "2.5"

    def test_int_truncates_toward_zero(self):
        assert coerce_result(Decimal("3.9"), int) == 3
        assert coerce_result(Decimal("-3.9"), int) == -3

    def test_int_covers_long_range(self):
        assert coerce_result(Decimal("9223372036854775808.5"), int) == 2**63

    def test_float(self):
        assert coerce_result(Decimal("0.25"), float) == 0.25

    def test_unsupported_target(self):
        with pytest.raises(ValueError) as exc_info:
            coerce_result(Decimal(1), list)
        assert "Unsupported target type builtins.list" in str(exc_info.value)


class TestMathConverter:
    def test_convert_single_value(self, converter):
        assert converter.convert(10, float, "x / 4") == 2.5

    def test_convert_single_value_positional(self, converter):
        assert converter.convert(10, int, "{0} + a") == 20

    def test_convert_many(self, converter):
        assert converter.convert_many([3, 4], int, "(a + b) * 2") == 14

    def test_convert_to_str(self, converter):
        assert converter.convert(2, str, "x * 1.5") == "3.0"

    def test_convert_to_decimal(self, converter):
        assert converter.convert("0.1", Decimal, "x + 0.2") == Decimal("0.3")

    def test_parameter_is_stringified(self, converter):
        assert converter.convert(5, int, 3) == 3

    def test_parse_error_returns_unset(self, converter, caplog):
        with caplog.at_level(logging.WARNING, logger="mathexpr.converter"):
            result = converter.convert(1, int, "x +")

        assert result is UNSET
        assert "error parsing expression 'x +'" in caplog.text

    def test_evaluation_error_returns_unset(self, converter, caplog):
        with caplog.at_level(logging.WARNING, logger="mathexpr.converter"):
            result = converter.convert(1, int, "y")

        assert result is UNSET
        assert "parameter index 1 is out of range" in caplog.text

    def test_unsupported_target_returns_unset(self, converter, caplog):
        with caplog.at_level(logging.WARNING, logger="mathexpr.converter"):
            result = converter.convert(1, list, "x")

        assert result is UNSET
        assert "Unsupported target type" in caplog.text

    def test_process_exception_override(self):
        class RecordingConverter(MathConverter):
            def __init__(self):
                super().__init__()
                self.errors = []

            def process_exception(self, exc):
                self.errors.append(exc)

        converter = RecordingConverter()
        assert converter.convert(1, int, "(x") is UNSET
        assert len(converter.errors) == 1
        assert isinstance(converter.errors[0], ParseError)

    def test_convert_back_not_supported(self, converter):
        with pytest.raises(NotImplementedError):
            converter.convert_back(1, int, "x")

    def test_expressions_are_cached(self, converter):
        for value in range(3):
            converter.convert(value, int, "x * 2")
        assert converter.engine.cache.compile_count == 1

    def test_uses_given_engine(self):
        engine = ExpressionEngine()
        converter = MathConverter(engine)
        converter.convert(1, int, "x")
        assert "x" in engine.cache


class TestUnset:
    def test_unset_is_singleton_and_falsy(self):
        assert type(UNSET)() is UNSET
        assert not UNSET
        assert repr(UNSET) == "UNSET"
