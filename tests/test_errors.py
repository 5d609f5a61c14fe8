"""Tests for structured indicator errors."""

import pytest

from domain import ErrorCode, IndicatorError, InvalidInputError, kdj, macd


class TestIndicatorError:

    def test_message_prefix(self):
        error = IndicatorError("boom", code=ErrorCode.INTERNAL, indicator="MACD")
        assert str(error) == "[E901] [MACD] boom"
        assert error.message == "boom"

    def test_to_dict(self):
        error = IndicatorError("boom", indicator="KDJ", context={"n": 3})
        assert error.to_dict() == {
            "code": "E999",
            "message": "boom",
            "indicator": "KDJ",
            "context": {"n": 3},
        }

    def test_with_context_chains(self):
        error = IndicatorError("boom").with_context(period=5)
        assert error.context == {"period": 5}


class TestInvalidInputError:

    def test_is_value_error(self):
        assert issubclass(InvalidInputError, ValueError)
        assert issubclass(InvalidInputError, IndicatorError)

    def test_bad_period(self):
        error = InvalidInputError.bad_period("MACD", "signal_period", 0)
        assert error.code == ErrorCode.VALIDATION_PARAM
        assert error.context == {"field": "signal_period", "value": 0}
        assert "signal_period must be a positive integer, got 0" in str(error)

    def test_length_mismatch(self):
        error = InvalidInputError.length_mismatch("KDJ", highs=2, lows=2, closes=1)
        assert error.code == ErrorCode.VALIDATION_LENGTH
        assert "highs=2, lows=2, closes=1" in str(error)

    def test_kdj_raises_before_computing(self):
        # Lengths are checked before the period
        with pytest.raises(InvalidInputError) as exc_info:
            kdj([1.0], [1.0, 2.0], [1.0], period=0)
        assert exc_info.value.code == ErrorCode.VALIDATION_LENGTH

    def test_macd_reports_offending_field(self):
        with pytest.raises(InvalidInputError) as exc_info:
            macd([1.0] * 30, 12, 26, -1)
        assert exc_info.value.field == "signal_period"
        assert exc_info.value.indicator == "MACD"
