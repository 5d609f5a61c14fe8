"""Tests for text and JSON presentation of indicator results."""

import io
import json

import pytest

from domain import KDJValue, MACDValue, WindowConvention, kdj
from presentation import (
    KdjResponse,
    format_kdj,
    format_macd,
    kdj_to_response,
    macd_to_response,
    to_json,
    write_lines,
)


@pytest.fixture
def kdj_values():
    return [KDJValue(66.6667, 55.5556, 88.8889), KDJValue(77.7778, 62.963, 107.4074)]


@pytest.fixture
def macd_values():
    return [MACDValue(0.30556, 0.0, 0.30556), MACDValue(0.39352, 0.36420, 0.02932)]


class TestTextReport:

    def test_format_kdj(self, kdj_values):
        assert format_kdj(kdj_values) == [
            "Period 1: K: 66.67, D: 55.56, J: 88.89",
            "Period 2: K: 77.78, D: 62.96, J: 107.41",
        ]

    def test_format_kdj_precision(self, kdj_values):
        assert format_kdj(kdj_values[:1], precision=0) == ["Period 1: K: 67, D: 56, J: 89"]

    def test_format_macd(self, macd_values):
        assert format_macd(macd_values, precision=3) == [
            "MACD: 0.306, Signal: 0.000, Histogram: 0.306",
            "MACD: 0.394, Signal: 0.364, Histogram: 0.029",
        ]

    def test_write_lines(self):
        out = io.StringIO()
        write_lines("Title", ["a", "b"], out)
        assert out.getvalue() == "Title\na\nb\n"

    def test_write_lines_empty(self):
        out = io.StringIO()
        write_lines("Title", [], out)
        assert "(insufficient data)" in out.getvalue()


class TestJsonApi:

    def test_kdj_response(self, kdj_values):
        response = kdj_to_response(kdj_values, period=3, convention="exclusive")
        assert isinstance(response, KdjResponse)
        assert response.count == 2
        assert response.values[1].j == pytest.approx(107.4074)

    def test_kdj_response_from_enum(self):
        response = kdj_to_response([], period=9, convention=WindowConvention.INCLUSIVE)
        assert response.convention == "inclusive"
        assert response.values == []

    def test_macd_response(self, macd_values):
        payload = to_json(macd_to_response(macd_values, 12, 26, 9))
        assert payload["indicator"] == "MACD"
        assert payload["signal_period"] == 9
        assert payload["values"][0] == {"macd": 0.30556, "signal": 0.0, "histogram": 0.30556}

    def test_to_json_serializable(self):
        values = kdj([11, 12, 13, 14], [10, 9, 8, 7], [10.5, 11, 12, 13], period=2)
        payload = to_json(kdj_to_response(values, 2, "exclusive"))
        assert json.loads(json.dumps(payload)) == payload
