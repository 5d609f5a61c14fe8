"""Technical indicators library.

This package provides pure Python implementations of the KDJ and MACD
indicators over plain lists of prices.

Indicators:
    - KDJ: Stochastic oscillator with K, D and J lines
    - MACD: Moving Average Convergence Divergence
    - EMA: First-value-seeded exponential moving average
    - Utils: highest, lowest and argument checks

Example:
    >>> from domain.indicators import kdj, macd
    >>>
    >>> highs = [11, 12, 13, 14, 15, 16]
    >>> lows = [10, 9, 8, 7, 6, 5]
    >>> closes = [10.5, 11, 12, 13, 14, 15]
    >>>
    >>> kdj_values = kdj(highs, lows, closes, period=3)
    >>> macd_values = macd(closes, 2, 4, 3)
"""

from domain.indicators.base import PricePoint, PriceSeries, WindowConvention
from domain.indicators.kdj import KDJValue, kdj, kdj_from_series, raw_stochastic_value
from domain.indicators.macd import MACDValue, macd, macd_from_series
from domain.indicators.moving_averages import ema
from domain.indicators.utils import check_period, check_same_length, highest, lowest

__all__ = [
    # Base types
    "PricePoint",
    "PriceSeries",
    "WindowConvention",
    # Result types
    "KDJValue",
    "MACDValue",
    # Indicators
    "kdj",
    "kdj_from_series",
    "raw_stochastic_value",
    "macd",
    "macd_from_series",
    # Moving averages
    "ema",
    # Utilities
    "check_period",
    "check_same_length",
    "highest",
    "lowest",
]
