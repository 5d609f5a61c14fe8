from .errors import ErrorCode, IndicatorError, InvalidInputError
from .indicators import (
    KDJValue,
    MACDValue,
    PricePoint,
    PriceSeries,
    WindowConvention,
    ema,
    kdj,
    kdj_from_series,
    macd,
    macd_from_series,
)

__all__ = [
    # Errors
    "ErrorCode",
    "IndicatorError",
    "InvalidInputError",
    # Price data
    "PricePoint",
    "PriceSeries",
    "WindowConvention",
    # Results
    "KDJValue",
    "MACDValue",
    # Indicators
    "kdj",
    "kdj_from_series",
    "macd",
    "macd_from_series",
    "ema",
]
