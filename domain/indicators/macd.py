"""MACD (Moving Average Convergence Divergence) indicator."""

import logging
from collections.abc import Iterable, Sequence
from typing import NamedTuple

from domain.indicators.base import PricePoint, PriceSeries
from domain.indicators.moving_averages import ema
from domain.indicators.utils import check_period

logger = logging.getLogger(__name__)


class MACDValue(NamedTuple):
    """MACD line, signal line and histogram for one period."""
    macd: float
    signal: float
    histogram: float


def macd(
    closes: Sequence[float],
    short_period: int = 12,
    long_period: int = 26,
    signal_period: int = 9,
) -> list[MACDValue]:
    """Calculate MACD indicator.

    MACD Line = EMA(short) - EMA(long)
    Signal Line = EMA(MACD Line, signal periods)
    Histogram = MACD Line - Signal Line

    Args:
        closes: List of closing prices
        short_period: Short EMA period (default: 12)
        long_period: Long EMA period (default: 26)
        signal_period: Signal line EMA period (default: 9)

    Returns:
        List of MACDValue, one per close from index long_period - 1 on.
        Empty when there are fewer than long_period closes.

    Raises:
        InvalidInputError: If any period is not a positive integer

    Example:
        >>> closes = [float(p) for p in range(10, 50)]
        >>> result = macd(closes)
        >>> len(result)
        15
        >>> result[-1].macd > 0
        True

    Notes:
        - Both EMAs are seeded from closes[0], not an SMA warm-up
        - Signal is reported as 0.0 until signal_period MACD values exist,
          so the histogram equals the MACD line over that stretch
    """
    check_period(short_period, "short_period", indicator="MACD")
    check_period(long_period, "long_period", indicator="MACD")
    check_period(signal_period, "signal_period", indicator="MACD")

    if not closes or len(closes) < long_period:
        logger.debug(
            f"MACD: {len(closes)} closes is not enough for long period {long_period}, "
            "returning empty result"
        )
        return []

    short_ema = ema(closes, short_period)
    long_ema = ema(closes, long_period)

    macd_raw = [
        short_ema[i] - long_ema[i]
        for i in range(long_period - 1, len(closes))
    ]

    signal_ema = ema(macd_raw, signal_period)

    result = []
    for i, macd_value in enumerate(macd_raw):
        # WHY: Signal line is undefined until enough MACD history exists
        signal = signal_ema[i] if i >= signal_period - 1 else 0.0
        result.append(MACDValue(macd_value, signal, macd_value - signal))

    logger.debug(
        f"MACD({short_period}, {long_period}, {signal_period}): "
        f"{len(closes)} closes -> {len(result)} values"
    )
    return result


def macd_from_series(
    series: PriceSeries | Iterable[PricePoint],
    short_period: int = 12,
    long_period: int = 26,
    signal_period: int = 9,
) -> list[MACDValue]:
    """Calculate MACD from the closes of a PriceSeries or run of PricePoint."""
    if isinstance(series, PriceSeries):
        closes = series.closes
    else:
        closes = [point.close for point in series]
    return macd(closes, short_period, long_period, signal_period)
