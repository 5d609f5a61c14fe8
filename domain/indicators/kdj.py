"""KDJ (stochastic oscillator with K, D and J lines) indicator."""

import logging
from collections.abc import Iterable, Sequence
from typing import NamedTuple

from domain.errors import InvalidInputError
from domain.indicators.base import PricePoint, PriceSeries, WindowConvention
from domain.indicators.utils import check_period, check_same_length, highest, lowest

logger = logging.getLogger(__name__)

SEED = 50.0
FLAT_RANGE_RSV = 50.0

# K and D are smoothed with weight 1/3 on the new value
PRIOR_WEIGHT = 2.0 / 3.0
NEW_WEIGHT = 1.0 / 3.0


class KDJValue(NamedTuple):
    """K, D and J values for one period."""
    k: float
    d: float
    j: float


def raw_stochastic_value(close: float, highest_high: float, lowest_low: float) -> float:
    """Position of close within the high-low range, on a 0-100 scale.

    Example:
        >>> raw_stochastic_value(12.0, highest_high=13.0, lowest_low=8.0)
        80.0
        >>> raw_stochastic_value(5.0, highest_high=5.0, lowest_low=5.0)
        50.0
    """
    # WHY: Prevent division by zero in flat markets
    if highest_high == lowest_low:
        return FLAT_RANGE_RSV
    return (close - lowest_low) / (highest_high - lowest_low) * 100.0


def _resolve_convention(convention: WindowConvention | str) -> WindowConvention:
    try:
        return WindowConvention(convention)
    except ValueError:
        raise InvalidInputError(
            f"convention must be one of {[c.value for c in WindowConvention]}, got {convention!r}",
            indicator="KDJ",
            field="convention",
            value=convention,
        ) from None


def kdj(
    highs: Sequence[float],
    lows: Sequence[float],
    closes: Sequence[float],
    period: int = 9,
    convention: WindowConvention | str = WindowConvention.EXCLUSIVE,
) -> list[KDJValue]:
    """Calculate the KDJ indicator.

    RSV = 100 * (Close - Lowest Low) / (Highest High - Lowest Low)
    K = 2/3 * K_prev + 1/3 * RSV
    D = 2/3 * D_prev + 1/3 * K
    J = 3 * K - 2 * D

    K and D both start from 50.0.

    Args:
        highs: List of high prices
        lows: List of low prices
        closes: List of closing prices
        period: Lookback window size (default: 9)
        convention: Window convention (default: exclusive)
            - exclusive: window is the `period` bars before i; one value per
              index from `period` on, so len(result) == max(0, N - period)
            - inclusive: window is the `period` bars ending at i; one value
              per index, with the seed repeated until the window is full

    Returns:
        List of KDJValue

    Raises:
        InvalidInputError: If lengths differ or period is not positive

    Example:
        >>> highs = [11, 12, 13, 14, 15, 16]
        >>> lows = [10, 9, 8, 7, 6, 5]
        >>> closes = [10.5, 11, 12, 13, 14, 15]
        >>> result = kdj(highs, lows, closes, period=3)
        >>> len(result)
        3
        >>> round(result[0].k, 2)
        66.67

    Notes:
        - Flat windows (high == low) give RSV of exactly 50.0
        - J is not bounded to 0-100
    """
    n = check_same_length("KDJ", highs=highs, lows=lows, closes=closes)
    check_period(period, "period", indicator="KDJ")
    convention = _resolve_convention(convention)

    if convention is WindowConvention.EXCLUSIVE and n <= period:
        logger.debug(f"KDJ: {n} bars is not enough for period {period}, returning empty result")
        return []

    highest_highs = highest(highs, period)
    lowest_lows = lowest(lows, period)

    k = SEED
    d = SEED
    result = []

    if convention is WindowConvention.EXCLUSIVE:
        # Window [i - period, i) ends at i - 1
        for i in range(period, n):
            rsv = raw_stochastic_value(closes[i], highest_highs[i - 1], lowest_lows[i - 1])
            k = PRIOR_WEIGHT * k + NEW_WEIGHT * rsv
            d = PRIOR_WEIGHT * d + NEW_WEIGHT * k
            result.append(KDJValue(k, d, 3.0 * k - 2.0 * d))
    else:
        for i in range(n):
            if i >= period - 1:
                rsv = raw_stochastic_value(closes[i], highest_highs[i], lowest_lows[i])
                k = PRIOR_WEIGHT * k + NEW_WEIGHT * rsv
                d = PRIOR_WEIGHT * d + NEW_WEIGHT * k
            result.append(KDJValue(k, d, 3.0 * k - 2.0 * d))

    logger.debug(f"KDJ({period}, {convention.value}): {n} bars -> {len(result)} values")
    return result


def kdj_from_series(
    series: PriceSeries | Iterable[PricePoint],
    period: int = 9,
    convention: WindowConvention | str = WindowConvention.EXCLUSIVE,
) -> list[KDJValue]:
    """Calculate KDJ from a PriceSeries or an ordered run of PricePoint."""
    if not isinstance(series, PriceSeries):
        series = PriceSeries.from_points(series)
    return kdj(series.highs, series.lows, series.closes, period, convention)
