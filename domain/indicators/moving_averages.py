"""Moving average indicators."""

from collections.abc import Sequence

from domain.indicators.utils import check_period


def ema(values: Sequence[float], period: int) -> list[float]:
    """Calculate Exponential Moving Average.

    Uses exponential smoothing with alpha = 2/(period+1), seeded from the
    first value rather than an SMA warm-up. Early values are therefore
    biased toward values[0]; MACD output depends on this seeding.

    Args:
        values: List of values to calculate EMA over
        period: Number of periods for the moving average

    Returns:
        List of EMA values, same length as values

    Raises:
        InvalidInputError: If period is not a positive integer

    Example:
        >>> ema([10, 11, 12], 3)
        [10.0, 10.5, 11.25]
    """
    check_period(period, "period", indicator="EMA")

    if not values:
        return []

    smoothing = 2.0 / (period + 1.0)
    current = float(values[0])
    result = []

    for value in values:
        current = (value - current) * smoothing + current
        result.append(current)

    return result
