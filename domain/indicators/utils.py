"""Utility functions for technical analysis."""

from collections.abc import Sequence
from typing import Optional

from domain.errors import InvalidInputError


def check_period(period: int, name: str, indicator: str | None = None) -> None:
    """Reject periods that are not positive integers.

    bool is refused even though it subclasses int.

    Raises:
        InvalidInputError: If period is not an int >= 1
    """
    if isinstance(period, bool) or not isinstance(period, int) or period < 1:
        raise InvalidInputError.bad_period(indicator or "indicator", name, period)


def check_same_length(indicator: str, **series: Sequence[float]) -> int:
    """Ensure all named series have equal length.

    Returns:
        The shared length

    Raises:
        InvalidInputError: If any two lengths differ
    """
    lengths = {name: len(values) for name, values in series.items()}
    if len(set(lengths.values())) > 1:
        raise InvalidInputError.length_mismatch(indicator, **lengths)
    return next(iter(lengths.values()), 0)


def highest(values: Sequence[float], period: int) -> list[Optional[float]]:
    """Find highest value over rolling period.

    Args:
        values: List of values
        period: Lookback period

    Returns:
        List of highest values; entry i covers values[i - period + 1:i + 1]

    Example:
        >>> prices = [10, 12, 11, 15, 14, 13]
        >>> highest(prices, 3)
        [None, None, 12, 15, 15, 15]

    Notes:
        - Returns None for first (period - 1) values
    """
    check_period(period, "period")

    if len(values) < period:
        return [None] * len(values)

    result: list[Optional[float]] = [None] * (period - 1)

    for i in range(period - 1, len(values)):
        result.append(max(values[i - period + 1:i + 1]))

    return result


def lowest(values: Sequence[float], period: int) -> list[Optional[float]]:
    """Find lowest value over rolling period.

    Args:
        values: List of values
        period: Lookback period

    Returns:
        List of lowest values; entry i covers values[i - period + 1:i + 1]

    Example:
        >>> prices = [10, 12, 11, 15, 14, 13]
        >>> lowest(prices, 3)
        [None, None, 10, 11, 11, 13]

    Notes:
        - Returns None for first (period - 1) values
    """
    check_period(period, "period")

    if len(values) < period:
        return [None] * len(values)

    result: list[Optional[float]] = [None] * (period - 1)

    for i in range(period - 1, len(values)):
        result.append(min(values[i - period + 1:i + 1]))

    return result
