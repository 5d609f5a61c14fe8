"""Base types for technical indicators."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator


class WindowConvention(str, Enum):
    """Which bars make up the KDJ lookback window at index i.

    EXCLUSIVE: the `period` bars before i, i.e. [i - period, i).
        Output starts at index `period`.
    INCLUSIVE: the `period` bars ending at i, i.e. [i - period + 1, i].
        Every index gets an output; warm-up rows repeat the seed.
    """
    EXCLUSIVE = "exclusive"
    INCLUSIVE = "inclusive"


@dataclass(frozen=True)
class PricePoint:
    """
    Immutable price bar for one trading period.

    Only the fields the indicators read are modelled.
    """
    high: float
    low: float
    close: float


@dataclass
class PriceSeries:
    """Column view of an ordered run of price bars.

    Attributes:
        highs: List of high prices
        lows: List of low prices
        closes: List of closing prices

    Example:
        >>> series = PriceSeries.from_points([
        ...     PricePoint(high=102.0, low=99.0, close=101.0),
        ...     PricePoint(high=103.0, low=100.0, close=102.0),
        ... ])
        >>> series.closes
        [101.0, 102.0]
    """
    highs: list[float]
    lows: list[float]
    closes: list[float]

    @classmethod
    def from_points(cls, points: Iterable[PricePoint]) -> "PriceSeries":
        """Build a series from bars given in chronological order."""
        highs: list[float] = []
        lows: list[float] = []
        closes: list[float] = []
        for point in points:
            highs.append(point.high)
            lows.append(point.low)
            closes.append(point.close)
        return cls(highs=highs, lows=lows, closes=closes)

    def __len__(self) -> int:
        return len(self.closes)

    def __iter__(self) -> Iterator[PricePoint]:
        for high, low, close in zip(self.highs, self.lows, self.closes):
            yield PricePoint(high=high, low=low, close=close)
