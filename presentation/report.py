"""
Plain-text report formatting.

Transforms indicator results into printable lines.
Pure formatting logic - writing is left to the caller.
"""

from typing import TextIO
import sys

from domain import KDJValue, MACDValue


def format_kdj(values: list[KDJValue], precision: int = 2) -> list[str]:
    """Format KDJ values, one numbered line per period.

    Example:
        >>> format_kdj([KDJValue(66.666, 55.555, 88.888)])
        ['Period 1: K: 66.67, D: 55.56, J: 88.89']
    """
    return [
        f"Period {i}: K: {v.k:.{precision}f}, D: {v.d:.{precision}f}, J: {v.j:.{precision}f}"
        for i, v in enumerate(values, start=1)
    ]


def format_macd(values: list[MACDValue], precision: int = 2) -> list[str]:
    """Format MACD values, one line per period."""
    return [
        f"MACD: {v.macd:.{precision}f}, Signal: {v.signal:.{precision}f}, "
        f"Histogram: {v.histogram:.{precision}f}"
        for v in values
    ]


def write_lines(title: str, lines: list[str], out: TextIO | None = None) -> None:
    """Write a titled block of lines; notes when there is nothing to show."""
    out = out or sys.stdout
    out.write(f"{title}\n")
    if not lines:
        out.write("  (insufficient data)\n")
        return
    for line in lines:
        out.write(f"{line}\n")
