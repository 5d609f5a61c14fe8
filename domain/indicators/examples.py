"""Example usage of technical indicators library."""

from domain.indicators import kdj, macd


# Ten bars of steadily widening range
EXAMPLE_HIGHS = [11.0, 12.0, 13.0, 14.0, 15.0, 16.0, 17.0, 18.0, 19.0, 20.0]
EXAMPLE_LOWS = [10.0, 9.0, 8.0, 7.0, 6.0, 5.0, 4.0, 3.0, 2.0, 1.0]
EXAMPLE_CLOSES = [10.5, 11.0, 12.0, 13.0, 14.0, 15.0, 16.0, 17.0, 18.0, 19.0]

EXAMPLE_MACD_CLOSES = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0, 10.0]


def example_kdj():
    """Example: KDJ with a period of 3."""
    print("=" * 60)
    print("Example 1: KDJ(3)")
    print("=" * 60)

    values = kdj(EXAMPLE_HIGHS, EXAMPLE_LOWS, EXAMPLE_CLOSES, period=3)

    print("\nKDJ Values for the given period:")
    for i, value in enumerate(values, start=1):
        print(f"Period {i}: K: {value.k:.2f}, D: {value.d:.2f}, J: {value.j:.2f}")

    return values


def example_macd():
    """Example: MACD(12, 26, 9) on a short series.

    Ten closes never reach the 26-bar long period, so nothing is printed.
    """
    print("\n" + "=" * 60)
    print("Example 2: MACD(12, 26, 9)")
    print("=" * 60)

    values = macd(EXAMPLE_MACD_CLOSES, 12, 26, 9)

    if not values:
        print("\nNot enough closes for the long EMA period")
    for value in values:
        print(f"MACD: {value.macd}, Signal: {value.signal}, Histogram: {value.histogram}")

    return values


if __name__ == "__main__":
    """Run all examples."""
    example_kdj()
    example_macd()

    print("\n" + "=" * 60)
    print("All examples completed!")
    print("=" * 60)
