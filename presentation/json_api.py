"""
JSON API response types.

Structured responses for indicator results.
Can be used with FastAPI, Flask, or any web framework.
"""

from typing import Any

from pydantic import BaseModel

from domain import KDJValue, MACDValue, WindowConvention


# ============================================================================
# Response Models
# ============================================================================

class KdjPointResponse(BaseModel):
    """API response for one KDJ value."""
    k: float
    d: float
    j: float


class MacdPointResponse(BaseModel):
    """API response for one MACD value."""
    macd: float
    signal: float
    histogram: float


class KdjResponse(BaseModel):
    """KDJ run with the parameters that produced it."""
    indicator: str = "KDJ"
    period: int
    convention: str
    count: int
    values: list[KdjPointResponse]


class MacdResponse(BaseModel):
    """MACD run with the parameters that produced it."""
    indicator: str = "MACD"
    short_period: int
    long_period: int
    signal_period: int
    count: int
    values: list[MacdPointResponse]


# ============================================================================
# Conversion Functions
# ============================================================================

def kdj_to_response(
    values: list[KDJValue],
    period: int,
    convention: WindowConvention | str,
) -> KdjResponse:
    """Convert KDJ results to API response."""
    return KdjResponse(
        period=period,
        convention=WindowConvention(convention).value,
        count=len(values),
        values=[KdjPointResponse(k=v.k, d=v.d, j=v.j) for v in values],
    )


def macd_to_response(
    values: list[MACDValue],
    short_period: int,
    long_period: int,
    signal_period: int,
) -> MacdResponse:
    """Convert MACD results to API response."""
    return MacdResponse(
        short_period=short_period,
        long_period=long_period,
        signal_period=signal_period,
        count=len(values),
        values=[
            MacdPointResponse(macd=v.macd, signal=v.signal, histogram=v.histogram)
            for v in values
        ],
    )


def to_json(response: KdjResponse | MacdResponse) -> dict[str, Any]:
    """
    Convert a response model to a JSON-serializable dict.

    Args:
        response: KDJ or MACD response

    Returns:
        JSON-serializable dictionary
    """
    return response.model_dump(mode="json")
