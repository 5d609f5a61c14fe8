from .report import (
    format_kdj,
    format_macd,
    write_lines,
)
from .json_api import (
    KdjPointResponse,
    KdjResponse,
    MacdPointResponse,
    MacdResponse,
    kdj_to_response,
    macd_to_response,
    to_json,
)

__all__ = [
    # Text report
    "format_kdj",
    "format_macd",
    "write_lines",
    # JSON API
    "KdjPointResponse",
    "KdjResponse",
    "MacdPointResponse",
    "MacdResponse",
    "kdj_to_response",
    "macd_to_response",
    "to_json",
]
