"""
Indicator error types.

Structured errors with codes and context so callers can log or
serialize failures without parsing message strings.
"""

from enum import Enum
from typing import Any


# ============================================================================
# Error Codes
# ============================================================================

class ErrorCode(str, Enum):
    """Error codes for structured error handling."""

    # Validation errors (5xx)
    VALIDATION_PARAM = "E502"
    VALIDATION_CONFIG = "E503"
    VALIDATION_LENGTH = "E505"

    # Internal errors (9xx)
    INTERNAL = "E901"
    UNKNOWN = "E999"


# ============================================================================
# Error Classes
# ============================================================================

class IndicatorError(Exception):
    """
    Base exception for indicator failures.

    Provides structured error information for debugging.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.UNKNOWN,
        indicator: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        self.code = code
        self.indicator = indicator
        self.context = context or {}

        # Build detailed message
        parts = [f"[{code.value}]"]
        if indicator:
            parts.append(f"[{indicator}]")
        parts.append(message)

        self.message = message
        super().__init__(" ".join(parts))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "code": self.code.value,
            "message": self.message,
            "indicator": self.indicator,
            "context": self.context,
        }

    def with_context(self, **kwargs: Any) -> "IndicatorError":
        """Add additional context and return self for chaining."""
        self.context.update(kwargs)
        return self


class InvalidInputError(IndicatorError, ValueError):
    """Raised when indicator arguments are unusable.

    Covers mismatched input lengths and non-positive periods. Raised
    before any computation starts, so no partial result exists.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_PARAM,
        indicator: str | None = None,
        field: str | None = None,
        value: Any = None,
    ):
        self.field = field
        self.value = value

        context: dict[str, Any] = {}
        if field:
            context["field"] = field
            context["value"] = value

        super().__init__(
            message=message,
            code=code,
            indicator=indicator,
            context=context,
        )

    @classmethod
    def bad_period(cls, indicator: str, field: str, value: Any) -> "InvalidInputError":
        """Create error for a period that is not a positive integer."""
        return cls(
            f"{field} must be a positive integer, got {value!r}",
            indicator=indicator,
            field=field,
            value=value,
        )

    @classmethod
    def length_mismatch(cls, indicator: str, **lengths: int) -> "InvalidInputError":
        """Create error for input sequences of different lengths."""
        names = ", ".join(lengths)
        detail = ", ".join(f"{name}={n}" for name, n in lengths.items())
        error = cls(
            f"{names} must have the same length ({detail})",
            code=ErrorCode.VALIDATION_LENGTH,
            indicator=indicator,
        )
        return error.with_context(lengths=dict(lengths))
