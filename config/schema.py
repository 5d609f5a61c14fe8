"""
Configuration schema with validation.

All configuration is validated at load time using Pydantic.
"""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from domain.indicators import WindowConvention


class KdjConfig(BaseModel):
    """KDJ defaults."""

    period: int = Field(default=9, ge=1, le=500, description="Lookback window size")
    convention: WindowConvention = Field(
        default=WindowConvention.EXCLUSIVE,
        description="exclusive: window before the bar; inclusive: window ending at the bar",
    )


class MacdConfig(BaseModel):
    """MACD periods."""

    short_period: int = Field(default=12, ge=1, le=500)
    long_period: int = Field(default=26, ge=1, le=1000)
    signal_period: int = Field(default=9, ge=1, le=500)

    @field_validator("long_period")
    @classmethod
    def long_gt_short(cls, v: int, info) -> int:
        short_period = info.data.get("short_period", 12)
        if v <= short_period:
            raise ValueError("long_period must be greater than short_period")
        return v


class LoggingConfig(BaseModel):
    """Logging setup for the command-line caller."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: str = Field(default="%(asctime)s %(levelname)s %(name)s: %(message)s", min_length=1)

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        return v.upper().strip() if isinstance(v, str) else v


class OutputConfig(BaseModel):
    """Output preferences."""

    precision: int = Field(default=2, ge=0, le=12)
    format: Literal["text", "json"] = "text"


class IndicatorsConfig(BaseModel):
    """
    Root configuration model.

    All settings are validated on load.
    """

    kdj: KdjConfig = Field(default_factory=KdjConfig)
    macd: MacdConfig = Field(default_factory=MacdConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
