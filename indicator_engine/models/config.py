"""Signal configuration models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, model_validator

from indicator_engine.models.candle import Source

# RSI zone lines, asymmetric around 50
RSI_PERIOD = 14
RSI_OVERBOUGHT = 75.0
RSI_OVERSOLD = 35.0


class MovingAverageType(str, Enum):
    SMA = "sma"
    EMA = "ema"
    WMA = "wma"
    RMA = "rma"
    HMA = "hma"
    JMA = "jma"
    VWMA = "vwma"


class SmoothingMethod(str, Enum):
    SMA = "sma"
    EMA = "ema"


class RsiSignalConfig(BaseModel):
    """RSI zone-line crossing."""

    period: int = Field(default=RSI_PERIOD, ge=1)
    overbought: float = RSI_OVERBOUGHT
    oversold: float = RSI_OVERSOLD


class RmiSignalConfig(BaseModel):
    """Relative Momentum Index zone-line crossing."""

    period: int = Field(default=20, ge=1)
    momentum: int = Field(default=5, ge=1)
    overbought: float = 70.0
    oversold: float = 30.0


class AroonSignalConfig(BaseModel):
    period: int = Field(default=25, ge=1)


class MacdSignalConfig(BaseModel):
    fast_period: int = Field(default=12, ge=1)
    slow_period: int = Field(default=26, ge=1)
    signal_period: int = Field(default=9, ge=1)
    source: Source = Source.CLOSE

    @model_validator(mode="after")
    def _check_periods(self) -> "MacdSignalConfig":
        if self.fast_period >= self.slow_period:
            raise ValueError("fast_period must be smaller than slow_period")
        return self


class AdxSignalConfig(BaseModel):
    period: int = Field(default=14, ge=1)


class BollingerSignalConfig(BaseModel):
    period: int = Field(default=20, ge=1)
    multiplier: float = Field(default=2.0, ge=0)
    source: Source = Source.CLOSE


class SupertrendSignalConfig(BaseModel):
    period: int = Field(default=10, ge=1)
    multiplier: float = Field(default=3.0, ge=0)


class CloudSignalConfig(BaseModel):
    """Ichimoku-style cloud lookbacks."""

    conversion_period: int = Field(default=9, ge=1)
    base_period: int = Field(default=26, ge=1)
    span_period: int = Field(default=52, ge=1)
    displacement: int = Field(default=26, ge=1)


class SmoothMomentumSignalConfig(BaseModel):
    period: int = Field(default=10, ge=1)
    smoothing: int = Field(default=10, ge=1)
    method: SmoothingMethod = SmoothingMethod.SMA
    source: Source = Source.CLOSE


class SmoothAoSignalConfig(BaseModel):
    fast_period: int = Field(default=5, ge=1)
    slow_period: int = Field(default=34, ge=1)
    smoothing: int = Field(default=5, ge=1)
    method: SmoothingMethod = SmoothingMethod.SMA


class MovingAverageSignalConfig(BaseModel):
    """Price crossing a single moving average."""

    type: MovingAverageType = MovingAverageType.SMA
    period: int = Field(default=20, ge=1)
    source: Source = Source.CLOSE


class MovingAverageCrossSignalConfig(BaseModel):
    """Fast moving average crossing a slow one."""

    type: MovingAverageType = MovingAverageType.SMA
    fast_period: int = Field(default=9, ge=1)
    slow_period: int = Field(default=21, ge=1)
    source: Source = Source.CLOSE

    @model_validator(mode="after")
    def _check_periods(self) -> "MovingAverageCrossSignalConfig":
        if self.fast_period >= self.slow_period:
            raise ValueError("fast_period must be smaller than slow_period")
        return self


class DeviationMode(str, Enum):
    """How the zigzag reversal threshold is measured."""

    PERCENT = "percent"  # percent of the provisional extremum price
    ABSOLUTE = "absolute"  # price units
    ATR = "atr"  # multiples of ATR at the reversal candle
