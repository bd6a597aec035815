"""Candle (OHLCV bar) data models."""

from collections.abc import Sequence
from enum import Enum

from pydantic import BaseModel, ConfigDict


class Source(str, Enum):
    """Price field an indicator reads from a candle."""

    OPEN = "open"
    HIGH = "high"
    LOW = "low"
    CLOSE = "close"
    HL2 = "hl2"


class Candle(BaseModel):
    """One fixed-interval OHLCV bar.

    The OHLC invariants (high >= open/close/low, low <= open/close/high)
    are assumed from upstream and not validated here.
    """

    model_config = ConfigDict(frozen=True)

    open: float
    high: float
    low: float
    close: float
    volume: float = 0.0
    close_time: int = 0  # epoch milliseconds
    trade_count: int = 0

    @property
    def hl2(self) -> float:
        """Median price (high + low) / 2."""
        return (self.high + self.low) / 2

    @property
    def typical_price(self) -> float:
        """Typical price (high + low + close) / 3."""
        return (self.high + self.low + self.close) / 3

    @property
    def is_bullish(self) -> bool:
        """Check if this is a bullish (green) candle."""
        return self.close > self.open

    @property
    def is_bearish(self) -> bool:
        """Check if this is a bearish (red) candle."""
        return self.close < self.open

    @property
    def body_size(self) -> float:
        """Get the absolute size of the candle body."""
        return abs(self.close - self.open)

    @property
    def range_size(self) -> float:
        """Get the full range (high - low) of the candle."""
        return self.high - self.low

    def price(self, source: Source) -> float:
        """Read the price field selected by ``source``."""
        if source == Source.HL2:
            return self.hl2
        return getattr(self, source.value)


# Chronological, oldest first. Owned by the caller and never mutated here.
CandleSeries = Sequence[Candle]


def get_source(candles: CandleSeries, source: Source = Source.CLOSE) -> list[float]:
    """Get the selected price field of every candle."""
    return [c.price(source) for c in candles]


def get_opens(candles: CandleSeries) -> list[float]:
    """Get list of open prices."""
    return [c.open for c in candles]


def get_highs(candles: CandleSeries) -> list[float]:
    """Get list of high prices."""
    return [c.high for c in candles]


def get_lows(candles: CandleSeries) -> list[float]:
    """Get list of low prices."""
    return [c.low for c in candles]


def get_closes(candles: CandleSeries) -> list[float]:
    """Get list of close prices."""
    return [c.close for c in candles]


def get_volumes(candles: CandleSeries) -> list[float]:
    """Get list of volumes."""
    return [c.volume for c in candles]
