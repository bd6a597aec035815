"""Multi-series indicator results.

Every series is aligned 1:1 with the input candles; ``None`` marks
warm-up positions where the indicator has no defined value yet.
"""

from __future__ import annotations

from dataclasses import dataclass

from indicator_engine.models.signal import TrendState

IndicatorSeries = list[float | None]


@dataclass(frozen=True)
class MacdResult:
    macd: IndicatorSeries
    signal: IndicatorSeries
    histogram: IndicatorSeries


@dataclass(frozen=True)
class AdxResult:
    adx: IndicatorSeries
    plus_di: IndicatorSeries
    minus_di: IndicatorSeries


@dataclass(frozen=True)
class AroonResult:
    up: IndicatorSeries
    down: IndicatorSeries

    @property
    def oscillator(self) -> IndicatorSeries:
        """Aroon oscillator (up - down)."""
        return [
            None if u is None or d is None else u - d
            for u, d in zip(self.up, self.down)
        ]


@dataclass(frozen=True)
class BollingerResult:
    middle: IndicatorSeries
    upper: IndicatorSeries
    lower: IndicatorSeries


@dataclass(frozen=True)
class SupertrendResult:
    """Supertrend line plus the band state behind it.

    Attributes:
        supertrend: Active band (lower band in UP state, upper in DOWN).
        direction: Trend state per candle.
        upper: Ratcheted upper band.
        lower: Ratcheted lower band.
    """

    supertrend: IndicatorSeries
    direction: list[TrendState | None]
    upper: IndicatorSeries
    lower: IndicatorSeries


@dataclass(frozen=True)
class CloudResult:
    """Ichimoku-style cloud.

    ``span_a``/``span_b`` are already displaced forward, so index ``i``
    holds the value plotted under candle ``i``.
    """

    conversion: IndicatorSeries
    base: IndicatorSeries
    span_a: IndicatorSeries
    span_b: IndicatorSeries
