"""Oscillator signals: zone-line crossings and zero-line crossings."""

from indicator_engine.indicators.oscillators import (
    aroon,
    rmi,
    rsi,
    smooth_awesome_oscillator,
    smooth_momentum,
)
from indicator_engine.models.candle import CandleSeries, get_closes, get_highs, get_lows, get_source
from indicator_engine.models.config import (
    AroonSignalConfig,
    RmiSignalConfig,
    RsiSignalConfig,
    SmoothAoSignalConfig,
    SmoothMomentumSignalConfig,
)
from indicator_engine.models.results import IndicatorSeries
from indicator_engine.signals.crossing import cross_down, cross_up
from indicator_engine.signals.protocol import CrossingSignal
from indicator_engine.signals.registry import register_signal


@register_signal("rsi")
class RsiSignal(CrossingSignal):
    """RSI zone lines.

    - BUY: RSI crosses up the oversold line
    - SELL: RSI crosses down the overbought line
    """

    config_model = RsiSignalConfig
    config: RsiSignalConfig

    def values(self, candles: CandleSeries) -> IndicatorSeries:
        return rsi(get_closes(candles), self.config.period)

    def is_buy_signal(self, candles: CandleSeries) -> bool | None:
        return cross_up(self.values(candles), self.config.oversold)

    def is_sell_signal(self, candles: CandleSeries) -> bool | None:
        return cross_down(self.values(candles), self.config.overbought)


@register_signal("rmi")
class RmiSignal(CrossingSignal):
    """Relative Momentum Index zone lines (same rules as RSI)."""

    config_model = RmiSignalConfig
    config: RmiSignalConfig

    def values(self, candles: CandleSeries) -> IndicatorSeries:
        return rmi(get_closes(candles), self.config.period, self.config.momentum)

    def is_buy_signal(self, candles: CandleSeries) -> bool | None:
        return cross_up(self.values(candles), self.config.oversold)

    def is_sell_signal(self, candles: CandleSeries) -> bool | None:
        return cross_down(self.values(candles), self.config.overbought)


@register_signal("aroon")
class AroonSignal(CrossingSignal):
    """Aroon Up crossing Aroon Down."""

    config_model = AroonSignalConfig
    config: AroonSignalConfig

    def is_buy_signal(self, candles: CandleSeries) -> bool | None:
        result = aroon(get_highs(candles), get_lows(candles), self.config.period)
        return cross_up(result.up, result.down)

    def is_sell_signal(self, candles: CandleSeries) -> bool | None:
        result = aroon(get_highs(candles), get_lows(candles), self.config.period)
        return cross_down(result.up, result.down)


@register_signal("smooth_momentum")
class SmoothMomentumSignal(CrossingSignal):
    """Smoothed momentum crossing the zero line."""

    config_model = SmoothMomentumSignalConfig
    config: SmoothMomentumSignalConfig

    def values(self, candles: CandleSeries) -> IndicatorSeries:
        cfg = self.config
        return smooth_momentum(
            get_source(candles, cfg.source), cfg.period, cfg.smoothing, cfg.method
        )

    def is_buy_signal(self, candles: CandleSeries) -> bool | None:
        return cross_up(self.values(candles), 0.0)

    def is_sell_signal(self, candles: CandleSeries) -> bool | None:
        return cross_down(self.values(candles), 0.0)


@register_signal("smooth_ao")
class SmoothAoSignal(CrossingSignal):
    """Smoothed Awesome Oscillator crossing the zero line."""

    config_model = SmoothAoSignalConfig
    config: SmoothAoSignalConfig

    def values(self, candles: CandleSeries) -> IndicatorSeries:
        cfg = self.config
        return smooth_awesome_oscillator(
            get_highs(candles),
            get_lows(candles),
            cfg.fast_period,
            cfg.slow_period,
            cfg.smoothing,
            cfg.method,
        )

    def is_buy_signal(self, candles: CandleSeries) -> bool | None:
        return cross_up(self.values(candles), 0.0)

    def is_sell_signal(self, candles: CandleSeries) -> bool | None:
        return cross_down(self.values(candles), 0.0)
