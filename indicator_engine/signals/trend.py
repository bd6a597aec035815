"""Trend and volatility signals: line-vs-line and price-vs-band crossings."""

from indicator_engine.indicators.trend import adx, cloud, macd, supertrend
from indicator_engine.indicators.volatility import bollinger_bands
from indicator_engine.models.candle import (
    CandleSeries,
    get_closes,
    get_highs,
    get_lows,
    get_source,
)
from indicator_engine.models.config import (
    AdxSignalConfig,
    BollingerSignalConfig,
    CloudSignalConfig,
    MacdSignalConfig,
    SupertrendSignalConfig,
)
from indicator_engine.models.results import (
    AdxResult,
    BollingerResult,
    CloudResult,
    MacdResult,
    SupertrendResult,
)
from indicator_engine.signals.crossing import cross_down, cross_up
from indicator_engine.signals.protocol import CrossingSignal
from indicator_engine.signals.registry import register_signal


@register_signal("macd")
class MacdSignal(CrossingSignal):
    """MACD line crossing its signal line."""

    config_model = MacdSignalConfig
    config: MacdSignalConfig

    def values(self, candles: CandleSeries) -> MacdResult:
        cfg = self.config
        return macd(
            get_source(candles, cfg.source),
            cfg.fast_period,
            cfg.slow_period,
            cfg.signal_period,
        )

    def is_buy_signal(self, candles: CandleSeries) -> bool | None:
        result = self.values(candles)
        return cross_up(result.macd, result.signal)

    def is_sell_signal(self, candles: CandleSeries) -> bool | None:
        result = self.values(candles)
        return cross_down(result.macd, result.signal)


@register_signal("adx")
class AdxSignal(CrossingSignal):
    """+DI crossing -DI."""

    config_model = AdxSignalConfig
    config: AdxSignalConfig

    def values(self, candles: CandleSeries) -> AdxResult:
        return adx(
            get_highs(candles), get_lows(candles), get_closes(candles), self.config.period
        )

    def is_buy_signal(self, candles: CandleSeries) -> bool | None:
        result = self.values(candles)
        return cross_up(result.plus_di, result.minus_di)

    def is_sell_signal(self, candles: CandleSeries) -> bool | None:
        result = self.values(candles)
        return cross_down(result.plus_di, result.minus_di)


@register_signal("bollinger_bands")
class BollingerSignal(CrossingSignal):
    """Price re-entering the bands.

    - BUY: price crosses up through the lower band
    - SELL: price crosses down through the upper band
    """

    config_model = BollingerSignalConfig
    config: BollingerSignalConfig

    def _prices_and_bands(self, candles: CandleSeries) -> tuple[list[float], BollingerResult]:
        prices = get_source(candles, self.config.source)
        return prices, bollinger_bands(prices, self.config.period, self.config.multiplier)

    def is_buy_signal(self, candles: CandleSeries) -> bool | None:
        prices, bands = self._prices_and_bands(candles)
        return cross_up(prices, bands.lower)

    def is_sell_signal(self, candles: CandleSeries) -> bool | None:
        prices, bands = self._prices_and_bands(candles)
        return cross_down(prices, bands.upper)


@register_signal("supertrend")
class SupertrendSignal(CrossingSignal):
    """Close crossing the supertrend line, i.e. a trend state flip."""

    config_model = SupertrendSignalConfig
    config: SupertrendSignalConfig

    def values(self, candles: CandleSeries) -> SupertrendResult:
        return supertrend(
            get_highs(candles),
            get_lows(candles),
            get_closes(candles),
            self.config.period,
            self.config.multiplier,
        )

    def is_buy_signal(self, candles: CandleSeries) -> bool | None:
        return cross_up(get_closes(candles), self.values(candles).supertrend)

    def is_sell_signal(self, candles: CandleSeries) -> bool | None:
        return cross_down(get_closes(candles), self.values(candles).supertrend)


@register_signal("cloud")
class CloudSignal(CrossingSignal):
    """Cloud conversion line crossing the base line."""

    config_model = CloudSignalConfig
    config: CloudSignalConfig

    def values(self, candles: CandleSeries) -> CloudResult:
        cfg = self.config
        return cloud(
            get_highs(candles),
            get_lows(candles),
            cfg.conversion_period,
            cfg.base_period,
            cfg.span_period,
            cfg.displacement,
        )

    def is_buy_signal(self, candles: CandleSeries) -> bool | None:
        result = self.values(candles)
        return cross_up(result.conversion, result.base)

    def is_sell_signal(self, candles: CandleSeries) -> bool | None:
        result = self.values(candles)
        return cross_down(result.conversion, result.base)
