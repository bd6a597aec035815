"""Moving-average signals: price vs. average and fast vs. slow average."""

from indicator_engine.indicators.filters import moving_average
from indicator_engine.models.candle import CandleSeries, get_source, get_volumes
from indicator_engine.models.config import (
    MovingAverageCrossSignalConfig,
    MovingAverageSignalConfig,
    MovingAverageType,
)
from indicator_engine.models.results import IndicatorSeries
from indicator_engine.signals.crossing import cross_down, cross_up
from indicator_engine.signals.protocol import CrossingSignal
from indicator_engine.signals.registry import register_signal


def _average(
    candles: CandleSeries,
    prices: list[float],
    period: int,
    type: MovingAverageType,
) -> IndicatorSeries:
    volumes = get_volumes(candles) if type == MovingAverageType.VWMA else None
    return moving_average(prices, period, type, volumes)


@register_signal("moving_average")
class MovingAverageSignal(CrossingSignal):
    """Price crossing a moving average.

    - BUY: price crosses above the average
    - SELL: price crosses below the average
    """

    config_model = MovingAverageSignalConfig
    config: MovingAverageSignalConfig

    def _series(self, candles: CandleSeries) -> tuple[list[float], IndicatorSeries]:
        prices = get_source(candles, self.config.source)
        return prices, _average(candles, prices, self.config.period, self.config.type)

    def is_buy_signal(self, candles: CandleSeries) -> bool | None:
        prices, average = self._series(candles)
        return cross_up(prices, average)

    def is_sell_signal(self, candles: CandleSeries) -> bool | None:
        prices, average = self._series(candles)
        return cross_down(prices, average)


@register_signal("moving_average_cross")
class MovingAverageCrossSignal(CrossingSignal):
    """Fast moving average crossing a slow one (golden/death cross)."""

    config_model = MovingAverageCrossSignalConfig
    config: MovingAverageCrossSignalConfig

    def _series(self, candles: CandleSeries) -> tuple[IndicatorSeries, IndicatorSeries]:
        cfg = self.config
        prices = get_source(candles, cfg.source)
        fast = _average(candles, prices, cfg.fast_period, cfg.type)
        slow = _average(candles, prices, cfg.slow_period, cfg.type)
        return fast, slow

    def is_buy_signal(self, candles: CandleSeries) -> bool | None:
        fast, slow = self._series(candles)
        return cross_up(fast, slow)

    def is_sell_signal(self, candles: CandleSeries) -> bool | None:
        fast, slow = self._series(candles)
        return cross_down(fast, slow)
