"""Standard indicator bundle for a candle series."""

import logging

from indicator_engine.indicators.moving_average import ema, sma
from indicator_engine.indicators.oscillators import rsi
from indicator_engine.indicators.trend import adx, macd, supertrend, vwap
from indicator_engine.indicators.volatility import atr, bollinger_bands
from indicator_engine.models.candle import (
    CandleSeries,
    get_closes,
    get_highs,
    get_lows,
    get_volumes,
)
from indicator_engine.models.results import IndicatorSeries

logger = logging.getLogger(__name__)


class IndicatorCalculator:
    """Calculator for the indicators the trading loop usually inspects."""

    def __init__(
        self,
        sma_period: int = 20,
        ema_period: int = 50,
        rsi_period: int = 14,
        atr_period: int = 14,
        adx_period: int = 14,
        bollinger_period: int = 20,
        bollinger_multiplier: float = 2.0,
        macd_fast: int = 12,
        macd_slow: int = 26,
        macd_signal: int = 9,
        supertrend_period: int = 10,
        supertrend_multiplier: float = 3.0,
    ):
        self.sma_period = sma_period
        self.ema_period = ema_period
        self.rsi_period = rsi_period
        self.atr_period = atr_period
        self.adx_period = adx_period
        self.bollinger_period = bollinger_period
        self.bollinger_multiplier = bollinger_multiplier
        self.macd_fast = macd_fast
        self.macd_slow = macd_slow
        self.macd_signal = macd_signal
        self.supertrend_period = supertrend_period
        self.supertrend_multiplier = supertrend_multiplier

    @property
    def min_candles(self) -> int:
        """Candles needed before every bundled indicator has a value."""
        return max(
            self.sma_period,
            self.ema_period,
            self.rsi_period + 1,
            self.atr_period,
            2 * self.adx_period,
            self.bollinger_period,
            self.macd_slow + self.macd_signal - 1,
            self.supertrend_period,
        )

    def calculate_all(self, candles: CandleSeries) -> dict[str, IndicatorSeries]:
        """
        Calculate all indicators for the given candles.

        Returns:
            Dict of indicator name -> series aligned with ``candles``
        """
        highs = get_highs(candles)
        lows = get_lows(candles)
        closes = get_closes(candles)
        volumes = get_volumes(candles)

        macd_result = macd(closes, self.macd_fast, self.macd_slow, self.macd_signal)
        adx_result = adx(highs, lows, closes, self.adx_period)
        bands = bollinger_bands(closes, self.bollinger_period, self.bollinger_multiplier)
        trend = supertrend(
            highs, lows, closes, self.supertrend_period, self.supertrend_multiplier
        )

        return {
            "sma": sma(closes, self.sma_period),
            "ema": ema(closes, self.ema_period),
            "rsi": rsi(closes, self.rsi_period),
            "atr": atr(highs, lows, closes, self.atr_period),
            "macd": macd_result.macd,
            "macd_signal": macd_result.signal,
            "macd_histogram": macd_result.histogram,
            "adx": adx_result.adx,
            "plus_di": adx_result.plus_di,
            "minus_di": adx_result.minus_di,
            "bb_middle": bands.middle,
            "bb_upper": bands.upper,
            "bb_lower": bands.lower,
            "supertrend": trend.supertrend,
            "vwap": vwap(highs, lows, closes, volumes),
        }

    def calculate_latest(self, candles: CandleSeries) -> dict[str, float | None] | None:
        """
        Calculate indicators for the latest candle only.

        Returns:
            Dict with indicator values for the latest candle, or None if
            not enough data
        """
        if len(candles) < self.min_candles:
            logger.debug(
                "Not enough candles for indicator bundle: %d < %d",
                len(candles),
                self.min_candles,
            )
            return None

        return {name: series[-1] for name, series in self.calculate_all(candles).items()}
