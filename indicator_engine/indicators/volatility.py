"""Volatility indicators: True Range, ATR, Bollinger Bands."""

from collections.abc import Sequence

import numpy as np

from indicator_engine.indicators._series import as_array, pad
from indicator_engine.indicators.moving_average import rma_array, sma_array, stddev_array
from indicator_engine.models.results import BollingerResult, IndicatorSeries


def true_range_array(highs: np.ndarray, lows: np.ndarray, closes: np.ndarray) -> np.ndarray:
    """TR = max(high - low, |high - prev_close|, |low - prev_close|).

    The first bar has no previous close and uses high - low.
    """
    if len(highs) == 0:
        return np.empty(0, dtype=np.float64)

    hl = highs - lows
    prev_close = closes[:-1]
    hc = np.abs(highs[1:] - prev_close)
    lc = np.abs(lows[1:] - prev_close)
    rest = np.maximum(np.maximum(hl[1:], hc), lc)
    return np.concatenate((hl[:1], rest))


def atr_array(
    highs: np.ndarray,
    lows: np.ndarray,
    closes: np.ndarray,
    period: int = 14,
) -> np.ndarray:
    """Wilder-smoothed true range."""
    return rma_array(true_range_array(highs, lows, closes), period)


def true_range(
    highs: Sequence[float],
    lows: Sequence[float],
    closes: Sequence[float],
) -> list[float]:
    """
    Calculate True Range.

    TR = max(high - low, abs(high - prev_close), abs(low - prev_close))

    Args:
        highs: Sequence of high prices
        lows: Sequence of low prices
        closes: Sequence of close prices

    Returns:
        List of True Range values (defined from the first bar)
    """
    return true_range_array(as_array(highs), as_array(lows), as_array(closes)).tolist()


def atr(
    highs: Sequence[float],
    lows: Sequence[float],
    closes: Sequence[float],
    period: int = 14,
) -> IndicatorSeries:
    """
    Calculate Average True Range (ATR).

    Uses RMA (Relative Moving Average) / Wilder's smoothing.

    Args:
        highs: Sequence of high prices
        lows: Sequence of low prices
        closes: Sequence of close prices
        period: ATR period

    Returns:
        List of ATR values (None for the first ``period - 1`` positions)
    """
    return pad(
        atr_array(as_array(highs), as_array(lows), as_array(closes), period),
        len(closes),
    )


def bollinger_bands(
    values: Sequence[float],
    period: int = 20,
    multiplier: float = 2.0,
) -> BollingerResult:
    """
    Calculate Bollinger Bands.

    middle = SMA(values, period), upper/lower = middle +/- k * stddev,
    with the population standard deviation of the same window.

    Args:
        values: Sequence of price values (typically closes)
        period: Lookback period
        multiplier: Band width ``k`` in standard deviations

    Returns:
        BollingerResult with middle, upper and lower series
    """
    arr = as_array(values)
    middle = sma_array(arr, period)
    deviation = stddev_array(arr, period) * multiplier
    n = len(values)
    return BollingerResult(
        middle=pad(middle, n),
        upper=pad(middle + deviation, n),
        lower=pad(middle - deviation, n),
    )
