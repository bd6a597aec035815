"""Oscillators: bounded or semi-bounded series derived from price/volume.

Division-by-zero conventions:
- RSI/RMI: zero average loss -> 100
- MFI: zero negative money flow -> 100
- CCI: zero mean deviation -> 0
- Williams %R: flat high/low range -> -50
- ROC: zero base price -> 0
- Volume oscillator: zero long average -> 0
"""

from collections.abc import Sequence

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from indicator_engine.indicators._series import align, as_array, check_period, pad
from indicator_engine.indicators.moving_average import (
    ema_array,
    highest_array,
    lowest_array,
    rma_array,
    sma_array,
)
from indicator_engine.models.config import SmoothingMethod
from indicator_engine.models.results import AroonResult, IndicatorSeries

_EMPTY = np.empty(0, dtype=np.float64)


def _lagged_diff(arr: np.ndarray, lag: int) -> np.ndarray:
    check_period(lag, "lag")
    if len(arr) <= lag:
        return _EMPTY
    return arr[lag:] - arr[:-lag]


def _smooth(arr: np.ndarray, period: int, method: SmoothingMethod) -> np.ndarray:
    if method == SmoothingMethod.EMA:
        return ema_array(arr, period)
    return sma_array(arr, period)


def relative_strength_array(arr: np.ndarray, period: int, lag: int = 1) -> np.ndarray:
    """100 - 100 / (1 + RMA(gains) / RMA(losses)) over ``lag``-bar changes."""
    check_period(period)
    diffs = _lagged_diff(arr, lag)
    gains = np.maximum(diffs, 0.0)
    losses = np.maximum(-diffs, 0.0)
    avg_gain = rma_array(gains, period)
    avg_loss = rma_array(losses, period)
    with np.errstate(divide="ignore", invalid="ignore"):
        value = 100.0 - 100.0 / (1.0 + avg_gain / avg_loss)
    return np.where(avg_loss == 0, 100.0, value)


def rsi(values: Sequence[float], period: int = 14) -> IndicatorSeries:
    """
    Calculate Relative Strength Index (Wilder).

    RSI = 100 - 100 / (1 + RS), RS = RMA(gains, period) / RMA(losses, period)

    Args:
        values: Sequence of close prices
        period: RSI period

    Returns:
        List of RSI values, None for the first ``period`` positions
        (the first change needs two closes)
    """
    return pad(relative_strength_array(as_array(values), period), len(values))


def rmi(values: Sequence[float], period: int = 20, momentum: int = 5) -> IndicatorSeries:
    """
    Calculate Relative Momentum Index.

    RSI computed on ``momentum``-bar changes instead of one-bar changes.
    None for the first ``period + momentum - 1`` positions.
    """
    return pad(relative_strength_array(as_array(values), period, momentum), len(values))


def aroon(
    highs: Sequence[float],
    lows: Sequence[float],
    period: int = 25,
) -> AroonResult:
    """
    Calculate Aroon Up / Down.

    AroonUp = 100 * (period - bars since highest high) / period over the
    last ``period + 1`` bars; AroonDown mirrors it on lows. Ties resolve to
    the most recent bar.

    Args:
        highs: Sequence of high prices
        lows: Sequence of low prices
        period: Lookback period

    Returns:
        AroonResult with up and down series (None for the first
        ``period`` positions)
    """
    check_period(period)
    high_arr = as_array(highs)
    low_arr = as_array(lows)
    n = len(high_arr)
    if n <= period:
        return AroonResult(up=[None] * n, down=[None] * n)

    high_windows = sliding_window_view(high_arr, period + 1)
    low_windows = sliding_window_view(low_arr, period + 1)
    # argmax/argmin on the reversed window give bars since the newest extreme
    since_high = np.argmax(high_windows[:, ::-1], axis=1)
    since_low = np.argmin(low_windows[:, ::-1], axis=1)

    up = 100.0 * (period - since_high) / period
    down = 100.0 * (period - since_low) / period
    up = np.where(np.isnan(high_windows).any(axis=1), np.nan, up)
    down = np.where(np.isnan(low_windows).any(axis=1), np.nan, down)
    return AroonResult(up=pad(up, n), down=pad(down, n))


def awesome_oscillator_array(
    highs: np.ndarray,
    lows: np.ndarray,
    fast_period: int = 5,
    slow_period: int = 34,
) -> np.ndarray:
    """SMA(hl2, fast) - SMA(hl2, slow)."""
    if fast_period >= slow_period:
        raise ValueError("fast_period must be smaller than slow_period")
    median = (highs + lows) / 2
    fast, slow = align(sma_array(median, fast_period), sma_array(median, slow_period))
    return fast - slow


def awesome_oscillator(
    highs: Sequence[float],
    lows: Sequence[float],
    fast_period: int = 5,
    slow_period: int = 34,
) -> IndicatorSeries:
    """Calculate the Awesome Oscillator on the median price."""
    return pad(
        awesome_oscillator_array(as_array(highs), as_array(lows), fast_period, slow_period),
        len(highs),
    )


def smooth_awesome_oscillator(
    highs: Sequence[float],
    lows: Sequence[float],
    fast_period: int = 5,
    slow_period: int = 34,
    smoothing: int = 5,
    method: SmoothingMethod = SmoothingMethod.SMA,
) -> IndicatorSeries:
    """Calculate the Awesome Oscillator passed through one more SMA/EMA pass."""
    ao = awesome_oscillator_array(as_array(highs), as_array(lows), fast_period, slow_period)
    return pad(_smooth(ao, smoothing, method), len(highs))


def momentum(values: Sequence[float], period: int = 10) -> IndicatorSeries:
    """Calculate raw momentum: value - value ``period`` bars ago."""
    return pad(_lagged_diff(as_array(values), period), len(values))


def smooth_momentum(
    values: Sequence[float],
    period: int = 10,
    smoothing: int = 10,
    method: SmoothingMethod = SmoothingMethod.SMA,
) -> IndicatorSeries:
    """
    Calculate smoothed momentum.

    Args:
        values: Sequence of price values
        period: Momentum lookback
        smoothing: Period of the smoothing pass
        method: SMA or EMA smoothing

    Returns:
        List of values, None for the first ``period + smoothing - 1``
        positions
    """
    raw = _lagged_diff(as_array(values), period)
    return pad(_smooth(raw, smoothing, method), len(values))


def volume_oscillator(
    volumes: Sequence[float],
    short_period: int = 5,
    long_period: int = 10,
) -> IndicatorSeries:
    """
    Calculate the Volume Oscillator.

    100 * (SMA(volume, short) - SMA(volume, long)) / SMA(volume, long)

    Returns:
        List of percentages; 0 where the long average is zero
    """
    if short_period >= long_period:
        raise ValueError("short_period must be smaller than long_period")
    arr = as_array(volumes)
    short, long = align(sma_array(arr, short_period), sma_array(arr, long_period))
    with np.errstate(divide="ignore", invalid="ignore"):
        value = 100.0 * (short - long) / long
    return pad(np.where(long == 0, 0.0, value), len(volumes))


def cci(
    highs: Sequence[float],
    lows: Sequence[float],
    closes: Sequence[float],
    period: int = 20,
) -> IndicatorSeries:
    """Calculate Commodity Channel Index on the typical price."""
    check_period(period)
    typical = (as_array(highs) + as_array(lows) + as_array(closes)) / 3
    n = len(typical)
    if n < period:
        return [None] * n

    windows = sliding_window_view(typical, period)
    mean = windows.mean(axis=1)
    mean_deviation = np.abs(windows - mean[:, None]).mean(axis=1)
    with np.errstate(divide="ignore", invalid="ignore"):
        value = (typical[period - 1:] - mean) / (0.015 * mean_deviation)
    return pad(np.where(mean_deviation == 0, 0.0, value), n)


def mfi(
    highs: Sequence[float],
    lows: Sequence[float],
    closes: Sequence[float],
    volumes: Sequence[float],
    period: int = 14,
) -> IndicatorSeries:
    """Calculate Money Flow Index (volume-weighted RSI on the typical price)."""
    check_period(period)
    typical = (as_array(highs) + as_array(lows) + as_array(closes)) / 3
    n = len(typical)
    if n <= period:
        return [None] * n

    flow = (typical * as_array(volumes))[1:]
    change = np.diff(typical)
    positive = np.where(change > 0, flow, 0.0)
    negative = np.where(change < 0, flow, 0.0)
    positive_sum = sliding_window_view(positive, period).sum(axis=1)
    negative_sum = sliding_window_view(negative, period).sum(axis=1)
    with np.errstate(divide="ignore", invalid="ignore"):
        value = 100.0 - 100.0 / (1.0 + positive_sum / negative_sum)
    return pad(np.where(negative_sum == 0, 100.0, value), n)


def roc(values: Sequence[float], period: int = 9) -> IndicatorSeries:
    """Calculate Rate of Change in percent."""
    arr = as_array(values)
    diff = _lagged_diff(arr, period)
    base = arr[: len(diff)]
    with np.errstate(divide="ignore", invalid="ignore"):
        value = 100.0 * diff / base
    return pad(np.where(base == 0, 0.0, value), len(values))


def williams_r(
    highs: Sequence[float],
    lows: Sequence[float],
    closes: Sequence[float],
    period: int = 14,
) -> IndicatorSeries:
    """Calculate Williams %R in [-100, 0]."""
    close_arr = as_array(closes)
    hh = highest_array(as_array(highs), period)
    ll = lowest_array(as_array(lows), period)
    close_tail = close_arr[len(close_arr) - len(hh):]
    span = hh - ll
    with np.errstate(divide="ignore", invalid="ignore"):
        value = -100.0 * (hh - close_tail) / span
    return pad(np.where(span == 0, -50.0, value), len(closes))
