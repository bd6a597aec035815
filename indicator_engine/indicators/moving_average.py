"""Moving-average primitives.

Every function is a pure function of its input and recomputes the full
window on each call; no filter state is carried between calls.

Two layers:
- ``*_array`` kernels take a float64 array and return a compact array of
  the defined values only (``len(values) - warmup``, or empty).
- Public functions take any sequence of numbers and return an
  ``IndicatorSeries`` of the same length with ``None`` for warm-up.
"""

from collections.abc import Sequence

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from indicator_engine.indicators._series import as_array, check_period, pad
from indicator_engine.models.results import IndicatorSeries

_EMPTY = np.empty(0, dtype=np.float64)


# =============================================================================
# Compact kernels
# =============================================================================

def _windows(arr: np.ndarray, period: int) -> np.ndarray | None:
    check_period(period)
    if len(arr) < period:
        return None
    return sliding_window_view(arr, period)


def sma_array(arr: np.ndarray, period: int) -> np.ndarray:
    """Arithmetic mean of each trailing window."""
    windows = _windows(arr, period)
    if windows is None:
        return _EMPTY
    return windows.mean(axis=1)


def wma_array(arr: np.ndarray, period: int) -> np.ndarray:
    """Linearly weighted mean: newest weighted ``period``, oldest ``1``."""
    windows = _windows(arr, period)
    if windows is None:
        return _EMPTY
    weights = np.arange(1, period + 1, dtype=np.float64)
    return windows @ weights / weights.sum()


def _recursive_array(arr: np.ndarray, period: int, alpha: float) -> np.ndarray:
    """Exponential filter seeded with the SMA of the first ``period`` values."""
    check_period(period)
    if len(arr) < period:
        return _EMPTY

    result = np.empty(len(arr) - period + 1, dtype=np.float64)
    result[0] = np.mean(arr[:period])
    for i, value in enumerate(arr[period:], start=1):
        result[i] = value * alpha + result[i - 1] * (1 - alpha)
    return result


def ema_array(arr: np.ndarray, period: int) -> np.ndarray:
    """EMA with smoothing factor 2 / (period + 1)."""
    return _recursive_array(arr, period, 2.0 / (period + 1))


def rma_array(arr: np.ndarray, period: int) -> np.ndarray:
    """Wilder smoothing (RMA) with smoothing factor 1 / period."""
    return _recursive_array(arr, period, 1.0 / period)


def vwma_array(closes: np.ndarray, volumes: np.ndarray, period: int) -> np.ndarray:
    """Volume-weighted mean; windows without volume fall back to the SMA."""
    windows = _windows(closes, period)
    if windows is None:
        return _EMPTY
    volume_windows = sliding_window_view(volumes, period)
    weighted = (windows * volume_windows).sum(axis=1)
    total_volume = volume_windows.sum(axis=1)
    plain = windows.mean(axis=1)
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.where(total_volume == 0, plain, weighted / total_volume)


def highest_array(arr: np.ndarray, period: int) -> np.ndarray:
    """Rolling maximum."""
    windows = _windows(arr, period)
    if windows is None:
        return _EMPTY
    return windows.max(axis=1)


def lowest_array(arr: np.ndarray, period: int) -> np.ndarray:
    """Rolling minimum."""
    windows = _windows(arr, period)
    if windows is None:
        return _EMPTY
    return windows.min(axis=1)


def stddev_array(arr: np.ndarray, period: int) -> np.ndarray:
    """Rolling population standard deviation."""
    windows = _windows(arr, period)
    if windows is None:
        return _EMPTY
    return windows.std(axis=1)


# =============================================================================
# Public API
# =============================================================================

def sma(values: Sequence[float], period: int) -> IndicatorSeries:
    """
    Calculate Simple Moving Average.

    Args:
        values: Sequence of price values
        period: SMA period

    Returns:
        List of SMA values (same length as input, None for the first
        ``period - 1`` positions; all None when input is too short)
    """
    return pad(sma_array(as_array(values), period), len(values))


def ema(values: Sequence[float], period: int) -> IndicatorSeries:
    """
    Calculate Exponential Moving Average.

    The first defined value is the SMA of the first ``period`` values;
    after that ``ema[i] = value[i] * a + ema[i-1] * (1 - a)`` with
    ``a = 2 / (period + 1)``.

    Args:
        values: Sequence of price values
        period: EMA period

    Returns:
        List of EMA values (same length as input, None for warm-up)
    """
    return pad(ema_array(as_array(values), period), len(values))


def wma(values: Sequence[float], period: int) -> IndicatorSeries:
    """Calculate Weighted Moving Average (linear weights)."""
    return pad(wma_array(as_array(values), period), len(values))


def rma(values: Sequence[float], period: int) -> IndicatorSeries:
    """
    Calculate Wilder's moving average (RMA).

    Same recursion as the EMA with smoothing factor ``1 / period``.
    Used by RSI, ATR and ADX.
    """
    return pad(rma_array(as_array(values), period), len(values))


# Wilder EMA is the same filter under another name.
wema = rma


def vwma(
    values: Sequence[float],
    volumes: Sequence[float],
    period: int = 20,
) -> IndicatorSeries:
    """Calculate Volume Weighted Moving Average."""
    return pad(vwma_array(as_array(values), as_array(volumes), period), len(values))


def highest(values: Sequence[float], period: int) -> IndicatorSeries:
    """
    Calculate highest value over lookback period.

    Args:
        values: Sequence of values (typically highs)
        period: Lookback period

    Returns:
        List of highest values
    """
    return pad(highest_array(as_array(values), period), len(values))


def lowest(values: Sequence[float], period: int) -> IndicatorSeries:
    """
    Calculate lowest value over lookback period.

    Args:
        values: Sequence of values (typically lows)
        period: Lookback period

    Returns:
        List of lowest values
    """
    return pad(lowest_array(as_array(values), period), len(values))


def stddev(values: Sequence[float], period: int) -> IndicatorSeries:
    """Calculate rolling population standard deviation."""
    return pad(stddev_array(as_array(values), period), len(values))
