"""Composite adaptive filters (HMA, JMA) and the moving-average dispatcher.

Both filters chain several passes, so their warm-up is strictly longer
than the nominal period.
"""

import math
from collections import deque
from collections.abc import Sequence

import numpy as np

from indicator_engine.indicators._series import align, as_array, check_period, pad
from indicator_engine.indicators.moving_average import (
    ema_array,
    rma_array,
    sma_array,
    vwma_array,
    wma_array,
)
from indicator_engine.models.config import MovingAverageType
from indicator_engine.models.results import IndicatorSeries

_EMPTY = np.empty(0, dtype=np.float64)

# Rolling windows of the JMA volatility estimate
_VOLTY_SHORT = 10
_VOLTY_LONG = 65


def hma_array(arr: np.ndarray, period: int) -> np.ndarray:
    """Hull: WMA(2 * WMA(n/2) - WMA(n), round(sqrt(n)))."""
    check_period(period)
    half = max(period // 2, 1)
    root = max(int(round(math.sqrt(period))), 1)

    full = wma_array(arr, period)
    if len(full) == 0:
        return _EMPTY
    fast, slow = align(wma_array(arr, half), full)
    return wma_array(2 * fast - slow, root)


def _phase_ratio(phase: float) -> float:
    if phase < -100:
        return 0.5
    if phase > 100:
        return 2.5
    return phase / 100 + 1.5


def jma_array(arr: np.ndarray, period: int = 7, phase: float = 50.0) -> np.ndarray:
    """Jurik-style adaptive moving average.

    Two-stage EMA whose smoothing factor follows a power law of the
    current deviation relative to a rolling volatility estimate. ``phase``
    in [-100, 100] biases the filter backward (lag) or forward (overshoot).

    The first ``period`` outputs are treated as warm-up.
    """
    check_period(period)
    n = len(arr)
    if n <= period:
        return _EMPTY

    phase_ratio = _phase_ratio(phase)
    half_length = 0.5 * (period - 1)
    if half_length > 0:
        len1 = max(math.log(math.sqrt(half_length)) / math.log(2.0) + 2.0, 0.0)
    else:
        len1 = 0.0
    pow1 = max(len1 - 2.0, 0.5)
    len2 = math.sqrt(half_length) * len1
    beta = 0.45 * (period - 1) / (0.45 * (period - 1) + 2)
    max_volty = len1 ** (1.0 / pow1)

    first = float(arr[0])
    upper_band = lower_band = ma1 = jma = first
    det0 = det1 = 0.0
    volty_window: deque[float] = deque(maxlen=_VOLTY_SHORT)
    vsum_window: deque[float] = deque(maxlen=_VOLTY_LONG)

    result = np.empty(n, dtype=np.float64)
    for i, price in enumerate(arr):
        del1 = price - upper_band
        del2 = price - lower_band
        volty = 0.0 if abs(del1) == abs(del2) else max(abs(del1), abs(del2))

        volty_window.append(volty)
        vsum = sum(volty_window) / len(volty_window)
        vsum_window.append(vsum)
        avg_volty = sum(vsum_window) / len(vsum_window)

        relative = volty / avg_volty if avg_volty > 0 else 1.0
        relative = max(min(relative, max_volty), 1.0)

        pow2 = relative ** pow1
        kv = (len2 / (len2 + 1)) ** math.sqrt(pow2) if len2 > 0 else 0.0
        upper_band = price if del1 > 0 else price - kv * del1
        lower_band = price if del2 < 0 else price - kv * del2

        alpha = beta ** pow2
        ma1 = (1 - alpha) * price + alpha * ma1
        det0 = (price - ma1) * (1 - beta) + beta * det0
        ma2 = ma1 + phase_ratio * det0
        det1 = (ma2 - jma) * (1 - alpha) ** 2 + alpha ** 2 * det1
        jma = jma + det1
        result[i] = jma

    return result[period:]


def moving_average_array(
    arr: np.ndarray,
    period: int,
    type: MovingAverageType = MovingAverageType.SMA,
    volumes: np.ndarray | None = None,
) -> np.ndarray:
    """Compact moving average of the requested type."""
    if type == MovingAverageType.SMA:
        return sma_array(arr, period)
    if type == MovingAverageType.EMA:
        return ema_array(arr, period)
    if type == MovingAverageType.WMA:
        return wma_array(arr, period)
    if type == MovingAverageType.RMA:
        return rma_array(arr, period)
    if type == MovingAverageType.HMA:
        return hma_array(arr, period)
    if type == MovingAverageType.JMA:
        return jma_array(arr, period)
    if type == MovingAverageType.VWMA:
        if volumes is None:
            raise ValueError("VWMA requires volumes")
        return vwma_array(arr, volumes, period)
    raise ValueError(f"Unknown moving average type: {type}")


def hma(values: Sequence[float], period: int = 9) -> IndicatorSeries:
    """
    Calculate Hull Moving Average.

    Args:
        values: Sequence of price values
        period: Nominal period

    Returns:
        List of HMA values, None for the first
        ``period + round(sqrt(period)) - 2`` positions
    """
    return pad(hma_array(as_array(values), period), len(values))


def jma(values: Sequence[float], period: int = 7, phase: float = 50.0) -> IndicatorSeries:
    """
    Calculate Jurik-style adaptive moving average.

    Args:
        values: Sequence of price values
        period: Nominal period
        phase: Phase in [-100, 100]; values outside are clamped

    Returns:
        List of JMA values, None for the first ``period`` positions
    """
    return pad(jma_array(as_array(values), period, phase), len(values))


def moving_average(
    values: Sequence[float],
    period: int,
    type: MovingAverageType = MovingAverageType.SMA,
    volumes: Sequence[float] | None = None,
) -> IndicatorSeries:
    """Calculate a moving average selected by ``type``.

    ``volumes`` is required for VWMA and ignored otherwise.
    """
    volume_arr = as_array(volumes) if volumes is not None else None
    return pad(
        moving_average_array(as_array(values), period, type, volume_arr),
        len(values),
    )
