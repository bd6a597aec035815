"""Trend indicators: MACD, ADX, Supertrend, Ichimoku-style cloud, VWAP."""

from collections.abc import Sequence

import numpy as np

from indicator_engine.indicators._series import (
    align,
    as_array,
    check_period,
    pad,
    shift_forward,
)
from indicator_engine.indicators.moving_average import (
    ema_array,
    highest_array,
    lowest_array,
    rma_array,
)
from indicator_engine.indicators.volatility import atr_array, true_range_array
from indicator_engine.models.results import (
    AdxResult,
    CloudResult,
    IndicatorSeries,
    MacdResult,
    SupertrendResult,
)
from indicator_engine.models.signal import TrendState


def macd(
    values: Sequence[float],
    fast_period: int = 12,
    slow_period: int = 26,
    signal_period: int = 9,
) -> MacdResult:
    """
    Calculate MACD.

    macd = EMA(fast) - EMA(slow), signal = EMA(macd, signal_period),
    histogram = macd - signal.

    Args:
        values: Sequence of price values (typically closes)
        fast_period: Fast EMA period
        slow_period: Slow EMA period
        signal_period: Signal line period

    Returns:
        MacdResult; the macd line is defined from index ``slow_period - 1``,
        signal and histogram ``signal_period - 1`` bars later
    """
    if fast_period >= slow_period:
        raise ValueError("fast_period must be smaller than slow_period")
    check_period(signal_period, "signal_period")

    arr = as_array(values)
    n = len(arr)
    fast, slow = align(ema_array(arr, fast_period), ema_array(arr, slow_period))
    line = fast - slow
    signal = ema_array(line, signal_period)
    line_tail, signal_tail = align(line, signal)
    return MacdResult(
        macd=pad(line, n),
        signal=pad(signal, n),
        histogram=pad(line_tail - signal_tail, n),
    )


def adx(
    highs: Sequence[float],
    lows: Sequence[float],
    closes: Sequence[float],
    period: int = 14,
) -> AdxResult:
    """
    Calculate Average Directional Index with +DI / -DI.

    +DM/-DM and the true range (from the second bar on) are Wilder-smoothed;
    DI = 100 * smoothed DM / smoothed TR, DX = 100 * |+DI - -DI| / (+DI + -DI),
    ADX = RMA(DX). Zero smoothed TR gives DI 0; zero DI sum gives DX 0.

    Returns:
        AdxResult; DI lines are defined from index ``period``, ADX from
        index ``2 * period - 1``
    """
    check_period(period)
    high = as_array(highs)
    low = as_array(lows)
    close = as_array(closes)
    n = len(close)
    if n < 2:
        empty: IndicatorSeries = [None] * n
        return AdxResult(adx=empty, plus_di=list(empty), minus_di=list(empty))

    up_move = high[1:] - high[:-1]
    down_move = low[:-1] - low[1:]
    plus_dm = np.where((up_move > down_move) & (up_move > 0), up_move, 0.0)
    minus_dm = np.where((down_move > up_move) & (down_move > 0), down_move, 0.0)
    tr = true_range_array(high, low, close)[1:]

    smoothed_tr = rma_array(tr, period)
    smoothed_plus = rma_array(plus_dm, period)
    smoothed_minus = rma_array(minus_dm, period)

    with np.errstate(divide="ignore", invalid="ignore"):
        plus_di = np.where(smoothed_tr == 0, 0.0, 100.0 * smoothed_plus / smoothed_tr)
        minus_di = np.where(smoothed_tr == 0, 0.0, 100.0 * smoothed_minus / smoothed_tr)
        di_sum = plus_di + minus_di
        dx = np.where(di_sum == 0, 0.0, 100.0 * np.abs(plus_di - minus_di) / di_sum)

    return AdxResult(
        adx=pad(rma_array(dx, period), n),
        plus_di=pad(plus_di, n),
        minus_di=pad(minus_di, n),
    )


def supertrend(
    highs: Sequence[float],
    lows: Sequence[float],
    closes: Sequence[float],
    period: int = 10,
    multiplier: float = 3.0,
) -> SupertrendResult:
    """
    Calculate Supertrend.

    Basic bands are hl2 +/- multiplier * ATR. While the trend state holds,
    the active band only ratchets toward price (upper never rises in DOWN,
    lower never falls in UP). The state flips when the close breaches the
    opposite band; a band resets to its basic value once the previous close
    crossed it, so a fresh flip starts from the new state's own band.

    The first defined bar starts UP when its close is at or above hl2,
    DOWN otherwise.

    Returns:
        SupertrendResult (defined from index ``period - 1``)
    """
    high = as_array(highs)
    low = as_array(lows)
    close = as_array(closes)
    n = len(close)

    atr_values = atr_array(high, low, close, period)
    start = n - len(atr_values)
    median = (high + low) / 2

    line: IndicatorSeries = [None] * n
    direction: list[TrendState | None] = [None] * n
    upper_band: IndicatorSeries = [None] * n
    lower_band: IndicatorSeries = [None] * n

    upper = lower = 0.0
    state = TrendState.UP
    for i in range(start, n):
        offset = multiplier * atr_values[i - start]
        basic_upper = float(median[i] + offset)
        basic_lower = float(median[i] - offset)

        if i == start:
            upper, lower = basic_upper, basic_lower
            state = TrendState.UP if close[i] >= median[i] else TrendState.DOWN
        else:
            prev_close = close[i - 1]
            if basic_upper < upper or prev_close > upper:
                upper = basic_upper
            if basic_lower > lower or prev_close < lower:
                lower = basic_lower

            if state == TrendState.DOWN and close[i] > upper:
                state = TrendState.UP
            elif state == TrendState.UP and close[i] < lower:
                state = TrendState.DOWN

        upper_band[i] = upper
        lower_band[i] = lower
        direction[i] = state
        line[i] = lower if state == TrendState.UP else upper

    return SupertrendResult(
        supertrend=line,
        direction=direction,
        upper=upper_band,
        lower=lower_band,
    )


def _midpoint_array(high: np.ndarray, low: np.ndarray, period: int) -> np.ndarray:
    return (highest_array(high, period) + lowest_array(low, period)) / 2


def cloud(
    highs: Sequence[float],
    lows: Sequence[float],
    conversion_period: int = 9,
    base_period: int = 26,
    span_period: int = 52,
    displacement: int = 26,
) -> CloudResult:
    """
    Calculate an Ichimoku-style cloud.

    conversion/base/span_b are midpoints (highest high + lowest low) / 2
    over their lookbacks; span_a = (conversion + base) / 2. Both spans are
    displaced ``displacement - 1`` bars forward, so index ``i`` holds the
    value computed ``displacement - 1`` bars earlier.
    """
    check_period(displacement, "displacement")
    high = as_array(highs)
    low = as_array(lows)
    n = len(high)

    conversion = _midpoint_array(high, low, conversion_period)
    base = _midpoint_array(high, low, base_period)
    conv_tail, base_tail = align(conversion, base)
    span_a = (conv_tail + base_tail) / 2
    span_b = _midpoint_array(high, low, span_period)

    return CloudResult(
        conversion=pad(conversion, n),
        base=pad(base, n),
        span_a=shift_forward(span_a, displacement - 1, n),
        span_b=shift_forward(span_b, displacement - 1, n),
    )


def vwap(
    highs: Sequence[float],
    lows: Sequence[float],
    closes: Sequence[float],
    volumes: Sequence[float],
) -> list[float]:
    """
    Calculate Volume Weighted Average Price (VWAP).

    Note: This is a simple cumulative VWAP. In TradingView, VWAP resets daily.
    For intraday use, you may need to reset at session boundaries.

    Returns:
        List of VWAP values; the close is reported while cumulative
        volume is still zero
    """
    close = as_array(closes)
    typical = (as_array(highs) + as_array(lows) + close) / 3
    volume = as_array(volumes)
    cum_volume = np.cumsum(volume)
    cum_pv = np.cumsum(typical * volume)
    with np.errstate(divide="ignore", invalid="ignore"):
        value = cum_pv / cum_volume
    return np.where(cum_volume > 0, value, close).tolist()
