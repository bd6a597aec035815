"""Technical indicators (pure math, no I/O)."""

from indicator_engine.indicators.filters import hma, jma, moving_average
from indicator_engine.indicators.moving_average import (
    ema,
    highest,
    lowest,
    rma,
    sma,
    stddev,
    vwma,
    wema,
    wma,
)
from indicator_engine.indicators.oscillators import (
    aroon,
    awesome_oscillator,
    cci,
    mfi,
    momentum,
    rmi,
    roc,
    rsi,
    smooth_awesome_oscillator,
    smooth_momentum,
    volume_oscillator,
    williams_r,
)
from indicator_engine.indicators.structure import (
    FIB_RATIOS,
    confirmed_pivots,
    fibonacci_retracement,
    pivot_points,
    range_bands,
    support_resistance,
    zigzag,
)
from indicator_engine.indicators.trend import adx, cloud, macd, supertrend, vwap
from indicator_engine.indicators.volatility import atr, bollinger_bands, true_range

__all__ = [
    "sma",
    "ema",
    "wma",
    "rma",
    "wema",
    "vwma",
    "highest",
    "lowest",
    "stddev",
    "hma",
    "jma",
    "moving_average",
    "rsi",
    "rmi",
    "aroon",
    "awesome_oscillator",
    "smooth_awesome_oscillator",
    "momentum",
    "smooth_momentum",
    "volume_oscillator",
    "cci",
    "mfi",
    "roc",
    "williams_r",
    "macd",
    "adx",
    "supertrend",
    "cloud",
    "vwap",
    "true_range",
    "atr",
    "bollinger_bands",
    "zigzag",
    "confirmed_pivots",
    "pivot_points",
    "support_resistance",
    "fibonacci_retracement",
    "range_bands",
    "FIB_RATIOS",
]
