"""Conversions between caller sequences, compact arrays and aligned series.

Kernels work on *compact* float64 arrays that hold only defined values
(the warm-up prefix is dropped, so the array is aligned to the tail of
the input). Public functions pad the compact result back with ``None``
so it lines up index-for-index with the caller's input.
"""

from collections.abc import Sequence

import numpy as np

from indicator_engine.models.results import IndicatorSeries


def as_array(values: Sequence) -> np.ndarray:
    """Convert any sequence of real numbers (float, int, Decimal) to float64."""
    return np.array([float(v) for v in values], dtype=np.float64)


def defined(series: Sequence) -> np.ndarray:
    """Drop the leading ``None`` warm-up of a series and return the rest.

    A ``None`` after the first defined value becomes NaN.
    """
    start = 0
    while start < len(series) and series[start] is None:
        start += 1
    return np.array(
        [np.nan if v is None else float(v) for v in series[start:]],
        dtype=np.float64,
    )


def pad(compact: np.ndarray, length: int) -> IndicatorSeries:
    """Left-pad a compact array with ``None`` up to ``length``."""
    values = compact.tolist()
    return [None] * (length - len(values)) + values


def align(*arrays: np.ndarray) -> tuple[np.ndarray, ...]:
    """Trim compact arrays to their common tail."""
    n = min(len(a) for a in arrays)
    return tuple(a[len(a) - n:] for a in arrays)


def shift_forward(compact: np.ndarray, offset: int, length: int) -> IndicatorSeries:
    """Pad a compact array, then displace it ``offset`` bars into the future.

    Values projected beyond the last input index are dropped.
    """
    padded = pad(compact, length)
    if offset <= 0:
        return padded
    return ([None] * offset + padded)[:length]


def check_period(period: int, name: str = "period") -> None:
    """Reject non-positive lookback periods."""
    if period < 1:
        raise ValueError(f"{name} must be >= 1, got {period}")
