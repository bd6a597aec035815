"""Structural detectors: zigzag pivots, fractal pivots, support/resistance,
Fibonacci retracement and range bands.

These track extrema across the whole series on every call; like the rest
of the engine they keep no state between calls.
"""

import logging
import math
from collections.abc import Sequence

import numpy as np

from indicator_engine.indicators._series import as_array, check_period
from indicator_engine.indicators.volatility import atr_array
from indicator_engine.models.config import DeviationMode
from indicator_engine.models.signal import (
    FibonacciRetracement,
    Level,
    LevelKind,
    Pivot,
    PivotKind,
    RangeBands,
)

logger = logging.getLogger(__name__)

FIB_RATIOS: tuple[float, ...] = (0.236, 0.382, 0.5, 0.618, 0.786)


# =============================================================================
# Zigzag
# =============================================================================

def zigzag(
    highs: Sequence[float],
    lows: Sequence[float],
    closes: Sequence[float] | None = None,
    deviation: float = 5.0,
    mode: DeviationMode = DeviationMode.PERCENT,
    atr_period: int = 14,
) -> list[Pivot]:
    """
    Detect alternating swing pivots.

    Until the first swing is known, the running highest high and lowest low
    are tracked; the first move between them that exceeds the threshold
    confirms the earlier one as a pivot. From then on the detector is
    either tracking up (revising a provisional high while highs keep rising)
    or tracking down (mirror). A reversal larger than the threshold from the
    provisional extremum confirms it and starts a provisional pivot of the
    opposite kind at the reversal candle.

    Args:
        highs: Sequence of high prices
        lows: Sequence of low prices
        closes: Sequence of close prices (required for ``DeviationMode.ATR``)
        deviation: Threshold, interpreted according to ``mode``
        mode: Percent of the extremum price, absolute price, or ATR multiples
        atr_period: ATR period for ``DeviationMode.ATR``

    Returns:
        Pivots ordered by index, strictly alternating HIGH/LOW. Only the
        last one may be provisional (``confirmed=False``).
    """
    if deviation < 0:
        raise ValueError(f"deviation must be >= 0, got {deviation}")
    high = as_array(highs)
    low = as_array(lows)
    n = len(high)

    atr_values: np.ndarray | None = None
    if mode == DeviationMode.ATR:
        if closes is None:
            raise ValueError("closes are required for ATR deviation")
        compact = atr_array(high, low, as_array(closes), atr_period)
        atr_values = np.concatenate((np.full(n - len(compact), np.inf), compact))

    def threshold(i: int, reference: float) -> float:
        if mode == DeviationMode.PERCENT:
            return abs(reference) * deviation / 100
        if mode == DeviationMode.ABSOLUTE:
            return deviation
        return deviation * atr_values[i]

    pivots: list[Pivot] = []
    kind: PivotKind | None = None  # kind of the provisional pivot
    prov_index = 0
    prov_price = 0.0
    hi_index = lo_index = 0

    for i in range(n):
        if kind is None:
            if high[i] > high[hi_index]:
                hi_index = i
            if low[i] < low[lo_index]:
                lo_index = i
            swing = high[hi_index] - low[lo_index]
            if lo_index < hi_index and swing > threshold(i, low[lo_index]):
                pivots.append(Pivot(index=lo_index, price=low[lo_index], kind=PivotKind.LOW))
                kind, prov_index, prov_price = PivotKind.HIGH, hi_index, high[hi_index]
            elif hi_index < lo_index and swing > threshold(i, high[hi_index]):
                pivots.append(Pivot(index=hi_index, price=high[hi_index], kind=PivotKind.HIGH))
                kind, prov_index, prov_price = PivotKind.LOW, lo_index, low[lo_index]
            continue

        if kind == PivotKind.HIGH:
            if high[i] > prov_price:
                prov_index, prov_price = i, high[i]
            elif prov_price - low[i] > threshold(i, prov_price):
                pivots.append(Pivot(index=prov_index, price=prov_price, kind=kind))
                kind, prov_index, prov_price = PivotKind.LOW, i, low[i]
        else:
            if low[i] < prov_price:
                prov_index, prov_price = i, low[i]
            elif high[i] - prov_price > threshold(i, prov_price):
                pivots.append(Pivot(index=prov_index, price=prov_price, kind=kind))
                kind, prov_index, prov_price = PivotKind.HIGH, i, high[i]

    if kind is not None:
        pivots.append(
            Pivot(index=prov_index, price=prov_price, kind=kind, confirmed=False)
        )
    return pivots


def confirmed_pivots(pivots: Sequence[Pivot]) -> list[Pivot]:
    """Keep only confirmed pivots."""
    return [p for p in pivots if p.confirmed]


# =============================================================================
# Fractal pivots
# =============================================================================

def pivot_points(
    highs: Sequence[float],
    lows: Sequence[float],
    left: int = 5,
    right: int = 5,
) -> list[Pivot]:
    """
    Detect fractal pivot highs and lows.

    A bar is a pivot high when its high is strictly above the ``left``
    highs before it and at or above the ``right`` highs after it (mirror
    for lows). A pivot needs ``right`` later bars, so the newest ``right``
    bars are never pivots. Unlike zigzag, kinds may repeat.
    """
    check_period(left, "left")
    check_period(right, "right")
    high = as_array(highs)
    low = as_array(lows)

    pivots: list[Pivot] = []
    for i in range(left, len(high) - right):
        if high[i] > high[i - left:i].max() and high[i] >= high[i + 1:i + right + 1].max():
            pivots.append(Pivot(index=i, price=high[i], kind=PivotKind.HIGH))
        if low[i] < low[i - left:i].min() and low[i] <= low[i + 1:i + right + 1].min():
            pivots.append(Pivot(index=i, price=low[i], kind=PivotKind.LOW))
    return pivots


# =============================================================================
# Support / resistance
# =============================================================================

def support_resistance(
    pivots: Sequence[Pivot],
    current_price: float,
    tolerance: float = 0.5,
    min_strength: int = 1,
) -> list[Level]:
    """
    Cluster confirmed pivots into horizontal levels.

    Pivots are visited in price order; a pivot joins the open cluster while
    it lies within ``tolerance`` percent of the cluster mean, otherwise it
    starts a new cluster.

    Args:
        pivots: Pivots from ``zigzag`` or ``pivot_points``
        current_price: Price used to label levels support (at or below)
            or resistance (above)
        tolerance: Proximity tolerance in percent of the cluster mean
        min_strength: Minimum number of pivots for a level to be kept

    Returns:
        Levels sorted by ascending price
    """
    if tolerance < 0:
        raise ValueError(f"tolerance must be >= 0, got {tolerance}")

    clusters: list[list[Pivot]] = []
    for pivot in sorted(confirmed_pivots(pivots), key=lambda p: (p.price, p.index)):
        if clusters:
            mean = sum(p.price for p in clusters[-1]) / len(clusters[-1])
            if abs(pivot.price - mean) <= abs(mean) * tolerance / 100:
                clusters[-1].append(pivot)
                continue
        clusters.append([pivot])

    levels = []
    for cluster in clusters:
        if len(cluster) < min_strength:
            continue
        price = sum(p.price for p in cluster) / len(cluster)
        levels.append(
            Level(
                price=price,
                strength=len(cluster),
                kind=LevelKind.SUPPORT if price <= current_price else LevelKind.RESISTANCE,
                first_index=min(p.index for p in cluster),
                last_index=max(p.index for p in cluster),
            )
        )
    return levels


# =============================================================================
# Fibonacci retracement
# =============================================================================

def fibonacci_retracement(
    pivots: Sequence[Pivot],
    ratios: Sequence[float] = FIB_RATIOS,
) -> FibonacciRetracement | None:
    """
    Calculate retracement levels of the latest confirmed swing.

    level(r) = end - (end - start) * r, so for an up-swing (low -> high)
    the levels sit below the high and for a down-swing above the low.

    Returns:
        FibonacciRetracement, or None when fewer than two confirmed
        alternating pivots exist
    """
    if not ratios:
        raise ValueError("ratios must not be empty")

    confirmed = confirmed_pivots(pivots)
    if len(confirmed) < 2:
        return None
    start, end = confirmed[-2], confirmed[-1]
    if start.kind == end.kind:
        return None

    span = end.price - start.price
    return FibonacciRetracement(
        start=start,
        end=end,
        levels={ratio: end.price - span * ratio for ratio in ratios},
    )


# =============================================================================
# Range bands
# =============================================================================

def range_bands(
    highs: Sequence[float],
    lows: Sequence[float],
    closes: Sequence[float],
    lookback: int = 50,
    width_percent: float = 1.0,
    width: float | None = None,
) -> RangeBands | None:
    """
    Partition the recent price range into fixed-width bands.

    The bands are anchored to the mean close of the last ``lookback`` bars
    and cover its lowest low to highest high. ``width`` (price units) wins
    over ``width_percent`` (percent of the reference).

    Returns:
        RangeBands, or None with fewer than ``lookback`` candles or
        non-finite prices in the window
    """
    check_period(lookback, "lookback")
    n = len(closes)
    if n < lookback:
        return None

    high = as_array(highs)[-lookback:]
    low = as_array(lows)[-lookback:]
    close = as_array(closes)[-lookback:]
    if not (np.isfinite(high).all() and np.isfinite(low).all() and np.isfinite(close).all()):
        logger.debug("range_bands: non-finite prices in window")
        return None

    reference = float(close.mean())
    band_width = width if width is not None else abs(reference) * width_percent / 100
    if band_width <= 0:
        raise ValueError(f"band width must be > 0, got {band_width}")

    first = math.floor((low.min() - reference) / band_width)
    last = math.floor((high.max() - reference) / band_width)
    bands = [
        (reference + k * band_width, reference + (k + 1) * band_width)
        for k in range(first, last + 1)
    ]
    return RangeBands(
        reference=reference,
        width=band_width,
        bands=bands,
        current_band=math.floor((close[-1] - reference) / band_width),
    )
