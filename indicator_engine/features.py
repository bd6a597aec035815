"""Feature-vector assembly for an external learned decision model.

The engine only supplies the numbers: which features are enabled comes
from ``FeatureConfig``, and the vector order is fixed by
``FEATURE_ORDER`` whatever the toggles are.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum

from pydantic import BaseModel, Field

from indicator_engine.indicators.moving_average import ema
from indicator_engine.indicators.oscillators import (
    awesome_oscillator,
    cci,
    mfi,
    roc,
    rsi,
    volume_oscillator,
    williams_r,
)
from indicator_engine.indicators.trend import adx, cloud, vwap
from indicator_engine.models.candle import (
    CandleSeries,
    Source,
    get_closes,
    get_highs,
    get_lows,
    get_source,
    get_volumes,
)
from indicator_engine.models.results import IndicatorSeries

logger = logging.getLogger(__name__)

FEATURE_ORDER: tuple[str, ...] = (
    "ema21",
    "ema50",
    "ema100",
    "adx",
    "ao",
    "cci",
    "mfi",
    "roc",
    "rsi",
    "williams_r",
    "vwap",
    "kijun",
    "volume_oscillator",
    "volume",
)


class FeatureMode(str, Enum):
    INDICATORS = "indicators"  # latest indicator values
    CANDLES = "candles"  # raw recent prices


class FeatureConfig(BaseModel):
    """Feature toggles, one named field per indicator input."""

    mode: FeatureMode = FeatureMode.INDICATORS

    ema21: bool = False
    ema50: bool = False
    ema100: bool = False
    adx: bool = False
    ao: bool = False
    cci: bool = False
    mfi: bool = False
    roc: bool = False
    rsi: bool = False
    williams_r: bool = False
    vwap: bool = False
    kijun: bool = False
    volume_oscillator: bool = False
    volume: bool = False

    # Candles mode
    candle_length: int = Field(default=20, ge=1)
    candle_source: Source = Source.CLOSE

    def enabled(self) -> list[str]:
        """Enabled indicator features in vector order."""
        return [name for name in FEATURE_ORDER if getattr(self, name)]


def _latest(series: IndicatorSeries) -> float | None:
    return series[-1] if series else None


def _kijun(candles: CandleSeries) -> float | None:
    return _latest(cloud(get_highs(candles), get_lows(candles)).base)


_CALCULATORS: dict[str, Callable[[CandleSeries], float | None]] = {
    "ema21": lambda c: _latest(ema(get_closes(c), 21)),
    "ema50": lambda c: _latest(ema(get_closes(c), 50)),
    "ema100": lambda c: _latest(ema(get_closes(c), 100)),
    "adx": lambda c: _latest(adx(get_highs(c), get_lows(c), get_closes(c), 14).adx),
    "ao": lambda c: _latest(awesome_oscillator(get_highs(c), get_lows(c), 5, 25)),
    "cci": lambda c: _latest(cci(get_highs(c), get_lows(c), get_closes(c), 20)),
    "mfi": lambda c: _latest(mfi(get_highs(c), get_lows(c), get_closes(c), get_volumes(c), 14)),
    "roc": lambda c: _latest(roc(get_closes(c), 9)),
    "rsi": lambda c: _latest(rsi(get_closes(c), 14)),
    "williams_r": lambda c: _latest(williams_r(get_highs(c), get_lows(c), get_closes(c), 14)),
    "vwap": lambda c: _latest(vwap(get_highs(c), get_lows(c), get_closes(c), get_volumes(c))),
    "kijun": _kijun,
    "volume_oscillator": lambda c: _latest(volume_oscillator(get_volumes(c), 5, 10)),
    "volume": lambda c: c[-1].volume if c else None,
}


def feature_count(config: FeatureConfig) -> int:
    """Length of the vector ``build_feature_vector`` returns for ``config``."""
    if config.mode == FeatureMode.CANDLES:
        return config.candle_length + 1
    return len(config.enabled()) + 1


def build_feature_vector(
    candles: CandleSeries,
    config: FeatureConfig,
    holding_position: bool = False,
) -> list[float] | None:
    """
    Assemble the model inputs for the latest candle.

    Indicators mode: the latest value of every enabled feature in
    ``FEATURE_ORDER``. Candles mode: the last ``candle_length`` source
    prices. Both end with the holding flag (1.0 / 0.0).

    Returns:
        Feature list, or None while any enabled feature has no value yet
    """
    holding = 1.0 if holding_position else 0.0

    if config.mode == FeatureMode.CANDLES:
        if len(candles) < config.candle_length:
            logger.debug(
                "Feature vector: %d candles, need %d", len(candles), config.candle_length
            )
            return None
        prices = get_source(candles[-config.candle_length:], config.candle_source)
        return prices + [holding]

    features: list[float] = []
    for name in config.enabled():
        value = _CALCULATORS[name](candles)
        if value is None:
            logger.debug("Feature vector: %s not available with %d candles", name, len(candles))
            return None
        features.append(float(value))
    features.append(holding)
    return features
