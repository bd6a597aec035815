"""Data models shared by indicators, signals and features."""

from indicator_engine.models.candle import (
    Candle,
    CandleSeries,
    Source,
    get_closes,
    get_highs,
    get_lows,
    get_opens,
    get_source,
    get_volumes,
)
from indicator_engine.models.config import (
    AdxSignalConfig,
    AroonSignalConfig,
    BollingerSignalConfig,
    CloudSignalConfig,
    DeviationMode,
    MacdSignalConfig,
    MovingAverageCrossSignalConfig,
    MovingAverageSignalConfig,
    MovingAverageType,
    RmiSignalConfig,
    RsiSignalConfig,
    SmoothAoSignalConfig,
    SmoothingMethod,
    SmoothMomentumSignalConfig,
    SupertrendSignalConfig,
)
from indicator_engine.models.results import (
    AdxResult,
    AroonResult,
    BollingerResult,
    CloudResult,
    IndicatorSeries,
    MacdResult,
    SupertrendResult,
)
from indicator_engine.models.signal import (
    FibonacciRetracement,
    Level,
    LevelKind,
    Pivot,
    PivotKind,
    RangeBands,
    Signal,
    TrendState,
)

__all__ = [
    "Candle",
    "CandleSeries",
    "Source",
    "get_closes",
    "get_highs",
    "get_lows",
    "get_opens",
    "get_source",
    "get_volumes",
    "AdxSignalConfig",
    "AroonSignalConfig",
    "BollingerSignalConfig",
    "CloudSignalConfig",
    "DeviationMode",
    "MacdSignalConfig",
    "MovingAverageCrossSignalConfig",
    "MovingAverageSignalConfig",
    "MovingAverageType",
    "RmiSignalConfig",
    "RsiSignalConfig",
    "SmoothAoSignalConfig",
    "SmoothingMethod",
    "SmoothMomentumSignalConfig",
    "SupertrendSignalConfig",
    "AdxResult",
    "AroonResult",
    "BollingerResult",
    "CloudResult",
    "IndicatorSeries",
    "MacdResult",
    "SupertrendResult",
    "FibonacciRetracement",
    "Level",
    "LevelKind",
    "Pivot",
    "PivotKind",
    "RangeBands",
    "Signal",
    "TrendState",
]
