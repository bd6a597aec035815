"""Protocol every signal-bearing indicator satisfies, plus a shared base.

This module provides:
- SignalIndicator: Runtime-checkable Protocol consumed by the trading loop
- CrossingSignal: Base class deriving ``signal()`` from the buy/sell checks
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Protocol, runtime_checkable

from pydantic import BaseModel

from indicator_engine.models.candle import CandleSeries
from indicator_engine.models.signal import Signal

logger = logging.getLogger(__name__)


@runtime_checkable
class SignalIndicator(Protocol):
    """Protocol that all signal-bearing indicators implement.

    Each check is one crossing over the latest two points and returns
    ``None`` while there is not enough history for a verdict.
    """

    @property
    def name(self) -> str:
        """Registered signal name (e.g., 'rsi')."""
        ...

    def is_buy_signal(self, candles: CandleSeries) -> bool | None:
        """Return True when the buy crossing happened on the latest candle."""
        ...

    def is_sell_signal(self, candles: CandleSeries) -> bool | None:
        """Return True when the sell crossing happened on the latest candle."""
        ...

    def signal(self, candles: CandleSeries) -> Signal | None:
        """Combine both checks into a single Signal."""
        ...


class CrossingSignal:
    """Base for signals built from :func:`cross_up` / :func:`cross_down`.

    Subclasses set ``signal_name`` and ``config_model`` and implement the
    two checks.
    """

    signal_name: ClassVar[str]
    config_model: ClassVar[type[BaseModel]]

    def __init__(self, config: BaseModel | None = None, **overrides: Any):
        if config is None:
            config = self.config_model(**overrides)
        elif overrides:
            config = config.model_copy(update=overrides)
        self.config = config

    @property
    def name(self) -> str:
        return self.signal_name

    def is_buy_signal(self, candles: CandleSeries) -> bool | None:
        raise NotImplementedError

    def is_sell_signal(self, candles: CandleSeries) -> bool | None:
        raise NotImplementedError

    def signal(self, candles: CandleSeries) -> Signal | None:
        buy = self.is_buy_signal(candles)
        if buy is None:
            logger.debug("%s: no verdict with %d candles", self.name, len(candles))
            return None
        if buy:
            return Signal.BUY
        if self.is_sell_signal(candles):
            return Signal.SELL
        return Signal.NONE

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.config!r})"
