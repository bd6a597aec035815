"""Signal crossing abstraction and signal-bearing indicators.

Public API:
- cross_up / cross_down / crossing_signal: the crossing primitive
- SignalIndicator: Protocol consumed by the trading loop
- register_signal / create_signal / list_signals / get_signal_class

Importing this package auto-registers all built-in signals.
"""

from indicator_engine.signals.crossing import cross_down, cross_up, crossing_signal
from indicator_engine.signals.protocol import CrossingSignal, SignalIndicator
from indicator_engine.signals.registry import (
    create_signal,
    get_signal_class,
    list_signals,
    register_signal,
)

# Import built-in signals to trigger auto-registration
from indicator_engine.signals.moving_average import (  # noqa: E402
    MovingAverageCrossSignal,
    MovingAverageSignal,
)
from indicator_engine.signals.oscillators import (  # noqa: E402
    AroonSignal,
    RmiSignal,
    RsiSignal,
    SmoothAoSignal,
    SmoothMomentumSignal,
)
from indicator_engine.signals.trend import (  # noqa: E402
    AdxSignal,
    BollingerSignal,
    CloudSignal,
    MacdSignal,
    SupertrendSignal,
)

__all__ = [
    "cross_up",
    "cross_down",
    "crossing_signal",
    "CrossingSignal",
    "SignalIndicator",
    "register_signal",
    "create_signal",
    "get_signal_class",
    "list_signals",
    "MovingAverageSignal",
    "MovingAverageCrossSignal",
    "RsiSignal",
    "RmiSignal",
    "AroonSignal",
    "SmoothMomentumSignal",
    "SmoothAoSignal",
    "MacdSignal",
    "AdxSignal",
    "BollingerSignal",
    "SupertrendSignal",
    "CloudSignal",
]
