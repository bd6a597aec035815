"""Signal registry for discovering and instantiating signal indicators.

Usage:
    @register_signal("my_signal")
    class MySignal(CrossingSignal):
        ...

    rsi_signal = create_signal("rsi", overbought=80)
    names = list_signals()
"""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)

# Global registry: signal_name -> signal class
_REGISTRY: dict[str, type] = {}


def register_signal(name: str):
    """Decorator to register a signal class under a given name.

    The name is also stored on the class as ``signal_name``.

    Raises:
        ValueError: If a signal with the same name is already registered.
    """

    def decorator(cls):
        if name in _REGISTRY:
            raise ValueError(
                f"Signal '{name}' is already registered by {_REGISTRY[name].__name__}"
            )
        cls.signal_name = name
        _REGISTRY[name] = cls
        logger.debug("Registered signal: %s -> %s", name, cls.__name__)
        return cls

    return decorator


def get_signal_class(name: str) -> type:
    """Get the signal class by name (without instantiating).

    Raises:
        KeyError: If no signal is registered under the given name.
    """
    cls = _REGISTRY.get(name)
    if cls is None:
        available = ", ".join(sorted(_REGISTRY.keys())) or "(none)"
        raise KeyError(f"Unknown signal '{name}'. Available: {available}")
    return cls


def create_signal(name: str, **kwargs: Any):
    """Create a signal instance by name.

    Args:
        name: Registered signal name.
        **kwargs: ``config=`` and/or config field overrides.

    Raises:
        KeyError: If no signal is registered under the given name.
    """
    return get_signal_class(name)(**kwargs)


def list_signals() -> list[str]:
    """Return a sorted list of registered signal names."""
    return sorted(_REGISTRY.keys())
