"""Engine configuration."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from indicator_engine.features import FeatureConfig
from indicator_engine.models.config import RsiSignalConfig
from indicator_engine.signals import SignalIndicator, create_signal


class EngineSettings(BaseSettings):
    """Engine settings loaded from environment variables.

    Nested fields use ``__``, e.g. ``INDICATOR_ENGINE_RSI__OVERSOLD=30``.
    """

    model_config = SettingsConfigDict(
        env_prefix="INDICATOR_ENGINE_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"

    # Signals the trading loop combines (RSI or price/SMA crossing)
    enabled_signals: list[str] = ["rsi", "moving_average"]

    # RSI zone lines (75/35)
    rsi: RsiSignalConfig = RsiSignalConfig()

    # Inputs for the learned decision model
    features: FeatureConfig = FeatureConfig()


@lru_cache
def get_settings() -> EngineSettings:
    """Get cached settings instance."""
    return EngineSettings()


def signals_from_settings(settings: EngineSettings | None = None) -> list[SignalIndicator]:
    """Instantiate the enabled signals, in configured order.

    Raises:
        KeyError: If an enabled signal name is not registered.
    """
    settings = settings or get_settings()
    signals = []
    for name in settings.enabled_signals:
        if name == "rsi":
            signals.append(create_signal(name, config=settings.rsi))
        else:
            signals.append(create_signal(name))
    return signals
