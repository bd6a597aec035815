"""Tests for engine settings."""

import pytest

from indicator_engine.config import EngineSettings, get_settings, signals_from_settings
from indicator_engine.signals import MovingAverageSignal, RsiSignal


@pytest.fixture(autouse=True)
def _clear_settings_cache(monkeypatch, tmp_path):
    # Keep a developer's .env out of the tests
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestEngineSettings:
    def test_defaults(self):
        settings = EngineSettings()

        assert settings.log_level == "INFO"
        assert settings.enabled_signals == ["rsi", "moving_average"]
        assert settings.rsi.period == 14
        assert settings.rsi.overbought == 75.0
        assert settings.rsi.oversold == 35.0
        assert settings.features.enabled() == []

    def test_nested_env_override(self, monkeypatch):
        monkeypatch.setenv("INDICATOR_ENGINE_RSI__OVERSOLD", "30")
        monkeypatch.setenv("INDICATOR_ENGINE_FEATURES__RSI", "true")

        settings = EngineSettings()

        assert settings.rsi.oversold == 30.0
        assert settings.rsi.overbought == 75.0
        assert settings.features.enabled() == ["rsi"]

    def test_list_env_override(self, monkeypatch):
        monkeypatch.setenv("INDICATOR_ENGINE_ENABLED_SIGNALS", '["macd", "supertrend"]')

        assert EngineSettings().enabled_signals == ["macd", "supertrend"]

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestSignalsFromSettings:
    def test_default_signals(self):
        signals = signals_from_settings(EngineSettings())

        assert isinstance(signals[0], RsiSignal)
        assert isinstance(signals[1], MovingAverageSignal)

    def test_rsi_uses_configured_zones(self, monkeypatch):
        monkeypatch.setenv("INDICATOR_ENGINE_RSI__OVERBOUGHT", "80")

        signals = signals_from_settings()

        assert signals[0].config.overbought == 80.0

    def test_unknown_signal(self):
        settings = EngineSettings(enabled_signals=["nope"])

        with pytest.raises(KeyError):
            signals_from_settings(settings)
