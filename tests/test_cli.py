"""Tests for the command-line entry point."""

import pytest

from indicator_engine.__main__ import iter_csv_candles, main
from indicator_engine.config import get_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def csv_path(tmp_path):
    lines = ["close_time,open,high,low,close,volume,trade_count"]
    for i in range(60):
        price = 100 + i * 0.5
        lines.append(f"{(i + 1) * 60000},{price},{price + 1},{price - 1},{price + 0.5},10.5,3")
    lines.append("999,bad,row")
    path = tmp_path / "candles.csv"
    path.write_text("\n".join(lines) + "\n")
    return path


class TestIterCsvCandles:
    def test_skips_header_and_malformed_rows(self, csv_path):
        candles = list(iter_csv_candles(csv_path))

        assert len(candles) == 60
        assert candles[0].close_time == 60000
        assert candles[0].close == 100.5
        assert candles[0].trade_count == 3


class TestMain:
    def test_prints_indicators_and_signals(self, csv_path, capsys):
        assert main([str(csv_path), "--signals", "rsi,macd"]) == 0

        out = capsys.readouterr().out
        assert "Indicators (60 candles)" in out
        assert "supertrend" in out
        assert "rsi" in out
        assert "macd" in out

    def test_not_enough_history(self, tmp_path, capsys):
        path = tmp_path / "short.csv"
        path.write_text("60000,1,2,0.5,1.5,3\n")

        assert main([str(path)]) == 0
        assert "not enough history" in capsys.readouterr().out

    def test_missing_file(self, tmp_path):
        assert main([str(tmp_path / "missing.csv")]) == 1

    def test_unknown_signal(self, csv_path):
        assert main([str(csv_path), "--signals", "nope"]) == 1
