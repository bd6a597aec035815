"""Tests for trend and volatility indicators."""

import math

import pytest

from indicator_engine.indicators import (
    adx,
    atr,
    bollinger_bands,
    cloud,
    macd,
    supertrend,
    true_range,
    vwap,
)
from indicator_engine.models import TrendState


def _wave(n: int = 200) -> tuple[list[float], list[float], list[float]]:
    closes = [100 + 10 * math.sin(i / 5) + i * 0.1 for i in range(n)]
    highs = [c + 1 for c in closes]
    lows = [c - 2 for c in closes]
    return highs, lows, closes


class TestMACD:
    def test_macd_alignment(self):
        """Line defined from slow - 1, signal signal_period - 1 bars later."""
        values = [float(i % 7) for i in range(20)]
        result = macd(values, 3, 6, 3)

        assert result.macd[4] is None
        assert result.macd[5] is not None
        assert result.signal[6] is None
        assert result.signal[7] is not None
        assert result.histogram[7] == pytest.approx(result.macd[7] - result.signal[7])

    def test_macd_flat_series(self):
        result = macd([50.0] * 40)

        assert result.macd[-1] == pytest.approx(0.0)
        assert result.signal[-1] == pytest.approx(0.0)
        assert result.histogram[-1] == pytest.approx(0.0)

    def test_fast_must_be_smaller(self):
        with pytest.raises(ValueError):
            macd([1.0] * 40, 26, 12, 9)


class TestATR:
    """Tests for ATR calculation."""

    def test_true_range_first_bar(self):
        """First bar has no previous close."""
        result = true_range([12.0, 15.0], [10.0, 13.0], [11.0, 14.0])

        assert result == [2.0, 4.0]

    def test_atr_constant_range(self):
        """Test ATR with constant range."""
        highs = [102.0] * 20
        lows = [100.0] * 20
        closes = [101.0] * 20
        result = atr(highs, lows, closes, 14)

        assert result[12] is None
        assert result[13] == pytest.approx(2.0)
        assert result[-1] == pytest.approx(2.0)


class TestBollingerBands:
    def test_flat_series_collapses(self):
        result = bollinger_bands([100.0] * 25, 20, 2.0)

        assert result.middle[-1] == 100.0
        assert result.upper[-1] == 100.0
        assert result.lower[-1] == 100.0
        assert result.upper[18] is None

    def test_population_deviation(self):
        result = bollinger_bands([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0], 8, 2.0)

        assert result.middle[-1] == pytest.approx(5.0)
        assert result.upper[-1] == pytest.approx(9.0)
        assert result.lower[-1] == pytest.approx(1.0)


class TestADX:
    def test_steady_uptrend(self):
        """Only +DM is positive: -DI is 0 and ADX saturates at 100."""
        highs = [10.0 + i for i in range(30)]
        lows = [8.0 + i for i in range(30)]
        closes = [9.0 + i for i in range(30)]
        result = adx(highs, lows, closes, 5)

        assert result.plus_di[4] is None
        assert result.plus_di[5] == pytest.approx(50.0)
        assert result.minus_di[5] == 0.0
        assert result.adx[8] is None
        assert result.adx[9] == pytest.approx(100.0)

    def test_zero_range(self):
        """Zero true range gives DI 0 and DX 0."""
        result = adx([5.0] * 20, [5.0] * 20, [5.0] * 20, 5)

        assert result.plus_di[-1] == 0.0
        assert result.adx[-1] == 0.0

    def test_bounds(self):
        highs, lows, closes = _wave()
        result = adx(highs, lows, closes, 14)

        for series in (result.adx, result.plus_di, result.minus_di):
            for value in series:
                if value is not None:
                    assert 0.0 <= value <= 100.0

    def test_single_candle(self):
        result = adx([1.0], [1.0], [1.0], 14)

        assert result.adx == [None]


class TestSupertrend:
    def test_warmup_and_initial_state(self):
        highs, lows, closes = _wave(30)
        result = supertrend(highs, lows, closes, 10, 3.0)

        assert result.supertrend[8] is None
        assert result.direction[8] is None
        # close above hl2 on the first defined bar
        assert result.direction[9] == TrendState.UP

    def test_bands_ratchet_while_state_holds(self):
        """Lower band never falls in UP, upper band never rises in DOWN."""
        highs, lows, closes = _wave()
        result = supertrend(highs, lows, closes, 10, 3.0)
        line = result.supertrend
        direction = result.direction

        for i in range(11, len(closes)):
            if not direction[i - 2] == direction[i - 1] == direction[i]:
                continue
            if direction[i] == TrendState.UP:
                assert line[i] >= line[i - 1]
                assert line[i] == result.lower[i]
            else:
                assert line[i] <= line[i - 1]
                assert line[i] == result.upper[i]

    def test_flips_down_after_a_sell_off(self):
        closes = [100.0 + i for i in range(30)]
        closes += [129.0 - 5 * i for i in range(1, 16)]
        highs = [c + 1 for c in closes]
        lows = [c - 1 for c in closes]
        result = supertrend(highs, lows, closes, 10, 3.0)

        assert all(d == TrendState.UP for d in result.direction[9:30])
        assert result.direction[-1] == TrendState.DOWN


class TestCloud:
    def test_cloud_lines_and_displacement(self):
        """Spans are shifted displacement - 1 bars forward."""
        highs = [10.0 + i for i in range(8)]
        lows = [float(i) for i in range(8)]
        result = cloud(highs, lows, 2, 3, 4, 3)

        assert result.conversion[0] is None
        assert result.conversion[1] == pytest.approx(5.5)
        assert result.base[2] == pytest.approx(6.0)

        assert result.span_a[3] is None
        assert result.span_a[4] == pytest.approx(6.25)
        assert result.span_a[7] == pytest.approx(9.25)
        assert result.span_b[4] is None
        assert result.span_b[5] == pytest.approx(6.5)
        assert len(result.span_a) == len(highs)


class TestVWAP:
    def test_equal_volumes(self):
        highs = [11.0, 12.0]
        lows = [9.0, 10.0]
        closes = [10.0, 11.0]
        result = vwap(highs, lows, closes, [5.0, 5.0])

        assert result[0] == pytest.approx(10.0)
        assert result[1] == pytest.approx(10.5)

    def test_zero_volume_reports_close(self):
        result = vwap([11.0], [9.0], [10.5], [0.0])

        assert result == [10.5]
