"""Tests for oscillators."""

import math

import pytest

from indicator_engine.indicators import (
    aroon,
    awesome_oscillator,
    cci,
    mfi,
    momentum,
    rmi,
    roc,
    rsi,
    smooth_awesome_oscillator,
    smooth_momentum,
    volume_oscillator,
    williams_r,
)

# Wilder's worked example
WILDER_CLOSES = [
    44.34, 44.09, 44.15, 43.61, 44.33, 44.83, 45.10, 45.42,
    45.84, 46.08, 45.89, 46.03, 45.61, 46.28, 46.28,
]


class TestRSI:
    """Tests for RSI calculation."""

    def test_rsi_reference_values(self):
        """RSI matches the hand-computed Wilder values."""
        result = rsi(WILDER_CLOSES + [46.00], 14)

        assert result[14] == pytest.approx(70.464, abs=0.01)
        assert result[15] == pytest.approx(66.25, abs=0.01)

    def test_rsi_warmup(self):
        """First value needs period + 1 closes."""
        assert rsi(WILDER_CLOSES[:14], 14) == [None] * 14

        result = rsi(WILDER_CLOSES, 14)
        assert all(v is None for v in result[:14])
        assert result[14] is not None

    def test_rsi_all_gains(self):
        """Test RSI with all gains should be high."""
        values = [float(i) for i in range(100, 120)]
        result = rsi(values, 14)

        assert result[-1] == pytest.approx(100.0)

    def test_rsi_all_losses(self):
        """Test RSI with all losses should be low."""
        values = [float(i) for i in range(120, 100, -1)]
        result = rsi(values, 14)

        assert result[-1] == pytest.approx(0.0)

    def test_rsi_flat_series(self):
        """Zero average loss reports 100, even without gains."""
        result = rsi([50.0] * 20, 14)

        assert result[-1] == 100.0

    def test_rsi_bounds(self):
        values = [100 + 5 * math.sin(i / 2) + (i % 3) for i in range(80)]

        for value in rsi(values, 14):
            if value is not None:
                assert 0.0 <= value <= 100.0


class TestRMI:
    def test_momentum_one_equals_rsi(self):
        """RMI over one-bar changes is RSI."""
        values = WILDER_CLOSES + [46.00, 45.8, 46.4]

        assert rmi(values, 14, 1) == rsi(values, 14)

    def test_rmi_warmup(self):
        """None for the first period + momentum - 1 positions."""
        result = rmi([float(i % 4) for i in range(40)], 20, 5)

        assert all(v is None for v in result[:24])
        assert result[24] is not None


class TestAroon:
    """Tests for Aroon Up / Down."""

    def test_aroon_rising_series(self):
        """A new high every bar pins Up at 100 and Down at 0."""
        values = [float(i) for i in range(10)]
        result = aroon(values, values, 5)

        assert all(v is None for v in result.up[:5])
        assert result.up[-1] == 100.0
        assert result.down[-1] == 0.0
        assert result.oscillator[-1] == 100.0

    def test_aroon_ties_resolve_to_most_recent(self):
        result = aroon([5.0, 5.0, 5.0], [5.0, 5.0, 5.0], 2)

        assert result.up[-1] == 100.0
        assert result.down[-1] == 100.0

    def test_aroon_insufficient_data(self):
        result = aroon([1.0, 2.0], [1.0, 2.0], 5)

        assert result.up == [None, None]
        assert result.down == [None, None]


class TestAwesomeOscillator:
    def test_flat_series_is_zero(self):
        result = awesome_oscillator([11.0] * 40, [9.0] * 40, 5, 34)

        assert result[33] == pytest.approx(0.0)
        assert result[32] is None

    def test_fast_must_be_smaller(self):
        with pytest.raises(ValueError):
            awesome_oscillator([1.0] * 10, [1.0] * 10, 5, 5)

    def test_smoothed_warmup(self):
        """AO starts at slow - 1, smoothing adds smoothing - 1 more bars."""
        highs = [10.0 + math.sin(i) for i in range(50)]
        lows = [h - 1 for h in highs]
        result = smooth_awesome_oscillator(highs, lows, 5, 34, 5)

        assert result[36] is None
        assert result[37] is not None


class TestMomentum:
    def test_momentum(self):
        assert momentum([1.0, 2.0, 4.0, 7.0], 2) == [None, None, 3.0, 5.0]

    def test_smooth_momentum_on_a_line(self):
        """Constant slope gives constant momentum."""
        values = [2.0 * i for i in range(20)]
        result = smooth_momentum(values, 3, 4)

        assert all(v is None for v in result[:6])
        assert result[6] == pytest.approx(6.0)
        assert result[-1] == pytest.approx(6.0)


class TestVolumeOscillator:
    def test_volume_oscillator(self):
        volumes = [float(i) for i in range(1, 11)]
        result = volume_oscillator(volumes, 2, 4)

        # short = (9 + 10) / 2, long = (7 + 8 + 9 + 10) / 4
        assert result[-1] == pytest.approx(100 * (9.5 - 8.5) / 8.5)
        assert result[2] is None

    def test_zero_volume(self):
        """Zero long average reports 0."""
        result = volume_oscillator([0.0] * 12, 5, 10)

        assert result[-1] == 0.0

    def test_short_must_be_smaller(self):
        with pytest.raises(ValueError):
            volume_oscillator([1.0] * 20, 10, 5)


class TestDegenerateConventions:
    """Division-by-zero conventions of the feature oscillators."""

    def test_cci_flat(self):
        result = cci([10.0] * 25, [10.0] * 25, [10.0] * 25, 20)

        assert result[-1] == 0.0

    def test_mfi_no_negative_flow(self):
        values = [float(i) for i in range(1, 21)]
        result = mfi(values, values, values, [100.0] * 20, 14)

        assert result[13] is None
        assert result[14] == 100.0

    def test_roc(self):
        assert roc([100.0, 110.0], 1) == [None, pytest.approx(10.0)]
        assert roc([0.0, 5.0], 1) == [None, 0.0]

    def test_williams_r(self):
        highs = [12.0, 12.0, 12.0]
        lows = [10.0, 10.0, 10.0]

        assert williams_r(highs, lows, [11.0, 11.0, 12.0], 3)[-1] == pytest.approx(0.0)
        assert williams_r(highs, lows, [11.0, 11.0, 10.0], 3)[-1] == pytest.approx(-100.0)
        assert williams_r([5.0] * 3, [5.0] * 3, [5.0] * 3, 3)[-1] == -50.0
