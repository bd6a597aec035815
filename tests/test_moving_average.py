"""Tests for moving-average primitives."""

import math
from decimal import Decimal

import pytest

from indicator_engine.indicators import (
    ema,
    highest,
    lowest,
    rma,
    sma,
    stddev,
    vwma,
    wema,
    wma,
)


class TestSMA:
    """Tests for SMA calculation."""

    def test_sma_basic(self):
        """Test basic SMA calculation."""
        values = [float(i) for i in range(1, 11)]  # 1-10
        result = sma(values, 3)

        # First 2 values have no definition yet
        assert result[0] is None
        assert result[1] is None

        # 3rd value should be (1+2+3)/3 = 2
        assert result[2] == pytest.approx(2.0)

        # 4th value should be (2+3+4)/3 = 3
        assert result[3] == pytest.approx(3.0)
        assert len(result) == len(values)

    def test_exactly_period_values_gives_one_value(self):
        """Exactly `period` inputs produce exactly one defined value."""
        result = sma([1.0, 2.0, 3.0, 4.0], 4)

        defined = [v for v in result if v is not None]
        assert defined == [pytest.approx(2.5)]

    def test_insufficient_data(self):
        """Fewer than `period` inputs produce only absent values."""
        result = sma([100.0, 101.0, 102.0], 4)

        assert result == [None, None, None]

    def test_invalid_period(self):
        """A period below 1 is a programming error."""
        with pytest.raises(ValueError):
            sma([1.0, 2.0], 0)

    def test_nan_propagates_inside_its_window(self):
        """Malformed input poisons only the windows that contain it."""
        result = sma([1.0, float("nan"), 3.0, 4.0, 5.0], 2)

        assert result[0] is None
        assert math.isnan(result[1])
        assert math.isnan(result[2])
        assert result[3] == pytest.approx(3.5)
        assert result[4] == pytest.approx(4.5)

    def test_decimal_input(self):
        """Decimal prices are accepted."""
        result = sma([Decimal("1.5"), Decimal("2.5")], 2)

        assert result[1] == pytest.approx(2.0)


class TestEMA:
    """Tests for EMA calculation."""

    def test_ema_basic(self):
        """Test basic EMA calculation."""
        values = [float(i) for i in range(1, 11)]  # 1-10
        result = ema(values, 5)

        # First 4 values are warm-up
        assert result[0] is None
        assert result[3] is None

        # 5th value should be SMA of first 5 = (1+2+3+4+5)/5 = 3
        assert result[4] == pytest.approx(3.0)

        # alpha = 2/6: 6 * 1/3 + 3 * 2/3 = 4
        assert result[5] == pytest.approx(4.0)
        assert result[6] > result[5]

    def test_ema_insufficient_data(self):
        """Test EMA with insufficient data."""
        result = ema([100.0, 101.0, 102.0], 10)

        assert len(result) == 3
        assert all(v is None for v in result)

    def test_ema_deterministic(self):
        """Two calls on the same input return identical output."""
        values = [100 + math.sin(i / 3) for i in range(50)]

        assert ema(values, 10) == ema(values, 10)


class TestWMA:
    """Tests for WMA calculation."""

    def test_wma_weights_newest_most(self):
        """Newest value has weight `period`, oldest weight 1."""
        result = wma([1.0, 2.0, 3.0], 3)

        # (1*1 + 2*2 + 3*3) / 6
        assert result[2] == pytest.approx(14 / 6)

    def test_wma_rolling(self):
        result = wma([1.0, 2.0, 3.0, 6.0], 2)

        assert result == [None, pytest.approx(5 / 3), pytest.approx(8 / 3), pytest.approx(5.0)]


class TestRMA:
    """Tests for Wilder smoothing."""

    def test_rma_basic(self):
        """Seeded with the SMA, then alpha = 1/period."""
        result = rma([1.0, 2.0, 3.0, 4.0], 2)

        assert result[0] is None
        assert result[1] == pytest.approx(1.5)
        assert result[2] == pytest.approx(2.25)
        assert result[3] == pytest.approx(3.125)

    def test_wema_is_rma(self):
        values = [5.0, 3.0, 8.0, 1.0, 9.0]

        assert wema(values, 3) == rma(values, 3)


class TestVWMA:
    """Tests for volume weighted moving average."""

    def test_vwma_basic(self):
        result = vwma([1.0, 2.0, 3.0], [1.0, 1.0, 2.0], 3)

        # (1 + 2 + 6) / 4
        assert result[2] == pytest.approx(2.25)

    def test_vwma_zero_volume_falls_back_to_sma(self):
        result = vwma([1.0, 2.0, 3.0], [0.0, 0.0, 0.0], 3)

        assert result[2] == pytest.approx(2.0)


class TestHighestLowest:
    """Tests for highest/lowest calculations."""

    def test_highest_basic(self):
        """Test highest value over period."""
        values = [1.0, 3.0, 2.0, 5.0, 4.0, 6.0, 3.0, 8.0, 7.0]
        result = highest(values, 3)

        assert result[0] is None
        assert result[1] is None
        assert result[2] == 3.0
        assert result[3] == 5.0
        assert result[4] == 5.0

    def test_lowest_basic(self):
        """Test lowest value over period."""
        values = [5.0, 3.0, 4.0, 1.0, 6.0, 2.0, 7.0, 3.0, 8.0]
        result = lowest(values, 3)

        assert result[2] == 3.0
        assert result[3] == 1.0


class TestStddev:
    def test_population_stddev(self):
        """Population standard deviation of the classic example is 2."""
        result = stddev([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0], 8)

        assert result[-1] == pytest.approx(2.0)
