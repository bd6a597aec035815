"""Indicator & signal engine over OHLCV candle series.

This package contains pure logic with no I/O dependencies (no network,
database or order handling). History buffering, order placement and the
decision aggregation that combines several signals belong to the caller.
"""

__version__ = "1.0.0"
