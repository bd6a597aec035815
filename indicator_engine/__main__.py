"""CLI entry point: inspect the latest indicators and signals of a CSV file.

Usage:
    python -m indicator_engine candles.csv
    python -m indicator_engine candles.csv --signals rsi,macd,supertrend
    python -m indicator_engine candles.csv --verbose
"""

import argparse
import csv
import logging
import sys
from collections.abc import Iterator
from pathlib import Path

from indicator_engine.calculator import IndicatorCalculator
from indicator_engine.config import get_settings
from indicator_engine.models import Candle
from indicator_engine.signals import create_signal, list_signals

logger = logging.getLogger(__name__)


def iter_csv_candles(path: Path) -> Iterator[Candle]:
    """Stream candles from ``close_time,open,high,low,close,volume[,trade_count]`` rows."""
    with path.open(newline="", encoding="utf-8") as handle:
        for row in csv.reader(handle):
            if not row or not row[0].strip().isdigit():
                continue
            try:
                yield Candle(
                    close_time=int(row[0]),
                    open=float(row[1]),
                    high=float(row[2]),
                    low=float(row[3]),
                    close=float(row[4]),
                    volume=float(row[5]),
                    trade_count=int(row[6]) if len(row) > 6 and row[6] else 0,
                )
            except (IndexError, ValueError) as e:
                logger.warning(f"Skipping malformed row {row!r}: {e}")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print the latest indicator values and signals for a candle CSV",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m indicator_engine candles.csv
  python -m indicator_engine candles.csv --signals rsi,macd
        """,
    )
    parser.add_argument("csv", type=Path, help="CSV with close_time,open,high,low,close,volume")
    parser.add_argument(
        "--signals",
        type=str,
        default=None,
        help=f"Comma-separated signal names (available: {', '.join(list_signals())})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def _format(value: float | None) -> str:
    return "n/a" if value is None else f"{value:.6f}"


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    settings = get_settings()

    level = logging.DEBUG if args.verbose else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    if not args.csv.is_file():
        logger.error(f"File not found: {args.csv}")
        return 1

    candles = list(iter_csv_candles(args.csv))
    logger.info(f"Loaded {len(candles)} candles from {args.csv}")

    calculator = IndicatorCalculator()
    latest = calculator.calculate_latest(candles)
    print(f"\nIndicators ({len(candles)} candles)")
    if latest is None:
        print(f"  not enough history (need {calculator.min_candles})")
    else:
        for name, value in latest.items():
            print(f"  {name:<16} {_format(value)}")

    names = args.signals.split(",") if args.signals else settings.enabled_signals
    print("\nSignals")
    for name in names:
        name = name.strip()
        try:
            if name == "rsi":
                signal = create_signal(name, config=settings.rsi)
            else:
                signal = create_signal(name)
        except KeyError as e:
            logger.error(e.args[0])
            return 1
        verdict = signal.signal(candles)
        print(f"  {name:<22} {'n/a' if verdict is None else verdict.value.upper()}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
