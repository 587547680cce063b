#!/usr/bin/env python3
"""
Basic Usage Example - Stocks App Signal Calculations

This script demonstrates the signal layer and the report engine without
touching the network. It shows how to:
- Calculate individual signals on a price series
- Run every signal at once with SignalCalculator
- Drive the report engine with a canned quote fetcher

Run: python examples/basic_usage.py
"""

from dataclasses import replace
from datetime import UTC, datetime

from stocks_app.config.defaults import get_default_config
from stocks_app.data.fetcher import QuoteFetcher
from stocks_app.engine import StockReportEngine
from stocks_app.logging.config import configure_logging
from stocks_app.signals import MaxPrice, MinPrice, PriceDifference, SignalCalculator, WindowedSMA


class CannedFetcher(QuoteFetcher):
    """Quote fetcher serving fixed series instead of calling Yahoo."""

    SERIES = {
        "AAPL": [185.6, 184.3, 181.9, 181.2, 185.6, 185.1, 186.0, 187.4, 188.6, 191.6],
        "MSFT": [370.9, 370.6, 367.9, 375.8, 382.8, 384.6, 388.5, 390.3, 393.9, 398.7],
        "UBER": [],
    }

    def fetch_closing_data(self, symbol, start, end):
        return list(self.SERIES.get(symbol, []))


def demonstrate_signals():
    """Run each signal on a small series."""
    print("=== Individual signals ===")
    series = [2.0, 4.5, 5.3, 6.5, 4.7]

    print(f"Series:            {series}")
    print(f"MinPrice:          {MinPrice().calculate(series)}")
    print(f"MaxPrice:          {MaxPrice().calculate(series)}")
    print(f"PriceDifference:   {PriceDifference().calculate(series)}")
    print(f"WindowedSMA(3):    {WindowedSMA(window_size=3).calculate(series)}")
    print(f"WindowedSMA(10):   {WindowedSMA(window_size=10).calculate(series)}")
    print(f"WindowedSMA(1):    {WindowedSMA(window_size=1).calculate(series)}")
    print(f"MinPrice([]):      {MinPrice().calculate([])}")


def demonstrate_calculator():
    """Run all signals at once."""
    print("\n=== SignalCalculator ===")
    snapshot = SignalCalculator(window_size=3).calculate([0.0, 3.0, 5.0, 6.0, 1.0, 2.0, 1.0])
    print(snapshot)
    print("Note: a zero first price makes the relative change equal the absolute change")


def demonstrate_engine():
    """Produce a CSV report from canned data."""
    print("\n=== Report engine (canned quotes) ===")
    config = get_default_config()
    config = replace(config, signals=replace(config.signals, sma_window=5))
    engine = StockReportEngine(config, fetcher=CannedFetcher())

    summary = engine.run(
        ["AAPL", "MSFT", "UBER"],
        datetime(2024, 1, 2, tzinfo=UTC),
        datetime(2024, 1, 16, tzinfo=UTC),
    )
    print(f"\nReported: {[r.symbol for r in summary.reports]}, skipped: {summary.skipped}")


def main():
    configure_logging(level="WARNING")
    demonstrate_signals()
    demonstrate_calculator()
    demonstrate_engine()


if __name__ == "__main__":
    main()
