"""SMA (Simple Moving Average) calculations"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

from .base import StockSignal


def _window_mean(window: Sequence[float]) -> float:
    # Plain left-to-right addition; builtin sum() compensates on 3.12+
    total = 0.0
    for price in window:
        total += price
    return total / len(window)


def n_window_sma(n: int, series: Sequence[float]) -> Optional[list[float]]:
    """
    Calculate a simple moving average over windows of n elements

    SMA[i] = sum(series[i:i + n]) / n

    Args:
        n: Window size, must be at least 2
        series: Closing prices in chronological order

    Returns:
        One average per full window (empty if the series is shorter
        than the window), or None if the series is empty or n <= 1
    """
    if not series or n <= 1:
        return None

    # Each window is summed from scratch, not as a running total
    return [_window_mean(series[i:i + n]) for i in range(len(series) - n + 1)]


@dataclass(frozen=True)
class WindowedSMA(StockSignal[list[float]]):
    """Trailing simple moving average with a fixed window size."""

    window_size: int

    def calculate(self, series: Sequence[float]) -> Optional[list[float]]:
        return n_window_sma(self.window_size, series)
