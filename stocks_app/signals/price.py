"""Period min/max and price change calculations"""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

from .base import StockSignal


def min_price(series: Sequence[float]) -> Optional[float]:
    """
    Find the minimum value of a series.

    NaN entries are skipped.

    Args:
        series: Closing prices

    Returns:
        Minimum price or None if the series has no comparable value
    """
    result = math.inf
    seen = False
    for price in series:
        if math.isnan(price):
            continue
        seen = True
        if price < result:
            result = price

    return result if seen else None


def max_price(series: Sequence[float]) -> Optional[float]:
    """
    Find the maximum value of a series.

    NaN entries are skipped.

    Args:
        series: Closing prices

    Returns:
        Maximum price or None if the series has no comparable value
    """
    result = -math.inf
    seen = False
    for price in series:
        if math.isnan(price):
            continue
        seen = True
        if price > result:
            result = price

    return result if seen else None


def price_diff(series: Sequence[float]) -> Optional[tuple[float, float]]:
    """
    Calculate the change between the first and last price.

    relative = (last - first) / first

    A first price of exactly 0.0 is replaced by 1.0 in the denominator,
    so the relative value then equals the absolute one.

    Args:
        series: Closing prices in chronological order

    Returns:
        (absolute difference, relative difference) or None if empty
    """
    if not series:
        return None

    first, last = series[0], series[-1]
    abs_diff = last - first
    denominator = 1.0 if first == 0.0 else first

    return abs_diff, abs_diff / denominator


@dataclass(frozen=True)
class MinPrice(StockSignal[float]):
    """Lowest price of the period."""

    def calculate(self, series: Sequence[float]) -> Optional[float]:
        return min_price(series)


@dataclass(frozen=True)
class MaxPrice(StockSignal[float]):
    """Highest price of the period."""

    def calculate(self, series: Sequence[float]) -> Optional[float]:
        return max_price(series)


@dataclass(frozen=True)
class PriceDifference(StockSignal[tuple[float, float]]):
    """Absolute and relative change over the period."""

    def calculate(self, series: Sequence[float]) -> Optional[tuple[float, float]]:
        return price_diff(series)
