"""Price signal calculations over closing price series"""

from .base import StockSignal
from .calculator import SignalCalculator
from .price import MaxPrice, MinPrice, PriceDifference, max_price, min_price, price_diff
from .sma import WindowedSMA, n_window_sma

__all__ = [
    "StockSignal",
    "SignalCalculator",
    "MinPrice",
    "MaxPrice",
    "PriceDifference",
    "WindowedSMA",
    "min_price",
    "max_price",
    "price_diff",
    "n_window_sma",
]
