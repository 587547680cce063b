"""
Stocks App - Historical Price Signal Reporter

Fetches daily adjusted closing prices for a list of ticker symbols and
computes per-symbol price signals: period minimum, period maximum, price
change and a trailing simple moving average.
"""

__version__ = "0.1.0"
__author__ = "Stocks App Team"
