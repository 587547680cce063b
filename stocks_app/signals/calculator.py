"""Signal calculator coordinating all calculations for a price series"""

from collections.abc import Sequence
from typing import Optional

from ..config.defaults import DefaultConfig, get_default_config
from ..models.report import SignalSnapshot
from .price import MaxPrice, MinPrice, PriceDifference
from .sma import WindowedSMA


class SignalCalculator:
    """
    Runs every price signal over one series and collects the results.

    The calculator holds only immutable signal instances, so one calculator
    can serve all symbols, including from worker threads.
    """

    def __init__(self, config: Optional[DefaultConfig] = None,
                 window_size: Optional[int] = None):
        self.config = config or get_default_config()

        self.min_signal = MinPrice()
        self.max_signal = MaxPrice()
        self.diff_signal = PriceDifference()
        self.sma_signal = WindowedSMA(
            window_size=window_size if window_size is not None else self.config.signals.sma_window
        )

    @property
    def window_size(self) -> int:
        return self.sma_signal.window_size

    def calculate(self, series: Sequence[float]) -> SignalSnapshot:
        """
        Calculate all signals for a series

        Args:
            series: Closing prices in chronological order

        Returns:
            SignalSnapshot; every field is None for an empty series
        """
        return SignalSnapshot(
            last_price=series[-1] if series else None,
            min_price=self.min_signal.calculate(series),
            max_price=self.max_signal.calculate(series),
            price_diff=self.diff_signal.calculate(series),
            sma=self.sma_signal.calculate(series),
        )
