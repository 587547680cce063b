"""Common interface for all price signal calculations."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class StockSignal(ABC, Generic[T]):
    """
    A calculation deriving a value from a price series.

    Implementations are immutable and keep no state between calls, so a
    single instance can be shared across threads and symbols.
    """

    @abstractmethod
    def calculate(self, series: Sequence[float]) -> Optional[T]:
        """
        Calculate the signal on the provided series.

        Args:
            series: Closing prices in chronological order

        Returns:
            The signal value or None if the series is empty or invalid
            for this calculation
        """
