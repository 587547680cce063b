"""Base classes for report delivery mechanisms."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from ..logging.config import get_logger
from ..models.report import SymbolReport


class DeliveryStatus(Enum):
    """Report delivery status."""
    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class DeliveryResult:
    """Result of a single report delivery attempt."""
    status: DeliveryStatus
    symbol: Optional[str] = None
    message: Optional[str] = None
    error: Optional[Exception] = None


class BaseReportDelivery(ABC):
    """Base class for report delivery mechanisms."""

    def __init__(self, name: str, config: Any):
        self.name = name
        self.config = config
        self.logger = get_logger(f"report.delivery.{name}")
        self._delivery_count = 0
        self._error_count = 0

    @abstractmethod
    def begin(self, window_size: int) -> None:
        """Emit anything that precedes the first report, e.g. a header."""

    @abstractmethod
    def deliver(self, reports: list[SymbolReport]) -> list[DeliveryResult]:
        """
        Deliver reports to the configured destination.

        Args:
            reports: Symbol reports in output order

        Returns:
            List of delivery results for each report
        """

    def _record(self, result: DeliveryResult) -> DeliveryResult:
        if result.status == DeliveryStatus.SUCCESS:
            self._delivery_count += 1
        else:
            self._error_count += 1
        return result

    def get_stats(self) -> dict[str, Any]:
        """Get delivery statistics."""
        return {
            "name": self.name,
            "delivery_count": self._delivery_count,
            "error_count": self._error_count,
            "success_rate": (
                self._delivery_count / (self._delivery_count + self._error_count)
                if (self._delivery_count + self._error_count) > 0 else 0.0
            )
        }

    def reset_stats(self):
        """Reset delivery statistics."""
        self._delivery_count = 0
        self._error_count = 0
