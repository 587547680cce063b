"""Report delivery mechanisms."""

from .base import BaseReportDelivery, DeliveryResult, DeliveryStatus
from .stdout_delivery import StdoutReportDelivery, format_csv_header, format_csv_row

__all__ = [
    "BaseReportDelivery",
    "DeliveryResult",
    "DeliveryStatus",
    "StdoutReportDelivery",
    "format_csv_header",
    "format_csv_row",
]
