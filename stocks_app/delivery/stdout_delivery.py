"""Standard output report delivery mechanism."""

import json
import math
import sys
from typing import Any, Optional, TextIO

from ..config.defaults import OutputParams
from ..errors import DeliveryError
from ..models.report import SymbolReport
from ..utils.time import to_rfc3339
from .base import BaseReportDelivery, DeliveryResult, DeliveryStatus


def _money(value: Optional[float]) -> str:
    return f"${value if value is not None else 0.0:.2f}"


def _json_safe(payload: dict[str, Any]) -> dict[str, Any]:
    # JSON has no Infinity or NaN
    return {
        key: None if isinstance(value, float) and not math.isfinite(value) else value
        for key, value in payload.items()
    }


def format_csv_header(window_size: int) -> str:
    """CSV header matching the columns of format_csv_row."""
    return f"period start,symbol,price,change %,min,max,{window_size}d avg"


def format_csv_row(report: SymbolReport) -> str:
    """Render a report as one comma separated line."""
    snapshot = report.snapshot
    return ",".join([
        to_rfc3339(report.period_start),
        report.symbol,
        _money(snapshot.last_price),
        f"{report.pct_change:.2f}%",
        _money(snapshot.min_price),
        _money(snapshot.max_price),
        _money(snapshot.sma_last),
    ])


class StdoutReportDelivery(BaseReportDelivery):
    """Standard output report delivery implementation."""

    def __init__(self, name: str, config: OutputParams, stream: Optional[TextIO] = None):
        super().__init__(name, config)
        self.config: OutputParams = config
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so redirected stdout is honoured
        return self._stream if self._stream is not None else sys.stdout

    def begin(self, window_size: int) -> None:
        """Print the CSV header when configured."""
        if self.config.format == "csv" and self.config.include_header:
            print(format_csv_header(window_size), file=self.stream, flush=True)

    def deliver(self, reports: list[SymbolReport]) -> list[DeliveryResult]:
        """Deliver reports to stdout."""
        results = []

        for report in reports:
            try:
                print(self._format_report(report), file=self.stream, flush=True)

                self.logger.debug(
                    "Report printed to stdout",
                    delivery_name=self.name,
                    symbol=report.symbol
                )

                results.append(self._record(DeliveryResult(
                    status=DeliveryStatus.SUCCESS,
                    symbol=report.symbol,
                    message="Printed to stdout"
                )))

            except (OSError, ValueError) as e:
                self.logger.error(
                    "Failed to print report to stdout",
                    delivery_name=self.name,
                    symbol=report.symbol,
                    error=str(e)
                )
                results.append(self._record(DeliveryResult(
                    status=DeliveryStatus.FAILED,
                    symbol=report.symbol,
                    message=f"Stdout error: {str(e)}",
                    error=DeliveryError(str(e), delivery_method="stdout", symbol=report.symbol)
                )))

        return results

    def _format_report(self, report: SymbolReport) -> str:
        """Format report for stdout output."""
        if self.config.format == "json":
            return json.dumps(_json_safe(report.to_dict()), allow_nan=False)
        return format_csv_row(report)
