"""
Main report engine coordinator.

Orchestrates the reporting pipeline: quote retrieval, signal calculation
and report delivery, one symbol at a time or across a thread pool.
"""

from collections.abc import Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

import structlog

from .config.defaults import DefaultConfig, get_default_config
from .data.fetcher import QuoteFetcher
from .delivery.base import BaseReportDelivery, DeliveryStatus
from .delivery.stdout_delivery import StdoutReportDelivery
from .errors import DataQualityError, DataRetrievalError
from .logging.config import log_symbol_report
from .models.report import SymbolReport
from .signals.calculator import SignalCalculator

logger = structlog.get_logger(__name__)


@dataclass
class RunSummary:
    """Outcome of a reporting run."""
    reports: list[SymbolReport] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)          # no price data
    failed: dict[str, str] = field(default_factory=dict)      # symbol -> error

    @property
    def success(self) -> bool:
        return not self.failed


class StockReportEngine:
    """
    Main coordinator for the stock signal reporter.

    Manages the reporting pipeline:
    Symbols → Quote Fetch → Signals → Delivery
    """

    def __init__(
        self,
        config: Optional[DefaultConfig] = None,
        fetcher: Optional[QuoteFetcher] = None,
        delivery: Optional[BaseReportDelivery] = None,
    ) -> None:
        """Initialize the report engine."""
        self.config = config or get_default_config()
        self.logger = logger

        self.fetcher = fetcher or QuoteFetcher(self.config.fetch)
        self.calculator = SignalCalculator(self.config)
        self.delivery = delivery or StdoutReportDelivery("stdout", self.config.output)

    def build_report(self, symbol: str, start: datetime, end: datetime) -> Optional[SymbolReport]:
        """
        Fetch quotes for one symbol and calculate its signals.

        Returns:
            SymbolReport, or None when the provider has no prices in range

        Raises:
            DataRetrievalError: If the provider is unreachable
            DataQualityError: If the provider data is unusable
        """
        closes = self.fetcher.fetch_closing_data(symbol, start, end)
        snapshot = self.calculator.calculate(closes)

        log_symbol_report(self.logger, symbol, rows=len(closes), reported=snapshot.has_data())

        if not snapshot.has_data():
            return None

        return SymbolReport(
            symbol=symbol,
            period_start=start,
            period_end=end,
            window_size=self.calculator.window_size,
            snapshot=snapshot,
        )

    def run(self, symbols: Sequence[str], start: datetime, end: datetime) -> RunSummary:
        """
        Produce and deliver reports for all symbols.

        Rows are delivered in the order of ``symbols`` whatever the number
        of fetch workers. A symbol that fails to fetch is logged and
        recorded in the summary; the remaining symbols are still processed.
        """
        summary = RunSummary()
        max_workers = self.config.fetch.max_workers

        self.logger.info(
            "Report run started",
            symbols=list(symbols),
            start=start.isoformat(),
            end=end.isoformat(),
            workers=max_workers
        )

        self.delivery.reset_stats()
        self.delivery.begin(self.calculator.window_size)

        for symbol, report, error in self._iter_reports(symbols, start, end, max_workers):
            if error is not None:
                self.logger.error(
                    "Symbol failed",
                    symbol=symbol,
                    error_type=type(error).__name__,
                    error=str(error)
                )
                summary.failed[symbol] = str(error)
                continue

            if report is None:
                summary.skipped.append(symbol)
                continue

            result = self.delivery.deliver([report])[0]
            if result.status == DeliveryStatus.SUCCESS:
                summary.reports.append(report)
            else:
                summary.failed[symbol] = result.message or "delivery failed"

        self.logger.info(
            "Report run finished",
            reported=len(summary.reports),
            skipped=len(summary.skipped),
            failed=len(summary.failed),
            delivery=self.delivery.get_stats()
        )
        return summary

    def _iter_reports(
        self,
        symbols: Sequence[str],
        start: datetime,
        end: datetime,
        max_workers: int,
    ) -> Iterator[tuple[str, Optional[SymbolReport], Optional[Exception]]]:
        if max_workers <= 1:
            for symbol in symbols:
                yield (symbol, *self._safe_build(symbol, start, end))
            return

        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = [
                (symbol, executor.submit(self._safe_build, symbol, start, end))
                for symbol in symbols
            ]
            # Consumed in submission order to keep rows deterministic
            for symbol, future in futures:
                yield (symbol, *future.result())

    def _safe_build(
        self, symbol: str, start: datetime, end: datetime
    ) -> tuple[Optional[SymbolReport], Optional[Exception]]:
        try:
            return self.build_report(symbol, start, end), None
        except (DataRetrievalError, DataQualityError) as e:
            return None, e
