"""Tests for stdout report delivery"""

import io
import json
import math
from dataclasses import replace
from datetime import UTC, datetime

import pytest

from stocks_app.config.defaults import OutputParams
from stocks_app.delivery import (
    DeliveryStatus,
    StdoutReportDelivery,
    format_csv_header,
    format_csv_row,
)
from stocks_app.errors import DeliveryError
from stocks_app.models.report import SignalSnapshot, SymbolReport


@pytest.fixture
def report() -> SymbolReport:
    return SymbolReport(
        symbol="MSFT",
        period_start=datetime(2024, 1, 2, tzinfo=UTC),
        period_end=datetime(2024, 1, 31, tzinfo=UTC),
        window_size=3,
        snapshot=SignalSnapshot(
            last_price=10.0,
            min_price=1.0,
            max_price=10.0,
            price_diff=(8.0, 4.0),
            sma=[3.3333333333333335, 4.333333333333333],
        ),
    )


class TestCsvFormatting:
    """Test CSV header and row rendering"""

    def test_header_uses_window_size(self):
        assert format_csv_header(30) == "period start,symbol,price,change %,min,max,30d avg"

    def test_row(self, report):
        assert format_csv_row(report) == (
            "2024-01-02T00:00:00+00:00,MSFT,$10.00,400.00%,$1.00,$10.00,$4.33"
        )

    def test_row_without_sma(self, report):
        """Test a missing moving average renders as zero"""
        snapshot = SignalSnapshot(last_price=5.0, min_price=5.0, max_price=5.0,
                                  price_diff=(0.0, 0.0), sma=[])
        row = format_csv_row(SymbolReport("UBER", report.period_start, report.period_end, 30, snapshot))
        assert row.endswith(",UBER,$5.00,0.00%,$5.00,$5.00,$0.00")


class TestStdoutReportDelivery:
    """Test StdoutReportDelivery"""

    def test_begin_prints_header(self):
        stream = io.StringIO()
        delivery = StdoutReportDelivery("stdout", OutputParams(), stream=stream)

        delivery.begin(30)

        assert stream.getvalue() == "period start,symbol,price,change %,min,max,30d avg\n"

    def test_begin_without_header(self):
        stream = io.StringIO()
        delivery = StdoutReportDelivery("stdout", OutputParams(include_header=False), stream=stream)

        delivery.begin(30)

        assert stream.getvalue() == ""

    def test_deliver_csv(self, report, capsys):
        """Test reports go to sys.stdout by default"""
        delivery = StdoutReportDelivery("stdout", OutputParams())

        results = delivery.deliver([report])

        assert results[0].status == DeliveryStatus.SUCCESS
        assert results[0].symbol == "MSFT"
        assert capsys.readouterr().out.strip() == format_csv_row(report)

    def test_deliver_json(self, report):
        stream = io.StringIO()
        delivery = StdoutReportDelivery("stdout", OutputParams(format="json"), stream=stream)

        delivery.begin(3)
        delivery.deliver([report])

        payload = json.loads(stream.getvalue())
        assert payload["symbol"] == "MSFT"
        assert payload["change_pct"] == 400.0
        assert payload["sma_window"] == 3
        assert payload["sma_last"] == 4.333333333333333

    def test_deliver_json_non_finite_values(self, report):
        """Test infinite and NaN prices are written as null"""
        stream = io.StringIO()
        delivery = StdoutReportDelivery("stdout", OutputParams(format="json"), stream=stream)
        snapshot = replace(report.snapshot, max_price=math.inf, last_price=math.nan)

        results = delivery.deliver([replace(report, snapshot=snapshot)])

        assert results[0].status == DeliveryStatus.SUCCESS
        line = stream.getvalue().strip()
        assert "Infinity" not in line and "NaN" not in line
        payload = json.loads(line)
        assert payload["max"] is None
        assert payload["price"] is None
        assert payload["min"] == 1.0

    def test_deliver_to_closed_stream(self, report):
        """Test a closed output is reported as a failed delivery"""
        stream = io.StringIO()
        stream.close()
        delivery = StdoutReportDelivery("stdout", OutputParams(), stream=stream)

        results = delivery.deliver([report])

        assert results[0].status == DeliveryStatus.FAILED
        assert isinstance(results[0].error, DeliveryError)
        assert results[0].error.symbol == "MSFT"
        assert delivery.get_stats()["error_count"] == 1

    def test_stats(self, report):
        delivery = StdoutReportDelivery("stdout", OutputParams(), stream=io.StringIO())

        delivery.deliver([report, report])

        stats = delivery.get_stats()
        assert stats["delivery_count"] == 2
        assert stats["success_rate"] == 1.0

        delivery.reset_stats()
        assert delivery.get_stats()["delivery_count"] == 0
