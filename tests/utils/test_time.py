"""Tests for report period time utilities."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from stocks_app.utils.time import ensure_utc, parse_date, resolve_period, to_rfc3339, utc_now


class TestParseDate:
    """Test date parsing for command line input."""

    def test_rfc3339_zulu(self):
        assert parse_date("2024-01-02T00:00:00Z") == datetime(2024, 1, 2, tzinfo=UTC)

    def test_rfc3339_offset_converted_to_utc(self):
        parsed = parse_date("2024-01-02T09:30:00+02:00")
        assert parsed == datetime(2024, 1, 2, 7, 30, tzinfo=UTC)
        assert parsed.tzinfo == UTC

    def test_plain_date_is_midnight_utc(self):
        assert parse_date("2024-01-02") == datetime(2024, 1, 2, tzinfo=UTC)

    def test_surrounding_whitespace(self):
        assert parse_date(" 2024-01-02 ") == datetime(2024, 1, 2, tzinfo=UTC)

    @pytest.mark.parametrize("value", ["", "yesterday", "2024-13-01", "02/01/2024"])
    def test_invalid_dates(self, value):
        with pytest.raises(ValueError):
            parse_date(value)


class TestFormatting:
    """Test RFC 3339 rendering and UTC normalization."""

    def test_to_rfc3339(self):
        assert to_rfc3339(datetime(2024, 1, 2, tzinfo=UTC)) == "2024-01-02T00:00:00+00:00"

    def test_to_rfc3339_converts_offsets(self):
        ts = datetime(2024, 1, 2, 1, 0, tzinfo=timezone(timedelta(hours=1)))
        assert to_rfc3339(ts) == "2024-01-02T00:00:00+00:00"

    def test_ensure_utc_naive(self):
        assert ensure_utc(datetime(2024, 1, 2)).tzinfo == UTC

    def test_utc_now_is_aware(self):
        assert utc_now().tzinfo == UTC


class TestResolvePeriod:
    """Test report period resolution."""

    def test_defaults_end_to_now(self):
        start = datetime(2024, 1, 2, tzinfo=UTC)
        before = utc_now()

        _, end = resolve_period(start)

        assert end >= before

    def test_explicit_end(self):
        start = datetime(2024, 1, 2, tzinfo=UTC)
        end = datetime(2024, 2, 2, tzinfo=UTC)
        assert resolve_period(start, end) == (start, end)

    def test_start_after_end(self):
        with pytest.raises(ValueError):
            resolve_period(datetime(2024, 2, 2, tzinfo=UTC), datetime(2024, 1, 2, tzinfo=UTC))
