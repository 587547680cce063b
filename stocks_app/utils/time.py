"""
Time utilities for report periods.

All datetimes handled by the application are timezone-aware UTC. Naive
input is interpreted as UTC rather than local time.
"""

from datetime import UTC, datetime
from typing import Optional


def utc_now() -> datetime:
    """Current wall-clock time as an aware UTC datetime."""
    return datetime.now(UTC)


def ensure_utc(ts: datetime) -> datetime:
    """
    Normalize a datetime to UTC.

    Args:
        ts: Aware or naive datetime

    Returns:
        Aware datetime in UTC; naive values are assumed to already be UTC
    """
    if ts.tzinfo is None:
        return ts.replace(tzinfo=UTC)
    return ts.astimezone(UTC)


def parse_date(value: str) -> datetime:
    """
    Parse an RFC 3339 timestamp or a plain ISO date.

    Accepts values like ``2024-01-02T00:00:00Z``,
    ``2024-01-02T09:30:00+02:00`` and ``2024-01-02`` (midnight UTC).

    Args:
        value: Date string from the command line or configuration

    Returns:
        Aware UTC datetime

    Raises:
        ValueError: If the string is not a valid date
    """
    text = value.strip()
    if not text:
        raise ValueError("Empty date string")

    # fromisoformat accepts a trailing 'Z' and 'T' separators on 3.11+
    return ensure_utc(datetime.fromisoformat(text))


def to_rfc3339(ts: datetime) -> str:
    """Render a datetime as RFC 3339 in UTC, e.g. 2024-01-02T00:00:00+00:00."""
    return ensure_utc(ts).isoformat()


def resolve_period(start: datetime, end: Optional[datetime] = None) -> tuple[datetime, datetime]:
    """
    Resolve a report period, defaulting the end to now.

    Raises:
        ValueError: If the start lies after the end
    """
    start = ensure_utc(start)
    end = ensure_utc(end) if end is not None else utc_now()

    if start > end:
        raise ValueError(f"Period start {to_rfc3339(start)} is after end {to_rfc3339(end)}")

    return start, end
