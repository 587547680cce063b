"""Pytest configuration and shared fixtures."""

from datetime import UTC, datetime

import pandas as pd
import pytest

from stocks_app.logging.config import configure_logging


@pytest.fixture(autouse=True, scope="session")
def structured_logging() -> None:
    """Send structlog output to stderr so stdout holds report rows only."""
    configure_logging(level="DEBUG")


@pytest.fixture
def sample_series() -> list[float]:
    """Closing prices with a dip and a late rally."""
    return [2.0, 3.0, 5.0, 6.0, 1.0, 2.0, 10.0]


@pytest.fixture
def sma_series() -> list[float]:
    """Short series for moving average checks."""
    return [2.0, 4.5, 5.3, 6.5, 4.7]


@pytest.fixture
def period() -> tuple[datetime, datetime]:
    """Report period as aware UTC datetimes."""
    return (
        datetime(2024, 1, 2, tzinfo=UTC),
        datetime(2024, 1, 8, tzinfo=UTC),
    )


@pytest.fixture
def quote_frame() -> pd.DataFrame:
    """Quote history shaped like yfinance Ticker.history(auto_adjust=False)."""
    index = pd.DatetimeIndex(
        ["2024-01-05", "2024-01-02", "2024-01-04", "2024-01-03"],
        tz="America/New_York",
        name="Date",
    )
    return pd.DataFrame(
        {
            "Open": [13.0, 10.0, 12.0, 11.0],
            "High": [14.0, 11.0, 13.0, 12.0],
            "Low": [12.0, 9.0, 11.0, 10.0],
            "Close": [13.5, 10.5, 12.5, 11.5],
            "Adj Close": [13.0, 10.0, 12.0, 11.0],
            "Volume": [1000, 1100, 1200, 1300],
        },
        index=index,
    )
