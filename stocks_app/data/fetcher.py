"""
Quote retrieval: yfinance download and closing price series extraction.
"""
from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

import pandas as pd
import yfinance as yf
from yfinance.exceptions import YFPricesMissingError

from ..config.defaults import FetchParams
from ..errors import DataRetrievalError, MalformedDataError, MissingDataError
from ..logging.config import get_fetch_logger
from ..utils.time import ensure_utc

logger = get_fetch_logger(__name__)

PROVIDER = "yahoo"


def get_close_series(df: pd.DataFrame, price_column: str = "Adj Close",
                     symbol_hint: Optional[str] = None) -> pd.Series:
    """
    Extract a chronologically sorted closing price series from a quote frame.

    Args:
        df: Quote history as returned by the provider
        price_column: Preferred column, 'Close' is used when it is missing
        symbol_hint: Symbol used in error reporting

    Returns:
        Float series indexed by timestamp, rows without a price removed

    Raises:
        MalformedDataError: If no usable price column exists
    """
    for column in (price_column, "Close"):
        if column in df.columns:
            series = df[column]
            break
    else:
        raise MalformedDataError(
            f"No {price_column} or Close column found in quote data",
            symbol=symbol_hint,
            expected_format=price_column,
            context={"columns": [str(c) for c in df.columns]}
        )

    try:
        series = pd.to_numeric(series, errors="raise").astype(float)
    except (TypeError, ValueError) as e:
        raise MalformedDataError(
            f"Non-numeric prices in {series.name} column: {e}",
            symbol=symbol_hint,
            expected_format="float"
        ) from e

    return series.sort_index().dropna()


class QuoteFetcher:
    """Fetches historical closing prices from Yahoo Finance."""

    def __init__(self, config: Optional[FetchParams] = None):
        self.config = config or FetchParams()

    def download(self, symbol: str, start: datetime, end: datetime) -> pd.DataFrame:
        """
        Download the raw quote history for a symbol.

        The provider treats ``end`` as exclusive, so one day is added to
        make the requested range inclusive.

        Returns:
            Quote frame, empty when the provider has no prices in range

        Raises:
            DataRetrievalError: If the provider request fails
        """
        try:
            ticker = yf.Ticker(symbol)
            return ticker.history(
                start=ensure_utc(start),
                end=ensure_utc(end) + timedelta(days=1),
                interval=self.config.interval,
                auto_adjust=False,
                timeout=self.config.timeout_seconds,
                raise_errors=True,
            )
        except YFPricesMissingError:
            return pd.DataFrame()
        except Exception as e:
            raise DataRetrievalError(
                f"Failed to download quotes for {symbol}: {e}",
                symbol=symbol,
                provider=PROVIDER,
                context={"start": start.isoformat(), "end": end.isoformat()}
            ) from e

    def fetch_closing_data(self, symbol: str, start: datetime, end: datetime) -> list[float]:
        """
        Fetch adjusted closing prices for a symbol over an inclusive UTC range.

        Args:
            symbol: Ticker symbol
            start: First day of the range
            end: Last day of the range

        Returns:
            Prices ordered by timestamp, empty if no data exists

        Raises:
            MissingDataError: If the symbol is blank
            DataRetrievalError: If the provider is unreachable
            MalformedDataError: If the provider returns unusable data
        """
        symbol = symbol.strip()
        if not symbol:
            raise MissingDataError("Ticker symbol is required", data_type="symbol")

        logger.debug("Fetching quotes", symbol=symbol,
                     start=start.isoformat(), end=end.isoformat())

        df = self.download(symbol, start, end)
        if df is None or df.empty:
            logger.info("No quotes returned", symbol=symbol)
            return []

        closes = get_close_series(df, self.config.price_column, symbol_hint=symbol)

        logger.debug("Quotes fetched", symbol=symbol, rows=len(closes))
        return closes.tolist()
