"""Quote data retrieval."""

from .fetcher import QuoteFetcher, get_close_series

__all__ = ["QuoteFetcher", "get_close_series"]
