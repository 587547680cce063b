"""
System failure error classifications for unrecoverable errors.

These exceptions represent failures outside the price data itself:
an unreachable provider, a broken configuration or a closed output.
"""

from typing import Any, Optional


class SystemFailureError(Exception):
    """Base class for unrecoverable system failures."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class DataRetrievalError(SystemFailureError):
    """The quote provider could not be reached or refused the request."""

    def __init__(self, message: str, symbol: Optional[str] = None,
                 provider: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.symbol = symbol
        self.provider = provider


class ConfigurationError(SystemFailureError):
    """Invalid or unreadable configuration."""

    def __init__(self, message: str, config_source: Optional[str] = None,
                 errors: Optional[list[str]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.config_source = config_source
        self.errors = errors or []


class DeliveryError(SystemFailureError):
    """Report delivery failures."""

    def __init__(self, message: str, delivery_method: Optional[str] = None,
                 symbol: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.delivery_method = delivery_method
        self.symbol = symbol
