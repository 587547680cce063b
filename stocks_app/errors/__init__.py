"""
Error classification system for quote retrieval and reporting.

Signal calculations never raise; these exceptions cover everything
around them: fetching quotes, loading configuration and writing reports.
"""

from .data_quality import (
    DataQualityError,
    MalformedDataError,
    MissingDataError,
)
from .system_failures import (
    ConfigurationError,
    DataRetrievalError,
    DeliveryError,
    SystemFailureError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MissingDataError",
    "MalformedDataError",
    # System Failures
    "SystemFailureError",
    "DataRetrievalError",
    "ConfigurationError",
    "DeliveryError",
]
