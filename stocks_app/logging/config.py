"""
Centralized logging configuration for the stock signal reporter.

This module provides standardized logging configuration using structlog
for all components. Log output goes to stderr so that stdout carries
nothing but report rows.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
    """
    # Convert string level to logging constant
    log_level = getattr(logging, level.upper())

    # Configure standard library logging
    logging.basicConfig(
        level=log_level,
        stream=sys.stderr,
        format="%(message)s",  # structlog will handle formatting
        force=True,
    )

    # Build processor chain
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    # Add timestamp if requested
    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    # Add final formatting processor
    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    # Configure structlog
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_fetch_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the quote fetching subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for quote retrieval
    """
    # Initial values keep the proxy lazy until first use
    return structlog.get_logger(name, subsystem="quote_fetch")


def log_symbol_report(
    logger: FilteringBoundLogger,
    symbol: str,
    rows: int,
    reported: bool,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the outcome of processing one symbol with standardized format.

    Args:
        logger: Structlog logger instance
        symbol: Ticker symbol
        rows: Number of prices in the fetched series
        reported: Whether a report row was produced
        context: Additional context data
    """
    bound_logger = logger.bind(
        symbol=symbol,
        rows=rows,
        reported=reported,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if reported:
        bound_logger.info("Symbol processed")
    else:
        bound_logger.warning("Symbol skipped, no price data")
