"""Structured logging configuration."""

from .config import configure_logging, get_fetch_logger, get_logger, log_symbol_report

__all__ = ["configure_logging", "get_logger", "get_fetch_logger", "log_symbol_report"]
