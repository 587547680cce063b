"""Command line entry point for the stock signal reporter."""

import argparse
import sys
from pathlib import Path
from typing import Any, Optional

import structlog

from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .engine import StockReportEngine
from .errors import ConfigurationError
from .logging.config import configure_logging
from .utils.time import parse_date, resolve_period

logger = structlog.get_logger(__name__)

EXIT_OK = 0
EXIT_SYMBOL_FAILED = 1
EXIT_USAGE = 2


def _date_arg(value: str):
    try:
        return parse_date(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid date '{value}': {e}") from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stocks",
        description="Report price signals (min, max, change, SMA) for stock symbols",
    )
    parser.add_argument("-s", "--symbols",
                        help="Comma separated stock symbols (default: AAPL,MSFT,UBER,GOOG)")
    parser.add_argument("-f", "--from", dest="start", type=_date_arg, required=True,
                        help="Start date of the data (RFC 3339 or YYYY-MM-DD, UTC)")
    parser.add_argument("-t", "--to", dest="end", type=_date_arg,
                        help="End date of the data (default: now)")
    parser.add_argument("-w", "--window", type=int, help="SMA window size in days")
    parser.add_argument("--format", choices=["csv", "json"], help="Output format")
    parser.add_argument("--no-header", action="store_true", help="Omit the CSV header")
    parser.add_argument("--workers", type=int, help="Concurrent symbol fetches")
    parser.add_argument("--config", type=Path, help="YAML configuration file")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    parser.add_argument("--log-json", action="store_true", help="Emit logs as JSON")
    return parser


def cli_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Translate parsed arguments into a configuration override dict."""
    overrides: dict[str, Any] = {}

    if args.symbols:
        symbols = [s.strip() for s in args.symbols.split(",") if s.strip()]
        overrides.setdefault("report", {})["symbols"] = symbols
    if args.window is not None:
        overrides.setdefault("signals", {})["sma_window"] = args.window
    if args.format:
        overrides.setdefault("output", {})["format"] = args.format
    if args.no_header:
        overrides.setdefault("output", {})["include_header"] = False
    if args.workers is not None:
        overrides.setdefault("fetch", {})["max_workers"] = args.workers

    return overrides


def load_config(args: argparse.Namespace):
    """
    Merge defaults, the YAML file and command line overrides.

    Raises:
        ConfigurationError: If the merged configuration is invalid
    """
    loader = ConfigLoader.create(args.config)
    if args.config is not None and not loader.config_file.exists():
        raise ConfigurationError(
            f"Configuration file not found: {args.config}",
            config_source=str(args.config)
        )

    merged = loader.merge_config(cli_overrides(args))

    errors = ConfigValidator.validate_config(merged)
    if errors:
        error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in errors]
        raise ConfigurationError(
            "Invalid configuration",
            config_source=str(loader.config_file),
            errors=error_msgs
        )

    return loader.build_config(merged)


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level, format_json=args.log_json)

    try:
        config = load_config(args)
    except ConfigurationError as e:
        logger.error("Configuration rejected", error=str(e), errors=e.errors)
        return EXIT_USAGE

    try:
        start, end = resolve_period(args.start, args.end)
    except ValueError as e:
        logger.error("Invalid report period", error=str(e))
        return EXIT_USAGE

    engine = StockReportEngine(config)
    summary = engine.run(config.report.symbols, start, end)

    return EXIT_OK if summary.success else EXIT_SYMBOL_FAILED


if __name__ == "__main__":
    sys.exit(main())
