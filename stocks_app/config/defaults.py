"""Default configuration parameters for the stock signal reporter."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FetchParams:
    """Quote fetching parameters."""
    interval: str = "1d"                  # Bar size requested from the provider
    price_column: str = "Adj Close"       # Preferred price column
    max_workers: int = 1                  # Concurrent symbol fetches
    timeout_seconds: int = 30             # Provider request timeout


@dataclass(frozen=True)
class SignalParams:
    """Signal calculation parameters."""
    sma_window: int = 30


@dataclass(frozen=True)
class OutputParams:
    """Report output parameters."""
    format: str = "csv"                   # csv, json
    include_header: bool = True


@dataclass(frozen=True)
class ReportParams:
    """Report scope parameters."""
    symbols: tuple[str, ...] = ("AAPL", "MSFT", "UBER", "GOOG")


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    fetch: FetchParams
    signals: SignalParams
    output: OutputParams
    report: ReportParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        fetch=FetchParams(),
        signals=SignalParams(),
        output=OutputParams(),
        report=ReportParams(),
    )
