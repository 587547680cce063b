"""Data models for per-symbol signal reports"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional


@dataclass(frozen=True)
class SignalSnapshot:
    """All signal values calculated for one price series"""
    last_price: Optional[float] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    price_diff: Optional[tuple[float, float]] = None  # (absolute, relative)
    sma: Optional[list[float]] = None

    def has_data(self) -> bool:
        """True when the series had at least one price"""
        return self.last_price is not None

    @property
    def abs_change(self) -> float:
        return self.price_diff[0] if self.price_diff is not None else 0.0

    @property
    def rel_change(self) -> float:
        return self.price_diff[1] if self.price_diff is not None else 0.0

    @property
    def sma_last(self) -> float:
        """Most recent moving average, 0.0 when none could be computed"""
        if not self.sma:
            return 0.0
        return self.sma[-1]


@dataclass(frozen=True)
class SymbolReport:
    """One output row: a symbol with its signal snapshot"""
    symbol: str
    period_start: datetime
    period_end: datetime
    window_size: int
    snapshot: SignalSnapshot

    @property
    def pct_change(self) -> float:
        """Relative change over the period in percent"""
        return self.snapshot.rel_change * 100.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "symbol": self.symbol,
            "period_start": self.period_start.isoformat(),
            "period_end": self.period_end.isoformat(),
            "price": self.snapshot.last_price,
            "change_abs": self.snapshot.abs_change,
            "change_pct": self.pct_change,
            "min": self.snapshot.min_price,
            "max": self.snapshot.max_price,
            "sma_window": self.window_size,
            "sma_last": self.snapshot.sma_last,
        }
