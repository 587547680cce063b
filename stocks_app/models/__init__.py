"""Data models for the stocks reporting system."""

from .report import SignalSnapshot, SymbolReport

__all__ = ["SignalSnapshot", "SymbolReport"]
