"""
Utility functions module.

Time Semantics:
- All report periods are UTC
- Naive datetimes are treated as UTC, never as local time
- The period end defaults to the current wall-clock time
"""
