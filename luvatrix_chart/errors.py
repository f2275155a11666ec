from __future__ import annotations


class ChartError(Exception):
    """Base error for the chart geometry engine."""


class ChartConfigError(ChartError, ValueError):
    """Raised at construction time when a scale or shape cannot be built."""


class ChartDataError(ChartError, ValueError):
    """Raised when input series cannot be coerced into numeric values."""
