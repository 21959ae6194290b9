"""Metric endpoint package."""

from .models import (
    ParsedSeries,
    TimeOptions,
    TimeOptionsSeries,
    TimeValue,
    TimeValueSeries,
)
from .requests import MetricRequest

__all__ = [
    "MetricRequest",
    "ParsedSeries",
    "TimeValue",
    "TimeOptions",
    "TimeValueSeries",
    "TimeOptionsSeries",
]
