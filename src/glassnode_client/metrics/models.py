"""Metric series response models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import ClassVar, Literal, TypeAlias


@dataclass(slots=True, frozen=True)
class TimeValue:
    time: int
    value: float


@dataclass(slots=True, frozen=True)
class TimeOptions:
    """One timestamp with named sub-metrics; hashable over its option items."""

    time: int
    options: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))

    def __hash__(self) -> int:
        return hash((self.time, frozenset(self.options.items())))


@dataclass(slots=True, frozen=True)
class TimeValueSeries:
    """Flat numeric series: one value per timestamp."""

    kind: ClassVar[Literal["time_value"]] = "time_value"
    points: tuple[TimeValue, ...] | list[TimeValue] = ()

    def __post_init__(self) -> None:
        if isinstance(self.points, tuple):
            return
        object.__setattr__(self, "points", tuple(self.points))

    def __len__(self) -> int:
        return len(self.points)


@dataclass(slots=True, frozen=True)
class TimeOptionsSeries:
    """Series of named sub-metric bundles, e.g. several moving averages."""

    kind: ClassVar[Literal["time_options"]] = "time_options"
    records: tuple[TimeOptions, ...] | list[TimeOptions] = ()

    def __post_init__(self) -> None:
        if isinstance(self.records, tuple):
            return
        object.__setattr__(self, "records", tuple(self.records))

    def __len__(self) -> int:
        return len(self.records)


ParsedSeries: TypeAlias = TimeValueSeries | TimeOptionsSeries


__all__ = [
    "TimeValue",
    "TimeOptions",
    "TimeValueSeries",
    "TimeOptionsSeries",
    "ParsedSeries",
]
