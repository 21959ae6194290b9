"""Request models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(slots=True, frozen=True)
class MetricRequest:
    """Structured request for one metric endpoint.

    ``since``/``until`` are Unix timestamps where ``0`` means unset.
    ``overrides`` are raw query parameters merged underneath the structured
    fields.
    """

    asset: str
    category: str
    metric: str
    since: int = 0
    until: int = 0
    frequency: str = ""
    overrides: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if isinstance(self.since, bool) or not isinstance(self.since, int):
            raise TypeError("since must be int")
        if isinstance(self.until, bool) or not isinstance(self.until, int):
            raise TypeError("until must be int")
        if not isinstance(self.overrides, Mapping):
            raise TypeError("overrides must be Mapping[str, str]")
        normalized: dict[str, str] = {}
        for key, value in self.overrides.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise TypeError("overrides entries must be str -> str")
            normalized[key] = value
        object.__setattr__(self, "overrides", MappingProxyType(normalized))


__all__ = [
    "MetricRequest",
]
