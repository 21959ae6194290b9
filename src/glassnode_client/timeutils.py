"""Timestamp helpers for request defaults."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone


def yesterday_timestamp(now: datetime | None = None) -> int:
    """Unix timestamp (seconds) of the moment 24 hours before ``now``."""

    current = now or datetime.now(timezone.utc)
    if current.tzinfo is None:
        current = current.replace(tzinfo=timezone.utc)
    return int((current - timedelta(days=1)).timestamp())


__all__ = [
    "yesterday_timestamp",
]
