"""Shared helpers for sync/async transport implementations."""

from __future__ import annotations

from collections.abc import Mapping
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import httpx

from ..config import GlassnodeClientConfig
from .errors import GlassnodeValidationError

JSON_CONTENT_TYPE = "application/json; charset=utf-8"
_SECRET_QUERY_KEYS = frozenset({"api_key"})


def build_default_headers(config: GlassnodeClientConfig) -> Mapping[str, str]:
    return {
        "Content-Type": JSON_CONTENT_TYPE,
        "Accept": JSON_CONTENT_TYPE,
        "User-Agent": config.user_agent,
    }


def build_default_timeout(config: GlassnodeClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


def build_request_kwargs(timeout: float | None) -> dict[str, object]:
    """Per-call keyword arguments; an absent timeout keeps the client default."""

    if timeout is None:
        return {}
    if timeout <= 0:
        raise GlassnodeValidationError("timeout must be > 0")
    return {"timeout": httpx.Timeout(timeout)}


def mask_secret(value: str | None, show: int = 4) -> str:
    if not value or len(value) <= show + 2:
        return "***"
    return "*" * (len(value) - show) + value[-show:]


def redact_url(url: str) -> str:
    """Return ``url`` with secret query values masked for logging."""

    parts = urlsplit(url)
    if not parts.query:
        return url
    pairs = [
        (key, mask_secret(value) if key in _SECRET_QUERY_KEYS else value)
        for key, value in parse_qsl(parts.query, keep_blank_values=True)
    ]
    return urlunsplit(parts._replace(query=urlencode(pairs, safe="*")))


def classify_network_error(exc: BaseException) -> tuple[str, str]:
    """Return ``(message, cause)`` for a transport-level exception."""

    if isinstance(exc, httpx.TimeoutException):
        return "request timed out", "timeout"
    return "network/transport error", "network"


__all__ = [
    "JSON_CONTENT_TYPE",
    "build_default_headers",
    "build_default_timeout",
    "build_request_kwargs",
    "mask_secret",
    "redact_url",
    "classify_network_error",
]
