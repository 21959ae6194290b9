"""Error types and HTTP status mapping."""

from __future__ import annotations

from collections.abc import Mapping


def _to_int(value: object) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if text == "":
            return None
        if text.lstrip("-").isdigit():
            return int(text)
    return None


def extract_code(payload: Mapping[str, object] | None) -> int | None:
    if not isinstance(payload, Mapping):
        return None
    return _to_int(payload.get("code"))


def extract_message(payload: Mapping[str, object] | None) -> str | None:
    if not isinstance(payload, Mapping):
        return None
    value = payload.get("message")
    if value is None:
        return None
    text = str(value)
    return text or None


class GlassnodeApiError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        code: int | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.http_status = http_status
        self.code = code
        self.cause = cause


class GlassnodeValidationError(GlassnodeApiError):
    """Invalid input; raised before any request is sent."""


class GlassnodeTransportError(GlassnodeApiError):
    """Non-2xx HTTP status or network-level failure."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        code: int | None = None,
        cause: str | None = None,
        server_message: str | None = None,
    ) -> None:
        super().__init__(message, http_status=http_status, code=code, cause=cause)
        self.server_message = server_message


class GlassnodeParseError(GlassnodeApiError):
    """Response body matched neither known schema."""

    def __init__(
        self,
        message: str,
        *,
        detail: str | None = None,
        http_status: int | None = None,
    ) -> None:
        super().__init__(message, http_status=http_status, cause="parse")
        self.detail = detail

    def __str__(self) -> str:
        base = super().__str__()
        if self.detail:
            return f"{base}: {self.detail}"
        return base


class GlassnodeClientClosedError(GlassnodeApiError):
    """Raised when client is used after close."""


def is_success_status(http_status: int | None) -> bool:
    return http_status is not None and 200 <= http_status < 300


def classify_http_error(
    payload: Mapping[str, object] | None,
    *,
    http_status: int | None,
) -> GlassnodeTransportError | None:
    """Map a non-2xx response to a transport error; ``None`` on success."""

    if is_success_status(http_status):
        return None

    code = extract_code(payload)
    server_message = extract_message(payload)
    if http_status is None:
        message = server_message or "missing HTTP status"
    else:
        message = server_message or f"unknown error, status code: {http_status}"
    return GlassnodeTransportError(
        message,
        http_status=http_status,
        code=code,
        cause="http_status",
        server_message=server_message,
    )


__all__ = [
    "GlassnodeApiError",
    "GlassnodeValidationError",
    "GlassnodeTransportError",
    "GlassnodeParseError",
    "GlassnodeClientClosedError",
    "extract_code",
    "extract_message",
    "is_success_status",
    "classify_http_error",
]
