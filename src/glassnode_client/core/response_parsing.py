"""Shared response handling helpers for sync/async transports."""

from __future__ import annotations

import json
from typing import Protocol

from .errors import classify_http_error, is_success_status
from .models import ErrorResponse


class BodyResponse(Protocol):
    status_code: int
    content: bytes


def parse_error_body(content: bytes | None) -> ErrorResponse | None:
    """Decode a ``{code, message}`` error body; ``None`` when it is not one."""

    if not content:
        return None
    try:
        payload = json.loads(content)
    except (ValueError, UnicodeDecodeError):
        return None
    if not isinstance(payload, dict):
        return None
    return ErrorResponse.from_payload(payload)


def evaluate_response(response: BodyResponse) -> bytes:
    """Return the body of a 2xx response or raise the mapped transport error."""

    http_status = getattr(response, "status_code", None)
    content = getattr(response, "content", b"") or b""
    if is_success_status(http_status):
        return content

    error_body = parse_error_body(content)
    payload = (
        {"code": error_body.code, "message": error_body.message}
        if error_body is not None
        else None
    )
    mapped_error = classify_http_error(payload, http_status=http_status)
    if mapped_error is None:
        return content
    raise mapped_error


__all__ = [
    "parse_error_body",
    "evaluate_response",
]
