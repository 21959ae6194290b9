"""Input validation helpers."""

from __future__ import annotations

from collections.abc import Mapping

from ..core.errors import GlassnodeValidationError

ASSET_PARAM = "a"
API_KEY_PARAM = "api_key"
SINCE_PARAM = "s"
UNTIL_PARAM = "u"
FREQUENCY_PARAM = "i"
FORMAT_PARAM = "f"


def ensure_required(value: str | None, *, name: str) -> str:
    if value is None or not isinstance(value, str) or value == "":
        raise GlassnodeValidationError(f"{name} required")
    return value


def ensure_no_format_override(params: Mapping[str, str]) -> None:
    # Only the default JSON response format can be decoded.
    if params.get(FORMAT_PARAM):
        raise GlassnodeValidationError("format override not supported")


__all__ = [
    "ASSET_PARAM",
    "API_KEY_PARAM",
    "SINCE_PARAM",
    "UNTIL_PARAM",
    "FREQUENCY_PARAM",
    "FORMAT_PARAM",
    "ensure_required",
    "ensure_no_format_override",
]
