"""Core response models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .errors import extract_code, extract_message


@dataclass(slots=True, frozen=True)
class ErrorResponse:
    code: int | None
    message: str | None

    @classmethod
    def from_payload(cls, payload: Mapping[str, object]) -> "ErrorResponse":
        return cls(
            code=extract_code(payload),
            message=extract_message(payload),
        )


__all__ = [
    "ErrorResponse",
]
