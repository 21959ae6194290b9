"""Shared helpers for sync/async client bootstrap."""

from __future__ import annotations

from dataclasses import replace

from .config import GlassnodeClientConfig
from .core.errors import GlassnodeValidationError


def resolve_client_config(
    *,
    config: GlassnodeClientConfig | None,
    api_key: str | None,
    base_url: str | None,
) -> GlassnodeClientConfig:
    resolved = config or GlassnodeClientConfig()
    if api_key is not None:
        resolved = replace(resolved, api_key=api_key)
    if base_url is not None:
        resolved = replace(resolved, base_url=base_url)
    validate_client_config(resolved)
    return resolved


def validate_client_config(config: GlassnodeClientConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise GlassnodeValidationError(str(exc)) from exc


__all__ = [
    "resolve_client_config",
    "validate_client_config",
]
