"""Shared request preparation for sync/async metric services."""

from __future__ import annotations

from ..config import GlassnodeClientConfig
from .params import build_query_params
from .requests import MetricRequest
from .urls import compose_url


def build_request_url(config: GlassnodeClientConfig, request: MetricRequest) -> str:
    """Validate ``request`` and compose its absolute URL; performs no I/O."""

    params = build_query_params(config.api_key, request)
    return compose_url(
        config.base_url,
        config.metrics_prefix,
        request.category,
        request.metric,
        params,
    )


__all__ = [
    "build_request_url",
]
