"""Async single-request metric fetch (build URL, GET, classify)."""

from __future__ import annotations

import logging
from typing import Protocol

from ..config import GlassnodeClientConfig
from ..core.errors import GlassnodeParseError
from .models import ParsedSeries
from .parser import classify_response
from .requests import MetricRequest
from .service_shared import build_request_url

logger = logging.getLogger("glassnode_client")


class AsyncGetTransport(Protocol):
    async def get(self, url: str, *, timeout: float | None = None) -> bytes: ...


class AsyncMetricsService:
    """Async counterpart of ``MetricsService``."""

    def __init__(self, transport: AsyncGetTransport, config: GlassnodeClientConfig) -> None:
        self._transport = transport
        self._config = config

    def build_url(self, request: MetricRequest) -> str:
        return build_request_url(self._config, request)

    async def get_metric_data(
        self,
        request: MetricRequest,
        *,
        timeout: float | None = None,
    ) -> ParsedSeries:
        url = self.build_url(request)
        body = await self._transport.get(url, timeout=timeout)
        try:
            series = classify_response(body)
        except GlassnodeParseError as exc:
            logger.error(
                "response parse error category=%s metric=%s detail=%s",
                request.category,
                request.metric,
                exc.detail,
            )
            raise
        logger.debug(
            "response classified category=%s metric=%s kind=%s size=%s",
            request.category,
            request.metric,
            series.kind,
            len(series),
        )
        return series


__all__ = [
    "AsyncMetricsService",
]
