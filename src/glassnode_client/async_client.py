"""Public async client entrypoint."""

from __future__ import annotations

from types import TracebackType

from .client_shared import resolve_client_config
from .config import GlassnodeClientConfig
from .core.async_transport import AsyncTransport
from .core.errors import GlassnodeClientClosedError
from .metrics.async_service import AsyncMetricsService
from .metrics.models import ParsedSeries
from .metrics.requests import MetricRequest


class _GuardedAsyncMetricsService:
    """Guard wrapper to block usage after async client close."""

    def __init__(self, owner: "AsyncGlassnodeClient", delegate: AsyncMetricsService) -> None:
        self._owner = owner
        self._delegate = delegate

    def build_url(self, request: MetricRequest) -> str:
        return self._delegate.build_url(request)

    async def get_metric_data(
        self,
        request: MetricRequest,
        *,
        timeout: float | None = None,
    ) -> ParsedSeries:
        self._owner._ensure_open()
        return await self._delegate.get_metric_data(request, timeout=timeout)


class AsyncGlassnodeClient:
    """Public async Glassnode API client."""

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        config: GlassnodeClientConfig | None = None,
        transport: AsyncTransport | None = None,
        metrics_service: AsyncMetricsService | None = None,
    ) -> None:
        self._config = resolve_client_config(config=config, api_key=api_key, base_url=base_url)
        self._transport = transport or AsyncTransport(self._config)
        internal_metrics = metrics_service or AsyncMetricsService(self._transport, self._config)
        self._closed = False
        self.metrics = _GuardedAsyncMetricsService(self, internal_metrics)

    @property
    def config(self) -> GlassnodeClientConfig:
        return self._config

    def _ensure_open(self) -> None:
        if self._closed:
            raise GlassnodeClientClosedError("AsyncGlassnodeClient is already closed")

    async def close(self) -> None:
        if self._closed:
            return
        await self._transport.close()
        self._closed = True

    async def __aenter__(self) -> "AsyncGlassnodeClient":
        self._ensure_open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        await self.close()
        return False


__all__ = [
    "AsyncGlassnodeClient",
]
