"""Public client entrypoint."""

from __future__ import annotations

from types import TracebackType

from .client_shared import resolve_client_config
from .config import GlassnodeClientConfig
from .core.errors import GlassnodeClientClosedError
from .core.transport import SyncTransport
from .metrics.models import ParsedSeries
from .metrics.requests import MetricRequest
from .metrics.service import MetricsService


class _GuardedMetricsService:
    """Guard wrapper to block usage after client close."""

    def __init__(self, owner: "GlassnodeClient", delegate: MetricsService) -> None:
        self._owner = owner
        self._delegate = delegate

    def build_url(self, request: MetricRequest) -> str:
        return self._delegate.build_url(request)

    def get_metric_data(
        self,
        request: MetricRequest,
        *,
        timeout: float | None = None,
    ) -> ParsedSeries:
        self._owner._ensure_open()
        return self._delegate.get_metric_data(request, timeout=timeout)


class GlassnodeClient:
    """Public Glassnode API client."""

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        config: GlassnodeClientConfig | None = None,
        transport: SyncTransport | None = None,
        metrics_service: MetricsService | None = None,
    ) -> None:
        self._config = resolve_client_config(config=config, api_key=api_key, base_url=base_url)
        self._transport = transport or SyncTransport(self._config)
        internal_metrics = metrics_service or MetricsService(self._transport, self._config)
        self._closed = False
        self.metrics = _GuardedMetricsService(self, internal_metrics)

    @property
    def config(self) -> GlassnodeClientConfig:
        return self._config

    def _ensure_open(self) -> None:
        if self._closed:
            raise GlassnodeClientClosedError("GlassnodeClient is already closed")

    def close(self) -> None:
        if self._closed:
            return
        self._transport.close()
        self._closed = True

    def __enter__(self) -> "GlassnodeClient":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


__all__ = [
    "GlassnodeClient",
]
