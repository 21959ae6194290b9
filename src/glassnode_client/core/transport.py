"""Sync HTTP transport with status evaluation."""

from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx

from ..config import GlassnodeClientConfig
from .errors import GlassnodeTransportError
from .response_parsing import evaluate_response
from .transport_shared import (
    build_default_headers,
    build_default_timeout,
    build_request_kwargs,
    classify_network_error,
    redact_url,
)

logger = logging.getLogger("glassnode_client")


class SyncTransportClient(Protocol):
    def get(self, url: str, **kwargs: Any) -> object: ...
    def close(self) -> None: ...


class SyncTransport:
    """Synchronous transport for the Glassnode API.

    Single attempt per call; non-2xx responses and network failures are
    raised as ``GlassnodeTransportError``.
    """

    def __init__(
        self,
        config: GlassnodeClientConfig,
        *,
        client: SyncTransportClient | None = None,
    ) -> None:
        self._config = config
        self._closed = False
        self._headers = dict(build_default_headers(config))
        self._owns_client = client is None
        self._client = client or httpx.Client(
            headers=self._headers,
            timeout=build_default_timeout(config),
        )

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client and hasattr(self._client, "close"):
            self._client.close()

    def get(self, url: str, *, timeout: float | None = None) -> bytes:
        if self._closed:
            raise GlassnodeTransportError("transport is already closed")

        request_kwargs = build_request_kwargs(timeout)
        safe_url = redact_url(url)
        logger.debug("request start url=%s", safe_url)
        try:
            response = self._client.get(url, headers=self._headers, **request_kwargs)
        except Exception as exc:
            message, cause = classify_network_error(exc)
            logger.error(
                "request network error url=%s error=%s",
                safe_url,
                exc.__class__.__name__,
            )
            raise GlassnodeTransportError(message, cause=cause) from exc

        http_status = getattr(response, "status_code", None)
        logger.debug("response received url=%s http_status=%s", safe_url, http_status)
        try:
            body = evaluate_response(response)
        except GlassnodeTransportError:
            logger.error("request failed url=%s http_status=%s", safe_url, http_status)
            raise
        logger.info("request success url=%s", safe_url)
        return body


__all__ = [
    "SyncTransport",
]
