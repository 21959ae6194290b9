from __future__ import annotations

import asyncio

import httpx
import pytest

from glassnode_client.core.async_transport import AsyncTransport
from glassnode_client.core.errors import GlassnodeTransportError
from tests.shared.payloads import make_error_body
from tests.shared.transport import AsyncSequencedClient, Response, Step, build_config

URL = "https://api.glassnode.com/v1/metrics/market/price?a=BTC&api_key=k"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("steps", "expected_body", "expected_exception", "expected_cause"),
    [
        ([Response(200, b"[]")], b"[]", None, None),
        ([Response(404, make_error_body(404, "not found"))], None, GlassnodeTransportError, "http_status"),
        ([httpx.ConnectError("down")], None, GlassnodeTransportError, "network"),
        ([httpx.ReadTimeout("slow")], None, GlassnodeTransportError, "timeout"),
    ],
    ids=["success", "http-error", "network", "timeout"],
)
async def test_async_transport_status_matrix(
    steps: list[Step],
    expected_body: bytes | None,
    expected_exception: type[Exception] | None,
    expected_cause: str | None,
):
    client = AsyncSequencedClient(steps)
    transport = AsyncTransport(build_config(), client=client)

    if expected_exception is not None:
        with pytest.raises(expected_exception) as exc_info:
            await transport.get(URL)
        assert exc_info.value.cause == expected_cause
    else:
        assert await transport.get(URL) == expected_body

    assert client.calls == 1


@pytest.mark.asyncio
async def test_async_transport_does_not_wrap_cancellation():
    client = AsyncSequencedClient([asyncio.CancelledError()])
    transport = AsyncTransport(build_config(), client=client)
    with pytest.raises(asyncio.CancelledError):
        await transport.get(URL)


@pytest.mark.asyncio
async def test_async_transport_can_initialize_and_close_with_real_httpx_client():
    transport = AsyncTransport(build_config())
    await transport.close()
