"""Unit tests for the cart API connectivity probe."""

from collections.abc import Callable

import httpx
import pytest

from fashion_assistant.core.errors import ProbeFailed
from fashion_assistant.core.provisioning import probe_cart_api


class TestProbeCartApi:
    """Tests for probe_cart_api."""

    @pytest.mark.asyncio
    async def test_success(self, make_http_client: Callable[..., httpx.AsyncClient], server_url: str) -> None:
        client = make_http_client(200)

        response = await probe_cart_api(server_url, client=client)

        assert response.status_code == 200
        assert [str(r.url) for r in client.requests] == [f"{server_url}/api/Cart"]
        assert client.requests[0].method == "GET"

    @pytest.mark.asyncio
    async def test_any_2xx_accepted(self, make_http_client: Callable[..., httpx.AsyncClient], server_url: str) -> None:
        response = await probe_cart_api(server_url, client=make_http_client(204, ""))

        assert response.status_code == 204

    @pytest.mark.asyncio
    async def test_server_error_fails(self, make_http_client: Callable[..., httpx.AsyncClient], server_url: str) -> None:
        client = make_http_client(500, "boom")

        with pytest.raises(ProbeFailed) as exc_info:
            await probe_cart_api(server_url, client=client)

        error = exc_info.value
        assert error.status_code == 500
        assert error.reason == "Internal Server Error"
        assert error.body == "boom"
        assert len(client.requests) == 1

    @pytest.mark.asyncio
    async def test_not_found_fails(self, make_http_client: Callable[..., httpx.AsyncClient], server_url: str) -> None:
        with pytest.raises(ProbeFailed) as exc_info:
            await probe_cart_api(server_url, client=make_http_client(404, "missing"))

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_timeout_fails_without_status(self, server_url: str) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(ProbeFailed) as exc_info:
                await probe_cart_api(server_url, client=client, timeout=0.5)

        assert exc_info.value.status_code is None
        assert "timed out" in exc_info.value.reason

    @pytest.mark.asyncio
    async def test_transport_error_fails(self, server_url: str) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(ProbeFailed) as exc_info:
                await probe_cart_api(server_url, client=client)

        assert "connection refused" in exc_info.value.reason

    @pytest.mark.asyncio
    async def test_trailing_slash_not_doubled(
        self, make_http_client: Callable[..., httpx.AsyncClient], server_url: str
    ) -> None:
        client = make_http_client(200)

        await probe_cart_api(f"{server_url}/", client=client)

        assert str(client.requests[0].url) == f"{server_url}/api/Cart"
