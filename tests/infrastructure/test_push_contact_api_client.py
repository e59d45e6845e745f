"""Tests for the Push Contact API client."""

from __future__ import annotations

import json

import httpx
import pytest

from push_contact_reconciler.application.exceptions import RegistryCallError
from push_contact_reconciler.infrastructure.adapters.push_contact_api import (
    PushContactApiClient,
    PushContactApiConfig,
)


def _client(handler, base_url: str = "https://push-contacts.example.com") -> PushContactApiClient:
    return PushContactApiClient(
        PushContactApiConfig(base_url=base_url),
        transport=httpx.MockTransport(handler),
    )


class TestPushContactApiConfig:
    """Tests for PushContactApiConfig."""

    def test_default_timeout(self) -> None:
        """Default timeout should be 30 seconds."""
        assert PushContactApiConfig(base_url="https://x").timeout == 30.0

    def test_config_is_frozen(self) -> None:
        """Config should be immutable."""
        config = PushContactApiConfig(base_url="https://x")
        with pytest.raises(AttributeError):
            config.base_url = "https://y"  # type: ignore[misc]


class TestPushContactApiClient:
    """Tests for PushContactApiClient."""

    @pytest.mark.parametrize(
        "base_url",
        ["https://push-contacts.example.com", "https://push-contacts.example.com/"],
    )
    def test_push_contact_url(self, base_url: str) -> None:
        """The PushContact segment is appended with a single separator."""
        client = PushContactApiClient(PushContactApiConfig(base_url=base_url))
        assert client.push_contact_url == "https://push-contacts.example.com/PushContact"

    @pytest.mark.asyncio
    async def test_sends_delete_with_bearer_and_json_body(self) -> None:
        """Device tokens are sent as a JSON array in an authorized DELETE."""
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200)

        status_code = await _client(handler).delete_by_device_tokens(["A", "B", "A"], "secret-token")

        assert status_code == 200
        assert len(requests) == 1
        request = requests[0]
        assert request.method == "DELETE"
        assert str(request.url) == "https://push-contacts.example.com/PushContact"
        assert request.headers["Authorization"] == "Bearer secret-token"
        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.content) == ["A", "B", "A"]

    @pytest.mark.asyncio
    async def test_returns_error_status_without_raising(self) -> None:
        """Non-2xx responses are returned as status codes."""
        status_code = await _client(lambda request: httpx.Response(401)).delete_by_device_tokens(["A"], "t")

        assert status_code == 401

    @pytest.mark.asyncio
    async def test_transport_error_raises_registry_call_error(self) -> None:
        """Transport errors are wrapped in RegistryCallError."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(RegistryCallError, match="Failed to call Push Contact API") as exc_info:
            await _client(handler).delete_by_device_tokens(["A"], "t")

        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
