"""Push Contact API client."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar

import httpx

from ....application.exceptions import RegistryCallError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PushContactApiConfig:
    """Configuration for the Push Contact API client."""

    base_url: str
    timeout: float = 30.0


class PushContactApiClient:
    """
    Async client for the Push Contact API.

    Implements the PushContactRegistry port.
    """

    PUSH_CONTACT_PATH: ClassVar[str] = "PushContact"

    def __init__(
        self,
        config: PushContactApiConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            config: Push Contact API location and timeout.
            transport: Optional httpx transport, used to stub the API in tests.
        """
        self._config = config
        self._transport = transport

    @property
    def push_contact_url(self) -> str:
        """URL of the push contact collection."""
        return f"{self._config.base_url.rstrip('/')}/{self.PUSH_CONTACT_PATH}"

    async def delete_by_device_tokens(self, device_tokens: list[str], token: str) -> int:
        """
        Delete push contacts by device token.

        Args:
            device_tokens: Device tokens sent as the JSON request body.
            token: Bearer credential for the Push Contact API.

        Returns:
            HTTP status code of the response. Non-2xx codes are returned, not raised.

        Raises:
            RegistryCallError: If the request could not be completed.
        """
        headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }

        try:
            async with httpx.AsyncClient(timeout=self._config.timeout, transport=self._transport) as client:
                response = await client.request(
                    "DELETE",
                    self.push_contact_url,
                    json=device_tokens,
                    headers=headers,
                )
        except httpx.HTTPError as e:
            msg = f"Failed to call Push Contact API at {self.push_contact_url}: {e}"
            raise RegistryCallError(msg) from e

        logger.debug(
            "DELETE %s for %d device tokens returned %d",
            self.push_contact_url,
            len(device_tokens),
            response.status_code,
        )
        return response.status_code
