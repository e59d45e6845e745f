"""Bearer credential providers for the Push Contact API."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import ClassVar

import msal

from ....application.exceptions import CredentialFailureError

logger = logging.getLogger(__name__)


class StaticPushContactApiTokenGetter:
    """Returns a bearer credential issued out of band and set in configuration."""

    def __init__(self, token: str) -> None:
        """Initialize with the configured credential."""
        self._token = token

    async def get_token(self) -> str:
        """Return the configured credential."""
        if not self._token:
            msg = "No Push Contact API token configured"
            raise CredentialFailureError(msg)
        return self._token


@dataclass(frozen=True, slots=True)
class MsalTokenConfig:
    """Client credentials used to acquire Push Contact API tokens from Entra ID."""

    tenant_id: str
    client_id: str
    client_secret: str
    scopes: list[str] = field(default_factory=list)


class MsalPushContactApiTokenGetter:
    """
    Acquires Push Contact API tokens with the client credentials flow.

    Tokens are cached until shortly before they expire.
    """

    AUTHORITY_BASE: ClassVar[str] = "https://login.microsoftonline.com"
    REFRESH_MARGIN: ClassVar[timedelta] = timedelta(minutes=5)

    def __init__(self, config: MsalTokenConfig) -> None:
        """Initialize the token getter."""
        self._config = config
        self._access_token: str | None = None
        self._token_expiry: datetime | None = None
        self._msal_app: msal.ConfidentialClientApplication | None = None

    def _get_msal_app(self) -> msal.ConfidentialClientApplication:
        """Get or create MSAL application instance."""
        if self._msal_app is None:
            authority = f"{self.AUTHORITY_BASE}/{self._config.tenant_id}"
            self._msal_app = msal.ConfidentialClientApplication(
                client_id=self._config.client_id,
                client_credential=self._config.client_secret,
                authority=authority,
            )
        return self._msal_app

    async def get_token(self) -> str:
        """
        Acquire an access token using client credentials flow.

        Raises:
            CredentialFailureError: If Entra ID does not issue a token.
        """
        if self._access_token and self._token_expiry and datetime.now(UTC) < self._token_expiry:
            return self._access_token

        app = self._get_msal_app()
        # acquire_token_for_client blocks on network I/O
        result = await asyncio.to_thread(app.acquire_token_for_client, scopes=self._config.scopes)

        if "access_token" not in result:
            error = result.get("error_description", result.get("error", "Unknown error"))
            msg = f"Failed to acquire Push Contact API token: {error}"
            raise CredentialFailureError(msg)

        self._access_token = result["access_token"]
        expires_in = result.get("expires_in", 3600)
        self._token_expiry = datetime.now(UTC) + timedelta(seconds=expires_in) - self.REFRESH_MARGIN
        logger.debug("Acquired Push Contact API token valid until %s", self._token_expiry.isoformat())

        return self._access_token
