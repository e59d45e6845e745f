"""Application settings loaded from environment variables."""

import logging
import os
from dataclasses import dataclass, field
from functools import cached_property

from ...application.exceptions import ConfigurationError
from ...application.use_cases import SentMessagesHandlerSettings
from ...domain.value_objects import FatalErrorCodeSet, MessagingErrorCode
from ..adapters.push_contact_api import MsalTokenConfig, PushContactApiConfig

logger = logging.getLogger(__name__)


def _env_int(key: str, default: int) -> int:
    """Get integer from environment variable."""
    return int(os.environ.get(key, str(default)))


def _env_float(key: str, default: float) -> float:
    """Get float from environment variable."""
    return float(os.environ.get(key, str(default)))


def _env_str(key: str, default: str = "") -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default)


def _env_list(key: str, default: str = "") -> list[str]:
    """Get comma-separated list from environment variable."""
    return [item.strip() for item in os.environ.get(key, default).split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings container."""

    # Push Contact API
    push_contact_api_url: str = field(default_factory=lambda: _env_str("PUSH_CONTACT_API_URL"))
    push_contact_api_timeout: float = field(default_factory=lambda: _env_float("PUSH_CONTACT_API_TIMEOUT", 30.0))
    push_contact_api_token: str = field(default_factory=lambda: _env_str("PUSH_CONTACT_API_TOKEN"))

    # Entra ID client credentials, used when no static token is set
    azure_tenant_id: str = field(default_factory=lambda: _env_str("AZURE_TENANT_ID"))
    azure_client_id: str = field(default_factory=lambda: _env_str("AZURE_CLIENT_ID"))
    azure_client_secret: str = field(default_factory=lambda: _env_str("AZURE_CLIENT_SECRET"))
    push_contact_api_scopes: list[str] = field(default_factory=lambda: _env_list("PUSH_CONTACT_API_SCOPE"))

    # Sent messages handling
    fatal_messaging_error_codes: list[str] = field(
        default_factory=lambda: _env_list("FATAL_MESSAGING_ERROR_CODES", "Unregistered,InvalidArgument")
    )

    # Run configuration
    run_mode: str = field(default_factory=lambda: _env_str("RUN_MODE", "once"))
    sent_messages_file: str = field(default_factory=lambda: _env_str("SENT_MESSAGES_FILE"))
    log_level: str = field(default_factory=lambda: _env_str("LOG_LEVEL", "INFO"))

    # API settings
    api_host: str = field(default_factory=lambda: _env_str("API_HOST", "0.0.0.0"))  # noqa: S104
    api_port: int = field(default_factory=lambda: _env_int("API_PORT", 8080))

    @property
    def uses_static_token(self) -> bool:
        """Check if a pre-issued Push Contact API token is configured."""
        return bool(self.push_contact_api_token)

    def validate(self) -> None:
        """Validate required settings."""
        missing: list[str] = []

        if not self.push_contact_api_url:
            missing.append("PUSH_CONTACT_API_URL")

        if not self.uses_static_token:
            if not self.azure_tenant_id:
                missing.append("AZURE_TENANT_ID")
            if not self.azure_client_id:
                missing.append("AZURE_CLIENT_ID")
            if not self.azure_client_secret:
                missing.append("AZURE_CLIENT_SECRET")
            if not self.push_contact_api_scopes:
                missing.append("PUSH_CONTACT_API_SCOPE")

        if self.run_mode.lower() == "once" and not self.sent_messages_file:
            missing.append("SENT_MESSAGES_FILE")

        if missing:
            msg = f"Missing required environment variables: {', '.join(missing)}"
            raise ConfigurationError(msg)

        unknown = [c for c in self.fatal_messaging_error_codes if MessagingErrorCode.try_parse(c) is None]
        if unknown:
            logger.warning("Ignoring unknown FATAL_MESSAGING_ERROR_CODES entries: %s", unknown)
        if not self.fatal_error_codes:
            msg = "FATAL_MESSAGING_ERROR_CODES contains no known messaging error code"
            raise ConfigurationError(msg)

    @cached_property
    def fatal_error_codes(self) -> FatalErrorCodeSet:
        """Get the fatal messaging error codes."""
        return FatalErrorCodeSet.from_strings(self.fatal_messaging_error_codes)

    @cached_property
    def handler_settings(self) -> SentMessagesHandlerSettings:
        """Get sent messages handling configuration."""
        return SentMessagesHandlerSettings(
            push_contact_api_url=self.push_contact_api_url,
            fatal_messaging_error_codes=self.fatal_error_codes,
        )

    @cached_property
    def push_contact_api_config(self) -> PushContactApiConfig:
        """Get Push Contact API client configuration."""
        return PushContactApiConfig(
            base_url=self.push_contact_api_url,
            timeout=self.push_contact_api_timeout,
        )

    @cached_property
    def msal_token_config(self) -> MsalTokenConfig:
        """Get client credentials for acquiring Push Contact API tokens."""
        return MsalTokenConfig(
            tenant_id=self.azure_tenant_id,
            client_id=self.azure_client_id,
            client_secret=self.azure_client_secret,
            scopes=self.push_contact_api_scopes,
        )


def load_settings() -> Settings:
    """Load and validate settings from environment."""
    settings = Settings()
    settings.validate()
    return settings
