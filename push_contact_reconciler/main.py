#!/usr/bin/env python3
"""
Push Contact Reconciler

Composition root and application entry point.
Wires together all layers following hexagonal architecture principles.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from .application.exceptions import ConfigurationError
from .application.use_cases import HandleSentMessages
from .infrastructure.adapters import (
    MsalPushContactApiTokenGetter,
    PushContactApiClient,
    StaticPushContactApiTokenGetter,
)
from .infrastructure.adapters.api.models import SendResultBatchRequest
from .infrastructure.config import Settings, load_settings

if TYPE_CHECKING:
    from .application.ports import PushContactApiTokenGetter
    from .application.use_cases import SentMessagesHandlingResult
    from .domain.entities import SendResultBatch

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)

# Application version
__version__ = "1.0.0"


class ApplicationContainer:
    """
    Dependency injection container.

    Responsible for creating and wiring all application components.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize container with settings."""
        self._settings = settings

    def create_token_getter(self) -> PushContactApiTokenGetter:
        """Create the Push Contact API credential adapter."""
        if self._settings.uses_static_token:
            logger.info("Using configured Push Contact API token")
            return StaticPushContactApiTokenGetter(self._settings.push_contact_api_token)

        logger.info("Using Entra ID client credentials for Push Contact API tokens")
        return MsalPushContactApiTokenGetter(self._settings.msal_token_config)

    def create_registry(self) -> PushContactApiClient:
        """Create the push contact registry adapter."""
        return PushContactApiClient(self._settings.push_contact_api_config)

    def create_handle_use_case(self) -> HandleSentMessages:
        """Create the main use case with all dependencies."""
        return HandleSentMessages(
            settings=self._settings.handler_settings,
            token_getter=self.create_token_getter(),
            registry=self.create_registry(),
        )


class Application:
    """
    Main application orchestrator.

    Handles run modes (single batch file or API) and lifecycle.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize application with settings."""
        self._settings = settings
        self._container = ApplicationContainer(settings)
        self._use_case = self._container.create_handle_use_case()

    async def handle(self, batch: SendResultBatch) -> SentMessagesHandlingResult:
        """Handle one batch of send results."""
        return await self._use_case.execute(batch)

    async def run_once(self) -> SentMessagesHandlingResult:
        """Handle the batch stored in the configured sent messages file."""
        path = Path(self._settings.sent_messages_file)
        logger.info("Reading sent messages from %s", path)

        request = SendResultBatchRequest.model_validate_json(path.read_text(encoding="utf-8"))
        batch = request.to_domain()
        logger.info(
            "Loaded %d sent messages (%d succeeded, %d failed)",
            len(batch),
            batch.success_count,
            batch.failure_count,
        )

        result = await self.handle(batch)
        logger.info("Sent messages handled: %s", result.outcome)
        return result

    async def run_api(self) -> None:
        """Run in API server mode."""
        import uvicorn

        from .infrastructure.adapters.api import create_app

        logger.info(
            "Starting API server on %s:%d",
            self._settings.api_host,
            self._settings.api_port,
        )

        app = create_app(
            handle_func=self.handle,
            version=__version__,
        )

        config = uvicorn.Config(
            app,
            host=self._settings.api_host,
            port=self._settings.api_port,
            log_level=self._settings.log_level.lower(),
        )
        await uvicorn.Server(config).serve()

    async def run(self) -> int:
        """
        Run the application based on configured mode.

        Returns:
            Exit code (0 for success, 1 for failure).
        """
        match self._settings.run_mode.lower():
            case "once":
                logger.info("Running in single-batch mode")
                result = await self.run_once()
                return 0 if result.success else 1

            case "api":
                await self.run_api()
                return 0

            case _:
                logger.error(
                    "Invalid RUN_MODE: %s (use 'once' or 'api')",
                    self._settings.run_mode,
                )
                return 1


async def async_main() -> int:
    """Async entry point."""
    try:
        logger.info("Push Contact Reconciler starting...")

        settings = load_settings()
        logging.getLogger().setLevel(settings.log_level.upper())

        app = Application(settings)
        return await app.run()

    except ConfigurationError as e:
        logger.error("Configuration error: %s", e)
        return 1
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        return 0
    except Exception:
        logger.exception("Unexpected error")
        return 1


def main() -> None:
    """Main entry point."""
    exit_code = asyncio.run(async_main())
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
