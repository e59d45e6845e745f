"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from fastapi import FastAPI, HTTPException, status
from fastapi.responses import JSONResponse

from ....domain.exceptions import DomainError
from .models import (
    ErrorResponse,
    HandlingResponse,
    HealthResponse,
    SendResultBatchRequest,
)

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Callable, Coroutine

    from ....application.use_cases import SentMessagesHandlingResult
    from ....domain.entities import SendResultBatch

    HandleFunc = Callable[[SendResultBatch], Coroutine[None, None, SentMessagesHandlingResult]]

logger = logging.getLogger(__name__)


def _result_to_response(result: SentMessagesHandlingResult) -> HandlingResponse:
    """Convert a handling result to an API response (no device tokens)."""
    return HandlingResponse(
        outcome=result.outcome.value,
        success=result.success,
        deleted_count=len(result.deleted_device_tokens),
        unhandled_count=len(result.unhandled),
        status_code=result.status_code,
    )


def create_app(
    handle_func: HandleFunc,
    version: str = "1.0.0",
) -> FastAPI:
    """
    Create FastAPI application.

    Args:
        handle_func: Async function handling one batch of send results.
        version: Application version string.

    Returns:
        Configured FastAPI application.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler."""
        logger.info("API server starting...")
        yield
        logger.info("API server shutting down...")

    app = FastAPI(
        title="Push Contact Reconciler API",
        description="Receives push provider send results and removes push contacts "
        "whose device tokens were permanently rejected.",
        version=version,
        lifespan=lifespan,
        responses={
            500: {"model": ErrorResponse, "description": "Internal server error"},
        },
    )

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["Health"],
        summary="Health check",
        description="Check if the service is healthy and running.",
    )
    async def health_check() -> HealthResponse:
        return HealthResponse(
            status="healthy",
            version=version,
            timestamp=datetime.now(UTC),
        )

    @app.post(
        "/api/v1/sent-messages",
        response_model=HandlingResponse,
        tags=["Operations"],
        summary="Handle sent messages",
        description="Handle the send results of one push send operation. "
        "Device tokens rejected with a fatal error code are deleted from the push contact registry.",
        responses={
            422: {"model": ErrorResponse, "description": "Invalid send results"},
        },
    )
    async def handle_sent_messages(request: SendResultBatchRequest) -> HandlingResponse:
        try:
            batch = request.to_domain()
        except DomainError as e:
            raise HTTPException(
                status_code=422,
                detail=str(e),
            ) from e

        logger.info("API: Handling %d sent messages", len(batch))
        result = await handle_func(batch)
        return _result_to_response(result)

    @app.exception_handler(Exception)
    async def global_exception_handler(request, exc: Exception) -> JSONResponse:  # noqa: ARG001
        """Handle uncaught exceptions."""
        logger.exception("Unhandled exception in API")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error", "detail": str(exc)},
        )

    return app
