"""API request and response models."""

import logging
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from ....domain.entities import SendResult, SendResultBatch
from ....domain.value_objects import MessagingErrorCode

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["healthy", "unhealthy"]
    version: str
    timestamp: datetime


class SendResultRequest(BaseModel):
    """One delivery outcome reported by the push provider."""

    message_id: str | None = Field(default=None, description="Provider-assigned message identifier")
    device_token: str = Field(description="Target device token")
    is_success: bool
    error_code: str | None = Field(
        default=None,
        description="Messaging error code, e.g. Unregistered; only set for failed deliveries",
    )

    def to_domain(self) -> SendResult:
        """Convert to a domain send result."""
        error_code = None
        if self.error_code:
            error_code = MessagingErrorCode.try_parse(self.error_code)
            if error_code is None:
                logger.warning(
                    "Unrecognized messaging error code %r for message %s to device token %s; not treated as fatal",
                    self.error_code,
                    self.message_id,
                    self.device_token,
                )

        return SendResult(
            message_id=self.message_id,
            device_token=self.device_token,
            is_success=self.is_success,
            error_code=error_code,
        )


class SendResultBatchRequest(BaseModel):
    """Send results of one send operation."""

    responses: list[SendResultRequest] | None = None

    def to_domain(self) -> SendResultBatch:
        """
        Convert to a domain batch; absent responses become an empty batch.

        Error codes that match no known code are dropped, so the result
        counts as a non-fatal failure.

        Raises:
            DomainError: If a known error code is set on a successful result.
        """
        return SendResultBatch.of(r.to_domain() for r in self.responses or [])


class HandlingResponse(BaseModel):
    """Response from handling a batch of send results."""

    outcome: str = Field(description="How the batch was handled, e.g. deleted or no_fatal_results")
    success: bool
    deleted_count: int = Field(default=0, description="Device tokens sent to the registry for deletion")
    unhandled_count: int = Field(default=0, description="Results left unprocessed")
    status_code: int | None = Field(default=None, description="Push Contact API response status")


class ErrorResponse(BaseModel):
    """Error response."""

    error: str
    detail: str | None = None
