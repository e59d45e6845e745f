"""Send result entity reported by the push provider."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..exceptions import InvalidSendResultError
from ..value_objects import MessagingErrorCode

if TYPE_CHECKING:
    from ..value_objects import FatalErrorCodeSet


@dataclass(frozen=True, slots=True)
class SendResult:
    """Outcome of one attempted notification delivery."""

    message_id: str | None
    device_token: str
    is_success: bool
    error_code: MessagingErrorCode | None = None

    def __post_init__(self) -> None:
        """Reject error codes on successful deliveries."""
        if self.is_success and self.error_code is not None:
            msg = (
                f"Successful send result for message {self.message_id!r} "
                f"cannot carry error code {self.error_code}"
            )
            raise InvalidSendResultError(msg)

    def is_fatal_failure(self, fatal_codes: FatalErrorCodeSet) -> bool:
        """Check if the delivery failed with an unrecoverable error code."""
        return not self.is_success and self.error_code in fatal_codes
