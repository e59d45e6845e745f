"""Messaging error code value object."""

from enum import StrEnum, auto
from typing import Self

from ..exceptions import InvalidMessagingErrorCodeError


class MessagingErrorCode(StrEnum):
    """Reason reported by the push provider for a failed delivery."""

    THIRD_PARTY_AUTH_ERROR = auto()
    INVALID_ARGUMENT = auto()
    INTERNAL = auto()
    QUOTA_EXCEEDED = auto()
    SENDER_ID_MISMATCH = auto()
    UNAVAILABLE = auto()
    UNREGISTERED = auto()
    UNSPECIFIED_ERROR = auto()

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str) -> Self:
        """
        Parse an error code from configuration or a provider payload.

        Accepts the enum value, the upper-snake name or the provider's
        PascalCase spelling, ignoring case and surrounding whitespace.

        Raises:
            InvalidMessagingErrorCodeError: If the value matches no code.
        """
        normalized = value.strip().replace("-", "").replace("_", "").lower()
        for code in cls:
            if code.value.replace("_", "") == normalized:
                return code
        msg = f"Unknown messaging error code: {value!r}"
        raise InvalidMessagingErrorCodeError(msg)

    @classmethod
    def try_parse(cls, value: str) -> Self | None:
        """Parse an error code, returning None when the value matches no code."""
        try:
            return cls.parse(value)
        except InvalidMessagingErrorCodeError:
            return None
