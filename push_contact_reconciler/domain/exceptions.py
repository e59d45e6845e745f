"""Domain exceptions."""


class DomainError(Exception):
    """Base exception for domain errors."""


class InvalidMessagingErrorCodeError(DomainError, ValueError):
    """Raised when an error code is not a known messaging error code."""


class InvalidSendResultError(DomainError, ValueError):
    """Raised when a send result carries inconsistent data."""
