"""Domain value objects - Immutable objects defined by their attributes."""

from .fatal_error_codes import FatalErrorCodeSet
from .messaging_error_code import MessagingErrorCode

__all__ = [
    "FatalErrorCodeSet",
    "MessagingErrorCode",
]
