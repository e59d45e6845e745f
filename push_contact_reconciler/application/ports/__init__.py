"""Application ports - Interfaces for external adapters."""

from .push_contact_registry import PushContactRegistry
from .token_getter import PushContactApiTokenGetter

__all__ = [
    "PushContactApiTokenGetter",
    "PushContactRegistry",
]
