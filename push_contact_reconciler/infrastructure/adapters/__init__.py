"""Infrastructure adapters - Implementations of application ports."""

from .push_contact_api import (
    MsalPushContactApiTokenGetter,
    PushContactApiClient,
    StaticPushContactApiTokenGetter,
)

__all__ = [
    "MsalPushContactApiTokenGetter",
    "PushContactApiClient",
    "StaticPushContactApiTokenGetter",
]
