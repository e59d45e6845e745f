"""Push Contact API adapter."""

from .client import PushContactApiClient, PushContactApiConfig
from .token_getter import (
    MsalPushContactApiTokenGetter,
    MsalTokenConfig,
    StaticPushContactApiTokenGetter,
)

__all__ = [
    "MsalPushContactApiTokenGetter",
    "MsalTokenConfig",
    "PushContactApiClient",
    "PushContactApiConfig",
    "StaticPushContactApiTokenGetter",
]
