"""Application use cases."""

from .handle_sent_messages import (
    HandleSentMessages,
    HandlingOutcome,
    SentMessagesHandlerSettings,
    SentMessagesHandlingResult,
)

__all__ = [
    "HandleSentMessages",
    "HandlingOutcome",
    "SentMessagesHandlerSettings",
    "SentMessagesHandlingResult",
]
