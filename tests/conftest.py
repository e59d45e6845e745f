"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from push_contact_reconciler.application.use_cases import SentMessagesHandlerSettings
from push_contact_reconciler.domain.entities import SendResult
from push_contact_reconciler.domain.value_objects import FatalErrorCodeSet, MessagingErrorCode


@pytest.fixture
def fatal_codes() -> FatalErrorCodeSet:
    """Fatal error codes: unregistered and invalid token."""
    return FatalErrorCodeSet(
        codes=frozenset({MessagingErrorCode.UNREGISTERED, MessagingErrorCode.INVALID_ARGUMENT})
    )


@pytest.fixture
def handler_settings(fatal_codes: FatalErrorCodeSet) -> SentMessagesHandlerSettings:
    """Handler settings pointing at a test Push Contact API."""
    return SentMessagesHandlerSettings(
        push_contact_api_url="https://push-contacts.example.com",
        fatal_messaging_error_codes=fatal_codes,
    )


@pytest.fixture
def unregistered_result() -> SendResult:
    """A delivery rejected because the device is no longer registered."""
    return SendResult(
        message_id="1",
        device_token="A",
        is_success=False,
        error_code=MessagingErrorCode.UNREGISTERED,
    )


@pytest.fixture
def successful_result() -> SendResult:
    """A successful delivery."""
    return SendResult(message_id="2", device_token="B", is_success=True)


@pytest.fixture
def internal_error_result() -> SendResult:
    """A delivery that failed with a non-fatal error code."""
    return SendResult(
        message_id="3",
        device_token="C",
        is_success=False,
        error_code=MessagingErrorCode.INTERNAL,
    )
