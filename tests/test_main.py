"""Tests for the composition root and run modes."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from push_contact_reconciler.application.use_cases import HandlingOutcome
from push_contact_reconciler.infrastructure.adapters import (
    MsalPushContactApiTokenGetter,
    PushContactApiClient,
    StaticPushContactApiTokenGetter,
)
from push_contact_reconciler.infrastructure.config import Settings
from push_contact_reconciler.main import Application, ApplicationContainer


@pytest.fixture
def batch_file(tmp_path: Path) -> Path:
    """Batch file with one unregistered and one delivered message."""
    path = tmp_path / "sent-messages.json"
    path.write_text(
        json.dumps(
            {
                "responses": [
                    {"message_id": "1", "device_token": "A", "is_success": False, "error_code": "Unregistered"},
                    {"message_id": "2", "device_token": "B", "is_success": True},
                ]
            }
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def settings(batch_file: Path) -> Settings:
    """Settings using a static token and the batch file."""
    return Settings(
        push_contact_api_url="https://push-contacts.example.com",
        push_contact_api_token="abc",
        fatal_messaging_error_codes=["Unregistered", "InvalidArgument"],
        run_mode="once",
        sent_messages_file=str(batch_file),
    )


class TestApplicationContainer:
    """Tests for ApplicationContainer."""

    def test_static_token_getter(self, settings: Settings) -> None:
        """A configured token selects the static token getter."""
        assert isinstance(ApplicationContainer(settings).create_token_getter(), StaticPushContactApiTokenGetter)

    def test_msal_token_getter(self, settings: Settings) -> None:
        """Without a static token tokens come from Entra ID."""
        settings.push_contact_api_token = ""
        assert isinstance(ApplicationContainer(settings).create_token_getter(), MsalPushContactApiTokenGetter)

    def test_registry(self, settings: Settings) -> None:
        """The registry targets the configured Push Contact API."""
        registry = ApplicationContainer(settings).create_registry()
        assert isinstance(registry, PushContactApiClient)
        assert registry.push_contact_url == "https://push-contacts.example.com/PushContact"


class TestApplication:
    """Tests for Application run modes."""

    @pytest.mark.asyncio
    async def test_run_once_deletes_fatal_tokens(self, settings: Settings) -> None:
        """Single-batch mode handles the configured file."""
        with patch.object(
            PushContactApiClient, "delete_by_device_tokens", AsyncMock(return_value=200)
        ) as delete:
            exit_code = await Application(settings).run()

        assert exit_code == 0
        delete.assert_awaited_once_with(["A"], "abc")

    @pytest.mark.asyncio
    async def test_run_once_fails_when_registry_rejects(self, settings: Settings) -> None:
        """A rejected delete gives a non-zero exit code."""
        with patch.object(PushContactApiClient, "delete_by_device_tokens", AsyncMock(return_value=500)):
            result = await Application(settings).run_once()
            exit_code = await Application(settings).run()

        assert result.outcome is HandlingOutcome.REGISTRY_REJECTED
        assert exit_code == 1

    @pytest.mark.asyncio
    async def test_run_once_ignores_unknown_error_codes(self, settings: Settings, batch_file: Path) -> None:
        """Unknown error codes in the file do not stop fatal tokens from being deleted."""
        batch_file.write_text(
            json.dumps(
                {
                    "responses": [
                        {"message_id": "1", "device_token": "A", "is_success": False, "error_code": "Unregistered"},
                        {"message_id": "2", "device_token": "B", "is_success": False, "error_code": "NEW_PROVIDER_CODE"},
                    ]
                }
            ),
            encoding="utf-8",
        )

        with patch.object(
            PushContactApiClient, "delete_by_device_tokens", AsyncMock(return_value=200)
        ) as delete:
            exit_code = await Application(settings).run()

        assert exit_code == 0
        delete.assert_awaited_once_with(["A"], "abc")

    @pytest.mark.asyncio
    async def test_invalid_run_mode(self, settings: Settings) -> None:
        """Unknown run modes fail."""
        settings.run_mode = "scheduled"
        assert await Application(settings).run() == 1
