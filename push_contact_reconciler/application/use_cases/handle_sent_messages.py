"""Use case for reconciling sent messages against the push contact registry."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum, auto
from http import HTTPStatus
from typing import TYPE_CHECKING

from ...domain.services import SendResultClassifier
from ...domain.value_objects import FatalErrorCodeSet
from ..exceptions import InvalidArgumentError, RegistryCallError

if TYPE_CHECKING:
    from ...domain.entities import SendResult, SendResultBatch
    from ...domain.services import ClassifiedSendResults
    from ..ports import PushContactApiTokenGetter, PushContactRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SentMessagesHandlerSettings:
    """Immutable configuration for sent messages handling."""

    push_contact_api_url: str
    fatal_messaging_error_codes: FatalErrorCodeSet = field(default_factory=FatalErrorCodeSet)


class HandlingOutcome(StrEnum):
    """How a batch of send results was handled."""

    EMPTY_BATCH = auto()
    NO_FATAL_RESULTS = auto()
    DELETED = auto()
    REGISTRY_REJECTED = auto()
    CREDENTIAL_FAILURE = auto()
    REGISTRY_CALL_FAILURE = auto()
    UNEXPECTED_FAILURE = auto()

    def __str__(self) -> str:
        return self.value

    @property
    def is_success(self) -> bool:
        """Check if the batch was handled without a registry or credential failure."""
        return self in {
            HandlingOutcome.EMPTY_BATCH,
            HandlingOutcome.NO_FATAL_RESULTS,
            HandlingOutcome.DELETED,
        }


@dataclass(frozen=True, slots=True)
class SentMessagesHandlingResult:
    """Result of the sent messages handling use case."""

    outcome: HandlingOutcome
    deleted_device_tokens: tuple[str, ...] = ()
    unhandled: tuple[SendResult, ...] = ()
    status_code: int | None = None
    error: Exception | None = None

    @property
    def success(self) -> bool:
        """Check if the operation was successful."""
        return self.outcome.is_success

    @property
    def failed(self) -> bool:
        """Check if removing invalid device tokens failed."""
        return not self.success


class HandleSentMessages:
    """
    Use case for removing push contacts whose device tokens were rejected.

    Fatal delivery failures are deleted from the registry in one call.
    Failures while doing so are logged and reported through the returned
    result, never raised to the caller.
    """

    def __init__(
        self,
        settings: SentMessagesHandlerSettings,
        token_getter: PushContactApiTokenGetter,
        registry: PushContactRegistry,
    ) -> None:
        """
        Initialize the use case.

        Args:
            settings: Fatal error codes and Push Contact API location.
            token_getter: Adapter supplying the registry bearer credential.
            registry: Adapter deleting push contacts by device token.
        """
        self._settings = settings
        self._token_getter = token_getter
        self._registry = registry
        self._classifier = SendResultClassifier(settings.fatal_messaging_error_codes)

    async def execute(self, batch: SendResultBatch | None) -> SentMessagesHandlingResult:
        """
        Handle the results of one send operation.

        Args:
            batch: Send results reported by the push provider.

        Returns:
            SentMessagesHandlingResult describing what was done.

        Raises:
            InvalidArgumentError: If no batch is given.
        """
        if batch is None:
            msg = "batch must not be None"
            raise InvalidArgumentError(msg)

        if batch.is_empty:
            return SentMessagesHandlingResult(outcome=HandlingOutcome.EMPTY_BATCH)

        # TODO: handle results whose error code is not fatal (e.g. UNAVAILABLE) once a retry policy exists
        classified = self._classifier.classify(batch)

        if not classified.has_fatal:
            logger.warning("Not handling following sent messages: %s", list(classified.other))
            return SentMessagesHandlingResult(
                outcome=HandlingOutcome.NO_FATAL_RESULTS,
                unhandled=classified.other,
            )

        return await self._delete_invalid_device_tokens(classified)

    async def _delete_invalid_device_tokens(
        self, classified: ClassifiedSendResults
    ) -> SentMessagesHandlingResult:
        """Delete push contacts for fatal results, reporting failures as outcomes."""
        device_tokens = classified.invalid_device_tokens

        try:
            token = await self._token_getter.get_token()
        except Exception as e:
            logger.exception("Error acquiring Push Contact API token for sent messages: %s", list(classified.fatal))
            return self._failure(HandlingOutcome.CREDENTIAL_FAILURE, classified, e)

        try:
            status_code = await self._registry.delete_by_device_tokens(device_tokens, token)
        except RegistryCallError as e:
            logger.exception("Error handling following sent messages: %s", list(classified.fatal))
            return self._failure(HandlingOutcome.REGISTRY_CALL_FAILURE, classified, e)
        except Exception as e:
            logger.exception("Unexpected error handling following sent messages: %s", list(classified.fatal))
            return self._failure(HandlingOutcome.UNEXPECTED_FAILURE, classified, e)

        if status_code != HTTPStatus.OK:
            logger.error(
                "Error deleting push contacts with following device tokens: %s. Response status code: %s",
                device_tokens,
                status_code,
            )
            return SentMessagesHandlingResult(
                outcome=HandlingOutcome.REGISTRY_REJECTED,
                unhandled=classified.other,
                status_code=status_code,
            )

        logger.info(
            "Deleted %d push contacts from %s",
            len(device_tokens),
            self._settings.push_contact_api_url,
        )
        return SentMessagesHandlingResult(
            outcome=HandlingOutcome.DELETED,
            deleted_device_tokens=tuple(device_tokens),
            unhandled=classified.other,
            status_code=status_code,
        )

    @staticmethod
    def _failure(
        outcome: HandlingOutcome,
        classified: ClassifiedSendResults,
        error: Exception,
    ) -> SentMessagesHandlingResult:
        # TODO: queue the fatal results so the deletion can be retried
        return SentMessagesHandlingResult(
            outcome=outcome,
            unhandled=classified.other,
            error=error,
        )
