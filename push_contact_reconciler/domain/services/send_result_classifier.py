"""Domain service for classifying send results."""

from dataclasses import dataclass

from ..entities import SendResult, SendResultBatch
from ..value_objects import FatalErrorCodeSet


@dataclass(frozen=True, slots=True)
class ClassifiedSendResults:
    """Send results split by whether the device token must be removed."""

    fatal: tuple[SendResult, ...]
    other: tuple[SendResult, ...]

    @property
    def has_fatal(self) -> bool:
        """Check if any result failed with a fatal error code."""
        return bool(self.fatal)

    @property
    def invalid_device_tokens(self) -> list[str]:
        """Device tokens of fatal results, in input order, duplicates kept."""
        return [r.device_token for r in self.fatal]


class SendResultClassifier:
    """Domain service for partitioning send results."""

    def __init__(self, fatal_codes: FatalErrorCodeSet) -> None:
        """Initialize classifier with the fatal error codes."""
        self._fatal_codes = fatal_codes

    def classify(self, batch: SendResultBatch) -> ClassifiedSendResults:
        """
        Partition a batch into fatal and other results.

        Args:
            batch: The send results to classify.

        Returns:
            ClassifiedSendResults keeping the input order in both parts.
        """
        fatal: list[SendResult] = []
        other: list[SendResult] = []

        for result in batch:
            if result.is_fatal_failure(self._fatal_codes):
                fatal.append(result)
            else:
                other.append(result)

        return ClassifiedSendResults(fatal=tuple(fatal), other=tuple(other))
