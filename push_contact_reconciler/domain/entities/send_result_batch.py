"""Batch of send results for one send operation."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Self

from .send_result import SendResult


@dataclass(frozen=True, slots=True)
class SendResultBatch:
    """Ordered send results produced by the push provider for one send."""

    responses: tuple[SendResult, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[SendResult]:
        return iter(self.responses)

    def __len__(self) -> int:
        return len(self.responses)

    @property
    def is_empty(self) -> bool:
        """Check if the batch holds no results."""
        return not self.responses

    @property
    def success_count(self) -> int:
        """Number of successful deliveries."""
        return sum(1 for r in self.responses if r.is_success)

    @property
    def failure_count(self) -> int:
        """Number of failed deliveries."""
        return len(self.responses) - self.success_count

    @classmethod
    def of(cls, responses: Iterable[SendResult] | None) -> Self:
        """Create a batch, treating absent responses as an empty batch."""
        return cls(responses=tuple(responses or ()))
