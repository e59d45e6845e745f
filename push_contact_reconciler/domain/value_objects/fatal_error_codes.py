"""Fatal error code set value object."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Self

from .messaging_error_code import MessagingErrorCode


@dataclass(frozen=True, slots=True)
class FatalErrorCodeSet:
    """Error codes meaning a device token is permanently invalid."""

    codes: frozenset[MessagingErrorCode] = field(
        default_factory=lambda: frozenset(
            {MessagingErrorCode.UNREGISTERED, MessagingErrorCode.INVALID_ARGUMENT}
        )
    )

    def __contains__(self, code: object) -> bool:
        return code in self.codes

    def __iter__(self) -> Iterator[MessagingErrorCode]:
        return iter(sorted(self.codes))

    def __len__(self) -> int:
        return len(self.codes)

    @classmethod
    def from_strings(cls, values: Iterable[str]) -> Self:
        """
        Build the set from configured names.

        Blank entries and names that match no known code are skipped.
        """
        codes = (MessagingErrorCode.try_parse(value) for value in values if value.strip())
        return cls(codes=frozenset(code for code in codes if code is not None))
