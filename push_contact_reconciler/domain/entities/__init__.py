"""Domain entities - Objects with identity and lifecycle."""

from .send_result import SendResult
from .send_result_batch import SendResultBatch

__all__ = [
    "SendResult",
    "SendResultBatch",
]
