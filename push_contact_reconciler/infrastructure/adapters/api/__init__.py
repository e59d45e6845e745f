"""API adapter for HTTP endpoints."""

from .app import create_app
from .models import HandlingResponse, HealthResponse, SendResultBatchRequest

__all__ = [
    "HandlingResponse",
    "HealthResponse",
    "SendResultBatchRequest",
    "create_app",
]
