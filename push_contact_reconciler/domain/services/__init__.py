"""Domain services - Stateless operations on domain objects."""

from .send_result_classifier import ClassifiedSendResults, SendResultClassifier

__all__ = ["ClassifiedSendResults", "SendResultClassifier"]
