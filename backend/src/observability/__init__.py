"""Observability package for the Messaging Backend."""

from src.observability.metrics import (
    observe_request_latency,
    increment_messaging_operation,
    get_metrics_content,
)

__all__ = [
    "observe_request_latency",
    "increment_messaging_operation",
    "get_metrics_content",
]
