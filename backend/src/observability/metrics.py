"""
Prometheus Metrics for the Messaging Backend.

DEPENDENCY:
    pip install prometheus-client

DATA FLOW:
    This file                  presentation/api/metrics.py         Observability Stack
    ─────────                  ────────────────────────────         ───────────────────
    Define metrics ──────────► /metrics endpoint ──────────────►   Prometheus ──► Grafana

METRIC TYPES:
    - Counter: Value only goes up (total count, e.g., messages sent)
    - Histogram: Distribution (for percentiles like P95, e.g., latency)
"""

from prometheus_client import (
    Histogram,
    Counter,
    generate_latest,
    CONTENT_TYPE_LATEST,
)


# =============================================================================
# METRICS DEFINITIONS
# =============================================================================
REQUEST_LATENCY = Histogram(
    "http_server_request_duration_seconds",  # must be the same name as grafana panel metric
    "Http request latency in seconds",
    ["method", "route", "http_status_code"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1, 2, 5],  # in seconds
)

MESSAGING_OPERATIONS_TOTAL = Counter(
    "messaging_operations_total",
    "Total number of messaging use-case executions by outcome",
    ["operation", "outcome"],
)


# =============================================================================
# RECORDING FUNCTIONS
# =============================================================================
def observe_request_latency(method: str, route: str, status_code: int, duration: float):
    """Call to record request latency. Integration point: presentation/middleware/metrics_middleware.py"""
    REQUEST_LATENCY.labels(
        method=method, route=route, http_status_code=str(status_code)
    ).observe(duration)


def increment_messaging_operation(operation: str, outcome: str):
    """
    Call once per use-case execution.

    Integration point: application/common/error_boundary.py

    Args:
        operation: send_message, get_inbox, get_sent, mark_as_read, delete_message, list_recipients
        outcome: success, or the lower-cased error kind (validation, not_found, ...)
    """
    MESSAGING_OPERATIONS_TOTAL.labels(operation=operation, outcome=outcome).inc()


# =============================================================================
# HELPER FOR /metrics ENDPOINT
# =============================================================================
def get_metrics_content():
    """
    Generate Prometheus metrics output.

    Called by: presentation/api/metrics.py

    Returns:
        Tuple of (content_bytes, content_type_string)
    """
    return generate_latest(), CONTENT_TYPE_LATEST


# =============================================================================
# EXPORTS
# =============================================================================
__all__ = [
    "observe_request_latency",
    "increment_messaging_operation",
    "get_metrics_content",
]
