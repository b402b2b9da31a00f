"""HTTP middleware."""

from src.presentation.middleware.correlation_id import CorrelationIdMiddleware
from src.presentation.middleware.metrics_middleware import MetricsMiddleware

__all__ = ["CorrelationIdMiddleware", "MetricsMiddleware"]
