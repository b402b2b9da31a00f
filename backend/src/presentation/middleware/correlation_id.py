"""Correlation ID middleware: X-Correlation-ID header → logging ContextVar."""

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from src.config.logging_config import NO_CORRELATION_ID, correlation_id_var


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID", NO_CORRELATION_ID)

        # Set in contextvars (propagates to async tasks and logging)
        token = correlation_id_var.set(correlation_id)
        try:
            response = await call_next(request)
        finally:
            correlation_id_var.reset(token)

        response.headers["X-Correlation-ID"] = correlation_id
        return response
