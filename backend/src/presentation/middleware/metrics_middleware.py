"""Records request latency per route template (e.g. /messages/{message_id})."""

import time
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from src.observability.metrics import observe_request_latency


class MetricsMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration = time.perf_counter() - start

        route = request.scope.get("route")
        # Unmatched paths share one label to keep cardinality bounded
        route_path = getattr(route, "path", "unmatched")
        observe_request_latency(
            request.method, route_path, response.status_code, duration
        )
        return response
