"""
Presentation Layer - API endpoints and request/response handling.

This layer contains:
- api/: FastAPI routers and endpoints
- dependencies/: Auth dependency injected into routes
- middleware/: Correlation ID and request metrics
"""
