"""
API Routers - FastAPI endpoint definitions.
"""

from src.presentation.api.messages import router as messages_router
from src.presentation.api.users import router as users_router
from src.presentation.api.metrics import router as metrics_router

__all__ = [
    "messages_router",
    "users_router",
    "metrics_router",
]
