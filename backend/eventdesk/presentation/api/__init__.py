"""
API Routers - FastAPI endpoint definitions.
"""

from eventdesk.presentation.api.events import router as events_router
from eventdesk.presentation.api.reviews import router as reviews_router
from eventdesk.presentation.api.metrics import router as metrics_router
from eventdesk.presentation.api.errors import register_error_handlers

__all__ = [
    "events_router",
    "reviews_router",
    "metrics_router",
    "register_error_handlers",
]
