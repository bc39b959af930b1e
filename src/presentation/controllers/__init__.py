"""
Controllers Package - Presentation Layer

FastAPI routers that validate requests, call the application use cases
and translate their errors into HTTP responses.
"""

from .predictions_controller import router as predictions_router
from .system_controller import router as system_router

__all__ = ["predictions_router", "system_router"]
