"""
API route registration
"""
from fastapi import APIRouter

from .v1 import messages as messages_v1
from .health import router as health_router
from models.response import ErrorResponse

api_v1_router = APIRouter()

api_v1_router.include_router(
    health_router,
    prefix="/health",
    tags=["health-v1"],
    responses={
        200: {"description": "Success"},
        503: {"description": "Service Unavailable", "model": ErrorResponse}
    }
)

api_v1_router.include_router(
    messages_v1.router,
    tags=["messages-v1"],
    responses={
        404: {"description": "Not Found", "model": ErrorResponse},
        422: {"description": "Validation Error", "model": ErrorResponse},
        503: {"description": "Storage Unavailable", "model": ErrorResponse}
    }
)

__all__ = ["api_v1_router"]
