"""
Health check API routes
"""
from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_message_data
from configs.settings import settings
from data.repositories.message_data import MessageData
from models.response import HealthResponse
from utils.logger import get_logger

logger = get_logger(__name__)
router = APIRouter()

@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness check"""
    return HealthResponse(
        status="healthy",
        service=settings.app_name,
        version=settings.app_version
    )

@router.get("/readiness", response_model=HealthResponse)
async def readiness_check(message_data: MessageData = Depends(get_message_data)) -> HealthResponse:
    """Readiness check - for K8s readiness probe"""
    store_ready = await message_data.store.ping()
    details = {
        "message_store": type(message_data.store).__name__,
        "store_ready": store_ready
    }
    
    if not store_ready:
        logger.warning("Readiness check failed", **details)
        raise HTTPException(status_code=503, detail="Message store is not reachable")
    
    return HealthResponse(
        status="ready",
        service=settings.app_name,
        version=settings.app_version,
        details=details
    )
