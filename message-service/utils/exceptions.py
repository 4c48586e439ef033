"""
Exception handling
"""
from fastapi import Request, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from utils.logger import get_logger
from utils.time_utils import now_ms

logger = get_logger("exceptions")

class BusinessError(Exception):
    """Base class for business errors"""
    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(message)

class ValidationError(BusinessError):
    """Missing or malformed input"""
    def __init__(self, message: str):
        super().__init__(message, 422)

class NotFoundError(BusinessError):
    """Operation targets a record that does not exist"""
    def __init__(self, message: str):
        super().__init__(message, 404)

class PersistenceError(BusinessError):
    """Storage backend failure (I/O, connectivity, constraint violation)"""
    def __init__(self, message: str):
        super().__init__(message, 503)

async def business_error_handler(request: Request, exc: BusinessError):
    """Business error handler"""
    logger.warning("Business error", error=exc.message, type=type(exc).__name__, path=request.url.path)
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": {"message": exc.message, "type": type(exc).__name__},
            "timestamp": now_ms()
        }
    )

async def http_error_handler(request: Request, exc: HTTPException):
    """HTTP error handler"""
    logger.warning("HTTP error", status=exc.status_code, detail=exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": {"message": str(exc.detail), "type": "HTTPException"},
            "timestamp": now_ms()
        }
    )

async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed request body or parameters, reported like ValidationError"""
    errors = exc.errors()
    logger.warning("Request validation error", path=request.url.path, errors=len(errors))
    message = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg')}" for error in errors
    )
    return JSONResponse(
        status_code=422,
        content={
            "success": False,
            "error": {"message": message or "Invalid request", "type": "ValidationError"},
            "timestamp": now_ms()
        }
    )

async def general_error_handler(request: Request, exc: Exception):
    """General error handler"""
    logger.error("Unexpected error", error=str(exc), path=request.url.path, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": {"message": "Internal server error", "type": "InternalError"},
            "timestamp": now_ms()
        }
    )
