"""
Request logging middleware
"""
import time
import uuid
from fastapi import FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware
from utils.logger import get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

class LoggingMiddleware(BaseHTTPMiddleware):
    """Log every request with a request ID, reusing the caller's ID when sent"""
    
    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        start_time = time.time()
        
        logger.info(
            "Request started",
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            client_ip=request.client.host if request.client else None
        )
        
        request.state.request_id = request_id
        
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                "Request failed",
                request_id=request_id,
                error=str(exc),
                process_time=f"{time.time() - start_time:.3f}s",
                exc_info=True
            )
            raise
        
        logger.info(
            "Request completed",
            request_id=request_id,
            status_code=response.status_code,
            process_time=f"{time.time() - start_time:.3f}s"
        )
        
        response.headers[REQUEST_ID_HEADER] = request_id
        return response

def add_logging_middleware(app: FastAPI):
    """Add logging middleware"""
    app.add_middleware(LoggingMiddleware)
