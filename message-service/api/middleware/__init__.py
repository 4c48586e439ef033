"""
Middleware
"""
from .error_handler import add_error_handlers
from .logging import add_logging_middleware, LoggingMiddleware, REQUEST_ID_HEADER

__all__ = [
    "add_error_handlers",
    "add_logging_middleware",
    "LoggingMiddleware",
    "REQUEST_ID_HEADER"
]
