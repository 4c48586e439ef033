"""
Utils Package
"""
from .logger import get_logger, setup_logging
from .id_generator import generate_message_id
from .time_utils import now, now_ms, ensure_utc
from .exceptions import BusinessError, ValidationError, NotFoundError, PersistenceError
from .validators import (
    validate_message_text,
    validate_reference_id,
    validate_tags,
    normalize_message_id
)

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    
    # ID Generation
    "generate_message_id",
    
    # Time
    "now",
    "now_ms",
    "ensure_utc",
    
    # Exceptions
    "BusinessError",
    "ValidationError",
    "NotFoundError",
    "PersistenceError",
    
    # Validation
    "validate_message_text",
    "validate_reference_id",
    "validate_tags",
    "normalize_message_id"
]
