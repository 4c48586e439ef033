"""
Log Utils
"""
import logging
import logging.handlers
import os
import structlog
from typing import Optional, Any
from configs.settings import settings

class CustomLogger:
    """Custom Logger class, supports error parameters and structlog style"""

    def __init__(self, name: str = None):
        self._logger = structlog.get_logger(name or __name__)

    def _log(self, _level: str, _message: str, _error: Optional[Any] = None, /, **kwargs):
        # Positional-only so context keys such as method= or message= pass through
        if _error is not None:
            kwargs["error"] = str(_error)
        getattr(self._logger, _level)(_message, **kwargs)

    def debug(self, message: str, error: Optional[Any] = None, /, **kwargs):
        """Debug log"""
        self._log("debug", message, error, **kwargs)

    def info(self, message: str, error: Optional[Any] = None, /, **kwargs):
        """Info log"""
        self._log("info", message, error, **kwargs)

    def warning(self, message: str, error: Optional[Any] = None, /, **kwargs):
        """Warning log"""
        self._log("warning", message, error, **kwargs)

    def error(self, message: str, error: Optional[Any] = None, /, **kwargs):
        """Error log"""
        self._log("error", message, error, **kwargs)

    def critical(self, message: str, error: Optional[Any] = None, /, **kwargs):
        """Critical error log"""
        self._log("critical", message, error, **kwargs)

    def exception(self, message: str, /, **kwargs):
        """Exception log (automatically includes stack information)"""
        self._logger.exception(message, **kwargs)

def setup_logging():
    """Setup logging configuration"""
    # Ensure log directory exists
    if settings.log_file:
        log_dir = os.path.dirname(settings.log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir, exist_ok=True)

    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    shared_processors = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(
                key_order=["timestamp", "level", "logger", "event"]
            ),
        ],
    )

    handlers = []

    # File handler
    if settings.log_file:
        file_handler = logging.handlers.RotatingFileHandler(
            settings.log_file,
            maxBytes=settings.log_max_size,
            backupCount=settings.log_backup_count,
            encoding='utf-8'
        )
        handlers.append(file_handler)

    # Console handler
    handlers.append(logging.StreamHandler())

    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)

    # Configure standard logging
    logging.basicConfig(
        level=log_level,
        handlers=handlers,
        force=True  # Force reconfiguration
    )

    # Configure structlog
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.getLogger("setup").debug(
        "Logging setup completed - Level: %s, File: %s", settings.log_level, settings.log_file
    )

def get_logger(name: str = None) -> CustomLogger:
    """Get custom logger"""
    return CustomLogger(name)

# Initialize logging
setup_logging()
