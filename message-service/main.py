"""
Message Service Application Entry
"""
import uvicorn
from fastapi import FastAPI
from contextlib import asynccontextmanager

from api.routes import api_v1_router
from api.middleware import add_error_handlers, add_logging_middleware

# Data layer
from data import initialize_data_layer, cleanup_data_layer

# Configuration and utilities
from configs.settings import settings
from configs.database_config import database_config
from utils.logger import get_logger


logger = get_logger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle management"""
    logger.info("Starting message service", debug=settings.debug, log_level=settings.log_level)
    try:
        app.state.message_data = await initialize_data_layer()
        logger.info("Data layer initialized successfully", backend=database_config.store_backend)
        yield
    except Exception as e:
        logger.error("Failed to start message service", error=str(e))
        raise
    finally:
        logger.info("Shutting down message service...")
        await cleanup_data_layer()
        logger.info("Message service shutdown completed")

def create_app() -> FastAPI:
    """Create FastAPI application"""
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Chat message store",
        debug=settings.debug,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # Add middleware (order is important)
    add_error_handlers(app)
    add_logging_middleware(app)

    app.include_router(api_v1_router, prefix="/api/v1")

    @app.get("/", tags=["root"])
    async def root():
        """Root path - Service information"""
        return {
            "service": settings.app_name,
            "version": settings.app_version,
            "status": "running",
            "store_backend": database_config.store_backend,
            "api_prefixes": ["/api/v1"]
        }

    return app

app = create_app()

if __name__ == "__main__":
    logger.info(f"Server will be available at: http://{settings.host}:{settings.port}")
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
        access_log=settings.debug,
    )
