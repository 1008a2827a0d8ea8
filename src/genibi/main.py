"""
GENIBI FastAPI Application Entry Point

Main application initialization with:
- Lifespan management (startup/shutdown logging)
- CORS configuration
- Error handling and rate limiting middleware
- Router registration
- Metrics endpoint
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from genibi import __version__
from genibi.config import Settings, get_settings
from genibi.config.logging_config import configure_logging, get_logger
from genibi.infrastructure.metrics import metrics_router, update_system_info
from genibi.api.v1.router import api_router
from genibi.api.middleware.error_handler import ErrorHandlerMiddleware
from genibi.api.middleware.rate_limiter import RateLimitConfig, RateLimitMiddleware

logger = get_logger(__name__)


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        settings: Application settings (defaults to environment)

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    configure_logging(settings)
    api_prefix = f"/api/{settings.api_version}"

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info(
            "Starting GENIBI application",
            env=settings.env,
            version=__version__,
            llm_enabled=settings.chat.llm_enabled,
        )
        update_system_info(settings.env)
        try:
            yield
        finally:
            logger.info("GENIBI application shutdown complete")

    app = FastAPI(
        title="GENIBI API",
        description="Mental wellness companion for Nigerian students - Chat safety API",
        version=__version__,
        debug=settings.debug,
        docs_url="/docs" if not settings.is_production() else None,
        redoc_url="/redoc" if not settings.is_production() else None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if settings.rate_limit.enabled:
        app.add_middleware(
            RateLimitMiddleware,
            config=RateLimitConfig.from_settings(settings.rate_limit),
            api_prefix=api_prefix,
        )

    # Added last so it wraps every other middleware
    app.add_middleware(ErrorHandlerMiddleware)

    app.include_router(
        api_router,
        prefix=api_prefix,
    )
    app.include_router(metrics_router)

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        """Root endpoint - basic info."""
        return {
            "name": "GENIBI API",
            "version": __version__,
            "status": "operational",
        }

    return app


app = create_application()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "genibi.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.env == "development",
        log_level=settings.log_level.lower(),
    )
