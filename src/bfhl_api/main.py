"""
FastAPI application entry point for the BFHL Classification API.
"""

from contextlib import asynccontextmanager
from typing import Optional

import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from bfhl_api.api.error_handlers import EXCEPTION_HANDLERS
from bfhl_api.api.middleware import RequestTracingMiddleware, SecurityHeadersMiddleware
from bfhl_api.api.models import RootResponse
from bfhl_api.api.responses import AsciiJSONResponse
from bfhl_api.api.routes import router
from bfhl_api.config import Settings, settings
from bfhl_api.logging_config import configure_logging

# Configure structured logging before the app is built
configure_logging(settings.LOG_LEVEL, settings.ENVIRONMENT, settings.APP_VERSION)
logger = structlog.get_logger(__name__)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        app_settings: Settings to build with (defaults to the global instance)

    Returns:
        Configured FastAPI app with settings and identity on ``app.state``
    """
    if app_settings is None:
        app_settings = settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "Application startup",
            version=app_settings.APP_VERSION,
            environment=app_settings.ENVIRONMENT,
            endpoint="POST /bfhl",
        )
        # Report which identity fields are set, never their values
        if not app_settings.is_production:
            logger.info("Identity configuration", **app_settings.identity_configured())
        yield
        logger.info("Application shutdown complete")

    app = FastAPI(
        title=app_settings.APP_NAME,
        description="Classifies array items into numbers, alphabets and special characters",
        version=app_settings.APP_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        default_response_class=AsciiJSONResponse,
    )

    app.state.settings = app_settings
    app.state.identity = app_settings.identity()

    # Added innermost first: tracing (answers 500s), security headers, CORS
    app.add_middleware(RequestTracingMiddleware)
    if app_settings.SECURITY_HEADERS_ENABLED:
        app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ALLOW_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for exc_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exc_class, handler)

    app.include_router(router, tags=["bfhl"])

    @app.get("/", response_model=RootResponse)
    async def root() -> RootResponse:
        """Service banner."""
        return RootResponse(
            message=f"{app_settings.APP_NAME} is running!",
            version=app_settings.APP_VERSION,
            environment=app_settings.ENVIRONMENT,
        )

    if app_settings.PROMETHEUS_ENABLED:
        Instrumentator().instrument(app).expose(app)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run(
        "bfhl_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_config=None,  # keep the structlog handlers from configure_logging
    )


if __name__ == "__main__":
    run()
