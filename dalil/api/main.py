"""
FastAPI Application Entry Point.

This module creates and configures the FastAPI application instance.
It handles:
1. Settings and logging initialization
2. Ownership of the shared StatsTracker and ChatService
3. Middleware configuration (audit, security headers, CORS)
4. Exception handlers rendering `{"reply": ...}` bodies
5. Router registration and static asset serving

Run with: dalil-relay
      or: uvicorn dalil.api.main:create_app --factory
"""
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

import httpx
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from dalil import __version__
from dalil.core.audit import AuditMiddleware, SecurityHeadersMiddleware
from dalil.core.config import Settings, get_settings
from dalil.core.exceptions import (
    EMPTY_MESSAGE_REPLY,
    SERVER_ERROR_REPLY,
    ConfigurationError,
    RelayException,
)
from dalil.core.logging_config import get_logger, setup_logging
from dalil.llm.client import LLMClient
from dalil.services.chat_service import ChatService
from dalil.stats.tracker import StatsTracker
from dalil.api.routes import chat_router, health_router, stats_router

logger = get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    http_client: Optional[httpx.Client] = None,
    stats: Optional[StatsTracker] = None,
) -> FastAPI:
    """
    Build the relay application.

    Args:
        settings: Settings to use; read from the environment when None
        http_client: Optional httpx client handed to the Groq SDK
        stats: Optional tracker; a fresh one is created when None

    Returns:
        Configured FastAPI application

    Raises:
        ConfigurationError: If GROQ_API_KEY is missing
    """
    if settings is None:
        settings = get_settings()
    setup_logging(settings.log_level, settings.log_dir)

    llm_client = LLMClient(settings, http_client=http_client)
    stats = stats if stats is not None else StatsTracker()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {settings.app_name} in {settings.app_env} mode")
        logger.info(f"LLM Model: {settings.llm_model}")
        logger.info(f"Audit Logging: {settings.enable_audit_logging}")

        yield  # Application runs here

        logger.info(f"Shutting down {settings.app_name}")
        llm_client.close()

    app = FastAPI(
        title="Dalil Alafiyah Relay",
        description="Relays health-education questions to a Groq-hosted model "
                    "and tracks in-memory usage statistics.",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.stats = stats
    app.state.chat_service = ChatService(
        llm_client,
        stats,
        max_message_length=settings.max_message_length,
    )

    # ============================================================
    # Middleware Configuration (Order matters!)
    # ============================================================

    app.add_middleware(SecurityHeadersMiddleware)

    if settings.enable_audit_logging:
        app.add_middleware(AuditMiddleware)

    origins = list(settings.allowed_origins) or ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=origins != ["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    if origins == ["*"]:
        # Open CORS is only flagged in production
        log_fn = logger.warning if settings.is_production() else logger.info
        log_fn("CORS configured for all origins (ALLOWED_ORIGINS is empty)")

    # ============================================================
    # Exception Handlers
    # ============================================================

    @app.exception_handler(RelayException)
    async def relay_exception_handler(request: Request, exc: RelayException):
        """Render service errors as a reply payload."""
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """A body that cannot be read is treated like an empty message."""
        logger.warning(f"Invalid request body on {request.url.path}: {exc.errors()}")
        return JSONResponse(status_code=400, content={"reply": EMPTY_MESSAGE_REPLY})

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception: {exc}")
        return JSONResponse(status_code=500, content={"reply": SERVER_ERROR_REPLY})

    # ============================================================
    # Routers
    # ============================================================

    app.include_router(health_router)
    app.include_router(chat_router)
    app.include_router(stats_router)

    # Static assets last so API paths take precedence
    public_dir = Path(settings.public_dir)
    if public_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(public_dir), html=True), name="public")
        logger.info(f"Serving static assets from {public_dir.resolve()}")
    else:
        @app.get("/", include_in_schema=False)
        async def root():
            return {
                "message": "Dalil Alafiyah Relay",
                "version": __version__,
                "documentation": "/docs",
                "health": "/health",
            }

    return app


def run() -> None:
    """
    Console entry point.

    Exits with status 1 before binding a port when the configuration
    is incomplete.
    """
    try:
        settings = get_settings()
    except ConfigurationError as e:
        setup_logging("INFO")
        logger.critical(f"Startup aborted: {e}")
        sys.exit(1)

    app = create_app(settings)

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
