"""PassGuard — password policy validation service.

Main FastAPI application with lifespan management, CORS, and global error handling.
"""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from passguard import __version__
from passguard.api.router import api_router
from passguard.config import get_settings
from passguard.log_config import configure_logging
from passguard.validators import ValidationEngine, build_default_rules

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown lifecycle."""
    settings = get_settings()

    # ── Startup ──
    logger.info("app_starting", debug=settings.DEBUG)

    # Rules are built and sealed before the first request is served
    engine = ValidationEngine(build_default_rules(settings))
    engine.seal()
    app.state.validation_engine = engine
    logger.info("validation_engine_ready", rules=[r.name for r in engine.rules])

    logger.info("app_started")

    yield

    # ── Shutdown ──
    logger.info("app_stopped")


async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all error handler for unhandled exceptions."""
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred. Please try again.",
        },
    )


async def value_error_handler(request: Request, exc: ValueError):
    """Handle validation errors."""
    return JSONResponse(
        status_code=422,
        content={"error": "validation_error", "message": str(exc)},
    )


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    settings = get_settings()
    configure_logging(settings.DEBUG, settings.LOG_LEVEL)

    app = FastAPI(
        title="PassGuard",
        description="Checks candidate passwords against every policy rule and reports all failures together.",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # ── Middleware ──

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Global Exception Handlers ──

    app.add_exception_handler(Exception, global_exception_handler)
    app.add_exception_handler(ValueError, value_error_handler)

    # ── Routes ──

    app.include_router(api_router, prefix="/api/v1")

    @app.get("/")
    async def root():
        """Root endpoint — API info."""
        return {
            "name": "PassGuard",
            "version": __version__,
            "description": "Password policy validation service",
            "docs": "/docs",
            "health": "/api/v1/health",
        }

    return app


app = create_app()
