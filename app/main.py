"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (authors, books, health)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, body size, rate limiting)
- Logging configuration
- Schema creation on startup

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from app.core.config import settings
from app.infrastructure.catalog.tables import create_schema
from app.interfaces.catalog.dependencies import get_engine
from app.interfaces.catalog.router import authors_router, books_router
from app.interfaces.health import router as health_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging
from app.shared.security.headers import (
    RequestSizeLimitMiddleware,
    SecurityHeadersMiddleware,
)
from app.shared.security.rate_limiting import limiter, rate_limit_exceeded_handler

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: make sure the catalog tables exist."""
    engine = app.dependency_overrides.get(get_engine, get_engine)()
    create_schema(engine)
    logger.info("Catalog schema ready.")
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level, sql_echo=settings.database_echo)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    app.add_middleware(
        RequestSizeLimitMiddleware, max_bytes=settings.max_request_size_bytes
    )
    app.add_middleware(SecurityHeadersMiddleware, api_prefix=settings.api_prefix)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix=settings.api_prefix)
    app.include_router(authors_router, prefix=settings.api_prefix)
    app.include_router(books_router, prefix=settings.api_prefix)

    return app


app = create_app()
