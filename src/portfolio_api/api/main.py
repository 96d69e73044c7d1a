"""FastAPI application entry point for the Portfolio API."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from datetime import timedelta

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from portfolio_api.api.errors import register_exception_handlers
from portfolio_api.api.routes import (
    auth,
    certifications,
    education,
    experiences,
    health,
    profile,
    projects,
)
from portfolio_api.config import Settings, load_settings
from portfolio_api.data.db import Database
from portfolio_api.services import TokenService

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Apply the configured level to the package loggers.

    Called from ``create_app`` so the uvicorn reload worker picks it up too.
    """
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("portfolio_api").setLevel(settings.log_level)


def _configured(flag: object) -> str:
    return "configured" if flag else "NOT configured"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Validate settings, open the database on startup and close it on shutdown."""
    settings: Settings = app.state.settings
    logger.info("DB_URL %s", _configured(settings.database_url))
    logger.info("JWT_SECRET %s", _configured(settings.jwt_secret))
    settings.validate()

    tokens = TokenService(
        settings.signing_key(), lifetime=timedelta(days=settings.jwt_expires_days)
    )
    database = Database(settings.database_url)
    database.open()
    app.state.database = database
    app.state.tokens = tokens
    logger.info("Portfolio API ready (environment: %s)", settings.environment)
    try:
        yield
    finally:
        database.close()


async def _log_requests(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    logger.info("%s %s", request.method, request.url.path)
    return await call_next(request)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application.

    Args:
        settings: Resolved settings; read from the environment when omitted.
    """
    settings = settings or load_settings()
    configure_logging(settings)

    app = FastAPI(
        title="Portfolio API",
        description="Content and admin API for a personal portfolio site",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if settings.is_development:
        app.middleware("http")(_log_requests)

    register_exception_handlers(app)

    app.include_router(health.router, prefix="/api")
    app.include_router(auth.router, prefix="/api")
    app.include_router(profile.router, prefix="/api")
    app.include_router(projects.router, prefix="/api")
    app.include_router(experiences.router, prefix="/api")
    app.include_router(education.router, prefix="/api")
    app.include_router(certifications.router, prefix="/api")
    return app


app = create_app()


def main() -> None:
    """Start the server on the configured port."""
    import uvicorn

    settings: Settings = app.state.settings
    uvicorn.run(
        "portfolio_api.api.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
