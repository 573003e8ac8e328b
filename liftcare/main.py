"""FastAPI application factory."""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from liftcare.api.router import api_router
from liftcare.config import Settings, get_settings
from liftcare.db.engine import Database
from liftcare.errors import register_error_handlers
from liftcare.logging_config import setup_logging
from liftcare.services.tokens import TokenService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    database: Database = app.state.db
    await database.create_all()
    logger.info("Starting %s", app.title)
    yield
    await database.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the app from an explicit Settings object.

    Raises TokenConfigurationError when no JWT secret is configured, so a
    misconfigured process fails at startup instead of on the first login.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        description="Administration backend for elevator maintenance: tenants, assets, contracts, jobs and tickets.",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.tokens = TokenService(
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        ttl_hours=settings.token_ttl_hours,
    )
    app.state.db = Database(settings.database_url, echo=settings.db_echo)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method, request.url.path, response.status_code, elapsed_ms,
        )
        return response

    register_error_handlers(app)
    app.include_router(api_router)

    @app.get("/", include_in_schema=False)
    async def health():
        return {"message": "LiftCare API is running"}

    return app
