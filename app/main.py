# =============================================================================
# Application Factory
# =============================================================================
#
# Run locally:
#   uvicorn app.main:app --reload
#
# Tests build isolated apps instead of importing `app`:
#   create_app(Settings(database_url="sqlite+aiosqlite://"))
# =============================================================================

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api import users
from app.api.errors import http_exception_handler, users_api_error_handler
from app.api.middleware import (
    ApiKeyMiddleware,
    CORSMiddleware,
    RequestLoggingMiddleware,
)
from app.config import Settings, get_settings
from app.db.engine import build_engine, build_session_factory, init_db
from app.exceptions import UsersApiError
from app.logging_config import configure_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI app, its database engine and request pipeline."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    engine = build_engine(settings.database_url, echo=settings.debug)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if settings.create_tables:
            await init_db(engine)
        logger.info("%s %s started", settings.app_name, settings.app_version)
        yield
        await engine.dispose()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
        # Only /users is routed; everything else is "Route not found".
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    app.add_exception_handler(UsersApiError, users_api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # Innermost first: ApiKey → RequestLogging → CORS (outermost)
    app.add_middleware(ApiKeyMiddleware, api_key=settings.api_key)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CORSMiddleware, max_age=settings.cors_max_age)

    app.include_router(users.router)
    return app


app = create_app()
