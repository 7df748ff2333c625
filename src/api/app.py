"""FastAPI application factory for the dashboard endpoint."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine

from api.routes import router
from config import Settings, get_settings
from db import create_db_engine, create_session_factory
from domain.errors import DashboardError, StoreUnavailable
from repositories.dashboard_repository import ensure_dashboard_schema

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: tuple[tuple[type[DashboardError], int], ...] = (
    (StoreUnavailable, 503),
    (DashboardError, 500),
)


def create_app(settings: Settings | None = None, *, engine: Engine | None = None) -> FastAPI:
    """Build the app; an injected engine is left open on shutdown for its owner to dispose."""
    settings = settings or get_settings()
    owns_engine = engine is None
    bound_engine = engine if engine is not None else create_db_engine(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        try:
            ensure_dashboard_schema(bound_engine)
        except StoreUnavailable as exc:
            logger.warning("Schema check skipped, store unavailable at startup: %s", exc)
        logger.info("Application startup complete")
        yield
        if owns_engine:
            bound_engine.dispose()
        logger.info("Application shutdown complete")

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.settings = settings
    app.state.session_factory = create_session_factory(bound_engine)
    app.include_router(router)
    app.add_exception_handler(DashboardError, _dashboard_error_handler)  # type: ignore[arg-type]
    return app


async def _dashboard_error_handler(request: Request, exc: DashboardError) -> JSONResponse:
    status_code = next(code for error_type, code in _STATUS_BY_ERROR if isinstance(exc, error_type))
    logger.error("%s %s failed with %s: %s", request.method, request.url.path, exc.code, exc)
    return JSONResponse(
        status_code=status_code,
        content={"error": {"code": exc.code, "message": str(exc)}},
    )
