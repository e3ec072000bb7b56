"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine

from . import models  # noqa: F401 - ensure models are registered with SQLModel
from .api import register_error_handlers, register_routes
from .core import (
    ALLOWED_CORS_ORIGINS,
    DATABASE_URL,
    DB_RESET,
    IS_PRODUCTION,
    build_engine,
    init_db,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db(app.state.engine, reset=app.state.db_reset)
    logger.info("Database ready")
    yield
    app.state.engine.dispose()


def create_app(
    engine: Optional[Engine] = None,
    *,
    production: bool = IS_PRODUCTION,
    db_reset: bool = DB_RESET,
) -> FastAPI:
    """Build the API around ``engine`` (defaults to one for DATABASE_URL)."""

    app = FastAPI(title="Project Tracker API", version="0.1.0", lifespan=lifespan)
    app.state.engine = engine if engine is not None else build_engine(DATABASE_URL)
    app.state.production = production
    app.state.db_reset = db_reset

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info("%s %s", request.method, request.url.path)
        return await call_next(request)

    register_error_handlers(app, production=production)
    register_routes(app)
    return app


__all__ = ["create_app"]
