"""Core configuration and infrastructure helpers."""

from .config import (
    ALLOWED_CORS_ORIGINS,
    APP_ENV,
    DATABASE_URL,
    DB_RESET,
    IS_PRODUCTION,
    LOG_LEVEL,
    PORT,
    STORE_TIMEOUT_MS,
)
from .database import build_engine, get_session, init_db
from .log_config import configure_logging
from .time import isoformat_utc, parse_timestamp, utcnow

__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "APP_ENV",
    "DATABASE_URL",
    "DB_RESET",
    "IS_PRODUCTION",
    "LOG_LEVEL",
    "PORT",
    "STORE_TIMEOUT_MS",
    "build_engine",
    "configure_logging",
    "get_session",
    "init_db",
    "isoformat_utc",
    "parse_timestamp",
    "utcnow",
]
