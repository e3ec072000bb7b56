"""Application settings and environment helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List

from dotenv import load_dotenv

load_dotenv(override=False)


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer") from exc


def _split_csv(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _unique(values: Iterable[str]) -> List[str]:
    seen = set()
    ordered: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


def _normalize_database_url(raw: str) -> str:
    """Point bare postgres URLs at the psycopg driver."""

    for prefix in ("postgres://", "postgresql://"):
        if raw.startswith(prefix):
            return "postgresql+psycopg://" + raw[len(prefix):]
    return raw


# Database -------------------------------------------------------------------
_PROJECT_ROOT = Path(__file__).resolve().parents[2]
DATA_DIR = Path(os.getenv("DATA_DIR", str(_PROJECT_ROOT / "data")))

_database_url_raw = os.getenv("DATABASE_URL") or os.getenv("POSTGRES_URL")
DATABASE_URL = (
    _normalize_database_url(_database_url_raw)
    if _database_url_raw
    else f"sqlite:///{DATA_DIR / 'app.db'}"
)

DB_RESET = _env_bool("DB_RESET", False)
STORE_TIMEOUT_MS = _env_int("STORE_TIMEOUT_MS", 5000)


# Runtime behaviour ----------------------------------------------------------
APP_ENV = (os.getenv("APP_ENV") or "development").strip().lower()
IS_PRODUCTION = APP_ENV == "production"
LOG_LEVEL = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()
PORT = _env_int("PORT", 8001)


# CORS -----------------------------------------------------------------------
# FRONTEND_ORIGIN can contain a comma-separated list for multi-domain deploys.
_frontend_origins = _split_csv(os.getenv("FRONTEND_ORIGIN"))
_additional_origins = _split_csv(os.getenv("ADDITIONAL_ALLOWED_ORIGINS"))

_local_dev_origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]

ALLOWED_CORS_ORIGINS = _unique(
    [
        *_frontend_origins,
        *_additional_origins,
        *_local_dev_origins,
    ]
)


__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "APP_ENV",
    "DATABASE_URL",
    "DATA_DIR",
    "DB_RESET",
    "IS_PRODUCTION",
    "LOG_LEVEL",
    "PORT",
    "STORE_TIMEOUT_MS",
]
