"""Database engine construction and session helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterator

from fastapi import Request
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from .config import STORE_TIMEOUT_MS


def _connect_args(url: str, timeout_ms: int) -> Dict[str, Any]:
    if url.startswith("sqlite"):
        return {"check_same_thread": False, "timeout": timeout_ms / 1000.0}
    if url.startswith("postgresql"):
        return {"options": f"-c statement_timeout={timeout_ms}"}
    return {}


def build_engine(url: str, *, timeout_ms: int = STORE_TIMEOUT_MS, **kwargs: Any) -> Engine:
    """Create an engine for ``url`` with a per-connection store timeout."""

    if url.startswith("sqlite:///") and not url.startswith("sqlite:///:memory:"):
        Path(url[len("sqlite:///"):]).parent.mkdir(parents=True, exist_ok=True)

    connect_args = {**_connect_args(url, timeout_ms), **kwargs.pop("connect_args", {})}
    if not url.startswith("sqlite"):
        kwargs.setdefault("pool_pre_ping", True)
    return create_engine(url, connect_args=connect_args, **kwargs)


def init_db(engine: Engine, *, reset: bool = False) -> None:
    """Create all tables, dropping them first when ``reset`` is set."""

    if reset:
        SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)


def get_session(request: Request) -> Iterator[Session]:
    """FastAPI dependency that yields a session bound to the app's engine."""

    with Session(request.app.state.engine) as session:
        yield session


__all__ = ["build_engine", "get_session", "init_db"]
