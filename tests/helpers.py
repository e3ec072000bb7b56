from __future__ import annotations

from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from backend import models  # noqa: F401 - register tables before create_all
from backend.core import build_engine, init_db


def make_engine() -> Engine:
    """In-memory SQLite engine whose single connection outlives sessions."""

    engine = build_engine("sqlite://", poolclass=StaticPool)
    init_db(engine)
    return engine
