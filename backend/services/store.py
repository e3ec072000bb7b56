"""Transaction scoping for service operations."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from .errors import StorageError

logger = logging.getLogger(__name__)


@contextmanager
def transaction(session: Session, failure_message: str) -> Iterator[Session]:
    """Commit everything done in the block, or roll all of it back.

    Database errors are logged and re-raised as ``StorageError`` carrying
    ``failure_message``; any other exception propagates after the rollback.
    """

    try:
        yield session
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception(failure_message)
        raise StorageError(failure_message) from exc
    except Exception:
        session.rollback()
        raise


@contextmanager
def reading(session: Session, failure_message: str) -> Iterator[Session]:
    """Wrap a read-only block so database errors become ``StorageError``."""

    try:
        yield session
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception(failure_message)
        raise StorageError(failure_message) from exc


__all__ = ["reading", "transaction"]
