"""Database model for per-candidate project progress."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime
from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class Progress(SQLModel, table=True):
    """Completion percentage and score of one candidate on one project."""

    __tablename__ = "progress"

    project_id: int = ORMField(foreign_key="projects.id", primary_key=True)
    candidate_id: str = ORMField(foreign_key="users.uid", primary_key=True)
    progress: int = 0
    score: int = 0
    updated_at: datetime = ORMField(
        default_factory=utcnow, sa_type=DateTime(timezone=True)
    )


__all__ = ["Progress"]
