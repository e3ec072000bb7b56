"""Database model for projects offered to candidates."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class ProjectStatus(str, Enum):
    PENDING = "Pending"
    ACCEPTED = "Accepted"
    COMPLETED = "Completed"


class Project(SQLModel, table=True):
    """Unit of work moving Pending -> Accepted -> Completed."""

    __tablename__ = "projects"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    name: str
    description: Optional[str] = None
    status: str = ORMField(default=ProjectStatus.PENDING.value, index=True)
    deadline: datetime = ORMField(index=True, sa_type=DateTime(timezone=True))
    accepted_by: Optional[str] = ORMField(default=None, foreign_key="users.uid")
    accepted_at: Optional[datetime] = ORMField(
        default=None, sa_type=DateTime(timezone=True)
    )
    created_at: datetime = ORMField(
        default_factory=utcnow, sa_type=DateTime(timezone=True)
    )


__all__ = ["Project", "ProjectStatus"]
