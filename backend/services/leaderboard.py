"""Leaderboard aggregation over progress rows."""

from __future__ import annotations

from typing import Any, Dict, List

from sqlalchemy import func
from sqlmodel import Session, select

from ..core.time import isoformat_utc
from ..models import Progress, User
from .store import reading


def get_leaderboard(session: Session) -> List[Dict[str, Any]]:
    """Rank every user by the sum of their scores.

    Users without progress rows are included with a total of 0.
    """

    total_score = func.coalesce(func.sum(Progress.score), 0).label("total_score")
    projects_completed = func.count(func.distinct(Progress.project_id)).label(
        "projects_completed"
    )
    last_activity = func.max(Progress.updated_at).label("last_activity")

    statement = (
        select(
            User.uid,
            User.display_name,
            User.email,
            User.photo_url,
            total_score,
            projects_completed,
            last_activity,
        )
        .select_from(User)
        .join(Progress, Progress.candidate_id == User.uid, isouter=True)
        .group_by(
            User.uid,
            User.display_name,
            User.email,
            User.photo_url,
            User.created_at,
        )
        .order_by(total_score.desc(), User.created_at.asc(), User.uid.asc())
    )

    with reading(session, "Failed to fetch leaderboard"):
        rows = session.exec(statement).all()

    return [
        {
            "candidate_id": row.uid,
            "display_name": row.display_name,
            "email": row.email,
            "photo_url": row.photo_url,
            "total_score": int(row.total_score or 0),
            "projects_completed": int(row.projects_completed or 0),
            "last_activity": isoformat_utc(row.last_activity),
        }
        for row in rows
    ]


__all__ = ["get_leaderboard"]
