"""Leaderboard endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlmodel import Session

from ...core import get_session
from ...services import get_leaderboard as get_leaderboard_op

router = APIRouter(prefix="/api", tags=["leaderboard"])


@router.get("/leaderboard")
def get_leaderboard(session: Session = Depends(get_session)):
    """Get every user's total score, highest first."""

    return get_leaderboard_op(session)


__all__ = ["router"]
