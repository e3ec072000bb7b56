"""Progress reporting endpoint."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends
from sqlmodel import Session

from ...core import get_session
from ...services import progress_to_dict, update_progress as update_progress_op
from ..validation import require_id, require_int, require_str

router = APIRouter(prefix="/api/progress", tags=["progress"])


@router.post("/update")
def update_progress(body: Dict[str, Any], session: Session = Depends(get_session)):
    """Record a candidate's progress and score; 100% completes the project."""

    row = update_progress_op(
        session,
        require_id(body, "project_id"),
        require_str(body, "candidate_id"),
        require_int(body, "progress"),
        require_int(body, "score"),
    )
    return progress_to_dict(row)


__all__ = ["router"]
