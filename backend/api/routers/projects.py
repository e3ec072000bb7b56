"""Project listing, creation and acceptance endpoints."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlmodel import Session

from ...core import get_session
from ...services import (
    accept_project as accept_project_op,
    create_project as create_project_op,
    list_active_projects,
    project_to_dict,
    seed_sample_projects,
)
from ..validation import optional_str, require_id, require_str

router = APIRouter(prefix="/api/projects", tags=["projects"])


@router.get("")
def list_projects(
    userId: Optional[str] = None, session: Session = Depends(get_session)
):
    """List projects that are not completed, with the caller's progress."""

    return list_active_projects(session, userId)


@router.post("")
def create_project(body: Dict[str, Any], session: Session = Depends(get_session)):
    """Create a new project; status defaults to Pending."""

    project = create_project_op(
        session,
        name=require_str(body, "name"),
        description=optional_str(body, "description"),
        status=optional_str(body, "status"),
        deadline=require_str(body, "deadline"),
    )
    return project_to_dict(project)


@router.post("/accept")
def accept_project(body: Dict[str, Any], session: Session = Depends(get_session)):
    """Accept a project on behalf of a candidate."""

    accept_project_op(
        session,
        require_id(body, "project_id"),
        require_str(body, "candidate_id"),
    )
    return {"message": "Project accepted successfully"}


@router.post("/samples")
def add_sample_projects(request: Request, session: Session = Depends(get_session)):
    """Insert demo projects (development only)."""

    if request.app.state.production:
        raise HTTPException(403, "Sample data is disabled in production")

    projects = seed_sample_projects(session)
    return {
        "message": "Sample projects added successfully",
        "projects": [project_to_dict(project) for project in projects],
    }


__all__ = ["router"]
