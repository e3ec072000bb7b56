"""Project and progress state machine.

Projects move ``Pending -> Accepted -> Completed``. Acceptance stamps the
project and initialises the candidate's progress row in one transaction;
reporting progress of exactly 100 completes the project in the same
transaction as the progress upsert.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional, Union

from sqlalchemy import and_
from sqlalchemy.dialects import postgresql, sqlite
from sqlmodel import Session, select

from ..core.time import isoformat_utc, parse_timestamp, utcnow
from ..models import Progress, Project, ProjectStatus
from .errors import InvalidTransition, ProjectNotFound, ValidationError
from .store import reading, transaction

logger = logging.getLogger(__name__)

COMPLETE_PROGRESS = 100
_PROGRESS_KEY = ["project_id", "candidate_id"]

SAMPLE_PROJECTS: List[Dict[str, Any]] = [
    {
        "name": "Mobile App Development",
        "description": (
            "Create a cross-platform mobile application using React Native. "
            "Features include user authentication, real-time data sync, and "
            "offline functionality."
        ),
        "days_until_deadline": 21,
    },
    {
        "name": "Data Analytics Dashboard",
        "description": (
            "Build an interactive dashboard for visualizing business metrics. "
            "Implement charts, filters, and export functionality using D3.js "
            "and React."
        ),
        "days_until_deadline": 14,
    },
    {
        "name": "E-commerce Platform",
        "description": (
            "Develop a full-stack e-commerce solution with features like "
            "product catalog, shopping cart, payment integration, and order "
            "management."
        ),
        "days_until_deadline": 30,
    },
]


def project_to_dict(project: Project) -> Dict[str, Any]:
    """Serialise a project model to API-friendly dict."""

    return {
        "id": project.id,
        "name": project.name,
        "description": project.description,
        "status": project.status,
        "deadline": isoformat_utc(project.deadline),
        "accepted_by": project.accepted_by,
        "accepted_at": isoformat_utc(project.accepted_at),
        "created_at": isoformat_utc(project.created_at),
    }


def progress_to_dict(row: Progress) -> Dict[str, Any]:
    return {
        "project_id": row.project_id,
        "candidate_id": row.candidate_id,
        "progress": row.progress,
        "score": row.score,
        "updated_at": isoformat_utc(row.updated_at),
    }


def _coerce_status(status: Optional[str]) -> str:
    if status is None:
        return ProjectStatus.PENDING.value
    try:
        return ProjectStatus(status).value
    except ValueError as exc:
        allowed = ", ".join(item.value for item in ProjectStatus)
        raise ValidationError(f"Status must be one of: {allowed}") from exc


def _coerce_deadline(deadline: Union[datetime, str, None]) -> datetime:
    if isinstance(deadline, datetime):
        return deadline
    if not deadline:
        raise ValidationError("Deadline is required")
    try:
        return parse_timestamp(deadline)
    except ValueError as exc:
        raise ValidationError("Deadline must be an ISO-8601 date") from exc


def _validate_progress(progress: int, score: int) -> None:
    if isinstance(progress, bool) or not isinstance(progress, int):
        raise ValidationError("Progress must be an integer")
    if not 0 <= progress <= COMPLETE_PROGRESS:
        raise ValidationError("Progress must be between 0 and 100")
    if isinstance(score, bool) or not isinstance(score, int):
        raise ValidationError("Score must be an integer")
    if score < 0:
        raise ValidationError("Score must not be negative")


def list_active_projects(
    session: Session, candidate_id: Optional[str]
) -> List[Dict[str, Any]]:
    """Return unfinished projects annotated with the candidate's progress."""

    statement = (
        select(Project, Progress)
        .join(
            Progress,
            and_(
                Progress.project_id == Project.id,
                Progress.candidate_id == candidate_id,
            ),
            isouter=True,
        )
        .where(Project.status != ProjectStatus.COMPLETED.value)
        .order_by(Project.deadline.asc(), Project.id.asc())
    )

    with reading(session, "Failed to fetch projects"):
        rows = session.exec(statement).all()

    results: List[Dict[str, Any]] = []
    for project, progress in rows:
        results.append(
            {
                **project_to_dict(project),
                "progress": progress.progress if progress else 0,
                "score": progress.score if progress else 0,
                "is_accepted": candidate_id is not None
                and project.accepted_by == candidate_id,
            }
        )
    return results


def create_project(
    session: Session,
    *,
    name: str,
    description: Optional[str],
    deadline: Union[datetime, str, None],
    status: Optional[str] = None,
) -> Project:
    """Insert a project; duplicate names are allowed."""

    name = (name or "").strip()
    if not name:
        raise ValidationError("Name is required")

    project = Project(
        name=name,
        description=description,
        status=_coerce_status(status),
        deadline=_coerce_deadline(deadline),
    )
    with transaction(session, "Failed to create project"):
        session.add(project)
    session.refresh(project)
    return project


def _insert_progress(session: Session):
    """Dialect ``INSERT`` for progress rows, so conflicts resolve in the database."""

    dialect = session.get_bind().dialect.name
    if dialect == "postgresql":
        return postgresql.insert(Progress)
    if dialect == "sqlite":
        return sqlite.insert(Progress)
    raise NotImplementedError(f"Progress upserts are not supported on {dialect}")


def _ensure_progress_row(session: Session, project_id: int, candidate_id: str) -> None:
    statement = (
        _insert_progress(session)
        .values(
            project_id=project_id,
            candidate_id=candidate_id,
            progress=0,
            score=0,
            updated_at=utcnow(),
        )
        .on_conflict_do_nothing(index_elements=_PROGRESS_KEY)
    )
    session.exec(statement)


def _upsert_progress(
    session: Session, project_id: int, candidate_id: str, progress: int, score: int
) -> None:
    statement = _insert_progress(session).values(
        project_id=project_id,
        candidate_id=candidate_id,
        progress=progress,
        score=score,
        updated_at=utcnow(),
    )
    statement = statement.on_conflict_do_update(
        index_elements=_PROGRESS_KEY,
        set_={
            "progress": statement.excluded.progress,
            "score": statement.excluded.score,
            "updated_at": statement.excluded.updated_at,
        },
    )
    session.exec(statement)


def accept_project(session: Session, project_id: int, candidate_id: str) -> Project:
    """Mark a project accepted by ``candidate_id`` and initialise its progress.

    An existing progress row for the pair is left untouched, so accepting twice
    is harmless. Completed projects cannot be accepted again.
    """

    with transaction(session, "Failed to accept project"):
        project = session.get(Project, project_id)
        if project is None:
            raise ProjectNotFound(project_id)
        if project.status == ProjectStatus.COMPLETED.value:
            raise InvalidTransition(f"Project {project_id} is already completed")

        project.status = ProjectStatus.ACCEPTED.value
        project.accepted_at = utcnow()
        project.accepted_by = candidate_id
        session.add(project)
        _ensure_progress_row(session, project_id, candidate_id)

    logger.info("Project %s accepted by %s", project_id, candidate_id)
    session.refresh(project)
    return project


def update_progress(
    session: Session, project_id: int, candidate_id: str, progress: int, score: int
) -> Progress:
    """Upsert the candidate's progress; 100 completes the project."""

    _validate_progress(progress, score)

    with transaction(session, "Failed to update progress"):
        project = session.get(Project, project_id)
        if project is None:
            raise ProjectNotFound(project_id)

        _upsert_progress(session, project_id, candidate_id, progress, score)

        if progress == COMPLETE_PROGRESS:
            project.status = ProjectStatus.COMPLETED.value
            session.add(project)

    if progress == COMPLETE_PROGRESS:
        logger.info("Project %s completed by %s", project_id, candidate_id)
    return session.get(Progress, (project_id, candidate_id), populate_existing=True)


def seed_sample_projects(session: Session) -> List[Project]:
    """Insert the demo projects. Calling it twice inserts them twice."""

    now = utcnow()
    projects = [
        Project(
            name=sample["name"],
            description=sample["description"],
            status=ProjectStatus.PENDING.value,
            deadline=now + timedelta(days=sample["days_until_deadline"]),
        )
        for sample in SAMPLE_PROJECTS
    ]
    with transaction(session, "Failed to add sample projects"):
        session.add_all(projects)
    for project in projects:
        session.refresh(project)
    return projects


__all__ = [
    "COMPLETE_PROGRESS",
    "SAMPLE_PROJECTS",
    "accept_project",
    "create_project",
    "list_active_projects",
    "progress_to_dict",
    "project_to_dict",
    "seed_sample_projects",
    "update_progress",
]
