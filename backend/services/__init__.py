"""Service layer helpers."""

from .errors import (
    InvalidTransition,
    ProjectNotFound,
    StorageError,
    TrackerError,
    ValidationError,
)
from .leaderboard import get_leaderboard
from .projects import (
    accept_project,
    create_project,
    list_active_projects,
    progress_to_dict,
    project_to_dict,
    seed_sample_projects,
    update_progress,
)
from .users import upsert_user, user_to_dict

__all__ = [
    "InvalidTransition",
    "ProjectNotFound",
    "StorageError",
    "TrackerError",
    "ValidationError",
    "accept_project",
    "create_project",
    "get_leaderboard",
    "list_active_projects",
    "progress_to_dict",
    "project_to_dict",
    "seed_sample_projects",
    "update_progress",
    "upsert_user",
    "user_to_dict",
]
