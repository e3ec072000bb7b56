"""Domain errors raised by the service layer."""

from __future__ import annotations

from typing import Any


class TrackerError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(TrackerError):
    status_code = 400


class ProjectNotFound(TrackerError):
    status_code = 404

    def __init__(self, project_id: Any) -> None:
        super().__init__(f"Project {project_id} not found")
        self.project_id = project_id


class InvalidTransition(TrackerError):
    """Requested status change would move a project backwards."""

    status_code = 409


class StorageError(TrackerError):
    """Database failure; ``message`` is safe to show, the cause is not."""

    status_code = 500


__all__ = [
    "InvalidTransition",
    "ProjectNotFound",
    "StorageError",
    "TrackerError",
    "ValidationError",
]
