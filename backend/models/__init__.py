"""Database model exports."""

from .progress import Progress
from .project import Project, ProjectStatus
from .user import User

__all__ = [
    "Progress",
    "Project",
    "ProjectStatus",
    "User",
]
