"""Aggregate API routers."""

from fastapi import APIRouter

from .leaderboard import router as leaderboard_router
from .progress import router as progress_router
from .projects import router as projects_router
from .system import router as system_router
from .users import router as users_router

ALL_ROUTERS: tuple[APIRouter, ...] = (
    system_router,
    projects_router,
    progress_router,
    leaderboard_router,
    users_router,
)

__all__ = ["ALL_ROUTERS"]
