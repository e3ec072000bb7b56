"""User registration endpoint."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends
from sqlmodel import Session

from ...core import get_session
from ...services import upsert_user, user_to_dict
from ..validation import optional_str, require_str

router = APIRouter(prefix="/api", tags=["users"])


@router.post("/users")
def save_user(body: Dict[str, Any], session: Session = Depends(get_session)):
    """Store the signed-in user's profile, keyed by uid."""

    user = upsert_user(
        session,
        uid=require_str(body, "uid"),
        email=optional_str(body, "email"),
        display_name=optional_str(body, "displayName"),
        photo_url=optional_str(body, "photoURL"),
    )
    return {"message": "User data saved", "user": user_to_dict(user)}


__all__ = ["router"]
