"""User registry helpers."""

from __future__ import annotations

from typing import Any, Dict, Optional

from sqlmodel import Session

from ..core.time import isoformat_utc
from ..models import User
from .errors import ValidationError
from .store import transaction


def user_to_dict(user: User) -> Dict[str, Any]:
    return {
        "uid": user.uid,
        "email": user.email,
        "display_name": user.display_name,
        "photo_url": user.photo_url,
        "created_at": isoformat_utc(user.created_at),
    }


def upsert_user(
    session: Session,
    *,
    uid: str,
    email: Optional[str] = None,
    display_name: Optional[str] = None,
    photo_url: Optional[str] = None,
) -> User:
    """Insert or overwrite the profile stored for ``uid``."""

    uid = (uid or "").strip()
    if not uid:
        raise ValidationError("uid is required")

    with transaction(session, "Failed to save user"):
        user = session.get(User, uid)
        if user is None:
            user = User(uid=uid)
        user.email = email
        user.display_name = display_name
        user.photo_url = photo_url
        session.add(user)
    session.refresh(user)
    return user


__all__ = ["upsert_user", "user_to_dict"]
