"""Request body helpers shared by the routers."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import HTTPException


def require_str(body: Dict[str, Any], key: str) -> str:
    value = body.get(key)
    if not isinstance(value, str) or not value.strip():
        raise HTTPException(400, f"{key} is required")
    return value.strip()


def optional_str(body: Dict[str, Any], key: str) -> Optional[str]:
    value = body.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise HTTPException(400, f"{key} must be a string")
    return value


def require_id(body: Dict[str, Any], key: str) -> int:
    """Read an integer identifier, accepting digit-only strings."""

    value = body.get(key)
    if value is None:
        raise HTTPException(400, f"{key} is required")
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    raise HTTPException(400, f"{key} must be an integer")


def require_int(body: Dict[str, Any], key: str) -> int:
    value = body.get(key)
    if value is None:
        raise HTTPException(400, f"{key} is required")
    if isinstance(value, bool) or not isinstance(value, int):
        raise HTTPException(400, f"{key} must be an integer")
    return value


__all__ = ["optional_str", "require_id", "require_int", "require_str"]
