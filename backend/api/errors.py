"""Exception handlers mapping service errors to JSON responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..services.errors import StorageError, TrackerError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI, *, production: bool) -> None:
    """Attach handlers; detailed causes are only exposed outside production."""

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
        payload = {"detail": exc.message}
        if not production and exc.__cause__ is not None:
            payload["error"] = str(exc.__cause__)
        return JSONResponse(payload, status_code=exc.status_code)

    @app.exception_handler(TrackerError)
    async def tracker_error_handler(request: Request, exc: TrackerError) -> JSONResponse:
        return JSONResponse({"detail": exc.message}, status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        payload = {"detail": "Internal server error"}
        if not production:
            payload["error"] = str(exc)
        return JSONResponse(payload, status_code=500)


__all__ = ["register_error_handlers"]
