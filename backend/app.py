"""ASGI entry point: ``uvicorn backend.app:app``."""

from __future__ import annotations

from .core import PORT, configure_logging
from .factory import create_app

configure_logging()
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("backend.app:app", host="127.0.0.1", port=PORT, reload=True)
