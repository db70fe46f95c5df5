"""Helpers for serving the app."""

from __future__ import annotations

import os

import uvicorn
from fastapi import FastAPI


def run_app(
    app: FastAPI | str,
    *,
    host: str | None = None,
    port: int | None = None,
    reload: bool = False,
    log_level: str | None = None,
) -> None:
    """Serve an app (or an import string such as "service:app") with uvicorn.

    Host and port default to the HOST and PORT environment variables, then
    127.0.0.1:8000. Reload requires an import string.
    """
    if reload and not isinstance(app, str):
        raise ValueError("reload=True requires the app as an import string, e.g. 'service:app'")

    uvicorn.run(
        app,
        host=host or os.getenv("HOST", "127.0.0.1"),
        port=port or int(os.getenv("PORT", "8000")),
        reload=reload,
        log_level=(log_level or os.getenv("LOG_LEVEL", "info")).lower(),
        log_config=None,
    )
