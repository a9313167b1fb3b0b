"""FastAPI dependencies shared by the routers."""
from __future__ import annotations

from fastapi import Request

from .config import Settings


def get_app_settings(request: Request) -> Settings:
    """Return the settings the running app was created with."""

    return request.app.state.settings
