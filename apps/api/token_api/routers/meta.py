"""Liveness endpoints."""
from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Response

from ..schemas.tokens import HealthResponse

router = APIRouter(tags=["meta"])


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Simple liveness probe."""

    now = datetime.now(timezone.utc).astimezone()
    return HealthResponse(status="ok", time=now.isoformat(timespec="seconds"))


@router.head("/health")
async def health_head() -> Response:
    """Allow HEAD for uptime monitors that only need the status code."""

    return Response(status_code=200)
