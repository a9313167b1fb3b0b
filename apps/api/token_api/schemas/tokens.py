"""Data contracts for token and health endpoints."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TokenRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    room_name: str = Field(default="", alias="roomName", description="Room to join")
    identity: str = Field(default="", description="Participant identity")
    name: str | None = Field(default=None, description="Optional display name")


class TokenResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    token: str = Field(..., description="Signed LiveKit access token")
    url: str = Field(..., description="LiveKit server URL to connect to")
    room_name: str = Field(..., alias="roomName")
    identity: str


class HealthResponse(BaseModel):
    status: str = "ok"
    time: str = Field(..., description="Current server time, RFC 3339")


class ErrorResponse(BaseModel):
    error: str
