"""Token issuance endpoint."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import TypeAdapter, ValidationError

from ..core.config import Settings
from ..core.dependencies import get_app_settings
from ..schemas.tokens import ErrorResponse, TokenRequest, TokenResponse
from ..services import tokens as token_service

logger = logging.getLogger(__name__)

router = APIRouter()

# A JSON null body decodes to an empty request.
_token_request_adapter = TypeAdapter(TokenRequest | None)


def _parse_token_request(body: bytes) -> TokenRequest:
    """Decode the body as JSON whatever the declared content type."""

    try:
        payload = _token_request_adapter.validate_json(body)
    except ValidationError as exc:
        logger.debug("Rejected token request body: %s", exc.errors())
        raise HTTPException(status_code=400, detail="Invalid request body") from exc
    return payload or TokenRequest()


@router.post(
    "/token",
    response_model=TokenResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": TokenRequest.model_json_schema(by_alias=True)}},
        }
    },
)
async def create_token(
    request: Request,
    settings: Settings = Depends(get_app_settings),
) -> TokenResponse:
    """Return a LiveKit access token for the requested room and identity."""

    payload = _parse_token_request(await request.body())
    if not payload.room_name or not payload.identity:
        raise HTTPException(status_code=400, detail="roomName and identity are required")

    try:
        issued = token_service.issue_token(settings, payload.room_name, payload.identity, payload.name)
    except token_service.TokenIssueError as exc:
        logger.exception("Error generating token: %s", exc)
        raise HTTPException(status_code=500, detail="Failed to generate token") from exc

    return TokenResponse(
        token=issued.token,
        url=settings.livekit_url,
        room_name=payload.room_name,
        identity=payload.identity,
    )
