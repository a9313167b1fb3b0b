"""LiveKit access token issuance.

Tokens are signed in-process with the configured API key and secret and are
never stored. Every token grants join, publish and subscribe on one room.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from livekit import api

from ..core.config import Settings

TOKEN_TTL = timedelta(hours=24)

logger = logging.getLogger(__name__)


class TokenIssueError(RuntimeError):
    """Raised when a token could not be signed."""


@dataclass(slots=True, frozen=True)
class IssuedToken:
    token: str
    expires_at: datetime


def build_grant(room: str) -> api.VideoGrants:
    """Return the grant handed to every participant of ``room``."""

    return api.VideoGrants(
        room_join=True,
        room=room,
        can_publish=True,
        can_subscribe=True,
    )


def issue_token(settings: Settings, room: str, identity: str, name: str | None = None) -> IssuedToken:
    """Sign a 24 hour access token for ``identity`` in ``room``.

    The caller is responsible for rejecting empty room names and identities.
    """

    issued_at = datetime.now(timezone.utc)
    try:
        access_token = (
            api.AccessToken(settings.livekit_api_key, settings.livekit_api_secret)
            .with_identity(identity)
            .with_grants(build_grant(room))
            .with_ttl(TOKEN_TTL)
        )
        if name:
            access_token = access_token.with_name(name)
        token = access_token.to_jwt()
    except Exception as exc:  # noqa: BLE001 - any signing fault is internal
        raise TokenIssueError(f"could not sign token for {identity!r} in {room!r}") from exc

    logger.info("Issued token for identity=%s room=%s", identity, room)
    return IssuedToken(token=token, expires_at=issued_at + TOKEN_TTL)
