"""Current user from an optional JWT bearer token (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from teamauth.application.dtos.user import UserResult
from teamauth.infrastructure.persistence.database import get_db
from teamauth.infrastructure.persistence.repositories import UserRepository
from teamauth.infrastructure.security.jwt import verify_token
from teamauth.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

_http_bearer = HTTPBearer(auto_error=False)


async def get_user_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserRepository:
    """User repository for read operations."""
    return UserRepository(db)


async def get_current_user_optional(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
) -> UserResult | None:
    """Return current user from JWT if present and active; else None."""
    if not credentials:
        return None
    try:
        payload = verify_token(credentials.credentials)
    except ValueError as e:
        logger.debug("Ignoring bearer token: %s", e)
        return None
    user = await user_repo.get_user(payload["sub"])
    if user is None or not user.is_active:
        return None
    return user
