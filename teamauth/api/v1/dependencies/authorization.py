"""Authorization gate dependencies (composition root).

The gate is built per request from settings flags, the permission registry
and the current actor. Cache is set in app lifespan (app.state.cache) when
Redis is enabled; otherwise lookups hit the DB only.
"""

from collections.abc import Awaitable, Callable
from typing import Annotated, Any

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from teamauth.application.dtos.user import UserResult
from teamauth.application.services.authorization_gate import AuthorizationGate
from teamauth.application.services.component_authorization import (
    ComponentAuthorization,
)
from teamauth.core.config import get_settings
from teamauth.infrastructure.persistence.database import get_db
from teamauth.infrastructure.persistence.repositories import PermissionRepository
from teamauth.infrastructure.services import AuthenticatedActor, PermissionResolver

from .auth import get_current_user_optional


def get_cache(request: Request) -> Any:
    """Cache service from app state, or None when Redis is disabled or not started."""
    return getattr(request.app.state, "cache", None)


async def get_permission_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
    cache: Annotated[Any, Depends(get_cache)],
) -> PermissionRepository:
    """Permission registry (find_by_key) with key cache."""
    return PermissionRepository(db, cache)


async def get_permission_resolver(
    db: Annotated[AsyncSession, Depends(get_db)],
    cache: Annotated[Any, Depends(get_cache)],
) -> PermissionResolver:
    """Permission resolver with grants cache."""
    return PermissionResolver(db, cache)


async def get_current_actor(
    user: Annotated[UserResult | None, Depends(get_current_user_optional)],
    resolver: Annotated[PermissionResolver, Depends(get_permission_resolver)],
) -> AuthenticatedActor | None:
    """Actor for the authenticated user; None when unauthenticated."""
    if user is None:
        return None
    return AuthenticatedActor(user, resolver)


async def get_authorization_gate(
    permission_repo: Annotated[PermissionRepository, Depends(get_permission_repo)],
    actor: Annotated[AuthenticatedActor | None, Depends(get_current_actor)],
) -> AuthorizationGate:
    settings = get_settings()
    return AuthorizationGate(
        permission_repo,
        actor,
        bypass_security=settings.bypass_security,
        check_permissions=settings.check_if_user_has_permission,
    )


def get_component_authorization(
    component: Any, *, check_permissions: bool = True
) -> Callable[..., Awaitable[ComponentAuthorization]]:
    """Dependency factory: ComponentAuthorization for a component (class, instance or key)."""

    async def _component(
        gate: Annotated[AuthorizationGate, Depends(get_authorization_gate)],
        team_id: str | None = None,
    ) -> ComponentAuthorization:
        return ComponentAuthorization(
            gate,
            component,
            check_permissions=check_permissions,
            team_id=team_id,
        )

    return _component


def require_component_read(
    component: Any, *, check_permissions: bool = True
) -> Callable[..., Awaitable[ComponentAuthorization]]:
    """Dependency factory: run the component's read gate (403 on denial)."""
    component_dep = get_component_authorization(
        component, check_permissions=check_permissions
    )

    async def _require(
        authorization: Annotated[ComponentAuthorization, Depends(component_dep)],
    ) -> ComponentAuthorization:
        await authorization.on_boot()
        return authorization

    return _require
