"""Authenticated user as a permission actor (implements IPermissionActor)."""

from __future__ import annotations

from teamauth.application.dtos.user import UserResult
from teamauth.application.interfaces.services import IPermissionResolver
from teamauth.domain.enums import PermissionType


class AuthenticatedActor:
    """Checks the current user's grants through a permission resolver."""

    def __init__(self, user: UserResult, resolver: IPermissionResolver) -> None:
        self.user = user
        self.resolver = resolver

    async def has_permission(
        self,
        permission_key: str,
        permission_type: PermissionType,
        team_id: str | None = None,
    ) -> bool:
        return await self.resolver.user_has_permission(
            self.user.id,
            permission_key,
            permission_type,
            team_id,
            email=self.user.email,
        )
