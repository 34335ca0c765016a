"""Component authorization: read gate on boot, write gate on submit."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from teamauth.application.services.authorization_gate import AuthorizationGate
from teamauth.core.constants import UNAUTHORIZED_ACTION_MESSAGE
from teamauth.domain.enums import PermissionType
from teamauth.domain.exceptions import AuthorizationException


def default_permission_key(component: Any) -> str:
    """Short class name of a component (class or instance); strings are used as-is."""
    if isinstance(component, str):
        return component
    if isinstance(component, type):
        return component.__name__
    return type(component).__name__


class ComponentAuthorization:
    """Authorization hooks for one component.

    on_boot() checks READ and aborts (AuthorizationException, mapped to 403).
    authorize() checks WRITE and returns the decision for the caller to act on.
    """

    def __init__(
        self,
        gate: AuthorizationGate,
        component: Any,
        *,
        permission_key_resolver: Callable[[], str] | None = None,
        check_permissions: bool = True,
        team_id: str | None = None,
    ) -> None:
        self.gate = gate
        self.component = component
        self.permission_key_resolver = permission_key_resolver
        self.check_permissions = check_permissions
        self.team_id = team_id

    @property
    def permission_key(self) -> str:
        if self.permission_key_resolver is not None:
            return self.permission_key_resolver()
        return default_permission_key(self.component)

    async def check(self, permission_type: PermissionType) -> bool:
        return await self.gate.check_permission(
            self.permission_key,
            permission_type,
            self.team_id,
            enabled=self.check_permissions,
        )

    async def on_boot(self) -> None:
        """Raise AuthorizationException if the actor may not read the component."""
        if not await self.check(PermissionType.READ):
            raise AuthorizationException(
                permission_key=self.permission_key,
                permission_type=PermissionType.READ.code,
                message=UNAUTHORIZED_ACTION_MESSAGE,
                team_id=self.team_id,
            )

    async def authorize(self) -> bool:
        """Return True if the actor may write through the component."""
        return await self.check(PermissionType.WRITE)
