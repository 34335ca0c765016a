"""Authorization gate: permission checks for UI components and API routes.

Configuration (bypass flag, global check flag) is passed in at construction;
the gate never reads settings itself.
"""

from __future__ import annotations

from teamauth.application.interfaces.services import (
    IPermissionActor,
    IPermissionRegistry,
)
from teamauth.domain.enums import PermissionType
from teamauth.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class AuthorizationGate:
    """Decides allow/deny for a permission key, type and optional team scope.

    Unregistered permission keys are not gated (allow). Registered keys need
    an authenticated actor holding a matching grant.
    """

    def __init__(
        self,
        permission_registry: IPermissionRegistry,
        actor: IPermissionActor | None = None,
        *,
        bypass_security: bool = False,
        check_permissions: bool = True,
    ) -> None:
        self.permission_registry = permission_registry
        self.actor = actor
        self.bypass_security = bypass_security
        self.check_permissions = check_permissions

    def is_checking_enabled(self, enabled: bool = True) -> bool:
        """Return True if checks run for a call site (global flag AND local override)."""
        return self.check_permissions and enabled

    async def check_permission(
        self,
        permission_key: str,
        permission_type: PermissionType,
        team_id: str | None = None,
        *,
        enabled: bool = True,
    ) -> bool:
        """Return True if access is allowed.

        Args:
            permission_key: Gated capability (usually a component class name).
            permission_type: Required access level.
            team_id: Optional team scope for the grant.
            enabled: Call-site override; False disables checking for this call.
        """
        if self.bypass_security:
            return True
        if not self.is_checking_enabled(enabled):
            return True

        permission = await self.permission_registry.find_by_key(permission_key)
        if permission is None:
            return True

        if self.actor is None:
            logger.info(
                "Permission denied (no authenticated actor): key=%s type=%s team_id=%s",
                permission_key,
                permission_type.code,
                team_id,
            )
            return False

        allowed = await self.actor.has_permission(
            permission_key, permission_type, team_id
        )
        if not allowed:
            logger.info(
                "Permission denied: key=%s type=%s team_id=%s",
                permission_key,
                permission_type.code,
                team_id,
            )
        return allowed
