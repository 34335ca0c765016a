"""Resolves user permission grants from DB (implements IPermissionResolver)."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import ColumnElement, Select, and_, or_, select, union_all
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from teamauth.application.dtos.permission import PermissionGrant
from teamauth.application.interfaces.services import ICacheService
from teamauth.core.config import get_settings
from teamauth.domain.enums import PermissionType
from teamauth.infrastructure.cache.keys import user_grants_key, user_grants_pattern
from teamauth.infrastructure.persistence.models.permission import (
    Permission,
    PermissionRole,
    PermissionTeamRole,
)
from teamauth.infrastructure.persistence.models.team import Role, Team, TeamRole
from teamauth.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


def evaluate_grants(
    grants: Iterable[PermissionGrant],
    permission_key: str,
    permission_type: PermissionType,
) -> bool:
    """Decide a request against a set of grants.

    An explicit DENY on the key refuses; otherwise any grant satisfying the
    requested type allows.
    """
    matching = [g for g in grants if g.permission_key == permission_key]
    if any(g.permission_type is PermissionType.DENY for g in matching):
        return False
    return any(g.permission_type.grants(permission_type) for g in matching)


class PermissionResolver:
    """Resolves grants through active team roles (role-level and direct), with caching.

    Only team roles on live teams count. Scoped to a team, a role held on an
    ancestor team counts when the role has hierarchy_access_below, and one held
    on a sibling team when it has hierarchy_access_neighbors.
    """

    def __init__(
        self,
        db: AsyncSession,
        cache: ICacheService | None = None,
        *,
        superadmin_emails: list[str] | None = None,
        cache_ttl: int | None = None,
    ) -> None:
        settings = get_settings()
        self.db = db
        self.cache = cache
        self.superadmin_emails = {
            e.lower()
            for e in (
                superadmin_emails
                if superadmin_emails is not None
                else settings.superadmin_email_list
            )
        }
        self.cache_ttl = (
            cache_ttl if cache_ttl is not None else settings.cache_ttl_permissions
        )

    def is_superadmin(self, email: str | None) -> bool:
        return bool(email) and email.lower() in self.superadmin_emails  # type: ignore[union-attr]

    def _cache_enabled(self) -> bool:
        return self.cache is not None and self.cache.is_available()

    def _team_scope(self, team_id: str) -> ColumnElement[bool]:
        """Team roles reaching team_id: on it, above it with below-access, or beside it with neighbor-access."""
        step = aliased(Team)
        ancestors = (
            select(step.parent_team_id.label("id"))
            .where(step.id == team_id, step.parent_team_id.is_not(None))
            .cte("team_ancestors", recursive=True)
        )
        parent = aliased(Team)
        # UNION (not ALL) stops on parent_team_id cycles.
        ancestors = ancestors.union(
            select(parent.parent_team_id)
            .join(ancestors, parent.id == ancestors.c.id)
            .where(parent.parent_team_id.is_not(None), parent.deleted_at.is_(None))
        )
        target = aliased(Team)
        sibling = aliased(Team)
        siblings = (
            select(sibling.id)
            .join(target, sibling.parent_team_id == target.parent_team_id)
            .where(target.id == team_id, sibling.id != team_id)
        )
        return or_(
            TeamRole.team_id == team_id,
            and_(
                Role.hierarchy_access_below.is_(True),
                TeamRole.team_id.in_(select(ancestors.c.id)),
            ),
            and_(
                Role.hierarchy_access_neighbors.is_(True),
                TeamRole.team_id.in_(siblings),
            ),
        )

    def _grants_query(self, user_id: str, team_id: str | None) -> Select:
        active = (
            TeamRole.user_id == user_id,
            TeamRole.terminated_at.is_(None),
            TeamRole.suspended_at.is_(None),
            Team.deleted_at.is_(None),
            Permission.deleted_at.is_(None),
        )
        if team_id is not None:
            active = (*active, self._team_scope(team_id))

        role_grants = (
            select(
                Permission.permission_key.label("permission_key"),
                PermissionRole.permission_type.label("permission_type"),
                TeamRole.team_id.label("team_id"),
            )
            .select_from(TeamRole)
            .join(Team, Team.id == TeamRole.team_id)
            .join(Role, Role.id == TeamRole.role_id)
            .join(PermissionRole, PermissionRole.role_id == TeamRole.role_id)
            .join(Permission, Permission.id == PermissionRole.permission_id)
            .where(*active)
        )
        direct_grants = (
            select(
                Permission.permission_key.label("permission_key"),
                PermissionTeamRole.permission_type.label("permission_type"),
                TeamRole.team_id.label("team_id"),
            )
            .select_from(TeamRole)
            .join(Team, Team.id == TeamRole.team_id)
            .join(Role, Role.id == TeamRole.role_id)
            .join(PermissionTeamRole, PermissionTeamRole.team_role_id == TeamRole.id)
            .join(Permission, Permission.id == PermissionTeamRole.permission_id)
            .where(*active)
        )
        combined = union_all(role_grants, direct_grants).subquery()
        return select(combined).distinct()

    async def get_user_grants(
        self, user_id: str, team_id: str | None = None
    ) -> list[PermissionGrant]:
        """Return every grant the user holds through active team roles (optionally on one team)."""
        cache_key = user_grants_key(user_id, team_id)
        if self._cache_enabled():
            cached = await self.cache.get(cache_key)  # type: ignore[union-attr]
            if isinstance(cached, list):
                return [PermissionGrant.from_cache(item) for item in cached]

        result = await self.db.execute(self._grants_query(user_id, team_id))
        grants: list[PermissionGrant] = []
        for key, ptype, grant_team_id in result.fetchall():
            try:
                grants.append(PermissionGrant(key, PermissionType(ptype), grant_team_id))
            except ValueError:
                logger.warning(
                    "Ignoring grant with unknown permission type %r on %s", ptype, key
                )

        if self._cache_enabled():
            await self.cache.set(  # type: ignore[union-attr]
                cache_key, [g.to_cache() for g in grants], ttl=self.cache_ttl
            )
        return grants

    async def user_has_permission(
        self,
        user_id: str,
        permission_key: str,
        permission_type: PermissionType,
        team_id: str | None = None,
        *,
        email: str | None = None,
    ) -> bool:
        if self.is_superadmin(email):
            return True
        grants = await self.get_user_grants(user_id, team_id)
        return evaluate_grants(grants, permission_key, permission_type)

    async def invalidate_user_cache(self, user_id: str) -> int:
        """Drop every cached grant set of the user. Returns keys removed."""
        if not self._cache_enabled():
            return 0
        return await self.cache.delete_pattern(user_grants_pattern(user_id))  # type: ignore[union-attr]
