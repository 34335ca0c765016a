"""Permission registry repository (implements IPermissionRegistry).

find_by_key is on the hot path of every gated call, so lookups (hits and
misses) are cached for a short TTL.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from teamauth.application.dtos.permission import PermissionResult
from teamauth.application.interfaces.services import ICacheService
from teamauth.core.config import get_settings
from teamauth.core.constants import CACHE_MISS_MARKER
from teamauth.infrastructure.cache.keys import permission_lookup_key
from teamauth.infrastructure.persistence.models.permission import Permission
from teamauth.infrastructure.persistence.repositories.base import BaseRepository
from teamauth.shared.telemetry.logging import get_logger
from teamauth.shared.utils.datetime import utc_now

logger = get_logger(__name__)


def _permission_to_result(p: Permission) -> PermissionResult:
    return PermissionResult(
        id=p.id,
        permission_key=p.permission_key,
        permission_name=p.permission_name,
        permission_description=p.permission_description,
    )


def _result_to_cache(result: PermissionResult | None) -> Any:
    if result is None:
        return CACHE_MISS_MARKER
    return {
        "id": result.id,
        "permission_key": result.permission_key,
        "permission_name": result.permission_name,
        "permission_description": result.permission_description,
    }


class PermissionRepository(BaseRepository[Permission]):
    """Permission repository. find_by_key returns PermissionResult (DTO)."""

    def __init__(
        self,
        db: AsyncSession,
        cache: ICacheService | None = None,
        *,
        cache_ttl: int | None = None,
    ) -> None:
        super().__init__(db, Permission)
        self.cache = cache
        self.cache_ttl = (
            cache_ttl if cache_ttl is not None else get_settings().cache_ttl_permission_keys
        )

    def _cache_enabled(self) -> bool:
        return self.cache is not None and self.cache.is_available()

    async def find_by_key(self, permission_key: str) -> PermissionResult | None:
        """Return the live permission registered under key, or None."""
        cache_key = permission_lookup_key(permission_key)
        if self._cache_enabled():
            cached = await self.cache.get(cache_key)  # type: ignore[union-attr]
            if cached == CACHE_MISS_MARKER:
                return None
            if isinstance(cached, dict):
                return PermissionResult(**cached)

        result = await self.db.execute(
            select(Permission).where(
                Permission.permission_key == permission_key,
                Permission.deleted_at.is_(None),
            )
        )
        permission = result.scalar_one_or_none()
        found = _permission_to_result(permission) if permission else None

        if self._cache_enabled():
            await self.cache.set(  # type: ignore[union-attr]
                cache_key, _result_to_cache(found), ttl=self.cache_ttl
            )
        return found

    async def _get_any_by_key(self, permission_key: str) -> Permission | None:
        result = await self.db.execute(
            select(Permission).where(Permission.permission_key == permission_key)
        )
        return result.scalar_one_or_none()

    async def create_permission(
        self,
        permission_key: str,
        permission_name: str | None = None,
        permission_description: str | None = None,
    ) -> PermissionResult:
        """Register a permission key so it becomes gated.

        A soft-deleted key is restored; a live key is returned unchanged.
        """
        existing = await self._get_any_by_key(permission_key)
        if existing is None:
            permission = await self.create(
                Permission(
                    permission_key=permission_key,
                    permission_name=permission_name,
                    permission_description=permission_description,
                )
            )
            return _permission_to_result(permission)
        if existing.deleted_at is not None:
            existing.deleted_at = None
            existing.permission_name = permission_name
            existing.permission_description = permission_description
            await self.db.flush()
            await self._invalidate(permission_key)
            logger.info("Restored permission key %s", permission_key)
        return _permission_to_result(existing)

    async def remove_permission(self, permission_key: str) -> bool:
        """Soft-delete a key so it is no longer gated. Returns False if it was not live."""
        existing = await self._get_any_by_key(permission_key)
        if existing is None or existing.deleted_at is not None:
            return False
        existing.deleted_at = utc_now()
        await self.db.flush()
        await self._invalidate(permission_key)
        logger.info("Removed permission key %s", permission_key)
        return True

    async def _on_after_create(self, obj: Permission) -> None:
        await self._invalidate(obj.permission_key)

    async def _invalidate(self, permission_key: str) -> None:
        if self._cache_enabled():
            await self.cache.delete(permission_lookup_key(permission_key))  # type: ignore[union-attr]
            logger.debug("Invalidated permission key cache: %s", permission_key)
