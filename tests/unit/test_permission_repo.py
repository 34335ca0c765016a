"""Unit tests for PermissionRepository: find_by_key caching and registry changes invalidating it."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from teamauth.application.dtos.permission import PermissionResult
from teamauth.core.constants import CACHE_MISS_MARKER
from teamauth.infrastructure.persistence.repositories.permission_repo import (
    PermissionRepository,
)
from teamauth.shared.utils.datetime import utc_now

from scripts import register_permissions


def _db_returning(permission) -> AsyncMock:
    result = MagicMock()
    result.scalar_one_or_none.return_value = permission
    db = AsyncMock()
    db.execute = AsyncMock(return_value=result)
    return db


def _cache(cached=None) -> MagicMock:
    cache = MagicMock()
    cache.is_available.return_value = True
    cache.get = AsyncMock(return_value=cached)
    cache.set = AsyncMock(return_value=True)
    return cache


def _permission_row() -> MagicMock:
    row = MagicMock()
    row.id = "p1"
    row.permission_key = "TeamForm"
    row.permission_name = "Team form"
    row.permission_description = None
    return row


async def test_found_permission_is_returned_and_cached() -> None:
    cache = _cache()
    repo = PermissionRepository(_db_returning(_permission_row()), cache, cache_ttl=30)
    found = await repo.find_by_key("TeamForm")
    assert found == PermissionResult("p1", "TeamForm", "Team form", None)
    cache.set.assert_awaited_once()
    key, value = cache.set.await_args.args
    assert key == "permission_key:TeamForm"
    assert value["id"] == "p1"
    assert cache.set.await_args.kwargs == {"ttl": 30}


async def test_missing_permission_caches_marker() -> None:
    cache = _cache()
    repo = PermissionRepository(_db_returning(None), cache, cache_ttl=30)
    assert await repo.find_by_key("NotGated") is None
    cache.set.assert_awaited_once_with(
        "permission_key:NotGated", CACHE_MISS_MARKER, ttl=30
    )


async def test_cached_marker_short_circuits_db() -> None:
    db = _db_returning(_permission_row())
    repo = PermissionRepository(db, _cache(cached=CACHE_MISS_MARKER))
    assert await repo.find_by_key("TeamForm") is None
    db.execute.assert_not_called()


async def test_cached_hit_short_circuits_db() -> None:
    db = _db_returning(None)
    cached = {
        "id": "p1",
        "permission_key": "TeamForm",
        "permission_name": None,
        "permission_description": None,
    }
    repo = PermissionRepository(db, _cache(cached=cached))
    found = await repo.find_by_key("TeamForm")
    assert found is not None and found.id == "p1"
    db.execute.assert_not_called()


async def test_without_cache_queries_db_each_time(settings) -> None:
    db = _db_returning(None)
    repo = PermissionRepository(db)
    assert repo.cache_ttl == settings.cache_ttl_permission_keys
    await repo.find_by_key("X")
    await repo.find_by_key("X")
    assert db.execute.await_count == 2


def _db_with_row(row) -> AsyncMock:
    db = _db_returning(row)
    db.add = MagicMock()
    return db


def _invalidating_cache() -> MagicMock:
    cache = _cache()
    cache.delete = AsyncMock(return_value=True)
    return cache


async def test_create_permission_drops_cached_miss() -> None:
    db = _db_with_row(None)
    cache = _invalidating_cache()
    repo = PermissionRepository(db, cache)
    created = await repo.create_permission("TeamForm", "Team form")
    assert created.permission_key == "TeamForm"
    db.add.assert_called_once()
    db.flush.assert_awaited()
    cache.delete.assert_awaited_once_with("permission_key:TeamForm")


async def test_create_permission_restores_soft_deleted_key() -> None:
    row = _permission_row()
    row.deleted_at = utc_now()
    db = _db_with_row(row)
    cache = _invalidating_cache()
    repo = PermissionRepository(db, cache)
    await repo.create_permission("TeamForm", "Team form v2")
    assert row.deleted_at is None
    assert row.permission_name == "Team form v2"
    db.add.assert_not_called()
    cache.delete.assert_awaited_once_with("permission_key:TeamForm")


async def test_create_permission_keeps_live_key() -> None:
    row = _permission_row()
    row.deleted_at = None
    db = _db_with_row(row)
    cache = _invalidating_cache()
    found = await PermissionRepository(db, cache).create_permission("TeamForm")
    assert found.id == "p1"
    db.add.assert_not_called()
    cache.delete.assert_not_called()


async def test_remove_permission_soft_deletes_and_invalidates() -> None:
    row = _permission_row()
    row.deleted_at = None
    db = _db_with_row(row)
    cache = _invalidating_cache()
    assert await PermissionRepository(db, cache).remove_permission("TeamForm")
    assert row.deleted_at is not None
    cache.delete.assert_awaited_once_with("permission_key:TeamForm")


async def test_remove_unknown_permission_is_noop() -> None:
    cache = _invalidating_cache()
    assert not await PermissionRepository(_db_with_row(None), cache).remove_permission("X")
    cache.delete.assert_not_called()


async def test_register_script_adds_then_removes_key() -> None:
    row = _permission_row()
    row.deleted_at = None
    cache = _invalidating_cache()
    repo = PermissionRepository(_db_with_row(None), cache)
    repo.create = AsyncMock(return_value=row)

    assert await register_permissions.apply(repo, "add", "TeamForm") == "Registered TeamForm (p1)"
    repo.create.assert_awaited_once()

    repo.db = _db_with_row(row)
    assert await register_permissions.apply(repo, "remove", "TeamForm") == "Removed TeamForm"
    cache.delete.assert_awaited_with("permission_key:TeamForm")


async def test_register_script_rejects_unknown_action() -> None:
    repo = PermissionRepository(_db_with_row(None))
    with pytest.raises(ValueError):
        await register_permissions.apply(repo, "rename", "TeamForm")
