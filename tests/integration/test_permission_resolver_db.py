"""PermissionResolver against Postgres: active team roles, soft deletes, DENY and team hierarchy."""

from dataclasses import dataclass

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from teamauth.domain.enums import PermissionType
from teamauth.infrastructure.persistence.models import (
    Permission,
    PermissionRole,
    PermissionTeamRole,
    Role,
    Team,
    TeamRole,
    User,
)
from teamauth.infrastructure.services.permission_resolver import PermissionResolver
from teamauth.shared.utils.datetime import utc_now

pytestmark = pytest.mark.requires_db

KEY = "TeamForm"


@dataclass
class World:
    user: User
    permission: Permission
    teams: dict[str, Team]


async def _world(db: AsyncSession) -> World:
    """Teams: root -> (child_a -> grandchild, child_b); other is a separate root."""
    user = User(name="Ada", email="ada@example.com")
    permission = Permission(permission_key=KEY, permission_name="Team form")
    root = Team(team_name="root")
    other = Team(team_name="other")
    db.add_all([user, permission, root, other])
    await db.flush()
    child_a = Team(team_name="child_a", parent_team_id=root.id)
    child_b = Team(team_name="child_b", parent_team_id=root.id)
    db.add_all([child_a, child_b])
    await db.flush()
    grandchild = Team(team_name="grandchild", parent_team_id=child_a.id)
    db.add(grandchild)
    await db.flush()
    teams = {
        "root": root,
        "other": other,
        "child_a": child_a,
        "child_b": child_b,
        "grandchild": grandchild,
    }
    return World(user, permission, teams)


async def _grant_role(
    db: AsyncSession,
    world: World,
    team: str,
    permission_type: PermissionType = PermissionType.ALL,
    **role_flags: bool,
) -> TeamRole:
    role = Role(name=f"role-{team}", **role_flags)
    db.add(role)
    await db.flush()
    db.add(
        PermissionRole(
            permission_id=world.permission.id,
            role_id=role.id,
            permission_type=int(permission_type),
        )
    )
    team_role = TeamRole(
        user_id=world.user.id, team_id=world.teams[team].id, role_id=role.id
    )
    db.add(team_role)
    await db.flush()
    return team_role


async def _allowed(
    db: AsyncSession,
    world: World,
    team: str | None,
    permission_type: PermissionType = PermissionType.READ,
) -> bool:
    resolver = PermissionResolver(db, superadmin_emails=[])
    team_id = world.teams[team].id if team else None
    return await resolver.user_has_permission(world.user.id, KEY, permission_type, team_id)


async def test_active_role_grant_allows_on_its_team(db_session: AsyncSession) -> None:
    world = await _world(db_session)
    await _grant_role(db_session, world, "child_a", PermissionType.WRITE)
    assert await _allowed(db_session, world, "child_a", PermissionType.WRITE)
    assert not await _allowed(db_session, world, "child_a", PermissionType.ALL)
    assert await _allowed(db_session, world, None)
    assert not await _allowed(db_session, world, "other")


async def test_role_on_soft_deleted_team_grants_nothing(db_session: AsyncSession) -> None:
    world = await _world(db_session)
    await _grant_role(db_session, world, "child_a")
    world.teams["child_a"].deleted_at = utc_now()
    await db_session.flush()
    assert not await _allowed(db_session, world, "child_a")
    assert not await _allowed(db_session, world, None)


@pytest.mark.parametrize("field", ["terminated_at", "suspended_at"])
async def test_inactive_team_role_grants_nothing(
    db_session: AsyncSession, field: str
) -> None:
    world = await _world(db_session)
    team_role = await _grant_role(db_session, world, "child_a")
    setattr(team_role, field, utc_now())
    await db_session.flush()
    assert not await _allowed(db_session, world, "child_a")


async def test_soft_deleted_permission_grants_nothing(db_session: AsyncSession) -> None:
    world = await _world(db_session)
    await _grant_role(db_session, world, "child_a")
    world.permission.deleted_at = utc_now()
    await db_session.flush()
    assert not await _allowed(db_session, world, "child_a")


async def test_direct_grant_and_direct_deny(db_session: AsyncSession) -> None:
    world = await _world(db_session)
    team_role = await _grant_role(db_session, world, "child_a", PermissionType.READ)
    direct = PermissionTeamRole(
        permission_id=world.permission.id,
        team_role_id=team_role.id,
        permission_type=int(PermissionType.WRITE),
    )
    db_session.add(direct)
    await db_session.flush()
    assert await _allowed(db_session, world, "child_a", PermissionType.WRITE)

    direct.permission_type = int(PermissionType.DENY)
    await db_session.flush()
    assert not await _allowed(db_session, world, "child_a", PermissionType.READ)


async def test_below_access_reaches_descendant_teams(db_session: AsyncSession) -> None:
    world = await _world(db_session)
    await _grant_role(db_session, world, "root", hierarchy_access_below=True)
    assert await _allowed(db_session, world, "child_a", PermissionType.ALL)
    assert await _allowed(db_session, world, "grandchild", PermissionType.ALL)
    assert not await _allowed(db_session, world, "other")


async def test_role_without_below_access_stays_on_its_team(
    db_session: AsyncSession,
) -> None:
    world = await _world(db_session)
    await _grant_role(db_session, world, "root")
    assert await _allowed(db_session, world, "root")
    assert not await _allowed(db_session, world, "child_a")


async def test_below_access_does_not_reach_ancestors(db_session: AsyncSession) -> None:
    world = await _world(db_session)
    await _grant_role(db_session, world, "child_a", hierarchy_access_below=True)
    assert await _allowed(db_session, world, "grandchild")
    assert not await _allowed(db_session, world, "root")
    assert not await _allowed(db_session, world, "child_b")


async def test_neighbor_access_reaches_sibling_teams(db_session: AsyncSession) -> None:
    world = await _world(db_session)
    await _grant_role(db_session, world, "child_a", hierarchy_access_neighbors=True)
    assert await _allowed(db_session, world, "child_b")
    assert not await _allowed(db_session, world, "root")
    assert not await _allowed(db_session, world, "grandchild")


async def test_root_teams_are_not_siblings(db_session: AsyncSession) -> None:
    world = await _world(db_session)
    await _grant_role(db_session, world, "root", hierarchy_access_neighbors=True)
    assert not await _allowed(db_session, world, "other")
