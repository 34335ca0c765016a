"""Tests for ORM model helpers that need no database."""

from teamauth.domain.enums import TeamRoleStatus
from teamauth.infrastructure.persistence.database import Base
from teamauth.infrastructure.persistence.models import TeamRole
from teamauth.shared.utils.datetime import utc_now


def test_team_role_status() -> None:
    assert TeamRole().status is TeamRoleStatus.ACTIVE
    assert TeamRole(suspended_at=utc_now()).status is TeamRoleStatus.SUSPENDED
    assert (
        TeamRole(suspended_at=utc_now(), terminated_at=utc_now()).status
        is TeamRoleStatus.TERMINATED
    )


def test_all_tables_registered() -> None:
    assert {
        "team",
        "app_user",
        "role",
        "permission",
        "permission_role",
        "team_role",
        "permission_team_role",
        "communication_template_group",
        "communication_template",
        "notification",
    } <= set(Base.metadata.tables)
