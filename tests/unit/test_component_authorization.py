"""Unit tests for ComponentAuthorization (read gate on boot, write gate on submit)."""

import pytest

from teamauth.application.services.authorization_gate import AuthorizationGate
from teamauth.application.services.component_authorization import (
    ComponentAuthorization,
    default_permission_key,
)
from teamauth.core.constants import UNAUTHORIZED_ACTION_MESSAGE
from teamauth.domain.enums import PermissionType
from teamauth.domain.exceptions import AuthorizationException


class TeamForm:
    """Stand-in UI component."""


class TestDefaultPermissionKey:
    def test_class_name(self) -> None:
        assert default_permission_key(TeamForm) == "TeamForm"

    def test_instance_uses_class_name(self) -> None:
        assert default_permission_key(TeamForm()) == "TeamForm"

    def test_string_is_used_as_is(self) -> None:
        assert default_permission_key("Teams.Form") == "Teams.Form"


def test_custom_resolver_overrides_class_name(make_registry) -> None:
    auth = ComponentAuthorization(
        AuthorizationGate(make_registry()),
        TeamForm(),
        permission_key_resolver=lambda: "CustomKey",
    )
    assert auth.permission_key == "CustomKey"


async def test_on_boot_raises_403_exception_when_denied(make_registry) -> None:
    gate = AuthorizationGate(make_registry({"TeamForm"}), actor=None)
    auth = ComponentAuthorization(gate, TeamForm, team_id="team-9")
    with pytest.raises(AuthorizationException) as exc_info:
        await auth.on_boot()
    exc = exc_info.value
    assert exc.message == UNAUTHORIZED_ACTION_MESSAGE
    assert exc.error_code == "PERMISSION_DENIED"
    assert exc.details == {
        "permission_key": "TeamForm",
        "permission_type": "read",
        "team_id": "team-9",
    }


async def test_on_boot_passes_for_unregistered_component(make_registry) -> None:
    gate = AuthorizationGate(make_registry(), actor=None)
    await ComponentAuthorization(gate, TeamForm).on_boot()


async def test_authorize_returns_bool_and_never_raises(make_registry, make_actor) -> None:
    registry = make_registry({"TeamForm"})
    reader = make_actor({("TeamForm", None): PermissionType.READ})
    auth = ComponentAuthorization(AuthorizationGate(registry, reader), TeamForm)
    await auth.on_boot()
    assert await auth.authorize() is False

    writer = make_actor({("TeamForm", None): PermissionType.WRITE})
    auth = ComponentAuthorization(AuthorizationGate(registry, writer), TeamForm)
    assert await auth.authorize() is True


async def test_component_check_flag_disables_checks(make_registry) -> None:
    gate = AuthorizationGate(make_registry({"TeamForm"}), actor=None)
    auth = ComponentAuthorization(gate, TeamForm, check_permissions=False)
    await auth.on_boot()
    assert await auth.authorize() is True
