"""Unit tests for CommunicationDispatcher (params merge, group lookup, per-group notify)."""

from dataclasses import dataclass
from unittest.mock import AsyncMock, MagicMock

from teamauth.application.dtos.communication import CommunicationTemplateGroupResult
from teamauth.application.services.communication_dispatcher import (
    CommunicationDispatcher,
)
from teamauth.domain.events import (
    BaseCommunicableEvent,
    CommunicableEvent,
    Recipient,
    event_type_for_trigger,
)


@dataclass
class TeamInvitationSent(BaseCommunicableEvent):
    pass


class MemberRemoved(BaseCommunicableEvent):
    trigger_name = "team.member_removed"


def _group(group_id: str, trigger: str) -> CommunicationTemplateGroupResult:
    return CommunicationTemplateGroupResult(id=group_id, title=None, trigger=trigger)


def _dispatcher(groups: list[CommunicationTemplateGroupResult]):
    repo = MagicMock()
    repo.get_valid_for_trigger = AsyncMock(return_value=groups)
    notifier = MagicMock()
    notifier.notify = AsyncMock()
    return CommunicationDispatcher(repo, notifier), repo, notifier


def test_event_name_defaults_to_class_name() -> None:
    assert TeamInvitationSent.get_name() == "TeamInvitationSent"
    assert MemberRemoved.get_name() == "team.member_removed"
    assert isinstance(TeamInvitationSent(), CommunicableEvent)


def test_event_type_for_trigger_names_events_by_trigger() -> None:
    event_type = event_type_for_trigger("TeamInvitationSent")
    assert event_type is event_type_for_trigger("TeamInvitationSent")
    event = event_type(params={"team": "Core"})
    assert isinstance(event, CommunicableEvent)
    assert event.get_name() == "TeamInvitationSent"
    assert event.get_params() == {"team": "Core"}


def test_build_params_adds_trigger_and_keeps_event_params() -> None:
    event = TeamInvitationSent(params={"team": "Blue", "trigger": "stale"})
    params = CommunicationDispatcher.build_params(event)
    assert params == {"team": "Blue", "trigger": "TeamInvitationSent"}
    assert event.params["trigger"] == "stale"


async def test_no_matching_group_means_no_notify() -> None:
    dispatcher, repo, notifier = _dispatcher([])
    await dispatcher.dispatch(TeamInvitationSent(communicables=[Recipient("u1", "a@x.io")]))
    repo.get_valid_for_trigger.assert_awaited_once_with("TeamInvitationSent")
    notifier.notify.assert_not_called()


async def test_one_group_notified_once_with_merged_params() -> None:
    group = _group("g1", "TeamInvitationSent")
    recipient = Recipient("u1", "a@x.io")
    dispatcher, _, notifier = _dispatcher([group])
    await dispatcher.dispatch(
        TeamInvitationSent(params={"team": "Blue"}, communicables=[recipient])
    )
    notifier.notify.assert_awaited_once_with(
        group, [recipient], None, {"team": "Blue", "trigger": "TeamInvitationSent"}
    )


async def test_each_group_notified_in_order() -> None:
    groups = [_group("g1", "team.member_removed"), _group("g2", "team.member_removed")]
    dispatcher, repo, notifier = _dispatcher(groups)
    await dispatcher.dispatch(MemberRemoved())
    repo.get_valid_for_trigger.assert_awaited_once_with("team.member_removed")
    assert [c.args[0].id for c in notifier.notify.await_args_list] == ["g1", "g2"]


async def test_failing_group_does_not_stop_others(caplog) -> None:
    groups = [_group("g1", "MemberRemoved"), _group("g2", "MemberRemoved")]
    dispatcher, _, notifier = _dispatcher(groups)
    notifier.notify.side_effect = [RuntimeError("smtp down"), None]
    await dispatcher.dispatch(MemberRemoved())
    assert notifier.notify.await_count == 2
    assert "Communication group g1 failed" in caplog.text
