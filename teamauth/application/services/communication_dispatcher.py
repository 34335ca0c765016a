"""Communication dispatch: notify template groups whose trigger matches an event."""

from __future__ import annotations

from typing import Any

from teamauth.application.interfaces.services import (
    ICommunicationGroupNotifier,
    ICommunicationTemplateGroupRepository,
)
from teamauth.domain.events import CommunicableEvent
from teamauth.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class CommunicationDispatcher:
    """Handles one communicable event: finds valid groups for its trigger and notifies each."""

    def __init__(
        self,
        group_repo: ICommunicationTemplateGroupRepository,
        notifier: ICommunicationGroupNotifier,
    ) -> None:
        self.group_repo = group_repo
        self.notifier = notifier

    @staticmethod
    def build_params(event: CommunicableEvent) -> dict[str, Any]:
        """Event params merged with trigger=<event name>."""
        return {**event.get_params(), "trigger": event.get_name()}

    async def dispatch(self, event: CommunicableEvent) -> None:
        trigger = event.get_name()
        params = self.build_params(event)
        groups = await self.group_repo.get_valid_for_trigger(trigger)
        if not groups:
            logger.debug("No communication groups for trigger %s", trigger)
            return

        communicables = event.get_communicables()
        for group in groups:
            try:
                await self.notifier.notify(group, communicables, None, params)
            except Exception:
                logger.exception(
                    "Communication group %s failed for trigger %s", group.id, trigger
                )
        logger.info(
            "Dispatched %s to %d group(s), %d recipient(s)",
            trigger,
            len(groups),
            len(communicables),
        )
