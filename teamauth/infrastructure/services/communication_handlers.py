"""Per-channel communication handlers and the template group notifier."""

from __future__ import annotations

from typing import Any

from teamauth.application.dtos.communication import (
    CommunicationTemplateGroupResult,
    CommunicationTemplateResult,
)
from teamauth.application.interfaces.services import (
    ICommunicationHandler,
    IEmailSender,
    INotificationStore,
    ISmsSender,
)
from teamauth.domain.enums import CommunicationType
from teamauth.domain.events import (
    DatabaseCommunicable,
    EmailCommunicable,
    SmsCommunicable,
)
from teamauth.infrastructure.services.communication_renderer import (
    CommunicationTemplateRenderer,
)
from teamauth.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


def _supporting(
    communicables: list[Any], contract: type, channel: str
) -> list[Any]:
    """Recipients implementing contract; others are dropped with a warning."""
    supported = []
    for c in communicables:
        if isinstance(c, contract):
            supported.append(c)
        else:
            logger.warning(
                "Recipient %r does not support %s communications; skipped",
                c,
                channel,
            )
    return supported


class EmailCommunicationHandler:
    def __init__(
        self,
        sender: IEmailSender,
        renderer: CommunicationTemplateRenderer | None = None,
    ) -> None:
        self.sender = sender
        self.renderer = renderer or CommunicationTemplateRenderer()

    async def notify(
        self,
        template: CommunicationTemplateResult,
        communicables: list[Any],
        params: dict[str, Any],
    ) -> None:
        recipients = _supporting(communicables, EmailCommunicable, "email")
        if not recipients:
            return
        subject = self.renderer.render(template.subject, params)
        body = self.renderer.render(template.content, params)
        for recipient in recipients:
            await self.sender.send(recipient.get_email(), subject, body)


class SmsCommunicationHandler:
    def __init__(
        self,
        sender: ISmsSender,
        renderer: CommunicationTemplateRenderer | None = None,
    ) -> None:
        self.sender = sender
        self.renderer = renderer or CommunicationTemplateRenderer()

    async def notify(
        self,
        template: CommunicationTemplateResult,
        communicables: list[Any],
        params: dict[str, Any],
    ) -> None:
        recipients = _supporting(communicables, SmsCommunicable, "sms")
        if not recipients:
            return
        body = self.renderer.render(template.content, params)
        for recipient in recipients:
            phone = recipient.get_phone()
            if not phone:
                logger.warning("Recipient %r has no phone number; skipped", recipient)
                continue
            await self.sender.send(phone, body)


class DatabaseCommunicationHandler:
    """Stores one in-app notification per recipient."""

    def __init__(
        self,
        store: INotificationStore,
        renderer: CommunicationTemplateRenderer | None = None,
    ) -> None:
        self.store = store
        self.renderer = renderer or CommunicationTemplateRenderer()

    async def notify(
        self,
        template: CommunicationTemplateResult,
        communicables: list[Any],
        params: dict[str, Any],
    ) -> None:
        recipients = _supporting(communicables, DatabaseCommunicable, "database")
        if not recipients:
            return
        subject = self.renderer.render(template.subject, params)
        content = self.renderer.render(template.content, params)
        button_text = template.extra.get("custom_button_text")
        button_href = template.extra.get("custom_button_href")
        for recipient in recipients:
            await self.store.create_notification(
                recipient.get_notifiable_id(),
                trigger=params.get("trigger"),
                subject=subject,
                content=content,
                communication_template_id=template.id,
                custom_button_text=self.renderer.render(button_text, params)
                if button_text
                else None,
                custom_button_href=self.renderer.render(button_href, params)
                if button_href
                else None,
            )


class CommunicationTemplateGroupNotifier:
    """Sends a group's live templates through the handler for each template type."""

    def __init__(self, handlers: dict[CommunicationType, ICommunicationHandler]) -> None:
        self.handlers = handlers

    async def notify(
        self,
        group: CommunicationTemplateGroupResult,
        communicables: list[Any],
        communication_type: CommunicationType | None = None,
        params: dict[str, Any] | None = None,
    ) -> None:
        params = params or {}
        for template in group.templates:
            if communication_type is not None and template.type != communication_type:
                continue
            if template.is_draft:
                continue
            handler = self.handlers.get(template.type)
            if handler is None:
                logger.warning(
                    "No handler for %s templates (template %s)",
                    template.type.name,
                    template.id,
                )
                continue
            await handler.notify(template, communicables, params)
