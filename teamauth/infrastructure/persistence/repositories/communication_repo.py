"""Communication template group and notification repositories."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import Any

from sqlalchemy import delete, exists, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from teamauth.application.dtos.communication import (
    CommunicationTemplateGroupResult,
    CommunicationTemplateResult,
)
from teamauth.domain.enums import CommunicationType
from teamauth.infrastructure.persistence.models.communication import (
    CommunicationTemplate,
    CommunicationTemplateGroup,
    Notification,
)
from teamauth.infrastructure.persistence.repositories.base import BaseRepository
from teamauth.shared.telemetry.logging import get_logger
from teamauth.shared.utils.datetime import ensure_utc

logger = get_logger(__name__)


def is_template_draft(
    communication_type: CommunicationType, values: dict[str, Any]
) -> bool:
    """A template is a draft while any attribute its channel requires is empty.

    Button fields of in-app templates may sit in values["extra"].
    """
    fields = {**(values.get("extra") or {}), **values}
    return any(not fields.get(attr) for attr in communication_type.required_attributes())


def _template_to_result(t: CommunicationTemplate) -> CommunicationTemplateResult:
    return CommunicationTemplateResult(
        id=t.id,
        template_group_id=t.template_group_id,
        type=CommunicationType(t.type),
        subject=t.subject,
        content=t.content,
        is_draft=t.is_draft,
        extra=dict(t.extra or {}),
    )


def _group_to_result(g: CommunicationTemplateGroup) -> CommunicationTemplateGroupResult:
    return CommunicationTemplateGroupResult(
        id=g.id,
        title=g.title,
        trigger=g.trigger,
        templates=[_template_to_result(t) for t in g.templates],
    )


class CommunicationTemplateGroupRepository(BaseRepository[CommunicationTemplateGroup]):
    """Template groups with their templates. Read methods return DTOs."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, CommunicationTemplateGroup)

    async def get_valid_for_trigger(
        self, trigger: str
    ) -> list[CommunicationTemplateGroupResult]:
        """Groups whose trigger matches and that hold at least one non-draft template."""
        has_live_template = exists().where(
            CommunicationTemplate.template_group_id == CommunicationTemplateGroup.id,
            CommunicationTemplate.is_draft.is_(False),
        )
        result = await self.db.execute(
            select(CommunicationTemplateGroup)
            .options(selectinload(CommunicationTemplateGroup.templates))
            .where(CommunicationTemplateGroup.trigger == trigger, has_live_template)
            .order_by(CommunicationTemplateGroup.created_at)
        )
        return [_group_to_result(g) for g in result.scalars().all()]

    async def list_groups(
        self, skip: int = 0, limit: int = 100
    ) -> list[CommunicationTemplateGroupResult]:
        result = await self.db.execute(
            select(CommunicationTemplateGroup)
            .options(selectinload(CommunicationTemplateGroup.templates))
            .order_by(CommunicationTemplateGroup.created_at)
            .offset(skip)
            .limit(limit)
        )
        return [_group_to_result(g) for g in result.scalars().all()]

    async def create_group_with_templates(
        self,
        title: str | None,
        trigger: str | None,
        templates: Iterable[dict[str, Any]] = (),
    ) -> CommunicationTemplateGroupResult:
        """Create a group and its templates; is_draft is derived from each channel's required fields."""
        group = CommunicationTemplateGroup(title=title, trigger=trigger)
        for values in templates:
            communication_type = CommunicationType(values["type"])
            extra = dict(values.get("extra") or {})
            group.templates.append(
                CommunicationTemplate(
                    type=int(communication_type),
                    subject=values.get("subject"),
                    content=values.get("content"),
                    extra=extra,
                    is_draft=is_template_draft(communication_type, values),
                )
            )
        self.db.add(group)
        await self.db.flush()
        result = await self.db.execute(
            select(CommunicationTemplateGroup)
            .options(selectinload(CommunicationTemplateGroup.templates))
            .where(CommunicationTemplateGroup.id == group.id)
            .execution_options(populate_existing=True)
        )
        return _group_to_result(result.scalar_one())

    async def delete_old_voids(self, older_than: datetime) -> int:
        """Delete groups without any template created before older_than. Returns count."""
        older_than = ensure_utc(older_than)
        has_template = exists().where(
            CommunicationTemplate.template_group_id == CommunicationTemplateGroup.id
        )
        result = await self.db.execute(
            delete(CommunicationTemplateGroup)
            .where(
                CommunicationTemplateGroup.created_at < older_than,
                ~has_template,
            )
            .execution_options(synchronize_session=False)
        )
        deleted = result.rowcount or 0
        logger.info("Deleted %d void communication group(s) older than %s", deleted, older_than)
        return deleted


class NotificationRepository(BaseRepository[Notification]):
    """In-app notifications (implements INotificationStore)."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Notification)

    async def create_notification(
        self,
        user_id: str,
        *,
        trigger: str | None,
        subject: str,
        content: str,
        communication_template_id: str | None = None,
        custom_button_text: str | None = None,
        custom_button_href: str | None = None,
    ) -> Notification:
        return await self.create(
            Notification(
                user_id=user_id,
                trigger=trigger,
                subject=subject,
                content=content,
                communication_template_id=communication_template_id,
                custom_button_text=custom_button_text,
                custom_button_href=custom_button_href,
            )
        )
