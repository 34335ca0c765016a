"""Communication template group, template and in-app notification ORM models."""

from datetime import datetime
from typing import Any

import sqlalchemy as sa
from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from teamauth.domain.enums import CommunicationType
from teamauth.infrastructure.persistence.database import Base
from teamauth.infrastructure.persistence.models.mixins import BaseModelMixin


class CommunicationTemplateGroup(BaseModelMixin, Base):
    """Maps a trigger (event name) to templates. Table: communication_template_group."""

    __tablename__ = "communication_template_group"

    title: Mapped[str | None] = mapped_column(String, nullable=True)
    trigger: Mapped[str | None] = mapped_column(String(1000), nullable=True, index=True)

    templates: Mapped[list["CommunicationTemplate"]] = relationship(
        back_populates="group",
        lazy="raise",
        cascade="all, delete-orphan",
    )


class CommunicationTemplate(BaseModelMixin, Base):
    """One channel's template in a group. Table: communication_template."""

    __tablename__ = "communication_template"

    template_group_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("communication_template_group.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    type: Mapped[int] = mapped_column(
        Integer, nullable=False, default=int(CommunicationType.EMAIL)
    )
    subject: Mapped[str | None] = mapped_column(String, nullable=True)
    content: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_draft: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=sa.text("true")
    )
    extra: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)

    group: Mapped[CommunicationTemplateGroup] = relationship(
        back_populates="templates", lazy="raise"
    )


class Notification(BaseModelMixin, Base):
    """In-app notification for one user. Table: notification."""

    __tablename__ = "notification"

    user_id: Mapped[str] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    communication_template_id: Mapped[str | None] = mapped_column(
        String,
        ForeignKey("communication_template.id", ondelete="SET NULL"),
        nullable=True,
    )
    trigger: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    subject: Mapped[str] = mapped_column(String, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    custom_button_text: Mapped[str | None] = mapped_column(String, nullable=True)
    custom_button_href: Mapped[str | None] = mapped_column(String, nullable=True)
    seen_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
