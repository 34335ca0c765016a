"""Team, User, Role and TeamRole ORM models."""

from datetime import datetime

import sqlalchemy as sa
from sqlalchemy import Boolean, DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from teamauth.domain.enums import TeamRoleStatus
from teamauth.infrastructure.persistence.database import Base
from teamauth.infrastructure.persistence.models.mixins import (
    BaseModelMixin,
    SoftDeleteMixin,
)


class Team(BaseModelMixin, SoftDeleteMixin, Base):
    """Team. Table: team. Optional parent team."""

    __tablename__ = "team"

    team_name: Mapped[str] = mapped_column(String, nullable=False)
    parent_team_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("team.id", ondelete="SET NULL"), nullable=True, index=True
    )


class User(BaseModelMixin, Base):
    """Application user. Table: app_user."""

    __tablename__ = "app_user"

    name: Mapped[str] = mapped_column(String, nullable=False)
    email: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=sa.text("true")
    )


class Role(BaseModelMixin, Base):
    """Role granting permissions to its team roles. Table: role."""

    __tablename__ = "role"

    name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    # Team roles of this role also reach descendant (below) or sibling teams.
    hierarchy_access_below: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=sa.text("false")
    )
    hierarchy_access_neighbors: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=sa.text("false")
    )


class TeamRole(BaseModelMixin, Base):
    """A user's role on a team. Table: team_role.

    Only team roles with neither terminated_at nor suspended_at grant permissions.
    """

    __tablename__ = "team_role"

    user_id: Mapped[str] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False
    )
    team_id: Mapped[str] = mapped_column(
        String, ForeignKey("team.id", ondelete="CASCADE"), nullable=False
    )
    role_id: Mapped[str] = mapped_column(
        String, ForeignKey("role.id", ondelete="CASCADE"), nullable=False
    )
    terminated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    suspended_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    team: Mapped[Team] = relationship(lazy="raise")
    role: Mapped[Role] = relationship(lazy="raise")

    __table_args__ = (
        Index("ix_team_role_user_team", "user_id", "team_id"),
        Index("ix_team_role_role", "role_id"),
    )

    @property
    def status(self) -> TeamRoleStatus:
        if self.terminated_at is not None:
            return TeamRoleStatus.TERMINATED
        if self.suspended_at is not None:
            return TeamRoleStatus.SUSPENDED
        return TeamRoleStatus.ACTIVE
