"""Permission, PermissionRole and PermissionTeamRole ORM models."""

from sqlalchemy import ForeignKey, Index, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from teamauth.domain.enums import PermissionType
from teamauth.infrastructure.persistence.database import Base
from teamauth.infrastructure.persistence.models.mixins import (
    BaseModelMixin,
    SoftDeleteMixin,
)


class Permission(BaseModelMixin, SoftDeleteMixin, Base):
    """Registered (gated) permission. Table: permission. Unique permission_key."""

    __tablename__ = "permission"

    permission_key: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    permission_name: Mapped[str | None] = mapped_column(String, nullable=True)
    permission_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    object_type: Mapped[int | None] = mapped_column(Integer, nullable=True)


class PermissionRole(BaseModelMixin, Base):
    """Role-level grant. Table: permission_role."""

    __tablename__ = "permission_role"

    permission_id: Mapped[str] = mapped_column(
        String, ForeignKey("permission.id", ondelete="CASCADE"), nullable=False
    )
    role_id: Mapped[str] = mapped_column(
        String, ForeignKey("role.id", ondelete="CASCADE"), nullable=False
    )
    permission_type: Mapped[int] = mapped_column(
        Integer, nullable=False, default=int(PermissionType.READ)
    )

    __table_args__ = (
        UniqueConstraint("permission_id", "role_id", name="uq_permission_role"),
        Index("ix_permission_role_role", "role_id"),
    )


class PermissionTeamRole(BaseModelMixin, Base):
    """Direct grant on one team role. Table: permission_team_role."""

    __tablename__ = "permission_team_role"

    permission_id: Mapped[str] = mapped_column(
        String, ForeignKey("permission.id", ondelete="CASCADE"), nullable=False
    )
    team_role_id: Mapped[str] = mapped_column(
        String, ForeignKey("team_role.id", ondelete="CASCADE"), nullable=False
    )
    permission_type: Mapped[int] = mapped_column(
        Integer, nullable=False, default=int(PermissionType.READ)
    )

    __table_args__ = (
        UniqueConstraint(
            "permission_id", "team_role_id", name="uq_permission_team_role"
        ),
        Index("ix_permission_team_role_team_role", "team_role_id"),
    )
