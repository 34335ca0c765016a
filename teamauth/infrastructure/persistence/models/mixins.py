"""Column mixins shared by every teamauth table.

BaseModelMixin gives a CUID primary key plus created_at/updated_at;
SoftDeleteMixin adds a nullable deleted_at for rows that are hidden rather
than removed (teams, permissions).
"""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

from teamauth.shared.utils.generators import generate_cuid


def _timestamp_column(*, on_update: bool = False) -> Mapped[datetime]:
    return mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now() if on_update else None,
        nullable=False,
    )


class BaseModelMixin:
    """CUID id, created_at and updated_at (server-side timestamps)."""

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(String, primary_key=True, default=generate_cuid)

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return _timestamp_column()

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return _timestamp_column(on_update=True)


class SoftDeleteMixin:
    """deleted_at; NULL means live. Lookups filter on deleted_at IS NULL."""

    @declared_attr
    def deleted_at(cls) -> Mapped[datetime | None]:
        return mapped_column(DateTime(timezone=True), nullable=True, index=True)
