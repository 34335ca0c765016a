"""Persistence repositories. Re-exports for dependency injection."""

from teamauth.infrastructure.persistence.repositories.base import BaseRepository
from teamauth.infrastructure.persistence.repositories.communication_repo import (
    CommunicationTemplateGroupRepository,
    NotificationRepository,
)
from teamauth.infrastructure.persistence.repositories.permission_repo import (
    PermissionRepository,
)
from teamauth.infrastructure.persistence.repositories.user_repo import UserRepository

__all__ = [
    "BaseRepository",
    "CommunicationTemplateGroupRepository",
    "NotificationRepository",
    "PermissionRepository",
    "UserRepository",
]
