"""DTOs for application use cases (no dependency on ORM)."""

from teamauth.application.dtos.communication import (
    CommunicationTemplateGroupResult,
    CommunicationTemplateResult,
)
from teamauth.application.dtos.permission import PermissionGrant, PermissionResult
from teamauth.application.dtos.user import UserResult

__all__ = [
    "CommunicationTemplateGroupResult",
    "CommunicationTemplateResult",
    "PermissionGrant",
    "PermissionResult",
    "UserResult",
]
