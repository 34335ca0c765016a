"""ORM models. Import this package so every table is registered on Base.metadata."""

from teamauth.infrastructure.persistence.models.communication import (
    CommunicationTemplate,
    CommunicationTemplateGroup,
    Notification,
)
from teamauth.infrastructure.persistence.models.permission import (
    Permission,
    PermissionRole,
    PermissionTeamRole,
)
from teamauth.infrastructure.persistence.models.team import Role, Team, TeamRole, User

__all__ = [
    "CommunicationTemplate",
    "CommunicationTemplateGroup",
    "Notification",
    "Permission",
    "PermissionRole",
    "PermissionTeamRole",
    "Role",
    "Team",
    "TeamRole",
    "User",
]
