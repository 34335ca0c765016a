"""Domain layer: enums, exceptions and communicable event contracts."""

from teamauth.domain.enums import CommunicationType, PermissionType, TeamRoleStatus
from teamauth.domain.events import (
    BaseCommunicableEvent,
    CommunicableEvent,
    DatabaseCommunicable,
    EmailCommunicable,
    Recipient,
    SmsCommunicable,
)

__all__ = [
    "BaseCommunicableEvent",
    "CommunicableEvent",
    "CommunicationType",
    "DatabaseCommunicable",
    "EmailCommunicable",
    "PermissionType",
    "Recipient",
    "SmsCommunicable",
    "TeamRoleStatus",
]
