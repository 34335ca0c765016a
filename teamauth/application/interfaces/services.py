"""Service interfaces (ports) for the application layer.

Protocols define contracts for application services (DIP).
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Protocol

from teamauth.domain.enums import CommunicationType, PermissionType

if TYPE_CHECKING:
    from teamauth.application.dtos.communication import (
        CommunicationTemplateGroupResult,
        CommunicationTemplateResult,
    )
    from teamauth.application.dtos.permission import PermissionGrant, PermissionResult


# Permission registry: lookup of registered (gated) permission keys
class IPermissionRegistry(Protocol):
    """Protocol for finding a registered permission by key."""

    async def find_by_key(self, permission_key: str) -> PermissionResult | None:
        """Return the permission registered under key, or None when the key is not gated."""


# Actor: the authenticated user as seen by the authorization gate
class IPermissionActor(Protocol):
    """Protocol for the current authenticated actor."""

    async def has_permission(
        self,
        permission_key: str,
        permission_type: PermissionType,
        team_id: str | None = None,
    ) -> bool:
        """Return True if the actor holds a grant satisfying permission_type on the key."""


# Permission resolver interface
class IPermissionResolver(Protocol):
    """Protocol for resolving a user's permission grants (used by AuthenticatedActor)."""

    async def user_has_permission(
        self,
        user_id: str,
        permission_key: str,
        permission_type: PermissionType,
        team_id: str | None = None,
        *,
        email: str | None = None,
    ) -> bool:
        """Return True if the user (optionally within one team) holds the permission."""

    async def get_user_grants(
        self, user_id: str, team_id: str | None = None
    ) -> list[PermissionGrant]:
        """Return every grant the user holds through active team roles."""


# Cache service interface
class ICacheService(Protocol):
    """Minimal cache protocol for permission caching (DIP)."""

    def is_available(self) -> bool:
        """Return True if cache is connected."""

    async def get(self, key: str) -> Any:
        """Return cached value or None."""

    async def set(self, key: str, value: Any, ttl: int = 300) -> bool:
        """Store value with TTL. Returns True on success."""

    async def delete(self, key: str) -> bool:
        """Delete key. Returns True on success."""

    async def delete_pattern(self, pattern: str) -> int:
        """Delete keys matching pattern. Returns count deleted."""


# Communication template groups (persistence)
class ICommunicationTemplateGroupRepository(Protocol):
    """Protocol for querying communication template groups by trigger."""

    async def get_valid_for_trigger(
        self, trigger: str
    ) -> list[CommunicationTemplateGroupResult]:
        """Return groups for trigger that hold at least one non-draft template."""

    async def delete_old_voids(self, older_than: datetime) -> int:
        """Delete groups without templates created before older_than; return count."""


# Group notifier: fan a group's templates out to channel handlers
class ICommunicationGroupNotifier(Protocol):
    """Protocol for notifying recipients through one template group."""

    async def notify(
        self,
        group: CommunicationTemplateGroupResult,
        communicables: list[Any],
        communication_type: CommunicationType | None = None,
        params: dict[str, Any] | None = None,
    ) -> None:
        """Send every (optionally type-filtered) template of the group to the recipients."""


# Channel handler: one per CommunicationType
class ICommunicationHandler(Protocol):
    """Protocol for delivering one template to recipients over one channel."""

    async def notify(
        self,
        template: CommunicationTemplateResult,
        communicables: list[Any],
        params: dict[str, Any],
    ) -> None:
        """Deliver the template to the recipients that support this channel."""


# Outbound senders
class IEmailSender(Protocol):
    """Protocol for sending one email."""

    async def send(self, to_email: str, subject: str, body: str) -> None:
        """Send email. No-op or log if not configured."""


class ISmsSender(Protocol):
    """Protocol for sending one SMS."""

    async def send(self, phone: str, body: str) -> None:
        """Send SMS. No-op or log if not configured."""


# In-app notification store
class INotificationStore(Protocol):
    """Protocol for persisting in-app (database) notifications."""

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
    ) -> Any:
        """Store one notification for the user."""

