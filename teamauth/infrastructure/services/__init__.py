"""Infrastructure services: permission resolution and communication delivery."""

from teamauth.infrastructure.services.authenticated_actor import AuthenticatedActor
from teamauth.infrastructure.services.communication_handlers import (
    CommunicationTemplateGroupNotifier,
    DatabaseCommunicationHandler,
    EmailCommunicationHandler,
    SmsCommunicationHandler,
)
from teamauth.infrastructure.services.communication_renderer import (
    CommunicationTemplateRenderer,
)
from teamauth.infrastructure.services.permission_resolver import (
    PermissionResolver,
    evaluate_grants,
)
from teamauth.infrastructure.services.senders import LogOnlyEmailSender, LogOnlySmsSender

__all__ = [
    "AuthenticatedActor",
    "CommunicationTemplateGroupNotifier",
    "CommunicationTemplateRenderer",
    "DatabaseCommunicationHandler",
    "EmailCommunicationHandler",
    "LogOnlyEmailSender",
    "LogOnlySmsSender",
    "PermissionResolver",
    "SmsCommunicationHandler",
    "evaluate_grants",
]
