"""Application ports (Protocols) implemented by infrastructure."""

from teamauth.application.interfaces.services import (
    ICacheService,
    ICommunicationGroupNotifier,
    ICommunicationHandler,
    ICommunicationTemplateGroupRepository,
    IEmailSender,
    INotificationStore,
    IPermissionActor,
    IPermissionRegistry,
    IPermissionResolver,
    ISmsSender,
)

__all__ = [
    "ICacheService",
    "ICommunicationGroupNotifier",
    "ICommunicationHandler",
    "ICommunicationTemplateGroupRepository",
    "IEmailSender",
    "INotificationStore",
    "IPermissionActor",
    "IPermissionRegistry",
    "IPermissionResolver",
    "ISmsSender",
]
