"""Messaging: in-process communicable event queue."""

from teamauth.infrastructure.messaging.communication_queue import (
    CommunicationQueue,
    build_communication_dispatcher,
)

__all__ = ["CommunicationQueue", "build_communication_dispatcher"]
