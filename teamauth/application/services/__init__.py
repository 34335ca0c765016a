"""Application services: authorization gate and communication dispatch."""

from teamauth.application.services.authorization_gate import AuthorizationGate
from teamauth.application.services.communication_dispatcher import (
    CommunicationDispatcher,
)
from teamauth.application.services.component_authorization import (
    ComponentAuthorization,
    default_permission_key,
)

__all__ = [
    "AuthorizationGate",
    "CommunicationDispatcher",
    "ComponentAuthorization",
    "default_permission_key",
]
