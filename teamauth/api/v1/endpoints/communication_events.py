"""Communication events API: publish a trigger to the communication queue (write gate)."""

import asyncio
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from teamauth.api.v1.dependencies import (
    get_communication_queue,
    get_component_authorization,
)
from teamauth.application.services.component_authorization import (
    ComponentAuthorization,
)
from teamauth.core.constants import UNAUTHORIZED_ACTION_MESSAGE
from teamauth.domain.enums import PermissionType
from teamauth.domain.events import Recipient, event_type_for_trigger
from teamauth.domain.exceptions import AuthorizationException
from teamauth.infrastructure.messaging.communication_queue import CommunicationQueue
from teamauth.schemas.communication import (
    CommunicationEventAccepted,
    CommunicationEventCreate,
)
from teamauth.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()

EVENT_FORM_COMPONENT = "CommunicationEventForm"


@router.post("", response_model=CommunicationEventAccepted, status_code=202)
async def publish_communication_event(
    body: CommunicationEventCreate,
    authorization: Annotated[
        ComponentAuthorization,
        Depends(get_component_authorization(EVENT_FORM_COMPONENT)),
    ],
    queue: Annotated[CommunicationQueue, Depends(get_communication_queue)],
):
    """Queue the event for dispatch and return immediately; 503 when the queue is full."""
    if not await authorization.authorize():
        raise AuthorizationException(
            permission_key=authorization.permission_key,
            permission_type=PermissionType.WRITE.code,
            message=UNAUTHORIZED_ACTION_MESSAGE,
            team_id=authorization.team_id,
        )
    event = event_type_for_trigger(body.trigger)(
        params=body.params,
        communicables=[
            Recipient(user_id=r.user_id, email=r.email, phone=r.phone)
            for r in body.recipients
        ],
    )
    try:
        queue.publish(event)
    except asyncio.QueueFull:
        logger.warning("Communication queue full; dropped %s", body.trigger)
        raise HTTPException(
            status_code=503, detail="Communication queue is full"
        ) from None
    return CommunicationEventAccepted(
        trigger=body.trigger, recipients=len(body.recipients)
    )
