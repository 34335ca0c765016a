"""Communication repositories and queue (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession

from teamauth.infrastructure.messaging.communication_queue import CommunicationQueue
from teamauth.infrastructure.persistence.database import get_db, get_db_transactional
from teamauth.infrastructure.persistence.repositories import (
    CommunicationTemplateGroupRepository,
)


async def get_communication_group_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CommunicationTemplateGroupRepository:
    """Template group repository for read operations."""
    return CommunicationTemplateGroupRepository(db)


async def get_communication_group_repo_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> CommunicationTemplateGroupRepository:
    """Template group repository for create (transactional)."""
    return CommunicationTemplateGroupRepository(db)


def get_communication_queue(request: Request) -> CommunicationQueue:
    """Queue started in the app lifespan. 503 when it is not running."""
    queue = getattr(request.app.state, "communication_queue", None)
    if queue is None or not queue.running:
        raise HTTPException(status_code=503, detail="Communication queue is not running")
    return queue
