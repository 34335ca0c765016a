"""Application lifespan: startup and shutdown.

Wiring of infrastructure only (cache, communication queue, DB engine dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from teamauth.core.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: Redis cache (if enabled), communication queue workers.
    Shutdown order: queue stop, cache disconnect, SQL engine dispose.
    """
    settings = get_settings()

    # ---- Startup ----
    if settings.redis_enabled:
        from teamauth.infrastructure.cache.redis_cache import CacheService

        cache = CacheService()
        await cache.connect()
        app.state.cache = cache
    else:
        app.state.cache = None

    from teamauth.infrastructure.messaging.communication_queue import (
        CommunicationQueue,
    )

    queue = CommunicationQueue(
        workers=settings.communication_queue_workers,
        maxsize=settings.communication_queue_maxsize,
    )
    queue.start()
    app.state.communication_queue = queue

    yield

    # ---- Shutdown ----
    await app.state.communication_queue.stop()
    app.state.communication_queue = None

    if getattr(app.state, "cache", None) is not None:
        await app.state.cache.disconnect()
        logger.info("Cache disconnected")

    from teamauth.infrastructure.persistence.database import dispose_engine

    await dispose_engine()
