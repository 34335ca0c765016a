"""In-process queue for communicable events.

publish() is fire-and-forget: events are dispatched by worker tasks started
in the app lifespan. Each event gets its own transactional session. Failed
events are logged and dropped (no retry).
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from contextlib import AbstractAsyncContextManager

from sqlalchemy.ext.asyncio import AsyncSession

from teamauth.application.services.communication_dispatcher import (
    CommunicationDispatcher,
)
from teamauth.domain.enums import CommunicationType
from teamauth.domain.events import CommunicableEvent
from teamauth.infrastructure.persistence.database import session_scope
from teamauth.infrastructure.persistence.repositories.communication_repo import (
    CommunicationTemplateGroupRepository,
    NotificationRepository,
)
from teamauth.infrastructure.services.communication_handlers import (
    CommunicationTemplateGroupNotifier,
    DatabaseCommunicationHandler,
    EmailCommunicationHandler,
    SmsCommunicationHandler,
)
from teamauth.infrastructure.services.communication_renderer import (
    CommunicationTemplateRenderer,
)
from teamauth.infrastructure.services.senders import LogOnlyEmailSender, LogOnlySmsSender
from teamauth.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

SessionScope = Callable[[], AbstractAsyncContextManager[AsyncSession]]
DispatcherFactory = Callable[[AsyncSession], CommunicationDispatcher]


def build_communication_dispatcher(db: AsyncSession) -> CommunicationDispatcher:
    """Wire a dispatcher with DB-backed repositories and log-only senders."""
    renderer = CommunicationTemplateRenderer()
    notifier = CommunicationTemplateGroupNotifier(
        {
            CommunicationType.EMAIL: EmailCommunicationHandler(
                LogOnlyEmailSender(), renderer
            ),
            CommunicationType.SMS: SmsCommunicationHandler(LogOnlySmsSender(), renderer),
            CommunicationType.DATABASE: DatabaseCommunicationHandler(
                NotificationRepository(db), renderer
            ),
        }
    )
    return CommunicationDispatcher(CommunicationTemplateGroupRepository(db), notifier)


class CommunicationQueue:
    """asyncio.Queue of events drained by a fixed number of worker tasks."""

    def __init__(
        self,
        workers: int = 1,
        maxsize: int = 0,
        *,
        session_factory: SessionScope | None = None,
        dispatcher_factory: DispatcherFactory | None = None,
    ) -> None:
        if workers < 1:
            raise ValueError("workers must be >= 1")
        self.workers = workers
        self._queue: asyncio.Queue[CommunicableEvent] = asyncio.Queue(maxsize=maxsize)
        self._session_factory = session_factory or session_scope
        self._dispatcher_factory = dispatcher_factory or build_communication_dispatcher
        self._tasks: list[asyncio.Task[None]] = []

    @property
    def running(self) -> bool:
        return bool(self._tasks)

    def qsize(self) -> int:
        return self._queue.qsize()

    def publish(self, event: CommunicableEvent) -> None:
        """Enqueue event. Raises asyncio.QueueFull when the queue is bounded and full."""
        self._queue.put_nowait(event)
        logger.debug("Queued communicable event %s", event.get_name())

    def start(self) -> None:
        if self._tasks:
            return
        self._tasks = [
            asyncio.create_task(self._worker(i), name=f"communication-worker-{i}")
            for i in range(self.workers)
        ]
        logger.info("Communication queue started (%d worker(s))", self.workers)

    async def stop(self) -> None:
        """Cancel workers. Events still queued are dropped with a warning."""
        for task in self._tasks:
            task.cancel()
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)
        self._tasks = []
        pending = self._queue.qsize()
        if pending:
            logger.warning("Communication queue stopped with %d pending event(s)", pending)
        logger.info("Communication queue stopped")

    async def join(self) -> None:
        """Wait until every published event has been processed."""
        await self._queue.join()

    async def _worker(self, index: int) -> None:
        while True:
            event = await self._queue.get()
            try:
                await self._process(event)
            except asyncio.CancelledError:
                raise
            except Exception:
                logger.exception(
                    "Communication worker %d failed to dispatch %s",
                    index,
                    event.get_name(),
                )
            finally:
                self._queue.task_done()

    async def _process(self, event: CommunicableEvent) -> None:
        async with self._session_factory() as db:
            await self._dispatcher_factory(db).dispatch(event)
