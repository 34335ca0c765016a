"""Fixtures for tests that need a real Postgres (DATABASE_URL).

Tables are created with create_all; each test runs inside an outer
transaction that is rolled back. Tests skip when the database is not
reachable; run without DB via: pytest -m 'not requires_db'.
"""

from collections.abc import AsyncIterator

import pytest
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import NullPool

import teamauth.infrastructure.persistence.models  # noqa: F401  (registers tables)
from teamauth.core.config import get_settings
from teamauth.infrastructure.persistence.database import Base


@pytest.fixture
async def db_session() -> AsyncIterator[AsyncSession]:
    """Session bound to a rolled-back connection. Skips when Postgres is unreachable."""
    # NullPool: connections must not outlive the test's event loop.
    engine = create_async_engine(get_settings().database_url, poolclass=NullPool)
    try:
        conn = await engine.connect()
    except (OSError, SQLAlchemyError) as exc:
        await engine.dispose()
        pytest.skip(f"Postgres not reachable at DATABASE_URL: {exc}")
    try:
        await conn.run_sync(Base.metadata.create_all)
        await conn.commit()
        outer = await conn.begin()
        session = AsyncSession(
            bind=conn,
            expire_on_commit=False,
            join_transaction_mode="create_savepoint",
        )
        try:
            yield session
        finally:
            await session.close()
            await outer.rollback()
    finally:
        await conn.close()
        await engine.dispose()
