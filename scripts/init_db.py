"""Create all teamauth tables on the configured database (no migrations).

Usage:
    uv run python -m scripts.init_db
"""

import asyncio

import teamauth.infrastructure.persistence.database as database
import teamauth.infrastructure.persistence.models  # noqa: F401  (registers tables)
from teamauth.shared.telemetry.logging import setup_logging


async def main() -> None:
    """Run Base.metadata.create_all; existing tables are left untouched."""
    setup_logging()
    database._ensure_engine()
    try:
        async with database.engine.begin() as conn:
            await conn.run_sync(database.Base.metadata.create_all)
        print(f"Created tables: {', '.join(sorted(database.Base.metadata.tables))}")
    finally:
        await database.dispose_engine()


if __name__ == "__main__":
    asyncio.run(main())
