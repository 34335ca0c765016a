"""Delete void communication template groups (no templates) past the max age.

Usage:
    uv run python -m scripts.delete_old_communication_groups [max_age_hours]
If max_age_hours is omitted, uses COMMUNICATION_VOID_GROUP_MAX_AGE_HOURS.
"""

import asyncio
import sys
from datetime import timedelta

from teamauth.core.config import get_settings
from teamauth.infrastructure.persistence.database import dispose_engine, session_scope
from teamauth.infrastructure.persistence.repositories import (
    CommunicationTemplateGroupRepository,
)
from teamauth.shared.telemetry.logging import setup_logging
from teamauth.shared.utils.datetime import utc_now


async def main() -> None:
    """Delete void groups created before now - max age."""
    setup_logging()
    settings = get_settings()
    try:
        max_age_hours = (
            int(sys.argv[1])
            if len(sys.argv) > 1
            else settings.communication_void_group_max_age_hours
        )
    except ValueError:
        print(f"Invalid max_age_hours: {sys.argv[1]}", file=sys.stderr)
        sys.exit(1)
    if max_age_hours < 0:
        print("max_age_hours must be >= 0", file=sys.stderr)
        sys.exit(1)

    cutoff = utc_now() - timedelta(hours=max_age_hours)
    try:
        async with session_scope() as session:
            deleted = await CommunicationTemplateGroupRepository(
                session
            ).delete_old_voids(cutoff)
    finally:
        await dispose_engine()
    print(f"Done. Deleted {deleted} void communication group(s) created before {cutoff.isoformat()}")


if __name__ == "__main__":
    asyncio.run(main())
