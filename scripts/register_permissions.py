"""Register or remove gated permission keys.

Usage:
    uv run python -m scripts.register_permissions add <permission_key> [name]
    uv run python -m scripts.register_permissions remove <permission_key>
When Redis is enabled the cached lookup of the key is dropped, so gates see
the change without waiting for the lookup TTL.
"""

import asyncio
import sys

from teamauth.core.config import get_settings
from teamauth.infrastructure.persistence.database import dispose_engine, session_scope
from teamauth.infrastructure.persistence.repositories import PermissionRepository
from teamauth.shared.telemetry.logging import setup_logging

ACTIONS = ("add", "remove")


async def apply(
    repo: PermissionRepository,
    action: str,
    permission_key: str,
    permission_name: str | None = None,
) -> str:
    """Run one registry action and return a line for the operator."""
    if action == "add":
        result = await repo.create_permission(permission_key, permission_name)
        return f"Registered {result.permission_key} ({result.id})"
    if action == "remove":
        if await repo.remove_permission(permission_key):
            return f"Removed {permission_key}"
        return f"{permission_key} is not registered"
    raise ValueError(f"Unknown action: {action!r}")


async def main() -> None:
    setup_logging()
    if len(sys.argv) < 3 or sys.argv[1] not in ACTIONS:
        print(__doc__, file=sys.stderr)
        sys.exit(1)
    action, permission_key = sys.argv[1], sys.argv[2]
    permission_name = sys.argv[3] if len(sys.argv) > 3 else None

    cache = None
    if get_settings().redis_enabled:
        from teamauth.infrastructure.cache.redis_cache import CacheService

        cache = CacheService()
        await cache.connect()
    try:
        async with session_scope() as session:
            line = await apply(
                PermissionRepository(session, cache),
                action,
                permission_key,
                permission_name,
            )
    finally:
        if cache is not None:
            await cache.disconnect()
        await dispose_engine()
    print(line)


if __name__ == "__main__":
    asyncio.run(main())
