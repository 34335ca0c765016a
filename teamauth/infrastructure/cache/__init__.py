"""Cache: Redis service and cache key utilities.

Used by the permission repository and resolver. CacheService uses
teamauth.core.config; key format is in keys.py (DRY).
"""

from teamauth.infrastructure.cache.keys import (
    permission_lookup_key,
    user_grants_key,
    user_grants_pattern,
)
from teamauth.infrastructure.cache.redis_cache import CacheService

__all__ = [
    "CacheService",
    "permission_lookup_key",
    "user_grants_key",
    "user_grants_pattern",
]
