"""Cache key builders. Single place for key format (DRY).

Key components (user_id, team_id) must not contain CACHE_KEY_SEP to avoid
ambiguous or colliding keys. Permission keys may contain anything: they
always sit in the last segment.
"""

from teamauth.core.constants import (
    ALL_TEAMS_SCOPE,
    CACHE_KEY_SEP,
    CACHE_PREFIX_PERMISSION,
    CACHE_PREFIX_PERMISSION_KEY,
)


def _validate_key_component(value: str, name: str) -> None:
    """Raise ValueError if value contains the cache key separator."""
    if CACHE_KEY_SEP in value:
        raise ValueError(
            f"Cache key component {name!r} must not contain separator {CACHE_KEY_SEP!r}"
        )


def user_grants_key(user_id: str, team_id: str | None = None) -> str:
    """Cache key for a user's permission grants (all teams or one team)."""
    _validate_key_component(user_id, "user_id")
    if team_id is not None:
        _validate_key_component(team_id, "team_id")
    scope = team_id if team_id is not None else ALL_TEAMS_SCOPE
    return f"{CACHE_PREFIX_PERMISSION}{CACHE_KEY_SEP}{user_id}{CACHE_KEY_SEP}{scope}"


def user_grants_pattern(user_id: str) -> str:
    """SCAN pattern matching every grants key of a user."""
    _validate_key_component(user_id, "user_id")
    return f"{CACHE_PREFIX_PERMISSION}{CACHE_KEY_SEP}{user_id}{CACHE_KEY_SEP}*"


def permission_lookup_key(permission_key: str) -> str:
    """Cache key for a registered permission looked up by key."""
    return f"{CACHE_PREFIX_PERMISSION_KEY}{CACHE_KEY_SEP}{permission_key}"
