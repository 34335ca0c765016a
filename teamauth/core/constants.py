"""Core constants: cache key prefixes and shared literal values."""

# Cache key prefixes
CACHE_PREFIX_PERMISSION = "permission"
CACHE_PREFIX_PERMISSION_KEY = "permission_key"

# Delimiter for composite keys
CACHE_KEY_SEP = ":"

# Cached stand-in for "no such permission" (cache values must be non-None to hit)
CACHE_MISS_MARKER = "__missing__"

# Team scope segment used when a permission check is not scoped to one team
ALL_TEAMS_SCOPE = "all"

# Abort message for boot-time (read gate) denials
UNAUTHORIZED_ACTION_MESSAGE = "Unauthorized action."
