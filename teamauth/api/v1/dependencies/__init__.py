"""Presentation-layer dependency injection (composition root).

Routes depend only on these dependencies, not on infrastructure directly.
"""

from teamauth.api.v1.dependencies.auth import get_current_user_optional, get_user_repo
from teamauth.api.v1.dependencies.authorization import (
    get_authorization_gate,
    get_cache,
    get_component_authorization,
    get_current_actor,
    get_permission_repo,
    get_permission_resolver,
    require_component_read,
)
from teamauth.api.v1.dependencies.communication import (
    get_communication_group_repo,
    get_communication_group_repo_for_write,
    get_communication_queue,
)
from teamauth.api.v1.dependencies.db import get_db, get_db_transactional

__all__ = [
    "get_authorization_gate",
    "get_cache",
    "get_communication_group_repo",
    "get_communication_group_repo_for_write",
    "get_communication_queue",
    "get_component_authorization",
    "get_current_actor",
    "get_current_user_optional",
    "get_db",
    "get_db_transactional",
    "get_permission_repo",
    "get_permission_resolver",
    "get_user_repo",
    "require_component_read",
]
