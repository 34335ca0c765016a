"""DTOs for user use cases."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserResult:
    """User read-model (current authenticated user)."""

    id: str
    name: str
    email: str
    is_active: bool = True
