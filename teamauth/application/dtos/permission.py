"""DTOs for permission use cases (no dependency on ORM)."""

from dataclasses import dataclass

from teamauth.domain.enums import PermissionType


@dataclass(frozen=True)
class PermissionResult:
    """Permission read-model (result of find_by_key)."""

    id: str
    permission_key: str
    permission_name: str | None = None
    permission_description: str | None = None


@dataclass(frozen=True)
class PermissionGrant:
    """One (permission_key, permission_type) pair held by a user through a team role."""

    permission_key: str
    permission_type: PermissionType
    team_id: str | None = None

    def to_cache(self) -> list[str | int | None]:
        return [self.permission_key, int(self.permission_type), self.team_id]

    @classmethod
    def from_cache(cls, value: list[str | int | None]) -> "PermissionGrant":
        key, ptype, team_id = value
        return cls(str(key), PermissionType(int(ptype)), team_id)  # type: ignore[arg-type]
