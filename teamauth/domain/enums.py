"""Domain enumerations: permission types and communication channels."""

from enum import Enum, IntEnum


class PermissionType(IntEnum):
    """Access level granted or required on a permission key.

    Values are bit flags: WRITE includes the READ bit and ALL includes both,
    so a grant satisfies a requirement when every required bit is set.
    DENY is not a flag; it is an explicit refusal that grants no access level.
    Only a DENY requirement matches a DENY grant, which lets callers test for
    an explicit refusal.
    """

    READ = 1
    WRITE = 3
    ALL = 7
    DENY = 100

    @property
    def code(self) -> str:
        """Lower-case code (read, write, all, deny) used in the API."""
        return self.name.lower()

    @classmethod
    def from_code(cls, code: str) -> "PermissionType":
        """Parse a code such as 'read' or 'WRITE'. Raises ValueError if unknown."""
        try:
            return cls[code.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown permission type: {code!r}") from None

    @staticmethod
    def has_permission(given: "PermissionType", expected: "PermissionType") -> bool:
        """Return True if a grant of type given satisfies a requirement of type expected."""
        if given is PermissionType.DENY or expected is PermissionType.DENY:
            return given is expected
        return (given.value & expected.value) == expected.value

    def grants(self, expected: "PermissionType") -> bool:
        """Shorthand for PermissionType.has_permission(self, expected)."""
        return PermissionType.has_permission(self, expected)


class CommunicationType(IntEnum):
    """Delivery channel of a communication template."""

    EMAIL = 1
    SMS = 2
    DATABASE = 3

    def required_attributes(self) -> tuple[str, ...]:
        """Template attributes that must be filled for the template not to be a draft."""
        if self is CommunicationType.DATABASE:
            return ("subject", "content", "custom_button_text", "custom_button_href")
        return ("subject", "content")


class TeamRoleStatus(str, Enum):
    """Lifecycle status of a user's role on a team."""

    ACTIVE = "active"
    SUSPENDED = "suspended"
    TERMINATED = "terminated"
