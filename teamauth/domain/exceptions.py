"""Domain exceptions for the teamauth application.

Each exception carries the HTTP status it maps to; the presentation layer
turns them into JSON error responses in core.exception_handlers.
"""

from typing import Any


class TeamAuthException(Exception):
    """Base exception for all teamauth application errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. permission_key).
    """

    status_code: int = 400

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for a JSON error response."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class AuthorizationException(TeamAuthException):
    """Raised when the actor lacks the permission required for the operation."""

    status_code = 403

    def __init__(
        self,
        permission_key: str | None = None,
        permission_type: str | None = None,
        message: str = "Permission denied",
        team_id: str | None = None,
    ) -> None:
        """Initialize with optional permission key, type, message and team scope.

        Args:
            permission_key: Permission key that was checked (e.g. 'TeamForm').
            permission_type: Required type code (e.g. 'read', 'write').
            message: Human-readable message.
            team_id: Team scope of the check, when scoped.
        """
        details: dict[str, Any] = {}
        if permission_key:
            details["permission_key"] = permission_key
        if permission_type:
            details["permission_type"] = permission_type
        if team_id:
            details["team_id"] = team_id
        super().__init__(message, "PERMISSION_DENIED", details)


class SqlNotConfiguredException(TeamAuthException):
    """Raised when an operation requires the SQL database but it is not configured."""

    status_code = 503

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
