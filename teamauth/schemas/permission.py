"""Permission check API schemas."""

from pydantic import BaseModel, Field


class PermissionCheckResponse(BaseModel):
    """Result of GET /permissions/{permission_key}/check."""

    permission_key: str
    permission_type: str = Field(..., description="read, write or all")
    team_id: str | None = None
    allowed: bool
