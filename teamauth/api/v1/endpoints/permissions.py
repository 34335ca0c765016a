"""Permissions API: check whether the caller holds a permission."""

from typing import Annotated, Literal

from fastapi import APIRouter, Depends

from teamauth.api.v1.dependencies import get_authorization_gate
from teamauth.application.services.authorization_gate import AuthorizationGate
from teamauth.domain.enums import PermissionType
from teamauth.schemas.permission import PermissionCheckResponse

router = APIRouter()


@router.get("/{permission_key}/check", response_model=PermissionCheckResponse)
async def check_permission(
    permission_key: str,
    gate: Annotated[AuthorizationGate, Depends(get_authorization_gate)],
    type: Literal["read", "write", "all"] = "read",
    team_id: str | None = None,
) -> PermissionCheckResponse:
    """Evaluate the gate for the caller. Never raises on denial."""
    permission_type = PermissionType.from_code(type)
    allowed = await gate.check_permission(permission_key, permission_type, team_id)
    return PermissionCheckResponse(
        permission_key=permission_key,
        permission_type=permission_type.code,
        team_id=team_id,
        allowed=allowed,
    )
