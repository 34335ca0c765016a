"""Communication template groups API: list (read gate) and create (write gate)."""

from typing import Annotated

from fastapi import APIRouter, Depends

from teamauth.api.v1.dependencies import (
    get_communication_group_repo,
    get_communication_group_repo_for_write,
    get_component_authorization,
    require_component_read,
)
from teamauth.application.services.component_authorization import (
    ComponentAuthorization,
)
from teamauth.core.constants import UNAUTHORIZED_ACTION_MESSAGE
from teamauth.domain.enums import PermissionType
from teamauth.domain.exceptions import AuthorizationException
from teamauth.infrastructure.persistence.repositories import (
    CommunicationTemplateGroupRepository,
)
from teamauth.schemas.communication import (
    CommunicationTemplateGroupCreate,
    CommunicationTemplateGroupResponse,
)

router = APIRouter()

LIST_COMPONENT = "CommunicationTemplateGroupsList"
FORM_COMPONENT = "CommunicationTemplateForm"


@router.get("", response_model=list[CommunicationTemplateGroupResponse])
async def list_communication_template_groups(
    _: Annotated[ComponentAuthorization, Depends(require_component_read(LIST_COMPONENT))],
    repo: Annotated[
        CommunicationTemplateGroupRepository, Depends(get_communication_group_repo)
    ],
    skip: int = 0,
    limit: int = 100,
):
    """List template groups with their templates."""
    groups = await repo.list_groups(skip=skip, limit=limit)
    return [CommunicationTemplateGroupResponse.model_validate(g) for g in groups]


@router.post("", response_model=CommunicationTemplateGroupResponse, status_code=201)
async def create_communication_template_group(
    body: CommunicationTemplateGroupCreate,
    authorization: Annotated[
        ComponentAuthorization, Depends(get_component_authorization(FORM_COMPONENT))
    ],
    repo: Annotated[
        CommunicationTemplateGroupRepository,
        Depends(get_communication_group_repo_for_write),
    ],
):
    """Create a group and its templates; 403 when the write gate refuses."""
    if not await authorization.authorize():
        raise AuthorizationException(
            permission_key=authorization.permission_key,
            permission_type=PermissionType.WRITE.code,
            message=UNAUTHORIZED_ACTION_MESSAGE,
            team_id=authorization.team_id,
        )
    created = await repo.create_group_with_templates(
        title=body.title,
        trigger=body.trigger,
        templates=[t.to_values() for t in body.templates],
    )
    return CommunicationTemplateGroupResponse.model_validate(created)
