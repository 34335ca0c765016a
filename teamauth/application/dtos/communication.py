"""DTOs for communication template groups and templates."""

from dataclasses import dataclass, field
from typing import Any

from teamauth.domain.enums import CommunicationType


@dataclass(frozen=True)
class CommunicationTemplateResult:
    """Communication template read-model."""

    id: str
    template_group_id: str
    type: CommunicationType
    subject: str | None
    content: str | None
    is_draft: bool
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class CommunicationTemplateGroupResult:
    """Communication template group read-model with its templates."""

    id: str
    title: str | None
    trigger: str | None
    templates: list[CommunicationTemplateResult] = field(default_factory=list)
