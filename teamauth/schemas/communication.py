"""Communication template group API schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from teamauth.domain.enums import CommunicationType


class CommunicationTemplateCreate(BaseModel):
    """One template in a group create request. is_draft is computed, not sent."""

    type: CommunicationType
    subject: str | None = Field(default=None, max_length=500)
    content: str | None = None
    custom_button_text: str | None = Field(default=None, max_length=200)
    custom_button_href: str | None = Field(default=None, max_length=2000)
    extra: dict[str, Any] = Field(default_factory=dict)

    def to_values(self) -> dict[str, Any]:
        """Values for the repository; button fields are stored in extra."""
        extra = dict(self.extra)
        if self.custom_button_text is not None:
            extra["custom_button_text"] = self.custom_button_text
        if self.custom_button_href is not None:
            extra["custom_button_href"] = self.custom_button_href
        return {
            "type": self.type,
            "subject": self.subject,
            "content": self.content,
            "extra": extra,
        }


class CommunicationTemplateGroupCreate(BaseModel):
    """Request body for POST /communication-template-groups."""

    title: str | None = Field(default=None, max_length=255)
    trigger: str = Field(..., min_length=1, max_length=1000)
    templates: list[CommunicationTemplateCreate] = Field(default_factory=list)


class CommunicationTemplateResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    type: CommunicationType
    subject: str | None
    content: str | None
    is_draft: bool
    extra: dict[str, Any] = Field(default_factory=dict)


class CommunicationTemplateGroupResponse(BaseModel):
    """Template group with its templates."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str | None
    trigger: str | None
    templates: list[CommunicationTemplateResponse] = Field(default_factory=list)


class RecipientCreate(BaseModel):
    user_id: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3, max_length=320)
    phone: str | None = Field(default=None, max_length=50)


class CommunicationEventCreate(BaseModel):
    """Request body for POST /communication-events: raise trigger for recipients."""

    trigger: str = Field(..., min_length=1, max_length=1000)
    params: dict[str, Any] = Field(default_factory=dict)
    recipients: list[RecipientCreate] = Field(default_factory=list)


class CommunicationEventAccepted(BaseModel):
    trigger: str
    recipients: int
