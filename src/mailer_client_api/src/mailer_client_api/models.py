"""Response schemas mirrored from the mailer service.

Every record is a frozen snapshot decoded from the service's camelCase JSON and
exposed with snake_case attributes. Fields the service omits decode to their zero
value so partially populated records still validate.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar, get_origin

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

__all__ = [
    "AttachmentRecord",
    "Envelope",
    "MailRecord",
    "Pagination",
    "TemplateRecord",
]

T = TypeVar("T")


class _WireModel(BaseModel):
    """Shared config: camelCase on the wire, immutable once decoded."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


class AttachmentRecord(_WireModel):
    """File attached to a mail."""

    id: str = ""
    mail_id: str = ""
    file: str = ""
    created_at: str = ""
    updated_at: str = ""


class MailRecord(_WireModel):
    """Mail queued or delivered by the service."""

    id: str = ""
    service: str = ""
    type: str = ""
    to: str = ""
    subject: str = ""
    template: str = ""
    data: dict[str, Any] = Field(default_factory=dict)
    status: str = ""
    error: str | None = None
    attachments: list[AttachmentRecord] = Field(default_factory=list)
    created_at: str = ""
    updated_at: str = ""


class TemplateRecord(_WireModel):
    """Named mail template."""

    id: str = ""
    name: str = ""
    content: str = ""
    description: str = ""
    is_active: bool = False
    created_at: str = ""
    updated_at: str = ""


# ---------------------------------------------------------------------------
# Envelope
# ---------------------------------------------------------------------------


class Pagination(_WireModel):
    """Paging metadata attached to list responses."""

    page: int = 0
    per_page: int = 0
    total: int = 0
    total_pages: int = 0
    has_next: bool = False
    has_previous: bool = False
    next_page: int | None = None
    previous_page: int | None = None


class Envelope(_WireModel, Generic[T]):
    """Standard response wrapper; ``data`` is a single record or a list of records."""

    success: bool = False
    message: str = ""
    status: int = 0
    timestamp: str | None = None
    data: T
    pagination: Pagination | None = None

    @field_validator("data", mode="before")
    @classmethod
    def _null_list_is_empty(cls, value: object) -> object:
        """Treat ``"data": null`` on list envelopes as an empty page."""
        if value is None and get_origin(cls.model_fields["data"].annotation) is list:
            return []
        return value
