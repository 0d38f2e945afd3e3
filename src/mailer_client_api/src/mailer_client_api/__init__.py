"""Public export surface for ``mailer_client_api``."""

from mailer_client_api.client import Client, get_client
from mailer_client_api.errors import (
    MailerAPIError,
    MailerError,
    MailerTransportError,
    MailerValidationError,
    is_api_error,
)
from mailer_client_api.filters import AttachmentFilter, MailFilter, TemplateFilter
from mailer_client_api.models import AttachmentRecord, Envelope, MailRecord, Pagination, TemplateRecord

__all__ = [
    "AttachmentFilter",
    "AttachmentRecord",
    "Client",
    "Envelope",
    "MailFilter",
    "MailRecord",
    "MailerAPIError",
    "MailerError",
    "MailerTransportError",
    "MailerValidationError",
    "Pagination",
    "TemplateFilter",
    "TemplateRecord",
    "get_client",
    "is_api_error",
]
