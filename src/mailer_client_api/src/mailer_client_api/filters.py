"""Structured filters for list operations.

Each filter renders to the query string the mailer service expects. A field left
at its zero value (``0``, ``""`` or ``None``) is omitted, so ``page=0`` means
"no explicit page" rather than "page zero".
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlencode

__all__ = ["AttachmentFilter", "MailFilter", "TemplateFilter"]


def _encode(pairs: list[tuple[str, object]]) -> str:
    """Form-encode ``pairs`` in order, skipping unset values."""
    return urlencode([(name, value) for name, value in pairs if value])


@dataclass(frozen=True)
class MailFilter:
    """Filters accepted by ``GET /mails``."""

    page: int = 0
    per_page: int = 0
    service: str = ""
    type: str = ""
    status: str = ""

    def to_query_string(self) -> str:
        """Return the encoded query string (without a leading ``?``)."""
        return _encode(
            [
                ("page", self.page),
                ("per_page", self.per_page),
                ("service", self.service),
                ("type", self.type),
                ("status", self.status),
            ]
        )


@dataclass(frozen=True)
class TemplateFilter:
    """Filters accepted by ``GET /templates``."""

    page: int = 0
    per_page: int = 0

    def to_query_string(self) -> str:
        """Return the encoded query string (without a leading ``?``)."""
        return _encode([("page", self.page), ("per_page", self.per_page)])


@dataclass(frozen=True)
class AttachmentFilter:
    """Filters accepted by ``GET /attachments``."""

    page: int = 0
    per_page: int = 0
    mail_id: str = ""

    def to_query_string(self) -> str:
        """Return the encoded query string (without a leading ``?``)."""
        return _encode(
            [
                ("page", self.page),
                ("per_page", self.per_page),
                ("mail_id", self.mail_id),
            ]
        )
