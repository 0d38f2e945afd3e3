"""Abstract interface for the mailer service API."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mailer_client_api.filters import AttachmentFilter, MailFilter, TemplateFilter
    from mailer_client_api.models import AttachmentRecord, Envelope, MailRecord, TemplateRecord

__all__ = ["Client", "get_client"]


class Client(ABC):
    """The contract for read access to the mailer service.

    Every method performs one stateless request. Rejected responses raise
    ``MailerAPIError``; failed exchanges raise ``MailerTransportError``. The
    ``timeout`` keyword overrides the configured timeout for a single call.
    """

    # -- mails ---------------------------------------------------------------

    @abstractmethod
    def list_mails(
        self,
        filters: MailFilter | None = None,
        *,
        timeout: float | None = None,
    ) -> Envelope[list[MailRecord]]:
        """List mails.

        Args:
            filters: Optional page/per_page/service/type/status filters.
            timeout: Optional per-call timeout in seconds.

        Returns:
            Envelope holding one page of mails and its pagination block.

        """
        raise NotImplementedError

    @abstractmethod
    def list_mails_raw(
        self,
        query_string: str = "",
        *,
        timeout: float | None = None,
    ) -> Envelope[list[MailRecord]]:
        """List mails, forwarding an already-encoded query string verbatim."""
        raise NotImplementedError

    @abstractmethod
    def get_mail(self, mail_id: str, *, timeout: float | None = None) -> Envelope[MailRecord]:
        """Fetch a single mail.

        Args:
            mail_id: Mail identifier, unescaped.
            timeout: Optional per-call timeout in seconds.

        Returns:
            Envelope holding the mail.

        Raises:
            MailerValidationError: If ``mail_id`` is empty.

        """
        raise NotImplementedError

    # -- templates -----------------------------------------------------------

    @abstractmethod
    def list_templates(
        self,
        filters: TemplateFilter | None = None,
        *,
        timeout: float | None = None,
    ) -> Envelope[list[TemplateRecord]]:
        """List templates, optionally paged by ``filters``."""
        raise NotImplementedError

    @abstractmethod
    def list_templates_raw(
        self,
        query_string: str = "",
        *,
        timeout: float | None = None,
    ) -> Envelope[list[TemplateRecord]]:
        """List templates, forwarding an already-encoded query string verbatim."""
        raise NotImplementedError

    @abstractmethod
    def get_template(self, template_id: str, *, timeout: float | None = None) -> Envelope[TemplateRecord]:
        """Fetch a single template; raises MailerValidationError on an empty id."""
        raise NotImplementedError

    # -- attachments ---------------------------------------------------------

    @abstractmethod
    def list_attachments(
        self,
        filters: AttachmentFilter | None = None,
        *,
        timeout: float | None = None,
    ) -> Envelope[list[AttachmentRecord]]:
        """List attachments, optionally paged or narrowed to one mail by ``filters``."""
        raise NotImplementedError

    @abstractmethod
    def list_attachments_raw(
        self,
        query_string: str = "",
        *,
        timeout: float | None = None,
    ) -> Envelope[list[AttachmentRecord]]:
        """List attachments, forwarding an already-encoded query string verbatim."""
        raise NotImplementedError

    @abstractmethod
    def get_attachment(self, attachment_id: str, *, timeout: float | None = None) -> Envelope[AttachmentRecord]:
        """Fetch a single attachment; raises MailerValidationError on an empty id."""
        raise NotImplementedError


def get_client() -> Client:
    """Return the default mailer client implementation.

    Returns:
        Client implementation.

    """
    raise NotImplementedError
