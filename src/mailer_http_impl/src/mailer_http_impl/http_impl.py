"""Mailer HTTP Client Implementation.

Concrete mailer_client_api.Client that talks to the mailer service's REST API over
a pluggable transport. Resolves the base URL and timeout from environment
variables and decodes service envelopes into the mailer_client_api models.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Any, TypeVar
from urllib.parse import quote

from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError

import mailer_client_api
from mailer_client_api import (
    AttachmentRecord,
    Client,
    Envelope,
    MailerAPIError,
    MailerTransportError,
    MailerValidationError,
    MailRecord,
    TemplateRecord,
)
from mailer_http_impl.transport import RequestsTransport, Transport

if TYPE_CHECKING:
    from mailer_client_api import AttachmentFilter, MailFilter, TemplateFilter

load_dotenv()

logger = logging.getLogger("mailer_http_impl")

API_PATH_PREFIX = "/api/v1"
DEFAULT_TIMEOUT_SECONDS = 10.0
HTTP_OK = 200

MailList = Envelope[list[MailRecord]]
MailItem = Envelope[MailRecord]
TemplateList = Envelope[list[TemplateRecord]]
TemplateItem = Envelope[TemplateRecord]
AttachmentList = Envelope[list[AttachmentRecord]]
AttachmentItem = Envelope[AttachmentRecord]

ResponseT = TypeVar("ResponseT", bound=BaseModel)

# ---------------------------------------------------------------------------
# Client implementation
# ---------------------------------------------------------------------------


class HttpMailerClient(Client):
    """Concrete mailer_client_api.Client backed by the mailer service REST API.

    Configuration:
        - MAILER_SERVICE_URL (required unless ``base_url`` is passed)
        - MAILER_SERVICE_TIMEOUT (optional, seconds; defaults to 10)

    Attributes:
        _base_url: Service base URL without trailing slashes.
        _timeout: Default per-request timeout in seconds.
        _transport: Object that performs the HTTP exchange.

    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: Transport | None = None,
    ) -> None:
        """Initialize the client, resolving base URL/timeout defaults from the environment."""
        url = os.environ.get("MAILER_SERVICE_URL", "") if base_url is None else base_url
        if not url:
            raise MailerValidationError("base URL is required")  # noqa: TRY003, EM101
        self._base_url = url.rstrip("/")
        self._timeout = _resolve_timeout(timeout)
        self._transport: Transport = transport if transport is not None else RequestsTransport()

    @property
    def base_url(self) -> str:
        """Get the normalized base URL."""
        return self._base_url

    @property
    def timeout(self) -> float:
        """Get the default request timeout in seconds."""
        return self._timeout

    # -- mails ---------------------------------------------------------------

    def list_mails(self, filters: MailFilter | None = None, *, timeout: float | None = None) -> MailList:
        """List mails using structured filters."""
        query = filters.to_query_string() if filters else ""
        return self.list_mails_raw(query, timeout=timeout)

    def list_mails_raw(self, query_string: str = "", *, timeout: float | None = None) -> MailList:
        """List mails, forwarding ``query_string`` verbatim."""
        return self._do(
            "GET",
            _with_query("/mails", query_string),
            MailList,
            operation="failed to list mails",
            timeout=timeout,
        )

    def get_mail(self, mail_id: str, *, timeout: float | None = None) -> MailItem:
        """Fetch a mail by id."""
        if not mail_id:
            raise MailerValidationError("mail id is required")  # noqa: TRY003, EM101
        return self._do(
            "GET",
            f"/mails/{_path_segment(mail_id)}",
            MailItem,
            operation="failed to get mail",
            timeout=timeout,
        )

    # -- templates -----------------------------------------------------------

    def list_templates(self, filters: TemplateFilter | None = None, *, timeout: float | None = None) -> TemplateList:
        """List templates using structured filters."""
        query = filters.to_query_string() if filters else ""
        return self.list_templates_raw(query, timeout=timeout)

    def list_templates_raw(self, query_string: str = "", *, timeout: float | None = None) -> TemplateList:
        """List templates, forwarding ``query_string`` verbatim."""
        return self._do(
            "GET",
            _with_query("/templates", query_string),
            TemplateList,
            operation="failed to list templates",
            timeout=timeout,
        )

    def get_template(self, template_id: str, *, timeout: float | None = None) -> TemplateItem:
        """Fetch a template by id."""
        if not template_id:
            raise MailerValidationError("template id is required")  # noqa: TRY003, EM101
        return self._do(
            "GET",
            f"/templates/{_path_segment(template_id)}",
            TemplateItem,
            operation="failed to get template",
            timeout=timeout,
        )

    # -- attachments ---------------------------------------------------------

    def list_attachments(
        self,
        filters: AttachmentFilter | None = None,
        *,
        timeout: float | None = None,
    ) -> AttachmentList:
        """List attachments using structured filters."""
        query = filters.to_query_string() if filters else ""
        return self.list_attachments_raw(query, timeout=timeout)

    def list_attachments_raw(self, query_string: str = "", *, timeout: float | None = None) -> AttachmentList:
        """List attachments, forwarding ``query_string`` verbatim."""
        return self._do(
            "GET",
            _with_query("/attachments", query_string),
            AttachmentList,
            operation="failed to list attachments",
            timeout=timeout,
        )

    def get_attachment(self, attachment_id: str, *, timeout: float | None = None) -> AttachmentItem:
        """Fetch an attachment by id."""
        if not attachment_id:
            raise MailerValidationError("attachment id is required")  # noqa: TRY003, EM101
        return self._do(
            "GET",
            f"/attachments/{_path_segment(attachment_id)}",
            AttachmentItem,
            operation="failed to get attachment",
            timeout=timeout,
        )

    # -- request execution ---------------------------------------------------

    def _do(  # noqa: PLR0913
        self,
        method: str,
        path: str,
        response_type: type[ResponseT],
        *,
        operation: str,
        accepted: tuple[int, ...] = (HTTP_OK,),
        body: Any | None = None,  # noqa: ANN401
        timeout: float | None = None,
    ) -> ResponseT:
        """Send one request, check its status and decode the envelope.

        Args:
            method: HTTP method.
            path: Resource path below the API prefix, including any query string.
            response_type: Model the success body is validated into.
            operation: Prefix for transport/decode error messages.
            accepted: Status codes treated as success.
            body: Optional JSON-serializable request body.
            timeout: Optional override of the configured timeout.

        Returns:
            The decoded response model.

        Raises:
            MailerAPIError: If the status is not in ``accepted``.
            MailerTransportError: If the exchange fails or the body cannot be decoded.

        """
        url = f"{self._base_url}{API_PATH_PREFIX}{path}"
        try:
            response = self._transport.send(method, url, body=body, timeout=timeout or self._timeout)
        except Exception as exc:
            raise MailerTransportError(operation, exc) from exc

        if response.status_code not in accepted:
            text = response.content.decode("utf-8", errors="surrogateescape")
            logger.warning("%s %s returned status %s", method, url, response.status_code)
            raise MailerAPIError.from_response(response.status_code, text)

        try:
            return response_type.model_validate_json(response.content)
        except ValidationError as exc:
            raise MailerTransportError(operation, exc) from exc


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------


def get_client_impl() -> HttpMailerClient:
    """Return a new HttpMailerClient using env defaults."""
    return HttpMailerClient()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _resolve_timeout(timeout: float | None) -> float:
    """Pick the explicit timeout, then MAILER_SERVICE_TIMEOUT, then the default."""
    if timeout is None:
        raw = os.environ.get("MAILER_SERVICE_TIMEOUT", "").strip()
        if raw:
            try:
                timeout = float(raw)
            except ValueError as exc:
                msg = f"MAILER_SERVICE_TIMEOUT must be a number of seconds, got {raw!r}"
                raise MailerValidationError(msg) from exc
    if not timeout or timeout <= 0:
        return DEFAULT_TIMEOUT_SECONDS
    return timeout


def _path_segment(value: str) -> str:
    """Escape ``value`` so it occupies exactly one path segment."""
    return quote(value, safe="")


def _with_query(path: str, query_string: str) -> str:
    return f"{path}?{query_string}" if query_string else path


# ---------------------------------------------------------------------------
# Factory registration
# ---------------------------------------------------------------------------


def register() -> None:
    """Bind the HTTP client factory into mailer_client_api.get_client."""
    mailer_client_api.get_client = get_client_impl
