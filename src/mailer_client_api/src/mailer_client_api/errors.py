"""Exceptions raised by mailer clients."""

from __future__ import annotations

import json

__all__ = [
    "MailerAPIError",
    "MailerError",
    "MailerTransportError",
    "MailerValidationError",
    "is_api_error",
]


class MailerError(Exception):
    """Base class for every error raised by a mailer client."""


class MailerValidationError(MailerError, ValueError):
    """A required argument was missing; raised before any request is sent."""


class MailerTransportError(MailerError):
    """The request could not be completed or its response could not be decoded.

    The underlying exception is chained as ``__cause__``.
    """

    def __init__(self, operation: str, cause: BaseException) -> None:
        """Build the error as ``"<operation>: <cause>"``."""
        super().__init__(f"{operation}: {cause}")
        self.operation = operation


class MailerAPIError(MailerError):
    """The mailer service answered with a status outside the accepted set.

    Attributes:
        status_code: HTTP status code of the response.
        message: Human-readable message derived from the response body.
        body: Raw response body, kept verbatim for debugging.

    """

    def __init__(self, status_code: int, message: str, body: str) -> None:
        """Store the status, derived message and raw body."""
        self.status_code = status_code
        self.message = message
        self.body = body
        super().__init__(f"mailer service returned status {status_code}: {message or body}")

    @classmethod
    def from_response(cls, status_code: int, body: str) -> MailerAPIError:
        """Build an error from a rejected response.

        The ``error`` field wins over ``message``; when neither is present (or the
        body is not a JSON object) the raw body becomes the message.

        Args:
            status_code: HTTP status code of the response.
            body: Response body text.

        Returns:
            MailerAPIError carrying the status, derived message and raw body.

        """
        try:
            payload = json.loads(body)
        except ValueError:
            payload = None
        if isinstance(payload, dict):
            error = payload.get("error")
            message = payload.get("message")
            error = error if isinstance(error, str) else ""
            message = message if isinstance(message, str) else ""
            if error or message:
                return cls(status_code, error or message, body)
        return cls(status_code, body, body)


def is_api_error(exc: BaseException | None) -> MailerAPIError | None:
    """Return the MailerAPIError behind ``exc`` (itself or a chained cause), if any."""
    while exc is not None:
        if isinstance(exc, MailerAPIError):
            return exc
        exc = exc.__cause__
    return None
