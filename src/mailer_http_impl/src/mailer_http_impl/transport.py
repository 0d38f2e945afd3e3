"""Transport seam between HttpMailerClient and the network.

Any object shaped like ``Transport`` can carry requests, which is how deployments
plug in a signing transport (e.g. HMAC-authenticated) without changing the
client. ``RequestsTransport`` is the plain HTTP default.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

import requests

__all__ = ["RequestsTransport", "Transport", "TransportResponse"]

logger = logging.getLogger("mailer_http_impl.transport")


class TransportResponse(Protocol):
    """Minimal response shape the client reads; ``requests.Response`` satisfies it."""

    status_code: int
    content: bytes


class Transport(Protocol):
    """Sends one request and returns the raw response."""

    def send(
        self,
        method: str,
        url: str,
        *,
        body: Any | None = None,  # noqa: ANN401
        timeout: float,
    ) -> TransportResponse:
        """Send ``method url`` with an optional JSON body, honoring ``timeout`` seconds."""
        ...


class RequestsTransport:
    """Plain HTTP transport built on ``requests``."""

    def send(
        self,
        method: str,
        url: str,
        *,
        body: Any | None = None,  # noqa: ANN401
        timeout: float,
    ) -> requests.Response:
        """Send the request; ``requests.RequestException`` propagates to the caller."""
        logger.debug("%s %s (timeout=%ss)", method, url, timeout)
        return requests.request(method, url, json=body, timeout=timeout)
