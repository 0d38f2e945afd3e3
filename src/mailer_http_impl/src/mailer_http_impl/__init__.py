"""Public exports for the mailer HTTP client implementation package."""

from mailer_http_impl.http_impl import HttpMailerClient, get_client_impl, register
from mailer_http_impl.transport import RequestsTransport, Transport, TransportResponse

__all__ = [
    "HttpMailerClient",
    "RequestsTransport",
    "Transport",
    "TransportResponse",
    "get_client_impl",
    "register",
]

register()
