"""Integration tests for mailer_client_api + HTTP implementation wiring."""

from __future__ import annotations

import json
from unittest.mock import Mock

import pytest
import requests

import mailer_client_api
import mailer_http_impl
from mailer_client_api import MailerAPIError, MailFilter, is_api_error
from mailer_http_impl.http_impl import HttpMailerClient

pytestmark = pytest.mark.integration


def _response(status_code: int, payload: object) -> Mock:
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.content = json.dumps(payload).encode("utf-8")
    return response


def test_mailer_client_factory_returns_http_client(monkeypatch: pytest.MonkeyPatch) -> None:
    """mailer_client_api.get_client returns HttpMailerClient after implementation import."""
    monkeypatch.setenv("MAILER_SERVICE_URL", "http://mailer:3002/")
    mailer_http_impl.register()

    client = mailer_client_api.get_client()

    assert isinstance(client, HttpMailerClient)
    assert client.base_url == "http://mailer:3002"


def test_list_mails_round_trip_through_requests(monkeypatch: pytest.MonkeyPatch) -> None:
    """A factory-built client sends through requests and decodes the envelope."""
    # ARRANGE
    monkeypatch.setenv("MAILER_SERVICE_URL", "http://mailer:3002")
    monkeypatch.setenv("MAILER_SERVICE_TIMEOUT", "7")
    mailer_http_impl.register()
    payload = {
        "success": True,
        "message": "Mails retrieved",
        "status": 200,
        "data": [{"id": "m1", "service": "auth", "type": "welcome", "status": "sent"}],
        "pagination": {"page": 1, "perPage": 10, "total": 1, "totalPages": 1, "hasNext": False, "hasPrevious": False},
    }
    mock_request = Mock(return_value=_response(200, payload))
    monkeypatch.setattr("mailer_http_impl.transport.requests.request", mock_request)

    # ACT
    result = mailer_client_api.get_client().list_mails(MailFilter(per_page=10, service="auth"))

    # ASSERT
    mock_request.assert_called_once_with(
        "GET",
        "http://mailer:3002/api/v1/mails?per_page=10&service=auth",
        json=None,
        timeout=7.0,
    )
    assert result.data[0].service == "auth"
    assert result.pagination is not None
    assert result.pagination.total == 1


def test_rejected_request_surfaces_api_error(monkeypatch: pytest.MonkeyPatch) -> None:
    """Server rejections reach the caller as MailerAPIError."""
    monkeypatch.setenv("MAILER_SERVICE_URL", "http://mailer:3002")
    mailer_http_impl.register()
    monkeypatch.setattr(
        "mailer_http_impl.transport.requests.request",
        Mock(return_value=_response(401, {"success": False, "status": 401, "error": "invalid signature"})),
    )

    with pytest.raises(MailerAPIError) as info:
        mailer_client_api.get_client().get_mail("m1")

    api_error = is_api_error(info.value)
    assert api_error is not None
    assert api_error.status_code == 401
    assert api_error.message == "invalid signature"
