"""Tests for the REST client using an in-memory httpx transport."""

from __future__ import annotations

import json

import httpx
import pytest

from core.api_client import AuthenticationError, InvoiceApiClient, TransportError
from core.models import UserProfile

BASE_URL = "https://api.test"


def _client(handler) -> InvoiceApiClient:
    return InvoiceApiClient(BASE_URL, transport=httpx.MockTransport(handler))


def test_list_invoices_for_user():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.path)
        return httpx.Response(200, json=[{"id": 1, "metalType": "GOLD24"}, "junk"])

    with _client(handler) as client:
        records = client.list_invoices(42)

    assert seen == ["/api/invoices/user/42"]
    assert records == [{"id": 1, "metalType": "GOLD24"}]


def test_list_invoices_without_user_hits_all():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/invoices/all"
        return httpx.Response(200, json=[])

    assert _client(handler).list_invoices() == []


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, json={"message": "not a list"}),
        httpx.Response(200, content=b"<html>oops</html>"),
        httpx.Response(204),
    ],
)
def test_list_invoices_malformed_body_is_empty(response):
    assert _client(lambda request: response).list_invoices(1) == []


def test_http_error_raises_transport_error():
    client = _client(lambda request: httpx.Response(503))

    with pytest.raises(TransportError) as excinfo:
        client.list_invoices(1)

    assert excinfo.value.status_code == 503


def test_network_failure_raises_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(TransportError) as excinfo:
        _client(handler).list_invoices(1)

    assert excinfo.value.status_code is None


def test_login_returns_user_profile():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "POST"
        assert request.url.path == "/api/users/login"
        assert json.loads(request.content) == {"email": "a@b.c", "password": "pw"}
        return httpx.Response(200, json={"id": 3, "name": "Asha", "email": "a@b.c"})

    user = _client(handler).login("a@b.c", "pw")

    assert user == UserProfile(id=3, name="Asha", email="a@b.c")
    assert user.display_name == "Asha"


def test_login_rejected_raises_authentication_error():
    with pytest.raises(AuthenticationError):
        _client(lambda request: httpx.Response(401)).login("a@b.c", "bad")


def test_login_without_user_object_has_no_fallback():
    with pytest.raises(AuthenticationError):
        _client(lambda request: httpx.Response(200, content=b"")).login("a@b.c", "pw")


def test_signup_posts_name_email_password():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/users"
        assert json.loads(request.content) == {"name": "Asha", "email": "a@b.c", "password": "pw"}
        return httpx.Response(201, json={"id": 9})

    assert _client(handler).signup("Asha", "a@b.c", "pw") == {"id": 9}


def test_delete_and_manual_create():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append((request.method, request.url.path))
        if request.method == "POST":
            return httpx.Response(200, json=json.loads(request.content))
        return httpx.Response(204)

    client = _client(handler)
    client.delete_invoice(5)
    saved = client.create_manual_invoice({"userId": 1, "metalType": "GOLD24"})

    assert calls == [("DELETE", "/api/invoices/5"), ("POST", "/api/invoices/manual")]
    assert saved == {"userId": 1, "metalType": "GOLD24"}


def test_upload_sends_multipart_with_user_id():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/invoices/upload"
        assert request.url.params["userId"] == "7"
        assert b'name="file"; filename="bill.pdf"' in request.content
        return httpx.Response(200, json={"invoiceDate": "2024-01-05", "metalType": "GOLD24"})

    parsed = _client(handler).upload_invoice("bill.pdf", b"%PDF-1.4", user_id=7)

    assert parsed["metalType"] == "GOLD24"
