"""HTTP client for the Aura Gold invoice REST API."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import httpx

from core.parsing import coerce_records
from core.models import UserProfile

logger = logging.getLogger(__name__)

__all__ = [
    "AuthenticationError",
    "InvoiceApiClient",
    "MalformedInputError",
    "TransportError",
]


class TransportError(RuntimeError):
    """Raised when the API cannot be reached or answers with a non-2xx status."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MalformedInputError(ValueError):
    """Raised when a response body is not valid JSON."""


class AuthenticationError(RuntimeError):
    """Raised when the API rejects a login attempt."""


class InvoiceApiClient:
    """Thin synchronous wrapper around the invoice, upload and user endpoints."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 15.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._client = httpx.Client(base_url=base_url, timeout=timeout, transport=transport)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "InvoiceApiClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = self._client.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.warning("%s %s failed with HTTP %s", method, url, status)
            raise TransportError(f"HTTP {status}", status_code=status) from exc
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise TransportError(str(exc) or exc.__class__.__name__) from exc
        return response

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise MalformedInputError("Response body is not valid JSON") from exc

    def login(self, email: str, password: str) -> UserProfile:
        try:
            response = self._request(
                "POST", "/api/users/login", json={"email": email, "password": password}
            )
        except TransportError as exc:
            if exc.status_code is not None:
                raise AuthenticationError("Invalid email or password") from exc
            raise

        try:
            payload = self._decode(response)
        except MalformedInputError as exc:
            raise AuthenticationError("Login response did not include a user") from exc

        user = UserProfile.from_payload(payload)
        if user is None:
            raise AuthenticationError("Login response did not include a user")
        logger.info("Signed in user %s", user.id)
        return user

    def signup(self, name: str, email: str, password: str) -> Any:
        response = self._request(
            "POST", "/api/users", json={"name": name, "email": email, "password": password}
        )
        try:
            return self._decode(response)
        except MalformedInputError:
            return None

    def list_invoices(self, user_id: Any = None) -> list[dict[str, Any]]:
        """Return invoices for ``user_id``, or for every user when it is unset."""

        url = f"/api/invoices/user/{user_id}" if user_id else "/api/invoices/all"
        response = self._request("GET", url)
        try:
            data = self._decode(response)
        except MalformedInputError:
            logger.debug("Ignoring malformed invoice listing from %s", url)
            return []
        return coerce_records(data)

    def delete_invoice(self, invoice_id: Any) -> None:
        self._request("DELETE", f"/api/invoices/{invoice_id}")
        logger.info("Deleted invoice %s", invoice_id)

    def create_manual_invoice(self, payload: Mapping[str, Any]) -> Any:
        response = self._request("POST", "/api/invoices/manual", json=dict(payload))
        try:
            return self._decode(response)
        except MalformedInputError:
            return None

    def upload_invoice(
        self,
        filename: str,
        content: bytes,
        user_id: Any = None,
        content_type: Optional[str] = None,
    ) -> dict[str, Any]:
        """Send a document for server-side extraction and return the parsed invoice."""

        params = {"userId": str(user_id)} if user_id else None
        file_tuple = (filename, content, content_type or "application/octet-stream")
        response = self._request(
            "POST", "/api/invoices/upload", params=params, files={"file": file_tuple}
        )
        try:
            data = self._decode(response)
        except MalformedInputError:
            return {}
        return dict(data) if isinstance(data, Mapping) else {}
