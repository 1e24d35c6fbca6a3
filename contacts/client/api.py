import logging

import requests
from django.conf import settings

logger = logging.getLogger("contacts.client")


class ContactsAPIError(Exception):
    """
    Невдала відповідь API або збій з'єднання.
    status_code is None означає, що сервер не відповів.
    """

    def __init__(self, message, errors=None, status_code=None):
        super().__init__(message)
        self.message = message
        self.errors = list(errors or [])
        self.status_code = status_code


class ContactsAPI:
    """Тонкий клієнт для /api/contacts поверх requests."""

    def __init__(self, base_url=None, timeout=None, session=None):
        self.base_url = (base_url or settings.CONTACTS_API_URL).rstrip("/")
        self.timeout = timeout or getattr(settings, "CONTACTS_API_TIMEOUT", 10)
        self.session = session or requests.Session()

    def _request(self, method, path="", payload=None):
        url = f"{self.base_url}/contacts{path}"
        try:
            r = self.session.request(method, url, json=payload, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.error("Запит %s %s не вдався", method, url, exc_info=exc)
            raise ContactsAPIError(str(exc)) from exc

        try:
            body = r.json()
        except ValueError:
            raise ContactsAPIError(
                f"Invalid response from server ({r.status_code})",
                status_code=r.status_code,
            ) from None

        if not isinstance(body, dict) or not body.get("success"):
            body = body if isinstance(body, dict) else {}
            raise ContactsAPIError(
                body.get("message") or "Request failed",
                errors=body.get("errors"),
                status_code=r.status_code,
            )
        return body

    def list_contacts(self):
        return self._request("GET")["data"]

    def create_contact(self, fields):
        return self._request("POST", payload=fields)["data"]

    def update_contact(self, contact_id, fields):
        return self._request("PUT", f"/{contact_id}", payload=fields)["data"]

    def toggle_favorite(self, contact_id):
        return self._request("PATCH", f"/{contact_id}/favorite")["data"]

    def delete_contact(self, contact_id):
        return self._request("DELETE", f"/{contact_id}")["message"]
