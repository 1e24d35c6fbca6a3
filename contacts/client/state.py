from __future__ import annotations

import json
from datetime import date, datetime, timezone as dt_timezone
from typing import Any, Optional

from django.utils import timezone
from django.utils.dateparse import parse_datetime

SORT_ORDERS = ("newest", "oldest", "name")

_EPOCH = datetime.min.replace(tzinfo=dt_timezone.utc)


def contact_key(contact: dict) -> Optional[str]:
    return contact.get("_id") or contact.get("id")


def created_at(contact: dict) -> datetime:
    value = contact.get("createdAt")
    parsed = parse_datetime(value) if isinstance(value, str) else value
    if parsed is None:
        return _EPOCH
    if timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed, dt_timezone.utc)
    return parsed


def matches(contact: dict, search: str = "", favorites_only: bool = False) -> bool:
    if favorites_only and not contact.get("isFavorite"):
        return False
    if not search:
        return True
    needle = search.lower()
    return any(
        needle in (contact.get(field) or "").lower()
        for field in ("name", "email", "phone")
    )


class ContactBook:
    """
    Локальний кеш списку контактів.

    Змінюється лише через методи нижче і лише записами, які повернув сервер.
    visible() повертає нову відфільтровану/відсортовану копію, кеш не чіпає.
    """

    def __init__(self, contacts=None):
        self._contacts: list[dict] = list(contacts or [])

    def __len__(self):
        return len(self._contacts)

    @property
    def contacts(self) -> list[dict]:
        return list(self._contacts)

    def get(self, contact_id) -> Optional[dict]:
        for contact in self._contacts:
            if contact_key(contact) == contact_id:
                return contact
        return None

    def replace_all(self, contacts) -> None:
        self._contacts = list(contacts)

    def add(self, contact: dict) -> None:
        self._contacts.insert(0, contact)

    def replace(self, contact: dict) -> None:
        key = contact_key(contact)
        self._contacts = [contact if contact_key(c) == key else c for c in self._contacts]

    def remove(self, contact_id) -> None:
        self._contacts = [c for c in self._contacts if contact_key(c) != contact_id]

    def visible(self, search: str = "", favorites_only: bool = False, order: str = "newest") -> list[dict]:
        if order not in SORT_ORDERS:
            raise ValueError(f"Unknown sort order: {order}")
        rows = [c for c in self._contacts if matches(c, search, favorites_only)]
        if order == "newest":
            return sorted(rows, key=created_at, reverse=True)
        if order == "oldest":
            return sorted(rows, key=created_at)
        return sorted(rows, key=lambda c: (c.get("name") or "").casefold())

    def statistics(self, today: Optional[date] = None) -> dict[str, Any]:
        today = today or timezone.localdate()
        added_today = 0
        for contact in self._contacts:
            created = created_at(contact)
            if created is not _EPOCH and timezone.localtime(created).date() == today:
                added_today += 1
        return {
            "total": len(self._contacts),
            "favorites": sum(1 for c in self._contacts if c.get("isFavorite")),
            "withMessages": sum(1 for c in self._contacts if c.get("message")),
            "addedToday": added_today,
        }

    def export_json(self) -> str:
        return json.dumps(self._contacts, indent=2, ensure_ascii=False)

    @staticmethod
    def export_filename(day: Optional[date] = None) -> str:
        day = day or timezone.localdate()
        return f"contacts_{day.isoformat()}.json"
