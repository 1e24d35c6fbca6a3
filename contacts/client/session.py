from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .api import ContactsAPI, ContactsAPIError
from .state import ContactBook

logger = logging.getLogger("contacts.client")


@dataclass(frozen=True)
class Notice:
    message: str
    level: str = "success"


class ContactSession:
    """
    Поєднує API-клієнт і локальний ContactBook.

    Кеш оновлюється лише після підтвердженої успішної відповіді,
    тож при помилці попередній стан лишається без змін.
    Кожен результат фіксується як Notice (аналог toast у вебінтерфейсі).
    """

    def __init__(self, api: Optional[ContactsAPI] = None, book: Optional[ContactBook] = None):
        self.api = api or ContactsAPI()
        self.book = book if book is not None else ContactBook()
        self.notices: list[Notice] = []

    @property
    def last_notice(self) -> Optional[Notice]:
        return self.notices[-1] if self.notices else None

    def _notify(self, message, level="success"):
        self.notices.append(Notice(message, level))

    def load(self) -> bool:
        try:
            contacts = self.api.list_contacts()
        except ContactsAPIError as exc:
            logger.warning("Не вдалося завантажити контакти: %s", exc.message)
            self._notify("Failed to load contacts", "error")
            return False
        self.book.replace_all(contacts)
        return True

    def submit(self, fields, editing_id=None) -> dict:
        try:
            if editing_id is not None:
                record = self.api.update_contact(editing_id, fields)
            else:
                record = self.api.create_contact(fields)
        except ContactsAPIError as exc:
            if exc.status_code is None:
                self._notify("Failed to submit contact", "error")
                return {"success": False, "errors": ["Failed to submit contact. Please try again."]}
            # помилки валідації показуються біля форми, без toast
            if exc.status_code != 400:
                self._notify(exc.message or "Failed to submit contact", "error")
            return {"success": False, "errors": exc.errors or [exc.message]}

        if editing_id is not None:
            self.book.replace(record)
            self._notify("Contact updated successfully!")
        else:
            self.book.add(record)
            self._notify("Contact added successfully!")
        return {"success": True, "errors": []}

    def delete(self, contact_id) -> bool:
        try:
            self.api.delete_contact(contact_id)
        except ContactsAPIError as exc:
            logger.warning("Не вдалося видалити контакт %s: %s", contact_id, exc.message)
            self._notify("Failed to delete contact", "error")
            return False
        self.book.remove(contact_id)
        self._notify("Contact deleted successfully!")
        return True

    def toggle_favorite(self, contact_id) -> bool:
        try:
            record = self.api.toggle_favorite(contact_id)
        except ContactsAPIError as exc:
            logger.warning("Не вдалося змінити обране %s: %s", contact_id, exc.message)
            self._notify("Failed to update favorite", "error")
            return False
        self.book.replace(record)
        self._notify("Added to favorites!" if record.get("isFavorite") else "Removed from favorites")
        return True
