"""
Типізовані помилки сховища контактів.

Кожен клас відповідає одному HTTP-статусу у відповіді API:
ContactValidationError -> 400, ContactNotFound -> 404, ContactStoreError -> 500.
"""


class ContactError(Exception):
    """Базовий клас для всіх помилок сховища контактів."""


class ContactValidationError(ContactError):
    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "Validation error")


class ContactNotFound(ContactError):
    def __init__(self, contact_id):
        self.contact_id = contact_id
        super().__init__(f"Contact {contact_id} not found")


class ContactStoreError(ContactError):
    """Збій бази даних; повідомлення передається клієнту як є."""
