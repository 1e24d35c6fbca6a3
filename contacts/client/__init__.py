from .api import ContactsAPI, ContactsAPIError
from .session import ContactSession, Notice
from .state import ContactBook, SORT_ORDERS

__all__ = [
    "ContactsAPI",
    "ContactsAPIError",
    "ContactSession",
    "Notice",
    "ContactBook",
    "SORT_ORDERS",
]
