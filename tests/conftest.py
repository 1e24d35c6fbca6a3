import pytest
from rest_framework.test import APIClient

from contacts.services import ContactStore


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def store():
    return ContactStore()


@pytest.fixture
def contact_data():
    """Валідний набір полів для створення контакту."""
    return {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "phone": "+1 (555) 123-4567",
        "message": "Met at the conference.",
        "category": "Work",
    }
