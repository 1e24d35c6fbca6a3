"""
Unit tests for ContactStore
"""
from unittest.mock import patch

import pytest
from django.db import DatabaseError
from django.utils import timezone

from contacts.errors import ContactNotFound, ContactStoreError, ContactValidationError
from contacts.models import Contact
from contacts.serializers import ContactSerializer

pytestmark = pytest.mark.django_db


def _fields(contact):
    return {name: getattr(contact, name) for name in ("name", "email", "phone", "message", "category")}


class TestCreate:
    def test_assigns_id_and_defaults(self, store, contact_data):
        del contact_data["message"]
        del contact_data["category"]
        contact = store.create(contact_data)

        assert contact.id is not None
        assert contact.created_at is not None
        assert contact.message == ""
        assert contact.category == "Other"
        assert contact.is_favorite is False
        assert Contact.objects.count() == 1

    def test_ids_unique_and_created_at_non_decreasing(self, store, contact_data):
        contacts = [store.create(contact_data) for _ in range(5)]

        assert len({c.id for c in contacts}) == 5
        stamps = [c.created_at for c in contacts]
        assert stamps == sorted(stamps)

    def test_trims_strings(self, store, contact_data):
        contact_data["name"] = "  Jane Doe  "
        contact_data["email"] = " jane@example.com "

        contact = store.create(contact_data)

        assert contact.name == "Jane Doe"
        assert contact.email == "jane@example.com"

    def test_blank_category_falls_back_to_other(self, store, contact_data):
        contact_data["category"] = ""
        assert store.create(contact_data).category == "Other"

    def test_null_message_stored_as_empty(self, store, contact_data):
        contact_data["message"] = None
        assert store.create(contact_data).message == ""

    @pytest.mark.parametrize("field,value,expected", [
        ("name", "A", "Name must be at least 2 characters"),
        ("name", "   ", "Name is required"),
        ("email", "not-an-email", "Please enter a valid email"),
        ("email", "", "Email is required"),
        ("phone", "123", "Phone must be at least 10 digits"),
        ("phone", "555-CALL-NOW", "Please enter a valid phone number"),
        ("phone", "", "Phone number is required"),
        ("message", "x" * 501, "Message cannot exceed 500 characters"),
        ("name", "N" * 101, "Name cannot exceed 100 characters"),
        ("email", "a" * 250 + "@x.io", "Email cannot exceed 254 characters"),
        ("phone", "1" * 31, "Phone number cannot exceed 30 characters"),
    ])
    def test_rejects_invalid_field(self, store, contact_data, field, value, expected):
        contact_data[field] = value

        with pytest.raises(ContactValidationError) as excinfo:
            store.create(contact_data)

        assert excinfo.value.errors == [expected]
        assert Contact.objects.count() == 0

    def test_validation_messages_mention_field(self, store, contact_data):
        for field, value, word in [("name", "A", "Name"), ("email", "not-an-email", "email"), ("phone", "123", "Phone")]:
            data = dict(contact_data, **{field: value})
            with pytest.raises(ContactValidationError) as excinfo:
                store.create(data)
            assert any(word in message for message in excinfo.value.errors)

    def test_unknown_category_rejected(self, store, contact_data):
        contact_data["category"] = "Enemies"

        with pytest.raises(ContactValidationError) as excinfo:
            store.create(contact_data)

        assert excinfo.value.errors[0].startswith("Category must be one of")

    def test_reports_every_missing_field_in_order(self, store):
        with pytest.raises(ContactValidationError) as excinfo:
            store.create({})

        assert excinfo.value.errors == [
            "Name is required",
            "Email is required",
            "Phone number is required",
        ]

    def test_message_of_exactly_500_chars_is_accepted(self, store, contact_data):
        contact_data["message"] = "x" * 500
        assert len(store.create(contact_data).message) == 500


class TestListAll:
    def test_newest_first(self, store, contact_data):
        c1 = store.create(contact_data)
        c2 = store.create(dict(contact_data, name="John Roe"))

        assert [c.id for c in store.list_all()] == [c2.id, c1.id]

    def test_empty(self, store):
        assert store.list_all() == []

    def test_database_error_becomes_store_error(self, store):
        with patch.object(Contact.objects, "order_by", side_effect=DatabaseError("db down")):
            with pytest.raises(ContactStoreError, match="db down"):
                store.list_all()

    def test_same_clock_reading_still_lists_newest_first(self, store, contact_data):
        frozen = timezone.now()
        with patch("contacts.services.timezone.now", return_value=frozen):
            c1 = store.create(contact_data)
            c2 = store.create(dict(contact_data, name="John Roe"))

        assert c2.created_at > c1.created_at
        assert [c.id for c in store.list_all()] == [c2.id, c1.id]


class TestUpdate:
    def test_replaces_fields_and_keeps_identity(self, store, contact_data):
        contact = store.create(contact_data)
        store.toggle_favorite(contact.id)
        new_fields = {
            "name": "Janet Doe",
            "email": "janet@example.org",
            "phone": "020 7946 0958",
            "message": "",
            "category": "Family",
        }

        store.update(contact.id, new_fields)

        [listed] = store.list_all()
        assert _fields(listed) == new_fields
        assert listed.id == contact.id
        assert listed.created_at == contact.created_at
        assert listed.is_favorite is True

    def test_omitted_fields_unchanged(self, store, contact_data):
        contact = store.create(contact_data)

        updated = store.update(contact.id, {"name": "Jane Smith"})

        assert updated.name == "Jane Smith"
        assert updated.email == contact_data["email"]
        assert updated.category == contact_data["category"]

    def test_invalid_fields_not_written(self, store, contact_data):
        contact = store.create(contact_data)

        with pytest.raises(ContactValidationError) as excinfo:
            store.update(contact.id, {"name": "Jane Smith", "phone": "123"})

        assert excinfo.value.errors == ["Phone must be at least 10 digits"]
        contact.refresh_from_db()
        assert contact.name == "Jane Doe"

    def test_missing_id(self, store, contact_data):
        contact = store.create(contact_data)
        store.delete(contact.id)

        with pytest.raises(ContactNotFound):
            store.update(contact.id, contact_data)

    def test_malformed_id_is_not_found(self, store, contact_data):
        with pytest.raises(ContactNotFound):
            store.update("not-a-uuid", contact_data)

    def test_row_deleted_after_lookup_is_not_found(self, store, contact_data):
        contact = store.create(contact_data)
        Contact.objects.filter(pk=contact.id).delete()

        with patch.object(store, "get", return_value=contact):
            with pytest.raises(ContactNotFound):
                store.update(contact.id, {"name": "Other Name"})


class TestToggleFavorite:
    def test_is_its_own_inverse(self, store, contact_data):
        contact = store.create(contact_data)
        original = ContactSerializer(contact).data

        once = store.toggle_favorite(contact.id)
        assert once.is_favorite is True

        twice = store.toggle_favorite(contact.id)
        assert ContactSerializer(twice).data == original

    def test_missing_id(self, store, contact_data):
        contact = store.create(contact_data)
        store.delete(contact.id)

        with pytest.raises(ContactNotFound):
            store.toggle_favorite(contact.id)


class TestDelete:
    def test_removes_record(self, store, contact_data):
        contact = store.create(contact_data)

        store.delete(contact.id)

        assert not Contact.objects.filter(pk=contact.id).exists()

    def test_twice_is_not_found(self, store, contact_data):
        contact = store.create(contact_data)
        store.delete(contact.id)

        with pytest.raises(ContactNotFound):
            store.delete(contact.id)

    def test_row_deleted_after_lookup_is_not_found(self, store, contact_data):
        contact = store.create(contact_data)
        Contact.objects.filter(pk=contact.id).delete()

        with patch.object(store, "get", return_value=contact):
            with pytest.raises(ContactNotFound):
                store.delete(contact.id)
