# contacts/services.py
from __future__ import annotations

import logging
from datetime import timedelta
from contextlib import contextmanager
from typing import Any, Mapping

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError, transaction
from django.utils import timezone

from .errors import ContactNotFound, ContactStoreError, ContactValidationError
from .models import Contact
from .serializers import ContactInputSerializer, flatten_errors

logger = logging.getLogger("contacts")

MUTABLE_FIELDS = ("name", "email", "phone", "message", "category")


@contextmanager
def _persistence():
    """Перетворює збої БД на ContactStoreError з оригінальним повідомленням."""
    try:
        yield
    except DatabaseError as exc:
        logger.error("Помилка бази даних", exc_info=exc)
        raise ContactStoreError(str(exc)) from exc


class ContactStore:
    """
    Сховище контактів поверх Django ORM.

    Валідація виконується до будь-якого запису; при помилці нічого не
    зберігається. Відсутній id -> ContactNotFound, збій БД -> ContactStoreError.
    """

    def list_all(self) -> list[Contact]:
        with _persistence():
            return list(Contact.objects.order_by("-created_at"))

    def get(self, contact_id, *, for_update: bool = False) -> Contact:
        qs = Contact.objects.select_for_update() if for_update else Contact.objects.all()
        with _persistence():
            try:
                return qs.get(pk=contact_id)
            except (Contact.DoesNotExist, DjangoValidationError, ValueError):
                # неіснуючий або некоректний UUID
                raise ContactNotFound(contact_id) from None

    def create(self, fields: Mapping[str, Any]) -> Contact:
        data = self._validate(fields)
        with _persistence(), transaction.atomic():
            contact = Contact.objects.create(created_at=self._next_created_at(), **data)
        logger.info("Контакт створено", extra={"contact_id": str(contact.id)})
        return contact

    def update(self, contact_id, fields: Mapping[str, Any]) -> Contact:
        with _persistence(), transaction.atomic():
            contact = self.get(contact_id, for_update=True)
            data = self._validate(fields, partial=True)
            changed = {name: data[name] for name in MUTABLE_FIELDS if name in data}
            # рядок міг зникнути між get() і записом
            if changed and not Contact.objects.filter(pk=contact.pk).update(**changed):
                raise ContactNotFound(contact_id)
            for name, value in changed.items():
                setattr(contact, name, value)
        logger.info("Контакт оновлено", extra={"contact_id": str(contact.id), "fields": list(changed)})
        return contact

    def toggle_favorite(self, contact_id) -> Contact:
        with _persistence(), transaction.atomic():
            contact = self.get(contact_id, for_update=True)
            contact.is_favorite = not contact.is_favorite
            contact.save(update_fields=["is_favorite"])
        logger.info(
            "Змінено статус обраного",
            extra={"contact_id": str(contact.id), "is_favorite": contact.is_favorite},
        )
        return contact

    def delete(self, contact_id) -> None:
        contact = self.get(contact_id)
        with _persistence():
            deleted, _ = Contact.objects.filter(pk=contact.pk).delete()
        if not deleted:
            raise ContactNotFound(contact_id)
        logger.info("Контакт видалено", extra={"contact_id": str(contact_id)})

    @staticmethod
    def _next_created_at():
        """
        Час створення, строго більший за останній збережений,
        щоб порядок "нові першими" не залежав від точності годинника.
        """
        now = timezone.now()
        latest = (
            Contact.objects.order_by("-created_at")
            .values_list("created_at", flat=True)
            .first()
        )
        if latest is not None and now <= latest:
            now = latest + timedelta(microseconds=1)
        return now

    @staticmethod
    def _validate(fields, partial: bool = False) -> dict[str, Any]:
        serializer = ContactInputSerializer(data=fields, partial=partial)
        if not serializer.is_valid():
            raise ContactValidationError(flatten_errors(serializer.errors))
        return dict(serializer.validated_data)
