import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from .errors import ContactNotFound, ContactStoreError, ContactValidationError
from .serializers import ContactSerializer
from .services import ContactStore

logger = logging.getLogger("contacts")


def _not_found():
    return Response(
        {"success": False, "message": "Contact not found"},
        status=status.HTTP_404_NOT_FOUND,
    )


def _validation_failed(exc: ContactValidationError):
    logger.warning("Валідація не пройшла", extra={"errors": exc.errors})
    return Response(
        {"success": False, "message": "Validation error", "errors": exc.errors},
        status=status.HTTP_400_BAD_REQUEST,
    )


def _store_failed(message: str, exc: ContactStoreError):
    return Response(
        {"success": False, "message": message, "error": str(exc)},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


class ApiRootView(APIView):
    def get(self, request):
        return Response({"message": "Contact Management API is running"})


class ContactBaseView(APIView):
    store = ContactStore()


class ContactListCreateView(ContactBaseView):
    """
    GET  /api/contacts/ — усі контакти, нові першими.
    POST /api/contacts/ — створення контакту.
    """

    def get(self, request):
        try:
            contacts = self.store.list_all()
        except ContactStoreError as exc:
            return _store_failed("Error fetching contacts", exc)
        return Response({
            "success": True,
            "count": len(contacts),
            "data": ContactSerializer(contacts, many=True).data,
        })

    def post(self, request):
        logger.info("POST /api/contacts/ — отримано дані", extra={"data": request.data})
        try:
            contact = self.store.create(request.data)
        except ContactValidationError as exc:
            return _validation_failed(exc)
        except ContactStoreError as exc:
            return _store_failed("Error creating contact", exc)
        return Response(
            {
                "success": True,
                "message": "Contact created successfully",
                "data": ContactSerializer(contact).data,
            },
            status=status.HTTP_201_CREATED,
        )


class ContactDetailView(ContactBaseView):
    """
    PUT    /api/contacts/<id>/ — оновлення полів контакту.
    DELETE /api/contacts/<id>/ — остаточне видалення.
    """

    def put(self, request, contact_id):
        try:
            contact = self.store.update(contact_id, request.data)
        except ContactNotFound:
            logger.warning("Контакт не знайдено", extra={"contact_id": contact_id})
            return _not_found()
        except ContactValidationError as exc:
            return _validation_failed(exc)
        except ContactStoreError as exc:
            return _store_failed("Error updating contact", exc)
        return Response({
            "success": True,
            "message": "Contact updated successfully",
            "data": ContactSerializer(contact).data,
        })

    def delete(self, request, contact_id):
        try:
            self.store.delete(contact_id)
        except ContactNotFound:
            logger.warning("Контакт не знайдено", extra={"contact_id": contact_id})
            return _not_found()
        except ContactStoreError as exc:
            return _store_failed("Error deleting contact", exc)
        return Response({"success": True, "message": "Contact deleted successfully"})


class ContactFavoriteView(ContactBaseView):
    """PATCH /api/contacts/<id>/favorite/ — перемикає isFavorite."""

    def patch(self, request, contact_id):
        try:
            contact = self.store.toggle_favorite(contact_id)
        except ContactNotFound:
            logger.warning("Контакт не знайдено", extra={"contact_id": contact_id})
            return _not_found()
        except ContactStoreError as exc:
            return _store_failed("Error updating favorite status", exc)
        return Response({
            "success": True,
            "message": "Favorite status updated",
            "data": ContactSerializer(contact).data,
        })
