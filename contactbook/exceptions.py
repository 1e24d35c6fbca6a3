import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger("contacts")


def _detail_message(detail) -> str:
    if isinstance(detail, dict):
        detail = detail.get("detail", next(iter(detail.values()), ""))
    if isinstance(detail, list):
        detail = detail[0] if detail else ""
    return str(detail)


def envelope_exception_handler(exc, context):
    """
    Обгортає помилки DRF (битий JSON, невідомий метод, ...) у той самий
    конверт {success, message}, що й решта API.
    """
    response = exception_handler(exc, context)
    if response is not None:
        response.data = {
            "success": False,
            "message": _detail_message(response.data),
        }
        return response

    view = context.get("view")
    logger.error(
        "Необроблена помилка у %s", type(view).__name__ if view else "view",
        exc_info=exc,
    )
    return Response(
        {"success": False, "message": "Internal server error", "error": str(exc)},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
