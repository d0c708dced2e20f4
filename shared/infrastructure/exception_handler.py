"""DRF exception handler translating domain failures into HTTP responses."""

from __future__ import annotations

import structlog
from rest_framework import status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler as drf_exception_handler  # type: ignore

from shared.domain.exceptions import DomainError, NotFound

logger = structlog.get_logger(__name__)


def domain_exception_handler(exc, context):  # type: ignore
    """Map ``DomainError`` to 4xx, fall back to DRF, hide everything else as 500."""

    view = context.get("view")
    view_name = view.__class__.__name__ if view is not None else None

    if isinstance(exc, DomainError):
        http_status = status.HTTP_404_NOT_FOUND if isinstance(exc, NotFound) else status.HTTP_400_BAD_REQUEST
        logger.warning("request_rejected", view=view_name, code=exc.code, detail=exc.message)
        return Response({"detail": exc.message, "code": exc.code}, status=http_status)

    response = drf_exception_handler(exc, context)
    if response is not None:
        return response

    logger.error("unexpected_error", view=view_name, exc_info=exc)
    return Response(
        {"detail": "Internal server error.", "code": "internal_error"},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
