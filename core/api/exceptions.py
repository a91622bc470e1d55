# core/api/exceptions.py
import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from core.numbering import ConflictError

logger = logging.getLogger(__name__)


def _messages(exc: DjangoValidationError):
    if hasattr(exc, "error_dict"):
        return {field: [str(m) for m in msgs] for field, msgs in exc.message_dict.items()}
    return {"detail": exc.messages}


def exception_handler(exc, context):
    """
    DRF's handler plus the two domain errors raised by the services:
    model-level ValidationError -> 400, ConflictError -> 409.
    """
    if isinstance(exc, DjangoValidationError):
        return Response(_messages(exc), status=status.HTTP_400_BAD_REQUEST)
    if isinstance(exc, ConflictError):
        logger.warning("Identifier conflict on %s", exc.identifier)
        return Response(
            {"detail": "Could not allocate a unique number, please try again."},
            status=status.HTTP_409_CONFLICT,
        )
    return drf_exception_handler(exc, context)
