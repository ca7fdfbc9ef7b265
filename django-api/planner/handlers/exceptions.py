"""Mapping of domain errors to HTTP responses."""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from planner.domain.errors import DomainError, ErrorCode

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    ErrorCode.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.MALFORMED_CONFIG: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.VENUE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.PERSISTENCE_FAILED: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def domain_exception_handler(exc, context):
    """Render DomainErrors as ``{"code", "message"}``; defer everything else to DRF."""
    if isinstance(exc, DomainError):
        code = STATUS_BY_CODE.get(exc.code, status.HTTP_400_BAD_REQUEST)
        if code >= 500:
            logger.error("Request failed: %s", exc)
        return Response({"code": exc.code.value, "message": exc.message}, status=code)
    return exception_handler(exc, context)
