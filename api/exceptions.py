"""
API exception handlers.

This module provides custom exception handling for REST API responses.
"""

import logging
from typing import Any, Dict, Optional

from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

from api.faults import FaultException, InvalidTokenFault
from core.domain.exceptions import (
    ChannelNotFoundError,
    DomainException,
    OrgNotFoundError,
    OrgUserNotFoundError,
    ServerNotFoundError,
)

logger = logging.getLogger(__name__)


def custom_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """Custom exception handler for REST API."""
    trace_id = _get_trace_id(context)

    if isinstance(exc, FaultException):
        response = _handle_fault(exc, trace_id)
    elif isinstance(exc, DomainException):
        response = _handle_domain_exception(exc, trace_id)
    elif isinstance(exc, APIException):
        response = exception_handler(exc, context)
        if response is None:
            return _handle_unexpected_exception(exc, context, trace_id)
        code = (
            exc.default_code.upper().replace("-", "_")
            if hasattr(exc, "default_code")
            else "API_ERROR"
        )
        detail = exc.default_detail
        if isinstance(response.data, dict):
            detail = response.data.get("detail", detail)
        response.data = {"error": {"code": code, "message": detail}}
    elif isinstance(exc, Http404):
        response = Response(
            {"error": {"code": "NOT_FOUND", "message": "Resource not found"}},
            status=status.HTTP_404_NOT_FOUND,
        )
    else:
        return _handle_unexpected_exception(exc, context, trace_id)

    if trace_id:
        response["X-Trace-ID"] = trace_id
    return response


def _get_trace_id(context: Dict[str, Any]) -> Optional[str]:
    """Extract trace ID from request context."""
    request = context.get("request")
    if not request:
        return None
    return getattr(request, "trace_id", getattr(request, "correlation_id", None))


def _handle_fault(exc: FaultException, trace_id: Optional[str]) -> Response:
    """Render a fault as {"fault": {...}}."""
    status_code = status.HTTP_400_BAD_REQUEST
    if isinstance(exc, InvalidTokenFault):
        status_code = status.HTTP_404_NOT_FOUND

    logger.warning(
        "Fault %s (%s): %s", exc.code, exc.label, exc.message, extra={"trace_id": trace_id}
    )
    return Response({"fault": exc.to_dict()}, status=status_code)


def _handle_domain_exception(exc: DomainException, trace_id: Optional[str]) -> Response:
    """Handle domain-specific exceptions."""
    status_code = status.HTTP_400_BAD_REQUEST
    if isinstance(
        exc, (OrgNotFoundError, OrgUserNotFoundError, ServerNotFoundError, ChannelNotFoundError)
    ):
        status_code = status.HTTP_404_NOT_FOUND

    logger.warning("Domain exception: %s - %s", exc.code, exc.message, extra={"trace_id": trace_id})
    return Response({"error": {"code": exc.code, "message": exc.message}}, status=status_code)


def _handle_unexpected_exception(
    exc: Exception, context: Dict[str, Any], trace_id: Optional[str]
) -> Response:
    """Handle unexpected or untracked exceptions."""
    logger.error("Unexpected error: %s", exc, extra={"trace_id": trace_id}, exc_info=True)
    response = exception_handler(exc, context)
    if not response:
        response = Response(
            {"error": {"code": "INTERNAL_ERROR", "message": "An internal error occurred"}},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    else:
        response.data = {
            "error": {"code": "INTERNAL_ERROR", "message": "An internal error occurred"}
        }
    if trace_id:
        response["X-Trace-ID"] = trace_id
    return response
