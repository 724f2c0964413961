"""Global exception handler for the admin API."""

import logging
import traceback
from datetime import UTC, datetime
from typing import Any

from django.conf import settings
from django.core.exceptions import PermissionDenied
from django.http import Http404

from pydantic import ValidationError
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.constants import REQUEST_ID_HEADER
from core.exceptions.domain_exceptions import (
    ConflictError,
    RecordNotFoundError,
    UnsupportedChannelError,
)
from core.logging.context import get_request_id

logger = logging.getLogger(__name__)


def custom_exception_handler(
    exc: Exception, context: dict[str, Any]
) -> Response | None:
    """Custom exception handler for Django REST Framework.

    Produces ``{status, message, request_id, timestamp}`` bodies for both DRF
    and domain exceptions and logs each failure with request details.

    Args:
        exc: The exception that was raised.
        context: Context dictionary containing request and view information.

    Returns:
        A Response object with the error details.
    """
    view = context.get("view")
    request = view.request if view else None
    request_id = get_request_id()

    response = exception_handler(exc, context)

    if response is None:
        if isinstance(exc, (RecordNotFoundError, Http404)):
            message = (
                str(exc)
                if isinstance(exc, RecordNotFoundError)
                else "The requested resource was not found."
            )
            response = _error_response(status.HTTP_404_NOT_FOUND, message, request_id)
        elif isinstance(exc, ConflictError):
            response = _error_response(
                status.HTTP_409_CONFLICT,
                str(exc),
                request_id,
                detail=exc.detail,
            )
        elif isinstance(exc, ValidationError):
            response = _error_response(
                status.HTTP_400_BAD_REQUEST,
                "Request validation failed",
                request_id,
                detail=exc.errors(include_url=False, include_context=False),
            )
        elif isinstance(exc, UnsupportedChannelError):
            response = _error_response(
                status.HTTP_400_BAD_REQUEST, str(exc), request_id
            )
        elif isinstance(exc, PermissionDenied):
            response = _error_response(
                status.HTTP_403_FORBIDDEN,
                "You do not have permission to perform this action.",
                request_id,
            )
        else:
            response = _error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "An internal server error occurred.",
                request_id,
            )

    if request_id:
        response[REQUEST_ID_HEADER] = request_id

    _log_exception(exc, request, response)

    return response


def _error_response(
    status_code: int,
    message: str,
    request_id: str | None,
    detail: Any = None,
) -> Response:
    """Build a standardized error response."""
    body: dict[str, Any] = {
        "status": status_code,
        "message": message,
        "request_id": request_id,
        "timestamp": datetime.now(UTC).isoformat(),
    }
    if detail is not None:
        body["detail"] = detail
    return Response(body, status=status_code)


def _log_exception(exc: Exception, request: Any, response: Response) -> None:
    """Log exception details; client errors at WARNING, the rest at ERROR.

    Stack traces are included only in DEBUG mode.
    """
    status_code = response.status_code
    if isinstance(exc, APIException) or 400 <= status_code < 500:
        log_level = logging.WARNING if status_code < 500 else logging.ERROR
    else:
        log_level = logging.ERROR

    request_path = request.path if request else "unknown"
    request_method = request.method if request else "unknown"

    log_message = (
        f"Exception occurred: {type(exc).__name__}: {exc} | "
        f"Path: {request_method} {request_path} | "
        f"Status: {status_code}"
    )

    if settings.DEBUG:
        stack_trace = "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        )
        log_message += f"\nStack trace:\n{stack_trace}"

    logger.log(log_level, log_message)
