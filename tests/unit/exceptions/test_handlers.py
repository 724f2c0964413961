"""Tests for the DRF exception handler."""

from unittest import TestCase
from unittest.mock import MagicMock
from uuid import uuid4

from django.core.exceptions import PermissionDenied
from django.http import Http404

from pydantic import BaseModel, ValidationError
from rest_framework.exceptions import NotAuthenticated

from core.exceptions import ConflictError, RecordNotFoundError, UnsupportedChannelError
from core.exceptions.handlers import custom_exception_handler
from core.logging.context import clear_request_id, set_request_id


class _Payload(BaseModel):
    count: int


def _validation_error():
    try:
        _Payload(count="many")
    except ValidationError as e:
        return e
    raise AssertionError("expected a validation error")


class TestCustomExceptionHandler(TestCase):
    """Test cases for custom_exception_handler."""

    def setUp(self):
        view = MagicMock()
        view.request.path = "/api/v1/admin/notifications"
        view.request.method = "POST"
        self.context = {"view": view}
        set_request_id("req-123")
        self.addCleanup(clear_request_id)

    def test_record_not_found(self):
        missing = uuid4()

        response = custom_exception_handler(
            RecordNotFoundError("notification", missing), self.context
        )

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data["message"], f"Notification with ID {missing} not found")
        self.assertEqual(response.data["request_id"], "req-123")
        self.assertEqual(response["X-Request-ID"], "req-123")
        self.assertIn("timestamp", response.data)

    def test_http404(self):
        response = custom_exception_handler(Http404(), self.context)

        self.assertEqual(response.status_code, 404)

    def test_conflict(self):
        response = custom_exception_handler(
            ConflictError("Only draft notifications can be edited", detail="sent"),
            self.context,
        )

        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.data["detail"], "sent")

    def test_validation_error(self):
        response = custom_exception_handler(_validation_error(), self.context)

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["message"], "Request validation failed")
        self.assertEqual(response.data["detail"][0]["loc"], ("count",))

    def test_unsupported_channel(self):
        response = custom_exception_handler(UnsupportedChannelError("fax"), self.context)

        self.assertEqual(response.status_code, 400)
        self.assertIn("fax", response.data["message"])

    def test_permission_denied(self):
        response = custom_exception_handler(PermissionDenied(), self.context)

        self.assertEqual(response.status_code, 403)

    def test_unexpected_error(self):
        response = custom_exception_handler(RuntimeError("boom"), self.context)

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.data["message"], "An internal server error occurred.")

    def test_drf_exception_keeps_drf_response(self):
        response = custom_exception_handler(NotAuthenticated(), {"view": None})

        self.assertEqual(response.status_code, 401)
        self.assertEqual(response["X-Request-ID"], "req-123")
