"""Tests for the delivery accountant."""

from unittest.mock import MagicMock
from uuid import uuid4

from django.db import DatabaseError
from django.test import TestCase

from core.enums import NotificationLifecycle
from core.exceptions import RecordNotFoundError
from core.schemas.dispatch import DeliveryResult
from core.services.delivery_accountant import DeliveryAccountant
from tests.factories import make_notification


class TestDeliveryAccountant(TestCase):
    """Test cases for DeliveryAccountant."""

    def setUp(self):
        self.accountant = DeliveryAccountant()

    def test_mark_sending(self):
        notification = make_notification()

        self.accountant.mark_sending(notification.id)

        notification.refresh_from_db()
        self.assertEqual(notification.status, "sending")

    def test_finalize_success(self):
        notification = make_notification(status="sending", open_count=3, click_count=2)

        status = self.accountant.finalize(
            notification.id,
            DeliveryResult(success=True, message="ok", attempted_count=7, delivered_count=6),
        )

        notification.refresh_from_db()
        self.assertEqual(status, NotificationLifecycle.SENT)
        self.assertEqual(notification.status, "sent")
        self.assertIsNotNone(notification.sent_at)
        self.assertEqual(notification.recipient_count, 7)
        self.assertEqual(notification.open_count, 0)
        self.assertEqual(notification.click_count, 0)

    def test_finalize_failure(self):
        notification = make_notification(status="sending", recipient_count=9)

        status = self.accountant.finalize(
            notification.id,
            DeliveryResult(success=False, message="down", attempted_count=4),
        )

        notification.refresh_from_db()
        self.assertEqual(status, NotificationLifecycle.FAILED)
        self.assertEqual(notification.status, "failed")
        self.assertIsNone(notification.sent_at)
        self.assertEqual(notification.recipient_count, 0)

    def test_mark_failed(self):
        notification = make_notification(status="sending")

        self.accountant.mark_failed(notification.id)

        notification.refresh_from_db()
        self.assertEqual(notification.status, "failed")
        self.assertIsNone(notification.sent_at)

    def test_mark_failed_swallows_storage_errors(self):
        notifications = MagicMock()
        notifications.set_status.side_effect = DatabaseError("gone")

        DeliveryAccountant(notifications).mark_failed(uuid4())
        DeliveryAccountant().mark_failed(uuid4())

    def test_tracking_is_not_capped_by_recipient_count(self):
        notification = make_notification(status="sent", recipient_count=1)

        for _ in range(5):
            self.accountant.track_open(notification.id)
        self.accountant.track_click(notification.id)

        notification.refresh_from_db()
        self.assertEqual(notification.open_count, 5)
        self.assertEqual(notification.click_count, 1)

    def test_tracking_missing_notification_raises(self):
        with self.assertRaises(RecordNotFoundError):
            self.accountant.track_open(uuid4())
