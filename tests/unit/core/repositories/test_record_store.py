"""Tests for the generic record store and the notification store."""

from datetime import timedelta
from uuid import uuid4

from django.test import TestCase
from django.utils import timezone

from core.enums import NotificationLifecycle
from core.exceptions import RecordNotFoundError
from core.models import Notification
from core.repositories import HelpRequestRepository, NotificationRepository
from tests.factories import make_help_request, make_notification


class TestRecordStore(TestCase):
    """Test cases for RecordStore behaviour shared by every store."""

    def setUp(self):
        self.store = NotificationRepository()

    def test_get_by_id_missing_raises_not_found(self):
        missing = uuid4()
        with self.assertRaises(RecordNotFoundError) as ctx:
            self.store.get_by_id(missing)
        self.assertEqual(ctx.exception.entity, "notification")
        self.assertEqual(ctx.exception.record_id, missing)
        self.assertIn(str(missing), str(ctx.exception))

    def test_update_changes_fields_and_bumps_updated_at(self):
        notification = make_notification()
        before = notification.updated_at

        self.store.update(notification.id, title="New title")

        notification.refresh_from_db()
        self.assertEqual(notification.title, "New title")
        self.assertGreaterEqual(notification.updated_at, before)

    def test_update_missing_raises_not_found(self):
        with self.assertRaises(RecordNotFoundError):
            self.store.update(uuid4(), title="x")

    def test_update_on_table_without_updated_at(self):
        help_request = make_help_request()

        HelpRequestRepository().update(help_request.id, state="vencido")

        help_request.refresh_from_db()
        self.assertEqual(help_request.state, "vencido")

    def test_delete_removes_row(self):
        notification = make_notification()

        self.store.delete(notification.id)

        self.assertFalse(Notification.objects.filter(pk=notification.id).exists())

    def test_delete_missing_raises_not_found(self):
        with self.assertRaises(RecordNotFoundError):
            self.store.delete(uuid4())

    def test_summary(self):
        notification = make_notification(title="Hello")

        self.assertEqual(
            self.store.summary(notification.id, "title"), {"title": "Hello"}
        )
        self.assertIsNone(self.store.summary(uuid4(), "title"))
        self.assertIsNone(self.store.summary(None, "title"))


class TestNotificationRepository(TestCase):
    """Test cases for NotificationRepository."""

    def setUp(self):
        self.store = NotificationRepository()

    def test_set_status_writes_extra_fields(self):
        notification = make_notification()
        now = timezone.now()

        self.store.set_status(
            notification.id, NotificationLifecycle.SENT, sent_at=now, recipient_count=4
        )

        notification.refresh_from_db()
        self.assertEqual(notification.status, "sent")
        self.assertEqual(notification.recipient_count, 4)
        self.assertEqual(notification.sent_at, now)

    def test_increment_counter(self):
        notification = make_notification()

        for _ in range(3):
            self.store.increment_counter(notification.id, "open_count")
        self.store.increment_counter(notification.id, "click_count")

        notification.refresh_from_db()
        self.assertEqual(notification.open_count, 3)
        self.assertEqual(notification.click_count, 1)

    def test_increment_counter_rejects_other_fields(self):
        notification = make_notification()
        with self.assertRaises(ValueError):
            self.store.increment_counter(notification.id, "recipient_count")

    def test_increment_counter_missing_raises_not_found(self):
        with self.assertRaises(RecordNotFoundError):
            self.store.increment_counter(uuid4(), "open_count")

    def test_due_scheduled_returns_past_scheduled_only(self):
        now = timezone.now()
        due = make_notification(
            status="scheduled", scheduled_for=now - timedelta(minutes=5)
        )
        make_notification(status="scheduled", scheduled_for=now + timedelta(hours=1))
        make_notification(status="draft", scheduled_for=now - timedelta(hours=1))

        self.assertEqual(list(self.store.due_scheduled(now)), [due])

    def test_totals_and_count_by(self):
        make_notification(status="sent", recipient_count=10, open_count=4, click_count=1)
        make_notification(status="sent", recipient_count=5, open_count=1)
        make_notification(status="draft")

        totals = self.store.totals()
        by_status = {row["status"]: row["count"] for row in self.store.count_by("status")}

        self.assertEqual(
            totals, {"total": 3, "recipients": 15, "opens": 5, "clicks": 1}
        )
        self.assertEqual(by_status, {"sent": 2, "draft": 1})

    def test_totals_on_empty_table_are_zero(self):
        self.assertEqual(
            self.store.totals(), {"total": 0, "recipients": 0, "opens": 0, "clicks": 0}
        )
