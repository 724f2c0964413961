"""Tests for the management commands."""

from datetime import timedelta
from io import StringIO
from unittest.mock import patch

from django.core.management import call_command
from django.test import TestCase
from django.utils import timezone

from tests.factories import make_notification, make_profile


class TestSendScheduledNotificationsCommand(TestCase):
    """Test cases for send_scheduled_notifications."""

    def test_sends_due_notifications(self):
        make_profile()
        due = make_notification(
            status="scheduled", scheduled_for=timezone.now() - timedelta(minutes=1)
        )
        make_notification(
            status="scheduled", scheduled_for=timezone.now() + timedelta(hours=1)
        )
        out = StringIO()

        call_command("send_scheduled_notifications", stdout=out)

        due.refresh_from_db()
        self.assertEqual(due.status, "sent")
        self.assertIn("Processed 1 scheduled notifications", out.getvalue())
        self.assertIn("Sent: 1", out.getvalue())

    def test_nothing_due(self):
        out = StringIO()

        call_command("send_scheduled_notifications", stdout=out)

        self.assertIn("Processed 0 scheduled notifications", out.getvalue())


class TestCleanupLogsCommand(TestCase):
    """Test cases for cleanup_logs."""

    @patch("core.management.commands.cleanup_logs.cleanup_old_logs")
    def test_passes_retention(self, mock_cleanup):
        mock_cleanup.return_value = 3
        out = StringIO()

        call_command("cleanup_logs", "--retention-days", "5", stdout=out)

        mock_cleanup.assert_called_once_with(retention_days=5)
        self.assertIn("Deleted 3 old log files", out.getvalue())
